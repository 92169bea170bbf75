"""Client core package.

This package contains the session state, the message synchronizer and
channel selector that drive the polling loop, appearance settings, local
persistence, and the ClientController that ties them together.
"""

from models.credentials import Credentials
from models.session import SessionState
from models.polling import PollingHandle
from models.synchronizer import MessageSynchronizer, SyncMode
from models.channel_selector import ChannelSelector, SelectorState
from models.settings import Settings, SettingsStore
from models.storage import CredentialStore, LocalStore
from models.controller import ClientController

__all__ = [
    "Credentials",
    "SessionState",
    "PollingHandle",
    "MessageSynchronizer",
    "SyncMode",
    "ChannelSelector",
    "SelectorState",
    "Settings",
    "SettingsStore",
    "LocalStore",
    "CredentialStore",
    "ClientController",
]
