"""Test fixtures for the Discord web client.

- discord: payload factories, an in-memory fake Discord API served through
  httpx.MockTransport, and a recording SessionView.
"""
