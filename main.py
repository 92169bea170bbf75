"""Main entry point for the Discord web client.

Runs an interactive terminal session: the ClientController and its polling
loop share one asyncio event loop with the prompt, so new messages appear
while the prompt waits for input.

To run:
    uv run python main.py

Commands:
    /login <token> <server-id> [--remember]   connect a bot to a server
    /channels                                 list text channels
    /join <number>                            switch channel
    /edit <number> <text>                     edit a message (numbered from the newest, 1 = newest)
    /delete <number>                          delete a message (asks first)
    /rename <name> [| topic]                  rename the active channel
    /emoji [number]                           show the picker or add an emoji to the draft
    /up, /down                                scroll the message list
    /refresh                                  reload the channel
    /set <field>=<value>                      change an appearance setting
    /logout, /quit
    anything else                             send as a message (after the draft)
"""

import asyncio
import logging

from pydantic import ValidationError as SettingsValidationError

from client.exceptions import DiscordClientError
from config import ClientConfig
from models.controller import ClientController
from models.emoji import EMOJI_PALETTE, insert_emoji
from ui.console import ConsoleView

logger = logging.getLogger(__name__)


async def _prompt(text: str) -> str:
    return await asyncio.to_thread(input, text)


def _message_id_from_end(controller: ClientController, number: str) -> str | None:
    messages = controller.session.messages
    try:
        index = int(number)
    except ValueError:
        return None
    if not 1 <= index <= len(messages):
        return None
    return messages[-index].id


async def handle_command(controller: ClientController, view: ConsoleView, line: str) -> bool:
    """Dispatch one line of input.

    Returns:
        False when the operator asked to quit.
    """
    command, _, rest = line.partition(" ")
    rest = rest.strip()

    if command == "/quit":
        return False
    if command == "/login":
        args = rest.split()
        remember = "--remember" in args
        args = [a for a in args if a != "--remember"]
        token, guild_id = (args + ["", ""])[:2]
        await controller.connect(token, guild_id, remember=remember)
    elif command == "/logout":
        await controller.logout()
    elif command == "/channels":
        view.paint_channels()
    elif command == "/join":
        try:
            channel = controller.session.channels[int(rest) - 1]
        except (ValueError, IndexError):
            view.report(f"No channel {rest!r}")
            return True
        await controller.select_channel(channel.id)
    elif command == "/edit":
        number, _, content = rest.partition(" ")
        message_id = _message_id_from_end(controller, number)
        if message_id is None or controller.begin_edit(message_id) is None:
            view.report(f"No message {number!r}")
            return True
        try:
            if await controller.save_edit(content) is None:
                view.report("Edit cancelled: content is empty")
        finally:
            controller.cancel_edit()
    elif command == "/delete":
        message_id = _message_id_from_end(controller, rest)
        if message_id is None:
            view.report(f"No message {rest!r}")
            return True
        answer = await _prompt("Are you sure you want to delete this message? [y/N] ")
        if answer.strip().lower() == "y":
            await controller.delete_message(message_id)
    elif command == "/rename":
        name, _, topic = rest.partition("|")
        await controller.edit_channel(name, topic)
    elif command == "/emoji":
        if not rest:
            view.paint_emoji_picker()
            return True
        try:
            emoji = EMOJI_PALETTE[int(rest) - 1]
        except (ValueError, IndexError):
            view.report(f"No emoji {rest!r}")
            return True
        view.draft = insert_emoji(view.draft, emoji)
        view.report(f"Draft: {view.draft}")
    elif command == "/up":
        view.scroll(-view.viewport.client_height // 2)
    elif command == "/down":
        view.scroll(view.viewport.client_height // 2)
    elif command == "/refresh":
        await controller.refresh()
    elif command == "/set":
        field, _, value = rest.partition("=")
        try:
            controller.update_settings(**{field.strip(): value.strip()})
        except SettingsValidationError as e:
            view.report(f"Invalid setting: {e.errors()[0]['msg']}")
    elif command.startswith("/"):
        view.report(f"Unknown command {command}")
    else:
        sent = await controller.send_message(f"{view.draft}{line}")
        if sent is not None:
            view.draft = ""
    return True


async def run(config: ClientConfig) -> None:
    view = ConsoleView()
    controller = ClientController(config, view)
    await controller.start()
    try:
        while True:
            line = await _prompt(f"{view.placeholder or '>'} ")
            try:
                if not await handle_command(controller, view, line):
                    break
            except DiscordClientError as e:
                view.report(str(e))
    finally:
        await controller.close()


def main() -> None:
    config = ClientConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(run(config))
    except (KeyboardInterrupt, EOFError):
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
