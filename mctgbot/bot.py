"""Telegram bot that relays chat between a group and the game server."""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from .bot_events import (
    InputEventSendMessage,
    OutputEventAPIError,
    OutputEventBindUser,
    OutputEventCommand,
    OutputEventEditMessage,
    OutputEventKillServer,
    OutputEventListPlayers,
    OutputEventMessage,
    OutputEventRequestError,
    OutputEventUserError,
    _InputEventTerminate,
)
from .telegram import (
    API_BASE,
    PM_MARKDOWN,
    EditMessageText,
    GetMe,
    Message,
    SendMessage,
    TelegramAPIError,
    Update,
    exchange_into,
    exchange_into_with,
    parse_updates,
)

log = logging.getLogger(__name__)


@dataclass
class BotConfig:
    """Bot settings: API token, the chat to live in and the admin user."""

    api_token: str = ""
    chat_id: int = 0
    admin_username: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BotConfig":
        if not isinstance(data, Mapping):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return cls(
            api_token=str(data.get("api_token", "")),
            chat_id=int(data.get("chat_id", 0)),
            admin_username=str(data.get("admin_username", "")),
        )


class BotState(Enum):
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


class Bot:
    """Polls Telegram for updates and sends messages to the configured chat.

    Events for the rest of the program are put on ``outbox``; events for the
    bot are put on ``inbox``.
    """

    def __init__(self, config: BotConfig) -> None:
        self.config = config
        self.state = BotState.STOPPED
        self.outbox: queue.Queue[Any] = queue.Queue()
        self.inbox: queue.Queue[Any] = queue.Queue()
        self._threads: list[threading.Thread] = []

    @classmethod
    def connect(cls, config: BotConfig) -> "Bot":
        """Create a bot after checking that the API accepts its token."""
        bot = cls(config)
        log.info("Checking Telegram bot API accessibility...")
        me = exchange_into(bot.uri("getMe"), GetMe.from_dict).unwrap() or GetMe()
        log.info("Running as @%s (%s)", me.username, me.first_name)
        return bot

    def uri(self, endpoint: str) -> str:
        return f"{API_BASE}{self.config.api_token}/{endpoint}"

    def send_message(self, message: str, use_md: bool = False) -> Optional[Message]:
        """Send a message to the chat; set use_md if it holds Markdown."""
        params = SendMessage(
            chat_id=self.config.chat_id,
            text=message,
            parse_mode=PM_MARKDOWN if use_md else "",
        )
        return exchange_into_with(
            self.uri("sendMessage"), params, Message.from_dict
        ).unwrap()

    def edit_message(
        self, message_id: int, message: str, use_md: bool = False
    ) -> Optional[Message]:
        """Replace the text of a message the bot sent earlier."""
        params = EditMessageText(
            chat_id=self.config.chat_id,
            message_id=message_id,
            text=message,
            parse_mode=PM_MARKDOWN if use_md else "",
        )
        return exchange_into_with(
            self.uri("editMessageText"), params, Message.from_dict
        ).unwrap()

    def is_running(self) -> bool:
        return self.state is not BotState.STOPPED

    def classify_message(self, message: Message) -> Optional[Any]:
        """Turn an incoming chat message into an output event, or None."""
        if message.chat.id != self.config.chat_id or not message.text:
            return None

        text = message.text
        admin = message.from_user.username == self.config.admin_username

        if text == "/players":
            return OutputEventListPlayers()
        if text == "/kill-server" and admin:
            return OutputEventKillServer()

        if text.startswith("/iamthe"):
            argv = text.split(" ")
            if len(argv) != 2:
                return OutputEventUserError("Usage: /iamthe <minecraft_nickname>")
            return OutputEventBindUser(
                telegram_name=message.from_user.username,
                minecraft_name=argv[1],
            )

        if admin and text.startswith("/"):
            return OutputEventCommand(text)

        return OutputEventMessage(username=message.from_user.username, message=text)

    def process_updates(
        self, updates: Iterable[Update], offset: int
    ) -> tuple[list[Any], int]:
        """Return the events for a batch of updates and the next poll offset."""
        events: list[Any] = []
        for update in updates:
            offset = max(offset, update.update_id + 1)

            if update.message is not None:
                event = self.classify_message(update.message)
                if event is not None:
                    events.append(event)

            edited = update.edited_message
            if edited is not None and edited.text and edited.chat.id == self.config.chat_id:
                events.append(
                    OutputEventEditMessage(
                        username=edited.from_user.username, message=edited.text
                    )
                )
        return events, offset

    def _poll_updates(self) -> None:
        offset = 0
        while self.state is BotState.RUNNING:
            try:
                result = exchange_into_with(
                    self.uri("getUpdates"), {"offset": offset}, parse_updates
                )
            except (OSError, ValueError) as exc:
                self.outbox.put(OutputEventRequestError(exc))
                continue
            if not result.ok:
                self.outbox.put(
                    OutputEventAPIError(
                        TelegramAPIError(result.error_code, result.description)
                    )
                )
                continue
            events, offset = self.process_updates(result.result or [], offset)
            for event in events:
                self.outbox.put(event)
        log.info("Update polling stopped")

    def _handle_inputs(self) -> None:
        while True:
            event = self.inbox.get()
            if isinstance(event, _InputEventTerminate):
                break
            if isinstance(event, InputEventSendMessage):
                try:
                    self.send_message(event.message, False)
                except (OSError, ValueError, TelegramAPIError) as exc:
                    log.warning("Could not send message: %s", exc)
        log.info("Input handling stopped")

    def start(self) -> None:
        """Start polling for updates and handling input events."""
        if self.state is not BotState.STOPPED:
            log.warning("Trying to start the bot twice!")
            return
        self.state = BotState.RUNNING
        self._threads = [
            threading.Thread(target=self._poll_updates, daemon=True),
            threading.Thread(target=self._handle_inputs, daemon=True),
        ]
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        """Stop both loops and wait for them to finish."""
        if self.state is not BotState.RUNNING:
            log.warning("Trying to stop the bot twice!")
            return
        self.state = BotState.STOPPING
        self.inbox.put(_InputEventTerminate())
        for thread in self._threads:
            thread.join()
        self._threads = []
        self.state = BotState.STOPPED