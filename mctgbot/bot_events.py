"""Events produced by and delivered to the Telegram bot."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OutputEventMessage:
    username: str
    message: str


@dataclass(frozen=True)
class OutputEventEditMessage:
    username: str
    message: str


@dataclass(frozen=True)
class OutputEventCommand:
    command: str


@dataclass(frozen=True)
class OutputEventBindUser:
    telegram_name: str
    minecraft_name: str


@dataclass(frozen=True)
class OutputEventListPlayers:
    pass


@dataclass(frozen=True)
class OutputEventKillServer:
    pass


@dataclass(frozen=True)
class OutputEventUserError:
    message: str


@dataclass(frozen=True)
class OutputEventRequestError:
    error: Exception


@dataclass(frozen=True)
class OutputEventAPIError:
    error: Exception


@dataclass(frozen=True)
class _InputEventTerminate:
    """Ends the input loop; internal use only."""


@dataclass(frozen=True)
class InputEventSendMessage:
    message: str