"""Errors and events exchanged with the game server."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .team_mapping import TeamMapping


class ServerErrorType(IntEnum):
    RUNNING = 0
    ETYPE = 1
    TRAWJS = 2
    USER = 3


_MESSAGES = {
    ServerErrorType.RUNNING: "Server is already running",
    ServerErrorType.ETYPE: "Unknown event type",
    ServerErrorType.TRAWJS: "Cannot serialize /tellraw message argument",
    ServerErrorType.USER: "User error",
}


class ServerError(Exception):
    """An error reported by the server handle."""

    def __init__(self, error_type: ServerErrorType | int) -> None:
        try:
            error_type = ServerErrorType(error_type)
        except ValueError:
            pass
        self.error_type = error_type
        super().__init__(_MESSAGES.get(error_type, "Unknown server error"))


@dataclass
class OutputEventLog:
    message: str


@dataclass
class OutputEventMessage:
    username: str
    message: str
    tellraw: bool = False  # relay this message back to the server too


@dataclass
class OutputEventPlayerDeath:
    username: str
    message: str


@dataclass
class OutputEventPlayerAchievement:
    username: str
    achievement: str


@dataclass
class OutputEventPlayerJoined:
    username: str


@dataclass
class OutputEventPlayerLeft:
    username: str


@dataclass
class OutputEventServerLoaded:
    pass


@dataclass
class OutputEventListPlayers:
    players_online: list[str] = field(default_factory=list)


@dataclass
class OutputEventListTeams:
    teams: list[str] = field(default_factory=list)


@dataclass
class OutputEventTeamMapping:
    mapping: TeamMapping = field(default_factory=TeamMapping)


@dataclass
class OutputEventError:
    error: Exception


@dataclass
class OutputEventExit:
    exit_code: int  # -2 when the exit code is unavailable


@dataclass
class _InputEventTerminate:
    pass


@dataclass
class _InputEventFetchTeams:
    pass


@dataclass
class _InputEventReqTeam:
    team: str


@dataclass
class _InputEventUpdateTeam:
    team: str
    usernames: list[str] = field(default_factory=list)


@dataclass
class InputEventChat:
    username: str
    message: str
    telegram: bool = False


@dataclass
class InputEventEditChat:
    username: str
    message: str


@dataclass
class InputEventCommand:
    command: str


@dataclass
class InputEventBindRename:
    username: str
    display_name: str


@dataclass
class InputEventListPlayers:
    pass


@dataclass
class InputEventKillServer:
    pass