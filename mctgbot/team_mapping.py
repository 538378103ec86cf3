"""Mapping between teams and the players in them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Team:
    name: str
    usernames: list[str] = field(default_factory=list)


@dataclass
class TeamMapping:
    data: list[Team] = field(default_factory=list)

    def player_teams(self, username: str) -> list[str]:
        """Names of the teams the player belongs to, in mapping order."""
        return [team.name for team in self.data if username in team.usernames]

    def team_players(self, team_name: str) -> list[str]:
        """Sorted, de-duplicated players of every team with this name."""
        return sorted(
            {user for team in self.data if team.name == team_name for user in team.usernames}
        )