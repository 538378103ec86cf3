from mctgbot.team_mapping import Team, TeamMapping


def _mapping():
    return TeamMapping(
        [
            Team("red", ["steve", "alex"]),
            Team("blue", ["notch"]),
            Team("red", ["alex", "herobrine"]),
            Team("green", ["steve"]),
        ]
    )


def test_player_teams_in_order():
    assert _mapping().player_teams("steve") == ["red", "green"]


def test_player_teams_repeats_duplicate_team_entries():
    assert _mapping().player_teams("alex") == ["red", "red"]


def test_player_teams_unknown_player():
    assert _mapping().player_teams("nobody") == []


def test_team_players_merged_sorted_unique():
    assert _mapping().team_players("red") == ["alex", "herobrine", "steve"]


def test_team_players_unknown_team():
    assert _mapping().team_players("yellow") == []


def test_empty_mapping():
    mapping = TeamMapping()
    assert mapping.player_teams("steve") == []
    assert mapping.team_players("red") == []


def test_consistency_between_queries():
    mapping = _mapping()
    for team in mapping.data:
        for user in mapping.team_players(team.name):
            assert team.name in mapping.player_teams(user)