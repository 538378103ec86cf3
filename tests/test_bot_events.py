import pytest

from mctgbot.bot_events import (
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
)


def test_message_fields_and_equality():
    event = OutputEventMessage(username="steve", message="hi")
    assert event.username == "steve"
    assert event.message == "hi"
    assert event == OutputEventMessage("steve", "hi")


def test_message_and_edit_are_distinct_types():
    assert OutputEventMessage("a", "b") != OutputEventEditMessage("a", "b")


def test_bind_user_fields():
    event = OutputEventBindUser(telegram_name="tg", minecraft_name="mc")
    assert (event.telegram_name, event.minecraft_name) == ("tg", "mc")


def test_empty_events_compare_equal():
    assert OutputEventListPlayers() == OutputEventListPlayers()
    assert OutputEventKillServer() == OutputEventKillServer()
    assert OutputEventListPlayers() != OutputEventKillServer()


def test_events_are_hashable_and_deduplicate():
    events = {
        OutputEventCommand("/say hi"),
        OutputEventCommand("/say hi"),
        OutputEventUserError("oops"),
    }
    assert len(events) == 2


def test_events_are_immutable():
    event = InputEventSendMessage("hello")
    with pytest.raises(AttributeError):
        event.message = "changed"
    assert event.message == "hello"


def test_error_events_hold_exceptions():
    err = ValueError("bad")
    assert OutputEventRequestError(err).error is err
    assert OutputEventAPIError(err).error is err