"""Telegram Bot API types and HTTP exchange helpers."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

API_BASE = "https://api.telegram.org/bot"
PM_MARKDOWN = "MarkdownV2"

T = TypeVar("T")


class TelegramAPIError(Exception):
    """An unsuccessful reply from the Telegram Bot API."""

    def __init__(self, error_code: int, description: str) -> None:
        super().__init__(f"Telegram API error code {error_code}: {description}")
        self.error_code = error_code
        self.description = description


def _require_object(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


@dataclass
class ExchangeResult(Generic[T]):
    """Envelope around every Telegram API reply."""

    ok: bool = False
    error_code: int = 0
    description: str = ""
    result: Optional[T] = None

    @classmethod
    def from_dict(
        cls, data: Any, parse: Callable[[Any], T]
    ) -> "ExchangeResult[T]":
        data = _require_object(data)
        raw = data.get("result")
        return cls(
            ok=bool(data.get("ok", False)),
            error_code=int(data.get("error_code", 0)),
            description=str(data.get("description", "")),
            result=parse(raw) if raw is not None else None,
        )

    def unwrap(self) -> Optional[T]:
        """Return the result, raising TelegramAPIError if the call failed."""
        if not self.ok:
            raise TelegramAPIError(self.error_code, self.description)
        return self.result


@dataclass
class GetMe:
    id: int = 0
    is_bot: bool = False
    first_name: str = ""
    username: str = ""
    can_join_groups: bool = False
    can_read_all_group_messages: bool = False
    supports_inline_queries: bool = False
    can_connect_to_business: bool = False
    has_main_web_app: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "GetMe":
        data = _require_object(data)
        return cls(
            id=int(data.get("id", 0)),
            is_bot=bool(data.get("is_bot", False)),
            first_name=str(data.get("first_name", "")),
            username=str(data.get("username", "")),
            can_join_groups=bool(data.get("can_join_groups", False)),
            can_read_all_group_messages=bool(
                data.get("can_read_all_group_messages", False)
            ),
            supports_inline_queries=bool(data.get("supports_inline_queries", False)),
            can_connect_to_business=bool(data.get("can_connect_to_business", False)),
            has_main_web_app=bool(data.get("has_main_web_app", False)),
        )


@dataclass
class User:
    username: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "User":
        data = _require_object(data)
        return cls(username=str(data.get("username", "")))


@dataclass
class Chat:
    id: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "Chat":
        data = _require_object(data)
        return cls(id=int(data.get("id", 0)))


@dataclass
class Message:
    message_id: int = 0
    from_user: User = None  # type: ignore[assignment]
    text: str = ""
    chat: Chat = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.from_user is None:
            self.from_user = User()
        if self.chat is None:
            self.chat = Chat()

    @classmethod
    def from_dict(cls, data: Any) -> "Message":
        data = _require_object(data)
        sender = data.get("from")
        chat = data.get("chat")
        return cls(
            message_id=int(data.get("message_id", 0)),
            from_user=User.from_dict(sender) if sender is not None else User(),
            text=str(data.get("text", "")),
            chat=Chat.from_dict(chat) if chat is not None else Chat(),
        )


def _optional_message(data: Mapping[str, Any], key: str) -> Optional[Message]:
    raw = data.get(key)
    return Message.from_dict(raw) if raw is not None else None


@dataclass
class Update:
    update_id: int = 0
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Update":
        data = _require_object(data)
        return cls(
            update_id=int(data.get("update_id", 0)),
            message=_optional_message(data, "message"),
            edited_message=_optional_message(data, "edited_message"),
            channel_post=_optional_message(data, "channel_post"),
            edited_channel_post=_optional_message(data, "edited_channel_post"),
        )


def parse_updates(data: Any) -> list[Update]:
    """Parse the result of a getUpdates call."""
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return [Update.from_dict(item) for item in data]


@dataclass
class SendMessage:
    chat_id: int
    text: str
    parse_mode: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"chat_id": self.chat_id, "text": self.text}
        if self.parse_mode:
            payload["parse_mode"] = self.parse_mode
        return payload


@dataclass
class EditMessageText:
    chat_id: int
    message_id: int
    text: str
    parse_mode: str = ""

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "chat_id": self.chat_id,
            "message_id": self.message_id,
            "text": self.text,
        }
        if self.parse_mode:
            payload["parse_mode"] = self.parse_mode
        return payload


def _read(request: urllib.request.Request | str) -> bytes:
    try:
        with urllib.request.urlopen(request) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        # The API reports failures as JSON bodies on non-2xx replies.
        try:
            return exc.read()
        finally:
            exc.close()


def _payload(params: Any) -> Any:
    to_dict = getattr(params, "to_dict", None)
    return to_dict() if callable(to_dict) else params


def exchange(endpoint: str) -> bytes:
    """Send a GET request and return the response body."""
    return _read(endpoint)


def exchange_with(endpoint: str, params: Any) -> bytes:
    """POST `params` as JSON and return the response body."""
    body = json.dumps(_payload(params)).encode("utf-8")
    request = urllib.request.Request(
        endpoint,
        data=body,
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    return _read(request)


def exchange_into(
    endpoint: str, parse: Callable[[Any], T]
) -> ExchangeResult[T]:
    """GET the endpoint and decode the reply, parsing its result with `parse`."""
    return ExchangeResult.from_dict(json.loads(exchange(endpoint)), parse)


def exchange_into_with(
    endpoint: str, params: Any, parse: Callable[[Any], T]
) -> ExchangeResult[T]:
    """POST `params` and decode the reply, parsing its result with `parse`."""
    return ExchangeResult.from_dict(json.loads(exchange_with(endpoint, params)), parse)