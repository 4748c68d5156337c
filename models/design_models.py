"""Domain values exchanged between the design orchestration layers."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import List, Literal, Union
from uuid import uuid4

from pydantic import BaseModel

Sender = Literal["user", "ai", "system"]
HistoryRole = Literal["user", "model"]


@dataclass(frozen=True)
class Image:
    """Opaque image payload plus its MIME type.

    Attributes:
        data: Raw (not base64) image bytes.
        mime_type: MIME type such as ``image/png``.
    """

    data: bytes
    mime_type: str

    def to_base64(self) -> str:
        """Return the payload as a base64 string."""
        return base64.b64encode(self.data).decode("utf-8")

    def to_data_url(self) -> str:
        """Return the payload as a ``data:`` URL suitable for vision input."""
        return f"data:{self.mime_type};base64,{self.to_base64()}"


@dataclass(frozen=True)
class ChatTurn:
    """One transcript entry."""

    text: str
    sender: Sender
    id: str = field(default_factory=lambda: uuid4().hex)


@dataclass(frozen=True)
class HistoryEntry:
    """A transcript turn mapped to the role vocabulary of the model."""

    role: HistoryRole
    text: str


class ChatResult(BaseModel):
    """Structured answer of the design assistant."""

    answer: str
    suggestions: List[str]


@dataclass(frozen=True)
class RemoveIntent:
    target: str


@dataclass(frozen=True)
class EditIntent:
    pass


@dataclass(frozen=True)
class ChatIntent:
    pass


Intent = Union[RemoveIntent, EditIntent, ChatIntent]


@dataclass(frozen=True)
class ImageTurnResult:
    """A follow-up turn that produced a new working image."""

    image: Image
    kind: Literal["image"] = "image"


@dataclass(frozen=True)
class TextTurnResult:
    """A follow-up turn answered by the chat responder."""

    chat: ChatResult
    kind: Literal["text"] = "text"


TurnResult = Union[ImageTurnResult, TextTurnResult]
