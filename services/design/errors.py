"""User-facing error taxonomy of the design assistant."""

from __future__ import annotations

from typing import Optional


class DesignServiceError(Exception):
    """Base error carrying a message safe to show to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class GenerationFailed(DesignServiceError):
    """An image operation produced no usable image or its model call failed."""

    def __init__(self, message: str, *, operation: Optional[str] = None) -> None:
        super().__init__(message)
        self.operation = operation


class ChatUnavailable(DesignServiceError):
    """The chat or intent classification call failed at the transport level."""


class SessionStateError(ValueError):
    """An action is not valid for the session's current phase."""
