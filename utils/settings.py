"""Runtime configuration for the model client and upload handling."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

IMAGE_FORMAT_MIME_TYPES = {
    "png": "image/png",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
}

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class ModelSettings:
    """Explicit configuration injected into the model client.

    Attributes:
        api_key: OpenAI API key.
        base_url: Optional override of the API base URL.
        text_model: Model used for intent classification and chat.
        image_model: Responses model driving the image generation tool.
        image_format: Output format requested from the image tool.
        image_quality: Quality hint for the image tool.
    """

    api_key: str
    base_url: Optional[str] = None
    text_model: str = "gpt-4.1-mini"
    image_model: str = "gpt-4.1"
    image_format: str = "png"
    image_quality: str = "auto"

    def __post_init__(self) -> None:
        if self.image_format not in IMAGE_FORMAT_MIME_TYPES:
            raise ValueError(
                f"Unsupported image format '{self.image_format}'. "
                f"Supported: {', '.join(IMAGE_FORMAT_MIME_TYPES)}"
            )

    @property
    def image_mime_type(self) -> str:
        return IMAGE_FORMAT_MIME_TYPES[self.image_format]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ModelSettings":
        """Build settings from environment variables.

        Raises:
            RuntimeError: If ``OPENAI_API_KEY`` is not set.
        """
        env = os.environ if environ is None else environ
        api_key = env.get("OPENAI_API_KEY")
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY environment variable is not set")
        return cls(
            api_key=api_key,
            base_url=env.get("OPENAI_BASE_URL") or None,
            text_model=env.get("OPENAI_TEXT_MODEL", cls.text_model),
            image_model=env.get("OPENAI_IMAGE_MODEL", cls.image_model),
            image_format=env.get("OPENAI_IMAGE_FORMAT", cls.image_format).lower(),
            image_quality=env.get("OPENAI_IMAGE_QUALITY", cls.image_quality),
        )


def max_upload_bytes(environ: Optional[Mapping[str, str]] = None) -> int:
    """Return the upload size limit in bytes."""
    env = os.environ if environ is None else environ
    raw = env.get("MAX_UPLOAD_BYTES")
    if not raw:
        return DEFAULT_MAX_UPLOAD_BYTES
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError("MAX_UPLOAD_BYTES must be an integer") from exc
