"""Model client backed by OpenAI's Responses API.

Each public call performs exactly one request. Transport and SDK failures are
re-raised as ``ModelClientError`` with the original exception chained; no
retries are attempted.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional, Sequence

from openai import AsyncOpenAI

from models.design_models import HistoryEntry, Image
from services.openai.media_inputs import build_image_inputs, build_text_inputs
from services.openai.response_parser import extract_image_payloads, extract_text, extract_usage
from utils.settings import ModelSettings

LOGGER = logging.getLogger(__name__)


class ModelClientError(RuntimeError):
    """A model request failed before a response could be read."""


def create_openai_client(settings: ModelSettings) -> AsyncOpenAI:
    """Create the shared async OpenAI client from explicit settings."""
    return AsyncOpenAI(api_key=settings.api_key, base_url=settings.base_url)


class OpenAIModelClient:
    """Perform single request/response calls for image and text generation."""

    def __init__(self, client: AsyncOpenAI, settings: ModelSettings) -> None:
        """Initialize the model client.

        Args:
            client: Shared async OpenAI client.
            settings: Model names and image output options.
        """
        if client is None:
            raise ValueError("AsyncOpenAI client is required.")
        self.client = client
        self.settings = settings

    async def generate_image(self, prompt: str, image: Image) -> Optional[Image]:
        """Return the first image produced for ``prompt`` applied to ``image``.

        Returns:
            The generated image, or None when the response carries no image data.

        Raises:
            ModelClientError: If the request fails.
        """
        tool: Dict[str, Any] = {
            "type": "image_generation",
            "output_format": self.settings.image_format,
            "quality": self.settings.image_quality,
        }
        response = await self._create(
            "image",
            model=self.settings.image_model,
            input=build_image_inputs(prompt, image),
            tools=[tool],
            tool_choice={"type": "image_generation"},
        )
        payloads = extract_image_payloads(response)
        if not payloads:
            LOGGER.warning("Image request returned no image data")
            return None
        return Image(data=payloads[0], mime_type=self.settings.image_mime_type)

    async def generate_text(
        self,
        prompt: str,
        history: Sequence[HistoryEntry] = (),
        schema: Optional[Mapping[str, Any]] = None,
        *,
        system_instruction: Optional[str] = None,
        schema_name: str = "structured_reply",
    ) -> str:
        """Return the raw text reply for ``prompt`` after the given history.

        Args:
            prompt: The new user message.
            history: Prior turns with ``user``/``model`` roles in chronological order.
            schema: Optional JSON schema the reply should follow. It is advisory,
                the reply is returned unvalidated.
            system_instruction: Optional persona/system prompt.
            schema_name: Name reported to the API for ``schema``.

        Raises:
            ModelClientError: If the request fails.
        """
        kwargs: Dict[str, Any] = {
            "model": self.settings.text_model,
            "input": build_text_inputs(prompt, history),
        }
        if system_instruction:
            kwargs["instructions"] = system_instruction
        if schema is not None:
            kwargs["text"] = {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "schema": dict(schema),
                    "strict": False,
                }
            }
        response = await self._create("text", **kwargs)
        return extract_text(response)

    async def _create(self, kind: str, **kwargs: Any) -> Any:
        start = time.time()
        try:
            response = await self.client.responses.create(**kwargs)
        except Exception as exc:
            LOGGER.error("OpenAI %s request failed: %s", kind, exc)
            raise ModelClientError(f"OpenAI {kind} request failed") from exc
        usage = extract_usage(response)
        LOGGER.info(
            "OpenAI %s request finished in %.3fs (input_tokens=%s, output_tokens=%s)",
            kind,
            time.time() - start,
            usage["input_tokens"],
            usage["output_tokens"],
        )
        return response
