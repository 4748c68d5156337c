"""Image-producing design operations: initial styling, object removal, edits."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from models.design_models import Image
from services.design.errors import GenerationFailed
from services.design.prompts import edit_prompt, initial_style_prompt, removal_prompt

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationMessages:
    """User-facing texts of one image operation."""

    name: str
    no_image: str
    failed: str


INITIAL_STYLE = OperationMessages(
    name="initial_style",
    no_image="No image was generated.",
    failed="Failed to generate the design. Please try again.",
)
REMOVAL = OperationMessages(
    name="removal",
    no_image="No image was generated from the removal.",
    failed="Failed to remove the object. Please try again.",
)
EDIT = OperationMessages(
    name="edit",
    no_image="No image was generated from the edit.",
    failed="Failed to edit the design. Please try again.",
)


class DesignImageOperations:
    """Run one image model call per operation and validate its output."""

    def __init__(self, model_client) -> None:
        if model_client is None:
            raise ValueError("Model client is required.")
        self.model_client = model_client

    async def apply_initial_style(self, image: Image, style: str) -> Image:
        """Restyle the room decor in ``style`` while keeping its architecture."""
        return await self._generate(INITIAL_STYLE, initial_style_prompt(style), image)

    async def remove_object(self, image: Image, target_description: str) -> Image:
        """Remove ``target_description`` and in-fill the vacated area."""
        return await self._generate(REMOVAL, removal_prompt(target_description), image)

    async def edit(self, image: Image, user_prompt: str) -> Image:
        """Apply the user's literal request to decorative elements only."""
        return await self._generate(EDIT, edit_prompt(user_prompt), image)

    async def _generate(self, messages: OperationMessages, prompt: str, image: Image) -> Image:
        try:
            result = await self.model_client.generate_image(prompt, image)
        except Exception as exc:
            LOGGER.exception("Image operation %s failed: %s", messages.name, exc)
            raise GenerationFailed(messages.failed, operation=messages.name) from exc
        if result is None:
            LOGGER.error("Image operation %s returned no image data", messages.name)
            raise GenerationFailed(messages.no_image, operation=messages.name)
        return result
