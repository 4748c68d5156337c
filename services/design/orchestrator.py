"""Single entry point for follow-up design turns."""

from __future__ import annotations

import logging
from typing import Sequence

from models.design_models import (
    ChatTurn,
    EditIntent,
    Image,
    ImageTurnResult,
    RemoveIntent,
    TextTurnResult,
    TurnResult,
)
from services.design.chat_responder import ChatResponder
from services.design.image_operations import DesignImageOperations
from services.design.intent_classifier import IntentClassifier

LOGGER = logging.getLogger(__name__)


class DesignOrchestrator:
    """Classify a request and dispatch it to removal, edit or chat.

    Errors raised by the chosen branch propagate unchanged.
    """

    def __init__(
        self,
        classifier: IntentClassifier,
        operations: DesignImageOperations,
        responder: ChatResponder,
    ) -> None:
        self.classifier = classifier
        self.operations = operations
        self.responder = responder

    @classmethod
    def from_model_client(cls, model_client) -> "DesignOrchestrator":
        """Wire every collaborator to one shared model client."""
        return cls(
            IntentClassifier(model_client),
            DesignImageOperations(model_client),
            ChatResponder(model_client),
        )

    async def process_turn(
        self, user_text: str, current_image: Image, transcript: Sequence[ChatTurn]
    ) -> TurnResult:
        """Return the image or text result for one user request."""
        intent = await self.classifier.classify(user_text)
        if isinstance(intent, RemoveIntent):
            LOGGER.info("Dispatching removal of %r", intent.target)
            image = await self.operations.remove_object(current_image, intent.target)
            return ImageTurnResult(image=image)
        if isinstance(intent, EditIntent):
            LOGGER.info("Dispatching free-form edit")
            image = await self.operations.edit(current_image, user_text)
            return ImageTurnResult(image=image)
        LOGGER.info("Dispatching chat response")
        chat = await self.responder.respond(transcript, user_text)
        return TextTurnResult(chat=chat)
