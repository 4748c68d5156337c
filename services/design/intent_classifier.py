"""Classify free-text design requests into REMOVE, EDIT or CHAT intents.

The parsing rules live in ``parse_intent`` so they can be exercised without a
model call:

- a reply starting with ``REMOVE|`` is a removal; the rest of that line is the
  target, kept verbatim,
- a reply equal to ``EDIT`` in any case is an edit,
- anything else falls back to chat.
"""

from __future__ import annotations

import logging

from models.design_models import ChatIntent, EditIntent, Intent, RemoveIntent
from services.design.errors import ChatUnavailable
from services.design.prompts import intent_classification_prompt

LOGGER = logging.getLogger(__name__)

REMOVE_PREFIX = "REMOVE|"
EDIT_TOKEN = "EDIT"
UNAVAILABLE_MESSAGE = "The design assistant is currently unavailable."


def parse_intent(reply: str) -> Intent:
    """Map a raw classifier reply onto an intent."""
    text = (reply or "").strip()
    if text.startswith(REMOVE_PREFIX):
        target = text[len(REMOVE_PREFIX):].splitlines()
        return RemoveIntent(target=target[0] if target else "")
    if text.upper() == EDIT_TOKEN:
        return EditIntent()
    return ChatIntent()


class IntentClassifier:
    """Ask the text model which operation a user request needs."""

    def __init__(self, model_client) -> None:
        if model_client is None:
            raise ValueError("Model client is required.")
        self.model_client = model_client

    async def classify(self, user_text: str) -> Intent:
        """Return the intent for ``user_text``.

        Raises:
            ChatUnavailable: If the classification call fails.
        """
        try:
            reply = await self.model_client.generate_text(intent_classification_prompt(user_text))
        except Exception as exc:
            LOGGER.exception("Intent classification failed: %s", exc)
            raise ChatUnavailable(UNAVAILABLE_MESSAGE) from exc
        intent = parse_intent(reply)
        LOGGER.info("Classified request as %s (raw reply %r)", type(intent).__name__, reply)
        return intent
