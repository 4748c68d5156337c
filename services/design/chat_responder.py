"""Conversational design assistant returning an answer plus follow-up suggestions."""

from __future__ import annotations

import logging
from typing import Iterable, List

from pydantic import ValidationError

from models.design_models import ChatResult, ChatTurn, HistoryEntry
from services.design.errors import ChatUnavailable
from services.design.prompts import chat_system_instruction
from services.openai.chat_schema import CHAT_RESPONSE_SCHEMA, SCHEMA_NAME

LOGGER = logging.getLogger(__name__)

FALLBACK_PREAMBLE = "I'm having a little trouble thinking of suggestions right now, but here's my answer:\n\n"
UNAVAILABLE_MESSAGE = "The design assistant is currently unavailable."

_SENDER_ROLES = {"user": "user", "ai": "model"}


def build_history(transcript: Iterable[ChatTurn]) -> List[HistoryEntry]:
	"""Return user and ai turns mapped to model roles; system turns are dropped."""
	return [
		HistoryEntry(role=_SENDER_ROLES[turn.sender], text=turn.text)
		for turn in transcript
		if turn.sender in _SENDER_ROLES
	]


def parse_chat_result(raw: str) -> ChatResult:
	"""Decode a reply into ``ChatResult``, degrading to plain text when it does not fit."""
	try:
		return ChatResult.model_validate_json(raw)
	except ValidationError as exc:
		LOGGER.warning("Failed to parse structured chat reply %r: %s", raw, exc)
		return ChatResult(answer=FALLBACK_PREAMBLE + raw, suggestions=[])


class ChatResponder:
	"""Answer design questions with schema-constrained output."""

	def __init__(self, model_client) -> None:
		if model_client is None:
			raise ValueError("Model client is required.")
		self.model_client = model_client

	async def respond(self, transcript: Iterable[ChatTurn], user_text: str) -> ChatResult:
		"""Return the assistant answer for ``user_text`` given the prior transcript.

		Raises:
			ChatUnavailable: If the chat call fails.
		"""
		history = build_history(transcript)
		try:
			raw = await self.model_client.generate_text(
				user_text,
				history,
				CHAT_RESPONSE_SCHEMA,
				system_instruction=chat_system_instruction(),
				schema_name=SCHEMA_NAME,
			)
		except Exception as exc:
			LOGGER.exception("Chat response request failed: %s", exc)
			raise ChatUnavailable(UNAVAILABLE_MESSAGE) from exc
		return parse_chat_result(raw or "")
