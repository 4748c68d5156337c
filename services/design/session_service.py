"""Session state transitions: photo upload, initial styling, follow-up turns.

A session moves ``EMPTY -> PHOTO_LOADED -> STYLED``. Uploading a photo always
resets the session. Follow-up turns keep these invariants:

- an image result replaces the generated image and appends one system turn,
- a chat result appends one ai turn and replaces the pending suggestions,
- a failure appends one system turn carrying the message and keeps the image.

Only one operation may be in flight per session; a second request while
``loading`` is set is rejected with ``SessionStateError``.
"""

from __future__ import annotations

import logging
from typing import List

from models.design_models import Image, ImageTurnResult, TurnResult
from models.session_models import SessionPhase, SessionState
from services.design.errors import DesignServiceError, SessionStateError
from services.design.image_operations import DesignImageOperations
from services.design.orchestrator import DesignOrchestrator
from services.design.session_store import SessionStore
from services.design.styles import normalize_style, pick_loading_message

LOGGER = logging.getLogger(__name__)

IMAGE_UPDATED_MESSAGE = "I've updated the design based on your request."
IMAGE_FOLLOW_UP_SUGGESTIONS: List[str] = [
	"What do you think of the change?",
	"Suggest another style.",
	"Give me shopping links for this look.",
]
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


def style_seed_message(style: str) -> str:
	return (
		f"Here is your room reimagined in the {style} style! "
		"You can use the chat below to make further changes or ask questions."
	)


def failure_message(error_message: str) -> str:
	return f"Sorry, I couldn't process that. {error_message}"


class DesignSessionService:
	"""Apply orchestration results to in-memory sessions."""

	def __init__(self, store: SessionStore, orchestrator: DesignOrchestrator) -> None:
		self.store = store
		self.orchestrator = orchestrator

	@property
	def operations(self) -> DesignImageOperations:
		return self.orchestrator.operations

	def upload_photo(self, session_id: str, image: Image) -> SessionState:
		"""Load a new source photo, discarding every previous result."""
		state = self.store.get(session_id)
		self._ensure_idle(state)
		state.original_image = image
		state.generated_image = None
		state.transcript.clear()
		state.pending_suggestions = []
		state.style = None
		state.error = None
		LOGGER.info("Session %s loaded a new photo (%s)", session_id, image.mime_type)
		return state

	def delete_session(self, session_id: str) -> None:
		"""Forget a session unless an operation is still running on it."""
		state = self.store.get(session_id)
		self._ensure_idle(state)
		self.store.delete(session_id)
		LOGGER.info("Session %s deleted", session_id)

	async def select_initial_style(self, session_id: str, style: str) -> SessionState:
		"""Generate the first styled image from the uploaded photo.

		Raises:
			SessionStateError: If no photo is loaded or an operation is in flight.
			GenerationFailed: If generation fails; the session stays in PHOTO_LOADED.
		"""
		state = self.store.get(session_id)
		self._ensure_idle(state)
		if state.original_image is None:
			raise SessionStateError("Upload a room photo before selecting a style.")
		style_name = normalize_style(style)

		state.generated_image = None
		state.transcript.clear()
		state.pending_suggestions = []
		state.style = None
		state.error = None
		self._start_loading(state)
		try:
			image = await self.operations.apply_initial_style(state.original_image, style_name)
		except DesignServiceError as exc:
			state.error = exc.message
			raise
		finally:
			self._stop_loading(state)

		state.generated_image = image
		state.style = style_name
		self.store.add_turn(session_id, "system", style_seed_message(style_name))
		LOGGER.info("Session %s styled as %s", session_id, style_name)
		return state

	async def send_message(self, session_id: str, text: str) -> TurnResult | None:
		"""Run one follow-up turn.

		Returns:
			The turn result, or None when the turn failed and was recorded as a
			system turn.

		Raises:
			SessionStateError: If the session is not styled yet, the text is blank,
				or an operation is in flight.
		"""
		state = self.store.get(session_id)
		self._ensure_idle(state)
		if state.phase is not SessionPhase.STYLED:
			raise SessionStateError("Select a style before chatting about the design.")
		prompt = (text or "").strip()
		if not prompt:
			raise SessionStateError("Message text is required.")

		history = list(state.transcript)
		current_image = state.generated_image
		self.store.add_turn(session_id, "user", prompt)
		state.error = None
		state.pending_suggestions = []
		self._start_loading(state)
		try:
			result = await self.orchestrator.process_turn(prompt, current_image, history)
		except DesignServiceError as exc:
			self._record_failure(state, exc.message)
			return None
		except Exception as exc:  # pylint: disable=broad-exception-caught
			LOGGER.exception("Unexpected failure in session %s: %s", session_id, exc)
			self._record_failure(state, UNKNOWN_ERROR_MESSAGE)
			return None
		finally:
			self._stop_loading(state)

		if isinstance(result, ImageTurnResult):
			state.generated_image = result.image
			self.store.add_turn(session_id, "system", IMAGE_UPDATED_MESSAGE)
			state.pending_suggestions = list(IMAGE_FOLLOW_UP_SUGGESTIONS)
		else:
			self.store.add_turn(session_id, "ai", result.chat.answer)
			state.pending_suggestions = list(result.chat.suggestions)
		return result

	def _record_failure(self, state: SessionState, message: str) -> None:
		state.error = message
		self.store.add_turn(state.session_id, "system", failure_message(message))

	def _ensure_idle(self, state: SessionState) -> None:
		if state.loading:
			raise SessionStateError("Another design operation is already in progress for this session.")

	def _start_loading(self, state: SessionState) -> None:
		state.loading = True
		state.loading_message = pick_loading_message(state.loading_message)

	def _stop_loading(self, state: SessionState) -> None:
		# The caption is kept so the next operation picks a different one.
		state.loading = False
