"""Session domain models for the design workflow."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from models.design_models import ChatTurn, Image


class SessionPhase(str, Enum):
	"""Lifecycle position of a design session."""

	EMPTY = "empty"
	PHOTO_LOADED = "photo_loaded"
	STYLED = "styled"


@dataclass
class SessionState:
	"""In-memory state of one design session.

	Attributes:
		session_id: Opaque identifier handed to the client.
		original_image: The uploaded source photo, if any.
		generated_image: The current styled/edited image, if any.
		transcript: Append-only chat transcript.
		pending_suggestions: Follow-up suggestions shown to the user.
		style: Style of the last successful initial generation.
		loading: True while a model operation is in flight.
		loading_message: Caption of the current or most recent operation.
		error: Last user-facing error message.
	"""

	session_id: str
	original_image: Optional[Image] = None
	generated_image: Optional[Image] = None
	transcript: List[ChatTurn] = field(default_factory=list)
	pending_suggestions: List[str] = field(default_factory=list)
	style: Optional[str] = None
	loading: bool = False
	loading_message: Optional[str] = None
	error: Optional[str] = None
	created_at: float = field(default_factory=lambda: time.time())

	@property
	def phase(self) -> SessionPhase:
		if self.original_image is None:
			return SessionPhase.EMPTY
		if self.generated_image is None:
			return SessionPhase.PHOTO_LOADED
		return SessionPhase.STYLED

	@property
	def current_image(self) -> Optional[Image]:
		"""Return the working image: the generated one, else the uploaded photo."""
		return self.generated_image or self.original_image
