"""Simple in-memory store for design sessions."""

from __future__ import annotations

from typing import Dict
from uuid import uuid4

from models.design_models import ChatTurn, Sender
from models.session_models import SessionState


class SessionStore:
	"""Manage design sessions and their transcripts."""

	def __init__(self) -> None:
		self._sessions: Dict[str, SessionState] = {}

	def create(self) -> SessionState:
		"""Create a new empty session."""
		session_id = uuid4().hex
		state = SessionState(session_id=session_id)
		self._sessions[session_id] = state
		return state

	def get(self, session_id: str) -> SessionState:
		"""Return a session or raise KeyError if missing."""
		state = self._sessions.get(session_id)
		if state is None:
			raise KeyError(f"Session {session_id} not found")
		return state

	def delete(self, session_id: str) -> None:
		"""Forget a session; raise KeyError if missing."""
		if self._sessions.pop(session_id, None) is None:
			raise KeyError(f"Session {session_id} not found")

	def add_turn(self, session_id: str, sender: Sender, text: str) -> ChatTurn:
		"""Append a turn to the session transcript."""
		state = self.get(session_id)
		turn = ChatTurn(text=text, sender=sender)
		state.transcript.append(turn)
		return turn

	def __len__(self) -> int:
		return len(self._sessions)
