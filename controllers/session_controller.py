"""Session lifecycle helpers for the design workflow."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import HTTPException, Request, UploadFile
from fastapi.responses import Response

from models.design_models import ImageTurnResult
from models.session_models import SessionState
from services.design.errors import GenerationFailed, SessionStateError
from services.design.session_service import DesignSessionService
from services.design.session_store import SessionStore
from utils.media_validation import read_image_upload


def _store(request: Request) -> SessionStore:
	store = getattr(request.app.state, "session_store", None)
	if store is None:
		raise HTTPException(status_code=500, detail="Session store unavailable")
	return store


def _service(request: Request) -> DesignSessionService:
	service = getattr(request.app.state, "session_service", None)
	if service is None:
		raise HTTPException(status_code=500, detail="Design assistant not initialized.")
	return service


def _get_state(request: Request, session_id: str) -> SessionState:
	try:
		return _store(request).get(session_id)
	except KeyError as exc:
		raise HTTPException(status_code=404, detail=str(exc)) from exc


def session_view(state: SessionState) -> Dict[str, Any]:
	"""Return the read model of a session; images are referenced, not embedded."""
	return {
		"session_id": state.session_id,
		"phase": state.phase.value,
		"style": state.style,
		"loading": state.loading,
		"loading_message": state.loading_message if state.loading else None,
		"error": state.error,
		"original_image": {"mime_type": state.original_image.mime_type} if state.original_image else None,
		"generated_image": {"mime_type": state.generated_image.mime_type} if state.generated_image else None,
		"transcript": [{"id": turn.id, "text": turn.text, "sender": turn.sender} for turn in state.transcript],
		"suggestions": list(state.pending_suggestions),
	}


async def start_session(request: Request) -> Dict[str, Any]:
	"""Create a new empty session."""
	state = _store(request).create()
	return session_view(state)


async def get_session(request: Request, session_id: str) -> Dict[str, Any]:
	return session_view(_get_state(request, session_id))


async def delete_session(request: Request, session_id: str) -> Dict[str, Any]:
	try:
		_service(request).delete_session(session_id)
	except KeyError as exc:
		raise HTTPException(status_code=404, detail=str(exc)) from exc
	except SessionStateError as exc:
		raise HTTPException(status_code=409, detail=str(exc)) from exc
	return {"session_id": session_id, "deleted": True}


async def upload_photo(request: Request, session_id: str, photo: UploadFile) -> Dict[str, Any]:
	"""Validate the uploaded photo and reset the session around it."""
	_get_state(request, session_id)
	image = await read_image_upload(photo, request.app.state.max_upload_bytes)
	try:
		state = _service(request).upload_photo(session_id, image)
	except SessionStateError as exc:
		raise HTTPException(status_code=409, detail=str(exc)) from exc
	return session_view(state)


async def select_style(request: Request, session_id: str, style: str) -> Dict[str, Any]:
	"""Generate the initial styled image for the session."""
	state = _get_state(request, session_id)
	try:
		state = await _service(request).select_initial_style(session_id, style)
	except SessionStateError as exc:
		raise HTTPException(status_code=409, detail=str(exc)) from exc
	except GenerationFailed as exc:
		raise HTTPException(status_code=502, detail=exc.message) from exc
	except ValueError as exc:
		raise HTTPException(status_code=400, detail=str(exc)) from exc
	return session_view(state)


async def send_message(request: Request, session_id: str, text: str) -> Dict[str, Any]:
	"""Run a follow-up turn and return its kind with the updated session."""
	state = _get_state(request, session_id)
	try:
		result = await _service(request).send_message(session_id, text)
	except SessionStateError as exc:
		raise HTTPException(status_code=409, detail=str(exc)) from exc

	if result is None:
		kind = "error"
	elif isinstance(result, ImageTurnResult):
		kind = "image"
	else:
		kind = "text"
	return {"kind": kind, "session": session_view(state)}


async def get_image(request: Request, session_id: str, which: str) -> Response:
	"""Return the raw bytes of the original or current image."""
	state = _get_state(request, session_id)
	if which == "original":
		image = state.original_image
	elif which == "current":
		image = state.current_image
	else:
		raise HTTPException(status_code=404, detail=f"Unknown image '{which}'")
	if image is None:
		raise HTTPException(status_code=404, detail="Image not available for this session")
	return Response(content=image.data, media_type=image.mime_type)
