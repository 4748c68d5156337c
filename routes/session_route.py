"""FastAPI routes for design sessions."""

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from pydantic import BaseModel

from controllers.session_controller import (
	delete_session,
	get_image,
	get_session,
	select_style,
	send_message,
	start_session,
	upload_photo,
)

router = APIRouter(prefix="/sessions", tags=["sessions"])


class StylePayload(BaseModel):
	style: str


class MessagePayload(BaseModel):
	text: str


@router.post("")
async def start_session_route(request: Request):
	try:
		return await start_session(request)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail="Failed to create session.") from exc


@router.get("/{session_id}")
async def get_session_route(request: Request, session_id: str):
	return await get_session(request, session_id)


@router.delete("/{session_id}")
async def delete_session_route(request: Request, session_id: str):
	return await delete_session(request, session_id)


@router.post("/{session_id}/photo")
async def upload_photo_route(request: Request, session_id: str, photo: UploadFile = File(...)):
	"""Upload a room photo; this resets the session."""
	try:
		return await upload_photo(request, session_id, photo)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail="Failed to process image.") from exc


@router.post("/{session_id}/style")
async def select_style_route(request: Request, session_id: str, payload: StylePayload):
	try:
		return await select_style(request, session_id, payload.style)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail="Failed to generate the design.") from exc


@router.post("/{session_id}/messages")
async def post_message_route(request: Request, session_id: str, payload: MessagePayload):
	try:
		return await send_message(request, session_id, payload.text)
	except HTTPException:
		raise
	except Exception as exc:
		raise HTTPException(status_code=500, detail="Failed to process message.") from exc


@router.get("/{session_id}/images/{which}")
async def get_image_route(request: Request, session_id: str, which: str):
	"""Return the original or current image bytes."""
	return await get_image(request, session_id, which)
