"""Validation helpers for uploaded room photos."""

import io

from fastapi import HTTPException, UploadFile
from PIL import Image as PILImage, UnidentifiedImageError

from models.design_models import Image

# Pillow format name -> MIME type sent to the model.
FORMAT_MIME_TYPES = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "WEBP": "image/webp",
    "GIF": "image/gif",
    "BMP": "image/bmp",
    "TIFF": "image/tiff",
}

GENERIC_CONTENT_TYPES = {"", "application/octet-stream"}


def detect_image_mime(image_bytes: bytes) -> str:
    """Return the MIME type of an image payload.

    Pillow only identifies and verifies the container; pixels are not decoded.

    Raises:
        ValueError: If the bytes are not a supported image.
    """
    try:
        with PILImage.open(io.BytesIO(image_bytes)) as img:
            image_format = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ValueError("Uploaded file is not a supported image.") from exc
    mime_type = FORMAT_MIME_TYPES.get(image_format or "")
    if mime_type is None:
        raise ValueError(f"Unsupported image format: {image_format}")
    return mime_type


def is_image_content_type(content_type: str | None) -> bool:
    """True for image/* headers and for missing or generic ones left to detection."""
    declared = (content_type or "").lower().split(";", 1)[0].strip()
    return declared in GENERIC_CONTENT_TYPES or declared.startswith("image/")


def image_from_bytes(image_bytes: bytes) -> Image:
    """Build an ``Image`` from raw upload bytes, trusting only the detected format.

    Raises:
        ValueError: If the payload is empty or unreadable.
    """
    if not image_bytes:
        raise ValueError("Uploaded image is empty.")
    detected = detect_image_mime(image_bytes)
    return Image(data=image_bytes, mime_type=detected)


async def read_image_upload(upload: UploadFile, max_bytes: int) -> Image:
    """Read a multipart photo upload into an ``Image``.

    Raises:
        HTTPException: 400 for empty or unreadable files, 413 for oversized files,
            415 for non-image content types.
    """
    try:
        image_bytes = await upload.read(max_bytes + 1)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise HTTPException(status_code=400, detail="Unable to read uploaded image.") from exc

    if len(image_bytes) > max_bytes:
        raise HTTPException(status_code=413, detail=f"Uploaded image exceeds {max_bytes} bytes.")

    if not is_image_content_type(upload.content_type):
        raise HTTPException(status_code=415, detail=f"Unsupported content type: {upload.content_type}")

    try:
        return image_from_bytes(image_bytes)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
