"""Helpers to extract text, images and usage from Responses API outputs."""

from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, List, Optional


def _field(item: Any, name: str, default: Any = None) -> Any:
	"""Read an attribute from SDK objects or a key from plain dicts."""
	if isinstance(item, dict):
		return item.get(name, default)
	return getattr(item, name, default)


def extract_text(response: Any) -> str:
	"""Return the concatenated output_text entries of the response."""
	chunks: List[str] = []
	for item in _field(response, "output", None) or []:
		if _field(item, "type") != "message":
			continue
		for content in _field(item, "content", None) or []:
			if _field(content, "type") == "output_text":
				chunks.append(_field(content, "text", "") or "")
	if chunks:
		return "".join(chunks)
	return _field(response, "output_text", "") or ""


def extract_image_payloads(response: Any) -> List[bytes]:
	"""Return decoded image bytes from every image generation call in the output.

	Calls without a result, or whose result is not valid base64, are skipped.
	"""
	images: List[bytes] = []
	for item in _field(response, "output", None) or []:
		if _field(item, "type") != "image_generation_call":
			continue
		result = _field(item, "result")
		if not result:
			continue
		try:
			images.append(base64.b64decode(result, validate=True))
		except (binascii.Error, ValueError):
			continue
	return images


def extract_usage(response: Any) -> Dict[str, Optional[int]]:
	"""Return token usage if present."""
	usage = _field(response, "usage")
	return {
		"input_tokens": _field(usage, "input_tokens") if usage else None,
		"output_tokens": _field(usage, "output_tokens") if usage else None,
	}
