"""Utilities to build input payloads for the Responses API."""

from typing import Any, Dict, List, Sequence

from models.design_models import HistoryEntry, Image

# The Responses API names the model side of a conversation "assistant".
_ROLE_MAP = {"user": "user", "model": "assistant"}


def build_image_inputs(prompt: str, image: Image) -> List[Dict[str, Any]]:
    """Compose a single user message carrying the image followed by the instruction."""
    return [
        {
            "type": "message",
            "role": "user",
            "content": [
                {"type": "input_image", "image_url": image.to_data_url()},
                {"type": "input_text", "text": prompt},
            ],
        }
    ]


def build_history_messages(history: Sequence[HistoryEntry]) -> List[Dict[str, Any]]:
    """Convert role-tagged history into Responses API messages, preserving order."""
    messages: List[Dict[str, Any]] = []
    for entry in history:
        role = _ROLE_MAP.get(entry.role)
        if role is None:
            raise ValueError(f"Unsupported history role: {entry.role!r}")
        messages.append({"type": "message", "role": role, "content": entry.text})
    return messages


def build_text_inputs(prompt: str, history: Sequence[HistoryEntry] = ()) -> List[Dict[str, Any]]:
    """Build the input array for a text request: prior history then the new prompt."""
    inputs = build_history_messages(history)
    inputs.append(
        {"type": "message", "role": "user", "content": [{"type": "input_text", "text": prompt}]}
    )
    return inputs
