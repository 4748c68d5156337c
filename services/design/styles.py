"""Selectable design styles and loading captions."""

from __future__ import annotations

import random
from typing import List, Optional

DESIGN_STYLES: List[str] = [
    "Modern",
    "Scandinavian",
    "Minimalist",
    "Industrial",
    "Bohemian",
    "Mid-Century Modern",
    "Coastal",
    "Farmhouse",
    "Japandi",
    "Art Deco",
]

LOADING_MESSAGES: List[str] = [
    "Reimagining your space...",
    "Brewing up some design magic...",
    "Consulting with our AI muse...",
    "Painting with pixels...",
    "Arranging the virtual furniture...",
]


def normalize_style(style: str) -> str:
    """Return a trimmed style name, matching catalogue casing when possible.

    Raises:
        ValueError: If the style is blank.
    """
    cleaned = (style or "").strip()
    if not cleaned:
        raise ValueError("A design style is required.")
    for known in DESIGN_STYLES:
        if known.lower() == cleaned.lower():
            return known
    return cleaned


def pick_loading_message(previous: Optional[str] = None) -> str:
    """Pick a random loading caption different from ``previous`` when possible."""
    candidates = [msg for msg in LOADING_MESSAGES if msg != previous] or LOADING_MESSAGES
    return random.choice(candidates)
