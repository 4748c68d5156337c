"""Shared fixtures for the design assistant tests."""

import pytest

from fakes import make_png_bytes
from models.design_models import Image


@pytest.fixture
def room_photo() -> Image:
    return Image(data=make_png_bytes(), mime_type="image/png")


@pytest.fixture
def styled_image() -> Image:
    return Image(data=b"styled-bytes", mime_type="image/png")


@pytest.fixture
def edited_image() -> Image:
    return Image(data=b"edited-bytes", mime_type="image/png")
