import pytest

from fakes import make_png_bytes
from services.design.styles import DESIGN_STYLES, LOADING_MESSAGES, normalize_style, pick_loading_message
from utils.media_validation import detect_image_mime, image_from_bytes, is_image_content_type
from utils.settings import DEFAULT_MAX_UPLOAD_BYTES, ModelSettings, max_upload_bytes


def test_settings_from_env():
    settings = ModelSettings.from_env(
        {
            "OPENAI_API_KEY": "sk-test",
            "OPENAI_TEXT_MODEL": "text-x",
            "OPENAI_IMAGE_FORMAT": "JPEG",
        }
    )
    assert settings.api_key == "sk-test"
    assert settings.text_model == "text-x"
    assert settings.image_model == "gpt-4.1"
    assert settings.base_url is None
    assert settings.image_mime_type == "image/jpeg"


def test_settings_require_api_key():
    with pytest.raises(RuntimeError):
        ModelSettings.from_env({})


def test_settings_reject_unknown_format():
    with pytest.raises(ValueError):
        ModelSettings(api_key="k", image_format="tiff")


def test_max_upload_bytes():
    assert max_upload_bytes({}) == DEFAULT_MAX_UPLOAD_BYTES
    assert max_upload_bytes({"MAX_UPLOAD_BYTES": "1024"}) == 1024
    with pytest.raises(ValueError):
        max_upload_bytes({"MAX_UPLOAD_BYTES": "lots"})


def test_detect_image_mime():
    assert detect_image_mime(make_png_bytes()) == "image/png"
    with pytest.raises(ValueError):
        detect_image_mime(b"definitely not an image")


def test_image_from_bytes_uses_detected_type():
    image = image_from_bytes(make_png_bytes())
    assert image.mime_type == "image/png"


@pytest.mark.parametrize("data", [b"", b"abc"])
def test_image_from_bytes_rejects_bad_input(data):
    with pytest.raises(ValueError):
        image_from_bytes(data)


@pytest.mark.parametrize(
    "content_type, accepted",
    [
        ("image/png", True),
        ("IMAGE/JPEG; charset=binary", True),
        ("application/octet-stream", True),
        (None, True),
        ("text/plain", False),
    ],
)
def test_is_image_content_type(content_type, accepted):
    assert is_image_content_type(content_type) is accepted


def test_normalize_style():
    assert normalize_style("  japandi ") == "Japandi"
    assert normalize_style("Wabi-Sabi") == "Wabi-Sabi"
    with pytest.raises(ValueError):
        normalize_style("   ")
    assert "Mid-Century Modern" in DESIGN_STYLES


def test_pick_loading_message_avoids_previous():
    previous = LOADING_MESSAGES[0]
    for _ in range(20):
        assert pick_loading_message(previous) != previous
