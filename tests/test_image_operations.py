import asyncio

import pytest

from services.design.errors import GenerationFailed
from services.design.image_operations import DesignImageOperations
from services.design.prompts import edit_prompt, initial_style_prompt, removal_prompt
from services.openai.model_client import ModelClientError
from fakes import FakeModelClient


def test_initial_style_sends_template_and_photo(room_photo, styled_image):
    client = FakeModelClient(image_replies=[styled_image])

    result = asyncio.run(DesignImageOperations(client).apply_initial_style(room_photo, "Japandi"))

    assert result == styled_image
    assert client.image_calls == [{"prompt": initial_style_prompt("Japandi"), "image": room_photo}]


def test_remove_object_uses_removal_template(styled_image, edited_image):
    client = FakeModelClient(image_replies=[edited_image])

    result = asyncio.run(DesignImageOperations(client).remove_object(styled_image, "the lamp"))

    assert result == edited_image
    assert client.image_calls[0]["prompt"] == removal_prompt("the lamp")


def test_edit_uses_edit_template(styled_image, edited_image):
    client = FakeModelClient(image_replies=[edited_image])

    asyncio.run(DesignImageOperations(client).edit(styled_image, "paint it green"))

    assert client.image_calls[0]["prompt"] == edit_prompt("paint it green")


@pytest.mark.parametrize(
    "method, arg, message",
    [
        ("apply_initial_style", "Modern", "No image was generated."),
        ("remove_object", "the lamp", "No image was generated from the removal."),
        ("edit", "add plants", "No image was generated from the edit."),
    ],
)
def test_missing_image_raises_operation_message(room_photo, method, arg, message):
    client = FakeModelClient(image_replies=[None])

    with pytest.raises(GenerationFailed) as excinfo:
        asyncio.run(getattr(DesignImageOperations(client), method)(room_photo, arg))

    assert excinfo.value.message == message


@pytest.mark.parametrize(
    "method, message",
    [
        ("apply_initial_style", "Failed to generate the design. Please try again."),
        ("remove_object", "Failed to remove the object. Please try again."),
        ("edit", "Failed to edit the design. Please try again."),
    ],
)
def test_transport_failure_hides_detail(room_photo, method, message):
    client = FakeModelClient(image_replies=[ModelClientError("HTTP 500 internal trace")])

    with pytest.raises(GenerationFailed) as excinfo:
        asyncio.run(getattr(DesignImageOperations(client), method)(room_photo, "x"))

    assert excinfo.value.message == message
    assert "HTTP 500" not in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, ModelClientError)
