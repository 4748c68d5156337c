import asyncio
import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from models.design_models import HistoryEntry, Image
from services.openai.chat_schema import CHAT_RESPONSE_SCHEMA
from services.openai.model_client import ModelClientError, OpenAIModelClient
from utils.settings import ModelSettings


def _client(response=None, side_effect=None, **settings):
    openai_client = SimpleNamespace(responses=SimpleNamespace(create=AsyncMock(return_value=response, side_effect=side_effect)))
    return openai_client, OpenAIModelClient(openai_client, ModelSettings(api_key="test-key", **settings))


def _image_response(*results):
    output = [SimpleNamespace(type="reasoning")]
    output += [SimpleNamespace(type="image_generation_call", result=result) for result in results]
    return SimpleNamespace(output=output, usage=SimpleNamespace(input_tokens=10, output_tokens=20))


def _text_response(text):
    content = [SimpleNamespace(type="output_text", text=text)]
    return SimpleNamespace(output=[SimpleNamespace(type="message", content=content)], usage=None)


def test_generate_image_returns_first_image():
    encoded = base64.b64encode(b"new-room").decode("utf-8")
    other = base64.b64encode(b"other").decode("utf-8")
    openai_client, client = _client(_image_response(encoded, other), image_format="webp")
    source = Image(data=b"old-room", mime_type="image/jpeg")

    result = asyncio.run(client.generate_image("restyle it", source))

    assert result == Image(data=b"new-room", mime_type="image/webp")
    kwargs = openai_client.responses.create.await_args.kwargs
    assert kwargs["tool_choice"] == {"type": "image_generation"}
    assert kwargs["tools"][0]["output_format"] == "webp"
    content = kwargs["input"][0]["content"]
    assert content[0]["image_url"] == source.to_data_url()
    assert content[1] == {"type": "input_text", "text": "restyle it"}


def test_generate_image_without_image_data_returns_none():
    _, client = _client(_image_response(None))
    assert asyncio.run(client.generate_image("x", Image(data=b"a", mime_type="image/png"))) is None


def test_generate_image_transport_failure():
    _, client = _client(side_effect=ConnectionError("reset"))
    with pytest.raises(ModelClientError) as excinfo:
        asyncio.run(client.generate_image("x", Image(data=b"a", mime_type="image/png")))
    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_generate_text_plain_prompt():
    openai_client, client = _client(_text_response("EDIT"), text_model="gpt-test")

    assert asyncio.run(client.generate_text("classify this")) == "EDIT"

    kwargs = openai_client.responses.create.await_args.kwargs
    assert kwargs["model"] == "gpt-test"
    assert "instructions" not in kwargs
    assert "text" not in kwargs
    assert kwargs["input"] == [
        {"type": "message", "role": "user", "content": [{"type": "input_text", "text": "classify this"}]}
    ]


def test_generate_text_with_history_schema_and_instruction():
    openai_client, client = _client(_text_response('{"answer":"a","suggestions":[]}'))
    history = [HistoryEntry(role="user", text="hi"), HistoryEntry(role="model", text="hello")]

    asyncio.run(
        client.generate_text(
            "next", history, CHAT_RESPONSE_SCHEMA, system_instruction="persona", schema_name="reply"
        )
    )

    kwargs = openai_client.responses.create.await_args.kwargs
    assert kwargs["instructions"] == "persona"
    assert kwargs["text"]["format"]["type"] == "json_schema"
    assert kwargs["text"]["format"]["name"] == "reply"
    assert kwargs["text"]["format"]["schema"] == CHAT_RESPONSE_SCHEMA
    assert [(item["role"], item["content"]) for item in kwargs["input"][:2]] == [
        ("user", "hi"),
        ("assistant", "hello"),
    ]
    assert kwargs["input"][2]["role"] == "user"


def test_generate_text_falls_back_to_output_text():
    _, client = _client(SimpleNamespace(output=[], output_text="CHAT", usage=None))
    assert asyncio.run(client.generate_text("x")) == "CHAT"


def test_requires_openai_client():
    with pytest.raises(ValueError):
        OpenAIModelClient(None, ModelSettings(api_key="k"))
