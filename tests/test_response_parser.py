import base64
from types import SimpleNamespace

from services.openai.response_parser import extract_image_payloads, extract_text, extract_usage


def test_extract_text_joins_output_text_parts():
    response = {
        "output": [
            {"type": "reasoning"},
            {
                "type": "message",
                "content": [
                    {"type": "output_text", "text": "REMOVE|"},
                    {"type": "refusal", "refusal": "no"},
                    {"type": "output_text", "text": "the lamp"},
                ],
            },
        ]
    }
    assert extract_text(response) == "REMOVE|the lamp"


def test_extract_text_empty_response():
    assert extract_text(SimpleNamespace(output=None)) == ""


def test_extract_image_payloads_skips_empty_and_invalid_results():
    good = base64.b64encode(b"png-bytes").decode("utf-8")
    response = SimpleNamespace(
        output=[
            SimpleNamespace(type="image_generation_call", result=None),
            SimpleNamespace(type="image_generation_call", result="%%%not-base64%%%"),
            SimpleNamespace(type="message", content=[]),
            SimpleNamespace(type="image_generation_call", result=good),
        ]
    )
    assert extract_image_payloads(response) == [b"png-bytes"]


def test_extract_usage():
    response = SimpleNamespace(usage=SimpleNamespace(input_tokens=3, output_tokens=4))
    assert extract_usage(response) == {"input_tokens": 3, "output_tokens": 4}
    assert extract_usage(SimpleNamespace()) == {"input_tokens": None, "output_tokens": None}
