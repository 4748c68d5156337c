"""Schema definition for the structured design assistant reply."""

from typing import Any, Dict

SCHEMA_NAME = "design_assistant_reply"

CHAT_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "answer": {
            "type": "string",
            "description": (
                "The direct, helpful, and concise answer to the user's question, "
                "formatted in markdown if necessary."
            ),
        },
        "suggestions": {
            "type": "array",
            "description": (
                "An array of 3 short, relevant follow-up questions or actions "
                "the user might want to ask next."
            ),
            "items": {"type": "string"},
        },
    },
    "required": ["answer", "suggestions"],
}
