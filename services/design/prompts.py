"""Instruction builders for every model operation.

All builders are pure: the same inputs always produce the same text.
"""

from __future__ import annotations


def initial_style_prompt(style: str) -> str:
	"""Return the instruction that restyles the uploaded room."""
	return (
		"Use the attached image of the room as the base. Keep the architecture (walls, windows, floors), "
		"the layout, and all major furniture pieces exactly as they are. "
		f"Change only the decorative elements to give the room a {style} aesthetic. "
		"Focus on updating: Wall art, cushions and textiles (throws, curtains), the area rug, plants, "
		"small decorative objects (vases, books, candles), and lighting (only the style of the fixtures, "
		"not their location). The resulting atmosphere should be fresh, soft, and inviting."
	)


def removal_prompt(target_description: str) -> str:
	"""Return the instruction that removes one object from the room."""
	return (
		f"Use the attached image. Remove {target_description} from the scene. "
		"Ensure that the background or surface where the item was located is realistically and seamlessly "
		"filled in, matching the surroundings. All other elements in the image must remain unchanged."
	)


def edit_prompt(user_prompt: str) -> str:
	"""Return the instruction that applies a free-form decor request."""
	return (
		f'As an AI interior designer, apply this user request: "{user_prompt}". '
		"Your changes should focus only on decorative elements like wall art, vases, cushions, and lighting "
		"to create a fresh, soft, and inviting atmosphere. "
		"You must maintain the existing architecture and furniture layout."
	)


def chat_system_instruction() -> str:
	"""Return the persona of the conversational design assistant."""
	return (
		"You are an AI interior design assistant. A user has an AI-generated image of a room. "
		"Your task is to answer questions about it and provide helpful next steps.\n"
		"- If asked for shopping suggestions for items in the image, provide a fictional list of 2-3 items "
		"with descriptive names and brands.\n"
		"- If asked for style advice or alternative styles, suggest 2-3 other design styles that would also "
		"suit the room. Briefly explain why each suggestion would work well.\n"
		"- For any other design-related questions, answer helpfully and concisely.\n"
		"- ALWAYS provide a list of 3 short, engaging follow-up questions or actions in the 'suggestions' "
		"field of the JSON response. These should anticipate the user's next logical query. "
		'Example suggestions: "Tell me more about this style.", "Suggest some wall art.", '
		'"Where can I buy a similar rug?".\n'
		"Do not refer to the user's image unless they mention it. "
		"Focus on general design principles and the content of their prompt."
	)


def intent_classification_prompt(user_text: str) -> str:
	"""Return the instruction that sorts a request into REMOVE, EDIT or CHAT."""
	return (
		f'Analyze the user\'s request: "{user_text}".\n'
		'- If the user wants to remove a specific object, respond with "REMOVE|[the object to remove]". '
		'Example: for "please get rid of the plant in the corner", respond "REMOVE|the plant in the corner".\n'
		"- If the user is asking for a different visual modification (e.g., 'change color', 'add object', "
		"'make it look like...'), respond with \"EDIT\".\n"
		'- For all other requests (questions, style advice, shopping links), respond with "CHAT".\n'
		"Respond with only one of these options. Your response should be a single line."
	)
