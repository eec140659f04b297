#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/prompts.py
"""Prompt text used by the note assistant.

The system prompts configure the editor's AI commands; the transformation
prompts wrap a note's plain text in an instruction for the model. Model
invocation itself is outside this package.
"""

from __future__ import annotations

import logging
from typing import Any

from notedoc.ast.transforms import extract_plain_text

logger = logging.getLogger(__name__)

_OUTPUT_ONLY = "ONLY output the generation itself, with no introductions, explanations, or extra commentary. "
_USE_MARKDOWN = "Use Markdown formatting when appropriate."
_SHORT_LIMIT = (
    "Limit your response to no more than 200 characters, but make sure to construct complete sentences. "
)

CONTINUE_SYSTEM_PROMPT = (
    "You are an AI writing assistant that continues existing text based on context from prior text. "
    + _SHORT_LIMIT
    + _OUTPUT_ONLY
    + _USE_MARKDOWN
)
IMPROVE_SYSTEM_PROMPT = (
    "You are an AI writing assistant that improves existing text. " + _SHORT_LIMIT + _OUTPUT_ONLY + _USE_MARKDOWN
)
SHORTER_SYSTEM_PROMPT = "You are an AI writing assistant that shortens existing text. " + _OUTPUT_ONLY + _USE_MARKDOWN
LONGER_SYSTEM_PROMPT = "You are an AI writing assistant that lengthens existing text. " + _OUTPUT_ONLY + _USE_MARKDOWN
FIX_SYSTEM_PROMPT = (
    "You are an AI writing assistant that fixes grammar and spelling errors in existing text. "
    + _SHORT_LIMIT
    + _OUTPUT_ONLY
    + _USE_MARKDOWN
)
ZAP_SYSTEM_PROMPT = (
    "You are an AI writing assistant that generates text based on a prompt. "
    "You take an input from the user and a command for manipulating the text. " + _OUTPUT_ONLY + _USE_MARKDOWN
)
DEFAULT_SYSTEM_PROMPT = (
    "You are an AI writing assistant. "
    + _OUTPUT_ONLY
    + "If user asks to delete text, just return an empty string. "
    + _USE_MARKDOWN
)
AUTOCOMPLETE_SYSTEM_PROMPT = (
    "You are an AI writing assistant that provides intelligent autocomplete suggestions. "
    "Given the context of what the user has written so far, suggest a natural and relevant continuation. "
    "IMPORTANT: Only provide the continuation text itself - no explanations, quotes, formatting, "
    "or prefixes like '...' or '-'. "
    "Do NOT add ellipsis (...) or any other symbols at the beginning or end of your suggestion! "
    "Start your response immediately with the actual continuation text. "
    "If the text seems complete or you cannot provide a meaningful suggestion, respond with an empty string. "
    "Focus on maintaining the writing style, tone, and flow of the existing content."
)

PDF_AUTO_PROMPT = (
    "Analyze this document and create a comprehensive, well-structured note. Include:\n"
    "- A brief summary of the main topic\n"
    "- Key points and important information organized with headings\n"
    "- Any notable details, facts, or takeaways\n"
    "- Use markdown formatting to make the notes clear and scannable\n\n"
    "Focus on capturing the essential information in a way that would be useful for reviewing and studying later."
)
IMAGE_AUTO_PROMPT = (
    "Analyze the image(s) and write a short note about it. Only include relevant information. "
    "If the image is text-based, only return the text and nothing else."
)
AUDIO_AUTO_PROMPT = "Transcribe the following audio. Include EVERYTHING."

SYSTEM_PROMPTS: dict[str, str] = {
    "continue": CONTINUE_SYSTEM_PROMPT,
    "improve": IMPROVE_SYSTEM_PROMPT,
    "shorter": SHORTER_SYSTEM_PROMPT,
    "longer": LONGER_SYSTEM_PROMPT,
    "fix": FIX_SYSTEM_PROMPT,
    "zap": ZAP_SYSTEM_PROMPT,
    "autocomplete": AUTOCOMPLETE_SYSTEM_PROMPT,
}

TRANSFORMATION_PROMPTS: dict[str, str] = {
    "summarize": "Please summarize the following text in a clear and concise way:",
    "expand": "Please expand on the following text, adding more detail and context:",
    "simplify": "Please simplify the following text, making it easier to understand:",
    "formal": "Please rewrite the following text in a more formal tone:",
    "casual": "Please rewrite the following text in a more casual, conversational tone:",
    "bullet-points": "Please convert the following text into bullet points:",
    "paragraph": "Please convert the following bullet points or list into a flowing paragraph:",
}


def get_system_prompt(command: str) -> str:
    """Return the system prompt for an editor AI command, or the default prompt."""
    return SYSTEM_PROMPTS.get(command, DEFAULT_SYSTEM_PROMPT)


def generate_transformation_prompt(kind: str, content: str) -> str:
    """Build the user prompt for a note transformation.

    Parameters
    ----------
    kind : str
        Transformation name, e.g. ``"summarize"`` or ``"bullet-points"``.
        Unknown names produce a generic ``Please <kind> the following text:``
        instruction.
    content : str
        Text to transform

    Returns
    -------
    str
        Instruction, a blank line, then the content

    Examples
    --------
    >>> generate_transformation_prompt("translate", "hola")
    'Please translate the following text:\\n\\nhola'

    """
    instruction = TRANSFORMATION_PROMPTS.get(kind)
    if instruction is None:
        logger.debug("No built-in transformation %r; using generic instruction", kind)
        instruction = f"Please {kind} the following text:"
    return f"{instruction}\n\n{content}"


def note_transformation_prompt(kind: str, tree: Any) -> str:
    """Build a transformation prompt from a note's document tree."""
    return generate_transformation_prompt(kind, extract_plain_text(tree))
