"""Prompt construction and post-processing of model output into ideas."""

from __future__ import annotations

from typing import Any

IDEA_COUNT = 3

PROMPT_TEMPLATE = (
    'Give me 3 engaging YouTube content ideas about: "{topic}".\n'
    "Return each on a new line, no numbering, short but catchy."
)


def build_prompt(topic: str) -> str:
    return PROMPT_TEMPLATE.format(topic=topic)


def extract_prediction_text(payload: Any) -> str:
    """Return ``predictions[0].content`` or an empty string if it is not there."""

    if not isinstance(payload, dict):
        return ""
    predictions = payload.get("predictions")
    if not isinstance(predictions, list) or not predictions:
        return ""
    first = predictions[0]
    if not isinstance(first, dict):
        return ""
    content = first.get("content")
    return content if isinstance(content, str) else ""


def normalize_ideas(text: str, count: int = IDEA_COUNT) -> list[str]:
    """Turn free text into exactly ``count`` ideas, one per non-blank line.

    Extra lines are dropped; missing ones are filled with ``Idea N``
    placeholders numbered by position.
    """

    ideas = [line.strip() for line in text.split("\n")]
    ideas = [idea for idea in ideas if idea][:count]
    while len(ideas) < count:
        ideas.append(f"Idea {len(ideas) + 1}")
    return ideas
