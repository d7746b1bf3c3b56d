"""
Prompt Builder layer for the trivia gateway.

Exports the trivia and suggested-topics prompt builders.
"""

from .prompt_builder import (
    MIN_TRIVIA_ITEMS,
    SUGGESTED_TOPIC_COUNT,
    build_suggestions_prompt,
    build_trivia_prompt,
    normalize_topic,
)

__all__ = [
    "MIN_TRIVIA_ITEMS",
    "SUGGESTED_TOPIC_COUNT",
    "build_suggestions_prompt",
    "build_trivia_prompt",
    "normalize_topic",
]
