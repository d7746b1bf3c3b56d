"""
Prompt Builder Layer
====================

Builds the two prompts the gateway sends upstream. Prompt text lives on the
server so clients never shape instructions themselves.

Responsibilities:
- build_trivia_prompt(): trivia/fun-fact generation for one topic
- build_suggestions_prompt(): a short list of suggested topics

Invariants:
- Both functions are pure: no I/O, same input -> same string
- The topic is inserted as plain text on one line; surrounding whitespace
  and embedded line breaks are collapsed so the instruction layout survives
- Both prompts demand raw JSON with no markdown fencing around it
"""

import re

# ── Constants ─────────────────────────────────────────────────────────────────
SUGGESTED_TOPIC_COUNT: int = 6
MIN_TRIVIA_ITEMS: int = 30

_WHITESPACE_RE = re.compile(r"\s+")

_TRIVIA_JSON_EXAMPLE = """```json
{
  "🌌 The Cosmos": [
    {
      "text": "What is a quasar and how is it powered?",
      "search_query": "what is a quasar"
    }
  ],
  "🚀 Space Exploration": [
    {
      "text": "Tip: You can track the International Space Station's position live online.",
      "search_query": "track international space station live"
    }
  ]
}
```"""


def normalize_topic(topic: str) -> str:
    """Collapse whitespace so the topic sits on a single line."""
    return _WHITESPACE_RE.sub(" ", topic).strip()


def build_trivia_prompt(topic: str) -> str:
    """
    Build the trivia generation prompt for a topic.

    The model is asked for at least MIN_TRIVIA_ITEMS items grouped into 3-4
    emoji-prefixed categories, each item carrying display text plus a search
    query, returned as one raw JSON object.

    Args:
        topic: The user's topic (already validated as non-blank).

    Returns:
        Prompt string ready to send as the user message.
    """
    topic = normalize_topic(topic)

    return f"""You are a brilliant trivia and fun fact generator. A user is interested in the topic: "{topic}".
Your task is to generate at least {MIN_TRIVIA_ITEMS} interesting items about this topic.

**Instructions:**
1.  Provide a mix of content types: intriguing questions, "Did you know...?" facts, and actionable tips.
2.  Group the items into 3-4 relevant, emoji-prefixed categories (e.g., "🔬 Science & Biology", "🏛️ History & Culture").
3.  For each item, provide the main text and a clean, effective Google search query for it.
4.  The output must be a single, valid JSON object. Do not include any text or markdown formatting before or after the JSON.

**JSON Structure Example:**
{_TRIVIA_JSON_EXAMPLE}

Now, generate the JSON for the topic: "{topic}\""""


def build_suggestions_prompt() -> str:
    """Build the prompt asking for SUGGESTED_TOPIC_COUNT fresh topic ideas."""
    return f"""You suggest topics for a trivia and fun fact explorer.
Generate exactly {SUGGESTED_TOPIC_COUNT} diverse, interesting topics that a curious person might want to learn about.

**Rules:**
1.  Each topic must be 2-4 words long.
2.  Cover a mix of areas such as science, history, nature, technology, food, and culture.
3.  Avoid controversial, political, or sensitive subjects.
4.  Respond with a single raw JSON array of {SUGGESTED_TOPIC_COUNT} strings and nothing else. Do not wrap it in markdown code fences.

Example of the expected format:
["Deep Sea Creatures", "Ancient Roman Engineering", "The Science of Sleep", "History of Chocolate", "Volcanic Islands", "Origami Mathematics"]"""
