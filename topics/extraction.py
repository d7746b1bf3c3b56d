import json
from typing import List


class ExtractionError(ValueError):
    """No usable JSON array of strings could be pulled out of the text."""


def extract_json_array(text: str) -> List[str]:
    """
    Pull a JSON array of strings out of free-form model output.

    Best-effort heuristic: models often wrap the array in prose or code
    fences, so the candidate is everything from the first "[" to the last "]"
    inclusive. Anything more nested or more creative than that is rejected.

    Returns:
        The parsed list, in the order the model produced it.

    Raises:
        ExtractionError: no brackets, invalid JSON, or a non-string element.
    """
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end < start:
        raise ExtractionError("No JSON array found in model output")

    candidate = text[start : end + 1]
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Invalid JSON array: {e.msg}") from e

    if not all(isinstance(item, str) and item.strip() for item in parsed):
        raise ExtractionError("Array must contain only non-empty strings")

    return parsed
