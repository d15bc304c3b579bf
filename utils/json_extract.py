"""Helpers for pulling a JSON document out of free-form model output."""
import json
import re
from typing import Any

# Non-greedy so only the first fenced block is taken; the "json" tag is optional.
_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def extract_json_candidate(raw_text: str) -> str:
    """Return the interior of the first ``` fence, or the text itself when unfenced."""
    match = _FENCE_RE.search(raw_text)
    if match:
        return match.group(1).strip()
    return raw_text.strip()


def _reject_constant(name: str) -> Any:
    # NaN / Infinity would survive into the stored page as non-standard JSON
    raise ValueError(f"non-standard JSON constant {name}")


def load_json_object(raw_text: str) -> dict[str, Any]:
    """Parse the (possibly fenced) reply as a JSON object.

    Raises ValueError when the candidate is not valid JSON, uses the
    non-standard NaN/Infinity constants, nests too deeply to decode, or is
    not an object. json.JSONDecodeError is a ValueError subclass, so callers
    catch one type.
    """
    candidate = extract_json_candidate(raw_text)
    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant)
    except RecursionError:
        raise ValueError("JSON nests too deeply to decode") from None
    if not isinstance(parsed, dict):
        raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
    return parsed
