# apps/backend/writewell/services/postprocess.py

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List

from writewell.schemas.writing import VALID_KINDS, Suggestion

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?", flags=re.IGNORECASE)


def strip_code_fences(raw: str) -> str:
    return _FENCE_RE.sub("", raw or "").strip()


def _to_str(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, str):
        return v
    return str(v)


def coerce_suggestion(item: Any, index: int) -> Suggestion:
    """
    Force one parsed element into a Suggestion.
    Missing id -> position (1-based), unknown type -> "improvement", missing text fields -> "".
    """
    data: Dict[str, Any] = item if isinstance(item, dict) else {}

    kind = data.get("type")
    if kind not in VALID_KINDS:
        kind = "improvement"

    return Suggestion(
        id=_to_str(data.get("id")) if data.get("id") else str(index + 1),
        kind=kind,
        title=_to_str(data.get("title")),
        description=_to_str(data.get("description")),
        original_snippet=_to_str(data.get("original")),
        suggested_snippet=_to_str(data.get("suggested")),
    )


def parse_suggestions(raw: str) -> List[Suggestion]:
    """Model output -> suggestions. Anything unparseable degrades to []."""
    cleaned = strip_code_fences(raw)

    try:
        data = json.loads(cleaned)
    except (ValueError, RecursionError):
        logger.warning("Model returned non-JSON analysis output (first 200 chars): %r", cleaned[:200])
        return []

    if not isinstance(data, list):
        logger.warning("Model returned %s instead of a JSON array; dropping it", type(data).__name__)
        return []

    return [coerce_suggestion(item, i) for i, item in enumerate(data)]
