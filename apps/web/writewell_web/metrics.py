# apps/web/writewell_web/metrics.py

from __future__ import annotations

import math
import re
from typing import Dict

_SENT_SPLIT_RE = re.compile(r"[.!?]+")


def count_words(text: str) -> int:
    if not text:
        return 0
    return len([w for w in re.split(r"\s+", text) if w])


def count_sentences(text: str) -> int:
    if not text:
        return 0
    return len([p for p in _SENT_SPLIT_RE.split(text) if p])


def readability_score(avg_words_per_sentence: int) -> int:
    """100 at <= 15 words per sentence, minus 5 per extra word, clamped to 0..100."""
    return min(100, max(0, 100 - (avg_words_per_sentence - 15) * 5))


def writing_metrics(text: str) -> Dict[str, int]:
    words = count_words(text)
    sentences = count_sentences(text)
    # round half up
    avg = math.floor(words / sentences + 0.5) if sentences > 0 else 0

    return {
        "words": words,
        "sentences": sentences,
        "avg_words_per_sentence": avg,
        "readability": readability_score(avg),
    }
