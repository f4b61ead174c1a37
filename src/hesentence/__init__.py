"""
hesentence - Rule-based sentence splitting for Hebrew text.

Splits text into sentences with punctuation and whitespace heuristics.
No statistical model is involved, so results are deterministic.
"""

__version__ = "0.1.0"

from .api import get_sentences, get_marker, set_marker, reset_marker
from .segmenters.rules import DEFAULT_MARKER, mark_boundaries
from .segmenters.sentence import SentenceSegmenter

__all__ = [
    "get_sentences",
    "get_marker",
    "set_marker",
    "reset_marker",
    "mark_boundaries",
    "SentenceSegmenter",
    "DEFAULT_MARKER",
]
