"""Module-level functions backed by a shared default segmenter.

``set_marker`` swaps the default segmenter for a new one. Each call takes
its own reference to the current segmenter, so a marker change never lands
between the marking and splitting steps of a call already in progress.
"""

import threading
import warnings
from typing import List, Optional

from .segmenters.rules import DEFAULT_MARKER
from .segmenters.sentence import SentenceSegmenter

_lock = threading.Lock()
_default = SentenceSegmenter(DEFAULT_MARKER)


def _current() -> SentenceSegmenter:
    with _lock:
        return _default


def get_sentences(text: Optional[str]) -> List[str]:
    """
    Split text into sentences with the default segmenter.

    Returns an empty list when ``text`` is None. Raises
    MarkerCollisionError if the text contains the current marker.
    """
    return _current().segment(text)


def get_marker() -> str:
    """Return the marker used by ``get_sentences``."""
    return _current().marker


def set_marker(new_marker: Optional[str]) -> str:
    """
    Change the marker used by ``get_sentences``.

    A None value is refused with a UserWarning and the current marker is
    kept. Any other value must be a non-empty string: an empty string or a
    non-string raises InvalidMarkerError and leaves the marker unchanged.
    Returns the marker in effect after the call.
    """
    global _default
    if new_marker is None:
        warnings.warn("Won't set marker to undefined value!", UserWarning, stacklevel=2)
        return get_marker()
    segmenter = SentenceSegmenter(new_marker)
    with _lock:
        _default = segmenter
    return segmenter.marker


def reset_marker() -> str:
    """Restore the default marker."""
    return set_marker(DEFAULT_MARKER)
