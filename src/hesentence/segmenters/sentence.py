"""Deterministic sentence segmenter built on the boundary marking rules."""

import re
from typing import Iterable, List, Optional, Sequence

from ..core.abc import Logger
from ..core.errors import InvalidMarkerError, MarkerCollisionError
from ..core.types import Segmentation
from .rules import DEFAULT_MARKER, DEFAULT_RULES, BoundaryRule, mark_boundaries

_WORD_CHAR = re.compile(r"\w")


def clean_fragments(fragments: Iterable[Optional[str]]) -> List[str]:
    """
    Turn raw fragments into sentences.

    Fragments that are None or hold no word character are dropped as noise.
    The rest are stripped of surrounding whitespace. Order is kept and
    duplicates are not removed.
    """
    sentences = []
    for fragment in fragments:
        if fragment is None:
            continue
        if not _WORD_CHAR.search(fragment):
            continue
        sentences.append(fragment.strip())
    return sentences


class SentenceSegmenter:
    """
    Deterministic rule-based sentence segmenter.
    The boundary marker is fixed for the lifetime of the instance, so one
    segmenter can be shared between threads.
    """

    def __init__(self, marker: str = DEFAULT_MARKER, *,
                 check_marker_collision: bool = True,
                 rules: Sequence[BoundaryRule] = DEFAULT_RULES,
                 logger: Optional[Logger] = None):
        """
        Initialize segmenter.

        Args:
            marker: Sentinel used to mark boundaries; must not occur in input
            check_marker_collision: Reject input that already contains the marker
            rules: Boundary marking stages, applied in order
            logger: Optional structured logger
        """
        if not isinstance(marker, str) or not marker:
            raise InvalidMarkerError(f"Marker must be a non-empty string, got {marker!r}")
        self.marker = marker
        self.check_marker_collision = check_marker_collision
        self.rules = tuple(rules)
        self.log = logger

    def __repr__(self) -> str:
        return f"SentenceSegmenter(marker={self.marker!r})"

    def _check_collision(self, text: str) -> None:
        position = text.find(self.marker)
        if position < 0:
            return
        if self.log:
            self.log.error("marker_collision", marker=repr(self.marker), position=position)
        raise MarkerCollisionError(self.marker, position)

    def mark(self, text: str) -> str:
        """Return ``text`` with this segmenter's marker at every boundary."""
        if self.check_marker_collision:
            self._check_collision(text)
        return mark_boundaries(text, self.marker, self.rules)

    def fragments(self, text: Optional[str]) -> List[str]:
        """Split marked text on the marker, before any cleanup."""
        if text is None:
            return []
        return self.mark(text).split(self.marker)

    def analyze(self, text: Optional[str]) -> Segmentation:
        """
        Segment text and keep every intermediate step.

        Args:
            text: Input text, or None

        Returns:
            Segmentation: Marked text, raw fragments and final sentences
        """
        if text is None:
            return Segmentation(text="", marker=self.marker, marked_text="")

        marked = self.mark(text)
        fragments = marked.split(self.marker)
        sentences = clean_fragments(fragments)

        if self.log:
            self.log.info("segmentation",
                          text_length=len(text),
                          fragments=len(fragments),
                          sentences=len(sentences))

        return Segmentation(
            text=text,
            marker=self.marker,
            marked_text=marked,
            fragments=fragments,
            sentences=sentences,
        )

    def segment(self, text: Optional[str]) -> List[str]:
        """
        Segment text into sentences.

        Args:
            text: Input text to segment; None yields no sentences

        Returns:
            List[str]: Trimmed sentences in input order
        """
        return self.analyze(text).sentences
