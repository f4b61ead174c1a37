"""Data types and result structures for segmentation."""

from dataclasses import dataclass, field
from typing import List

@dataclass
class Segmentation:
    """Full trace of one segmentation call."""
    text: str                      # Input as given
    marker: str                    # Marker used for this call
    marked_text: str               # Input with boundary markers inserted
    fragments: List[str] = field(default_factory=list)   # Split before cleanup
    sentences: List[str] = field(default_factory=list)   # Trimmed, non-noise fragments

    @property
    def boundary_count(self) -> int:
        """Number of markers inserted into the text."""
        return self.marked_text.count(self.marker) - self.text.count(self.marker)

    @property
    def dropped_fragments(self) -> int:
        """Fragments discarded as whitespace or punctuation noise."""
        return len(self.fragments) - len(self.sentences)
