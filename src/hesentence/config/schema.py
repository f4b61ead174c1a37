"""Pydantic schema for segmenter configuration."""

import re
from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.abc import Logger
from ..segmenters.rules import DEFAULT_MARKER, RULE_CHARACTERS
from ..segmenters.sentence import SentenceSegmenter

class SegmenterConfig(BaseModel):
    """Settings for building a SentenceSegmenter."""
    version: int = Field(default=1, description="Config schema version")
    marker: str = Field(default=DEFAULT_MARKER, min_length=1,
                        description="Sentinel inserted at sentence boundaries")
    check_marker_collision: bool = Field(default=True,
                                         description="Reject input that already contains the marker")
    encoding: str = Field(default="utf-8",
                          description="Encoding of input files, e.g. utf-8 or cp1255")
    
    class Config:
        extra = "forbid"  # Strict validation
        
    def validate_marker(self) -> List[str]:
        """Return problems with the marker that would corrupt boundary detection."""
        issues = []
        
        if not self.marker:
            issues.append("Marker is empty")
            
        if any(ch.isspace() for ch in self.marker):
            issues.append(f"Marker {self.marker!r} contains whitespace")
            
        if re.search(r"\w", self.marker):
            issues.append(f"Marker {self.marker!r} contains word characters")
            
        clashing = sorted(set(self.marker) & set(RULE_CHARACTERS))
        if clashing:
            issues.append(f"Marker {self.marker!r} contains rule punctuation: {clashing}")
            
        return issues

    def build_segmenter(self, logger: Optional[Logger] = None) -> SentenceSegmenter:
        """Create a segmenter from these settings."""
        return SentenceSegmenter(
            self.marker,
            check_marker_collision=self.check_marker_collision,
            logger=logger,
        )
