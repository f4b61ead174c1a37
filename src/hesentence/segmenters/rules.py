"""Boundary marking rules.

Text is marked by running an ordered pipeline of regex stages. Every stage
rescans the whole output of the previous one, so later stages see the markers
already inserted by earlier ones.

Two kinds of stage exist:

* consuming stages replace the whole match with the marker
  (a blank line becomes a single boundary);
* appending stages keep the match and put the marker right after it
  (``"end. "`` becomes ``"end. <marker>"``).
"""

import re
from dataclasses import dataclass
from typing import Pattern, Sequence, Tuple

DEFAULT_MARKER = "\x01"

PUNCTUATION = r"[.!?]"
AFTER_PUNCTUATION = r"(?:'|\"|\)|\]|\})?"   # at most one closing quote or bracket
PUNCTUATION_AND_CLOSER = PUNCTUATION + AFTER_PUNCTUATION

# Characters the rules match on; a marker drawn from these would be rescanned.
RULE_CHARACTERS = ".!?'\")]}"


@dataclass(frozen=True)
class BoundaryRule:
    """A single marking stage."""
    name: str
    pattern: Pattern[str]
    consume: bool   # True: replace match with marker. False: keep match, append marker.

    def apply(self, text: str, marker: str) -> str:
        """Run this stage over ``text`` and return the re-marked text."""
        # Callables keep markers like "\\" literal in the output.
        if self.consume:
            return self.pattern.sub(lambda m: marker, text)
        return self.pattern.sub(lambda m: m.group(0) + marker, text)


PARAGRAPH_BREAK = BoundaryRule(
    name="paragraph_break",
    pattern=re.compile(r"\n\s*\n"),
    consume=True,
)

TERMINAL_PUNCTUATION = BoundaryRule(
    name="terminal_punctuation",
    pattern=re.compile(PUNCTUATION_AND_CLOSER + r"\s"),
    consume=False,
)

# A lone letter before punctuation (an initial, a numbered item) ends a sentence too.
SINGLE_LETTER = BoundaryRule(
    name="single_letter",
    pattern=re.compile(r"\s\w" + PUNCTUATION),
    consume=False,
)

DEFAULT_RULES: Tuple[BoundaryRule, ...] = (
    PARAGRAPH_BREAK,
    TERMINAL_PUNCTUATION,
    SINGLE_LETTER,
)


def mark_boundaries(text: str, marker: str = DEFAULT_MARKER,
                    rules: Sequence[BoundaryRule] = DEFAULT_RULES) -> str:
    """
    Insert ``marker`` at every detected sentence boundary.

    Args:
        text: Decoded input text (may be empty)
        marker: Sentinel inserted at boundaries
        rules: Stages to apply, in order

    Returns:
        str: The input with markers inserted. Apart from the newlines eaten by
        paragraph breaks, every input character is preserved.
    """
    for rule in rules:
        text = rule.apply(text, marker)
    return text
