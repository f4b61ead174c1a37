#!/usr/bin/env python3
"""
hesentence Demo - Shows rule-based sentence splitting on Hebrew and English text.
"""

import sys
from pathlib import Path

# Add src to path so we can import hesentence
sys.path.insert(0, str(Path(__file__).parent / "src"))

from hesentence.cli import ConsoleLogger
from hesentence.segmenters.sentence import SentenceSegmenter


SAMPLES = [
    "שלום עולם. מה שלומך היום?\n\nפסקה חדשה בלי נקודה",
    "ראה סעיף א. ואחר כך סעיף ב.",
    'He said "stop." Then left.',
    "... !!! ???",
]


def main():
    segmenter = SentenceSegmenter("|", logger=ConsoleLogger(sys.stdout))
    
    for text in SAMPLES:
        print("=" * 60)
        print(f"Input: {text!r}")
        result = segmenter.analyze(text)
        print(f"Marked: {result.marked_text!r}")
        print(f"Fragments: {result.fragments!r}")
        for i, sentence in enumerate(result.sentences, 1):
            print(f"   {i}. {sentence}")
        if not result.sentences:
            print("   (no sentences)")
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
