"""Test the module-level functions."""

import threading

import pytest
import hesentence
from hesentence import get_sentences, get_marker, set_marker, reset_marker
from hesentence.core.errors import InvalidMarkerError, MarkerCollisionError


class TestGetSentences:
    """Test get_sentences with the default marker."""
    
    def test_basic(self):
        """Test the plain case."""
        assert get_sentences("Cats run fast. Dogs jump high!") == [
            "Cats run fast.", "Dogs jump high!"
        ]
    
    def test_none(self):
        """Test that None gives an empty list."""
        assert get_sentences(None) == []
    
    def test_default_marker_collision(self):
        """Test that the default marker may not appear in the input."""
        with pytest.raises(MarkerCollisionError):
            get_sentences("bad\x01text")
    
    def test_package_exports(self):
        """Test the names exported by the package."""
        assert hesentence.DEFAULT_MARKER == "\x01"
        assert callable(hesentence.mark_boundaries)
        assert hesentence.SentenceSegmenter is not None


class TestMarkerAccessors:
    """Test get_marker and set_marker."""
    
    def test_default(self):
        """Test the initial marker."""
        assert get_marker() == "\x01"
    
    def test_round_trip(self):
        """Test setting and reading back a marker."""
        assert set_marker("X") == "X"
        assert get_marker() == "X"
    
    def test_new_marker_is_used(self):
        """Test that get_sentences uses the marker that was set."""
        set_marker("#")
        assert get_sentences("One. Two.") == ["One.", "Two."]
        with pytest.raises(MarkerCollisionError):
            get_sentences("Item #1. Item #2.")
    
    def test_none_warns_and_keeps_marker(self):
        """Test that None is refused with a warning."""
        set_marker("X")
        with pytest.warns(UserWarning, match="undefined"):
            result = set_marker(None)
        assert result == "X"
        assert get_marker() == "X"
    
    def test_empty_marker_rejected(self):
        """Test that an empty marker raises and leaves state alone."""
        with pytest.raises(InvalidMarkerError):
            set_marker("")
        with pytest.raises(InvalidMarkerError):
            set_marker(1)
        assert get_marker() == "\x01"
    
    def test_reset(self):
        """Test restoring the default marker."""
        set_marker("X")
        assert reset_marker() == "\x01"
        assert get_marker() == "\x01"


class TestConcurrency:
    """Test marker changes while other threads split text."""
    
    def test_results_stay_correct(self):
        """Test that no call sees a half-applied marker change."""
        errors = []
        expected = ["One sentence.", "Another one!"]
        
        def worker():
            for _ in range(200):
                if get_sentences("One sentence. Another one!") != expected:
                    errors.append("bad result")
        
        def switcher():
            for i in range(200):
                set_marker("|" if i % 2 else "#")
        
        threads = [threading.Thread(target=worker) for _ in range(4)]
        threads.append(threading.Thread(target=switcher))
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        
        assert errors == []
