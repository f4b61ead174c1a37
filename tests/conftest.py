"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

import hesentence
from hesentence.segmenters.sentence import SentenceSegmenter
from hesentence.config.loader import load_config_from_string


@pytest.fixture(autouse=True)
def restore_default_marker():
    """Keep marker changes from leaking between tests."""
    yield
    hesentence.reset_marker()


@pytest.fixture
def segmenter():
    """Provide a segmenter with a visible marker for easy assertions."""
    return SentenceSegmenter("|")


@pytest.fixture
def sample_config_yaml():
    """Provide a sample config YAML for testing."""
    return """
version: 1
marker: "|"
check_marker_collision: true
encoding: cp1255
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)
    
    yield temp_path
    
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""
    
    def __init__(self):
        self.messages = []
    
    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))
    
    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))
    
    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))
    
    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()
