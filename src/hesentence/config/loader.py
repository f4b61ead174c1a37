"""YAML configuration loading and validation."""

import codecs
import yaml
from pathlib import Path
from typing import Any, Union
from .schema import SegmenterConfig

class ConfigLoadError(Exception):
    """Exception raised when config loading or validation fails."""
    pass

def _build_config(data: Any, source: str) -> SegmenterConfig:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config in {source} must contain a YAML mapping, got {type(data)}")
        
    try:
        config = SegmenterConfig.model_validate(data)
    except Exception as e:
        raise ConfigLoadError(f"Config validation failed: {e}")
        
    issues = config.validate_marker()
    try:
        codecs.lookup(config.encoding)
    except LookupError:
        issues.append(f"Unknown encoding: {config.encoding}")
    if issues:
        raise ConfigLoadError(f"Config validation issues: {'; '.join(issues)}")
        
    return config

def load_config(path: Union[str, Path]) -> SegmenterConfig:
    """
    Load and validate segmenter settings from a YAML file.
    
    Args:
        path: Path to YAML config file
        
    Returns:
        SegmenterConfig: Validated settings
        
    Raises:
        ConfigLoadError: If file cannot be read or settings are invalid
    """
    path = Path(path)
    
    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")
        
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")
        
    return _build_config(data, str(path))

def load_config_from_string(yaml_content: str) -> SegmenterConfig:
    """
    Load and validate segmenter settings from a YAML string.
    
    An empty document gives the default settings.
    
    Raises:
        ConfigLoadError: If YAML is invalid or settings are invalid
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")
        
    return _build_config(data, "string")
