"""Small utility functions."""

import json
from typing import Any

def safe_json(obj: Any) -> str:
    """Serialize results to JSON, expanding dataclasses and keeping Hebrew readable."""
    def serialize_item(item):
        if hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item
    
    return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)

def format_kv(**kv: Any) -> str:
    """Render key-value context as ``k=v`` pairs."""
    return " ".join(f"{k}={v}" for k, v in kv.items())
