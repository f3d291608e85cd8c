from typing import Any
import html
import json

from .values import UNDEFINED

def coerce_to_string(value: Any, escape: bool = False) -> str:
    """Convert value to string for template output."""
    if value is None or value is UNDEFINED:
        return ""
    if isinstance(value, (dict, list, tuple)):
        text = json.dumps(value)
    elif isinstance(value, bool):
        text = str(value).lower()
    else:
        text = str(value)
    return html.escape(text) if escape else text
