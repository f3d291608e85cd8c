from typing import Any
from .errors import SecurityError
from .path_parser import parse_path
from .values import UNDEFINED

def resolve_path(obj: Any, path: str) -> Any:
    """
    Safely resolve a value from a nested object using a path string.
    Does not use eval(). Prevents access to private attributes (starting with _).
    Returns UNDEFINED when any segment is missing.
    """
    segments = parse_path(path)
    if segments and segments[0] == 'this':
        segments = segments[1:]

    current = obj
    for segment in segments:
        if segment.startswith('_'):
            raise SecurityError(segment)

        if current is None or current is UNDEFINED:
            return UNDEFINED

        if isinstance(current, dict):
            if segment not in current:
                return UNDEFINED
            current = current[segment]
        elif isinstance(current, (list, tuple)):
            if not segment.isdigit():
                return UNDEFINED
            idx = int(segment)
            if idx >= len(current):
                return UNDEFINED
            current = current[idx]
        elif hasattr(current, segment):
            current = getattr(current, segment)
        else:
            return UNDEFINED

    return current
