"""
Value model shared by the engine and the switch helpers.
"""
from typing import Any


class _Undefined:
    """Marker for a path that resolved to nothing."""
    _instance = None

    def __new__(cls) -> '_Undefined':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'UNDEFINED'


UNDEFINED = _Undefined()


def values_equal(left: Any, right: Any) -> bool:
    """
    Structural equality without coercion across kinds.

    Booleans only equal booleans, numbers compare by numeric value,
    None only equals None and UNDEFINED equals nothing at all.
    """
    if left is UNDEFINED or right is UNDEFINED:
        return False

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right

    if isinstance(left, str) or isinstance(right, str):
        return isinstance(left, str) and isinstance(right, str) and left == right

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right))

    if isinstance(left, dict) and isinstance(right, dict):
        if left.keys() != right.keys():
            return False
        return all(values_equal(value, right[key]) for key, value in left.items())

    return type(left) is type(right) and left == right


def is_truthy(value: Any) -> bool:
    if value is UNDEFINED or value is None:
        return False
    return bool(value)
