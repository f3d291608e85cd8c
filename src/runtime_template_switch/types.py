from enum import Enum

class MissingStrategy(Enum):
    """How a path that resolves to nothing is rendered."""
    EMPTY = 'EMPTY'
    KEEP = 'KEEP'
    ERROR = 'ERROR'
