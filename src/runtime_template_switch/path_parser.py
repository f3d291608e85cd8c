from typing import List

def parse_path(path: str) -> List[str]:
    """
    Parse a path string into segments.
    Supports dot notation (a.b.c) and bracket notation (a['b'][0]).
    """
    if not path:
        return []

    if '[' not in path:
        return [segment for segment in path.split('.') if segment]

    segments: List[str] = []
    current = ""
    quote_char = None
    in_bracket = False

    for char in path:
        if quote_char:
            if char == quote_char:
                quote_char = None
            else:
                current += char
        elif in_bracket:
            if char in ('"', "'"):
                quote_char = char
            elif char == ']':
                in_bracket = False
                segments.append(current)
                current = ""
            else:
                current += char.strip()
        elif char == '.':
            if current:
                segments.append(current)
                current = ""
        elif char == '[':
            if current:
                segments.append(current)
                current = ""
            in_bracket = True
        else:
            current += char

    if current:
        segments.append(current)

    return segments
