"""
Template source parser.

Turns template text into a Template tree. Only structure is checked
here; whether a helper exists is decided when the template renders.
"""
import json
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from .errors import TemplateSyntaxError
from .patterns import PATTERNS
from .template import Expression, HelperBlock, Node, Param, RawString, Template

KEYWORDS = {"true": True, "false": False, "null": None}


@dataclass
class _OpenBlock:
    name: str
    params: List[Param]
    start: int
    elements: List[Node] = field(default_factory=list)


def _position(source: str, index: int) -> Tuple[int, int]:
    line = source.count("\n", 0, index) + 1
    column = index - (source.rfind("\n", 0, index) + 1) + 1
    return line, column


def _syntax_error(message: str, source: str, index: int, name: Optional[str]) -> TemplateSyntaxError:
    line, column = _position(source, index)
    return TemplateSyntaxError(message, line, column, name)


def parse_param(token: str) -> Param:
    """Parse one parameter token into a literal or a path."""
    if token[0] in ('"', "'"):
        if len(token) < 2 or token[-1] != token[0]:
            raise ValueError(f"Unterminated string literal: {token}")
        if token[0] == '"':
            return Param(literal=json.loads(token))
        return Param(literal=token[1:-1].replace("\\'", "'"))

    if token in KEYWORDS:
        return Param(literal=KEYWORDS[token])

    if PATTERNS["NUMBER"].match(token):
        number: Any = float(token) if any(c in token for c in ".eE") else int(token)
        return Param(literal=number)

    return Param(path=token)


def _parse_call(body: str, source: str, index: int, name: Optional[str]) -> Tuple[str, List[Param]]:
    tokens = PATTERNS["PARAM"].findall(body)
    if not tokens:
        raise _syntax_error("Empty helper tag", source, index, name)

    helper_name = tokens[0]
    if not PATTERNS["HELPER_NAME"].match(helper_name):
        raise _syntax_error(f"Invalid helper name '{helper_name}'", source, index, name)

    try:
        params = [parse_param(token) for token in tokens[1:]]
    except ValueError as e:
        raise _syntax_error(str(e), source, index, name) from e
    return helper_name, params


def parse_template(source: str, name: Optional[str] = None) -> Template:
    root: List[Node] = []
    stack: List[_OpenBlock] = []
    elements = root
    pos = 0

    for match in PATTERNS["TAG"].finditer(source):
        if match.start() > pos:
            elements.append(RawString(source[pos:match.start()]))
        pos = match.end()

        escaped, triple = match.group("escaped"), match.group("triple")

        # \{{literal}}
        if escaped:
            elements.append(RawString(match.group(0)[1:]))
            continue

        if match.group("comment") is not None:
            continue

        body = match.group("body").strip()
        if body.startswith("!"):
            continue

        if not triple and body.startswith("#"):
            helper_name, params = _parse_call(body[1:], source, match.start(), name)
            block = _OpenBlock(helper_name, params, match.start())
            stack.append(block)
            elements = block.elements
            continue

        if not triple and body.startswith("/"):
            closing = body[1:].strip()
            if not stack:
                raise _syntax_error(f"Unexpected closing tag '{closing}'", source, match.start(), name)
            block = stack.pop()
            if block.name != closing:
                raise _syntax_error(
                    f"Closing tag '{closing}' does not match opening tag '{block.name}'",
                    source, match.start(), name,
                )
            elements = stack[-1].elements if stack else root
            elements.append(HelperBlock(block.name, block.params, Template(block.elements)))
            continue

        tokens = PATTERNS["PARAM"].findall(body)
        if not tokens:
            raise _syntax_error("Empty expression", source, match.start(), name)

        if len(tokens) == 1:
            try:
                param = parse_param(tokens[0])
            except ValueError as e:
                raise _syntax_error(str(e), source, match.start(), name) from e
            elements.append(Expression(param, raw=match.group(0), escape=not triple))
        else:
            helper_name, params = _parse_call(body, source, match.start(), name)
            elements.append(HelperBlock(helper_name, params))

    if pos < len(source):
        elements.append(RawString(source[pos:]))

    if stack:
        block = stack[-1]
        raise _syntax_error(f"Unclosed block '{block.name}'", source, block.start, name)

    return Template(root, name)
