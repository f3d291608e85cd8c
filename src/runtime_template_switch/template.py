"""
Parsed template tree.

A Template is a flat list of nodes; block helpers own a nested Template
as their body. Rendering walks the tree once, in document order.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, List, Optional

from .coercion import coerce_to_string
from .context import Output, RenderContext
from .errors import MissingVariableError, UnknownHelperError
from .helper import Helper, PathAndValue
from .patterns import PATTERNS
from .resolver import resolve_path
from .types import MissingStrategy
from .values import UNDEFINED

if TYPE_CHECKING:
    from .registry import TemplateRegistry


@dataclass
class Param:
    """A helper parameter or expression: either a literal or a path."""
    path: Optional[str] = None
    literal: Any = None

    def evaluate(self, r: 'TemplateRegistry', ctx: Any, rc: RenderContext) -> PathAndValue:
        if self.path is None:
            return PathAndValue(None, self.literal)

        if self.path.startswith('@'):
            value = rc.get_local_var(self.path[1:])
        else:
            value = resolve_path(ctx, self.path)

        if value is UNDEFINED and r.config.missing_strategy is MissingStrategy.ERROR:
            raise MissingVariableError(self.path)
        return PathAndValue(self.path, value)


class Node(ABC):
    @abstractmethod
    def render(self, r: 'TemplateRegistry', ctx: Any, rc: RenderContext, out: Output) -> None:
        pass


@dataclass
class RawString(Node):
    text: str

    def render(self, r, ctx, rc, out):
        out.write(self.text)


@dataclass
class Expression(Node):
    param: Param
    raw: str
    escape: bool = True

    def render(self, r, ctx, rc, out):
        helper_def = self._lookup_helper(r, rc)
        if helper_def is not None:
            helper_def.call(Helper(name=self.param.path), r, ctx, rc, out)
            return

        evaluated = self.param.evaluate(r, ctx, rc)
        if evaluated.value is UNDEFINED and r.config.missing_strategy is MissingStrategy.KEEP:
            out.write(self.raw)
            return
        out.write(coerce_to_string(evaluated.value, escape=self.escape and r.config.escape_html))

    def _lookup_helper(self, r, rc):
        """A bare name like {{hi}} calls a helper of that name before falling back to data."""
        name = self.param.path
        if name is None or not PATTERNS["HELPER_NAME"].match(name) or name == 'this':
            return None
        helper_def = rc.get_local_helper(name)
        if helper_def is None:
            helper_def = r.get_helper(name)
        return helper_def


@dataclass
class HelperBlock(Node):
    """A helper invocation; template is None for inline calls."""
    name: str
    params: List[Param] = field(default_factory=list)
    template: Optional['Template'] = None

    def render(self, r, ctx, rc, out):
        helper_def = rc.get_local_helper(self.name)
        if helper_def is None:
            helper_def = r.get_helper(self.name)
        if helper_def is None:
            raise UnknownHelperError(self.name)

        helper = Helper(
            name=self.name,
            params=[param.evaluate(r, ctx, rc) for param in self.params],
            template=self.template,
        )
        helper_def.call(helper, r, ctx, rc, out)


@dataclass
class Template:
    elements: List[Node] = field(default_factory=list)
    name: Optional[str] = None

    def render(self, r: 'TemplateRegistry', ctx: Any, rc: RenderContext, out: Output) -> None:
        for element in self.elements:
            element.render(r, ctx, rc, out)
