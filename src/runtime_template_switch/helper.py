from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from .context import Output, RenderContext

if TYPE_CHECKING:
    from .registry import TemplateRegistry
    from .template import Template


@dataclass
class PathAndValue:
    """An evaluated helper parameter. path is None for literals."""
    path: Optional[str]
    value: Any


@dataclass
class Helper:
    """A single helper invocation as seen by HelperDef.call."""
    name: str
    params: List[PathAndValue] = field(default_factory=list)
    template: Optional['Template'] = None

    def param(self, idx: int) -> Optional[PathAndValue]:
        if 0 <= idx < len(self.params):
            return self.params[idx]
        return None

    def render_template(
        self,
        r: 'TemplateRegistry',
        ctx: Any,
        rc: RenderContext,
        out: Output,
    ) -> None:
        """Render the nested body, if there is one."""
        if self.template is not None:
            self.template.render(r, ctx, rc, out)


class HelperDef(ABC):
    @abstractmethod
    def call(
        self,
        h: Helper,
        r: 'TemplateRegistry',
        ctx: Any,
        rc: RenderContext,
        out: Output,
    ) -> None:
        pass


HelperFn = Callable[[Helper, 'TemplateRegistry', Any, RenderContext, Output], None]


class FunctionHelper(HelperDef):
    """Adapts a plain function to the HelperDef contract."""

    def __init__(self, fn: HelperFn):
        self.fn = fn

    def call(self, h, r, ctx, rc, out):
        self.fn(h, r, ctx, rc, out)
