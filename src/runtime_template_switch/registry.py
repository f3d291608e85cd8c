import logging
from typing import Any, Callable, Dict, Optional

from .config import EngineConfig
from .context import RenderContext, StringOutput
from .errors import TemplateNotFoundError
from .helper import FunctionHelper, HelperDef, HelperFn
from .parser import parse_template
from .template import Template

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Holds global helpers and named templates, and renders them.

    Helpers registered here are visible everywhere; block helpers may add
    local helpers for the extent of their own body via the RenderContext.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig.load()
        self._helpers: Dict[str, HelperDef] = {}
        self._templates: Dict[str, Template] = {}

    # ========== Helpers ==========

    def register_helper(self, name: str, helper: HelperDef) -> None:
        if name in self._helpers:
            logger.debug(f"register_helper: replacing helper '{name}'")
        self._helpers[name] = helper

    def helper(self, name: str) -> Callable[[HelperFn], HelperFn]:
        """Decorator to register a plain function as a helper."""
        def decorator(fn: HelperFn) -> HelperFn:
            self.register_helper(name, FunctionHelper(fn))
            return fn
        return decorator

    def get_helper(self, name: str) -> Optional[HelperDef]:
        return self._helpers.get(name)

    def has_helper(self, name: str) -> bool:
        return name in self._helpers

    # ========== Templates ==========

    def register_template_string(self, name: str, source: str) -> None:
        self._templates[name] = parse_template(source, name)
        logger.debug(f"register_template_string: registered '{name}'")

    def has_template(self, name: str) -> bool:
        return name in self._templates

    def render(self, name: str, data: Any = None) -> str:
        template = self._templates.get(name)
        if template is None:
            raise TemplateNotFoundError(name)
        return self._render(template, data)

    def render_template(self, source: str, data: Any = None) -> str:
        return self._render(parse_template(source), data)

    def _render(self, template: Template, data: Any) -> str:
        logger.debug(f"render: starting '{template.name or '<inline>'}'")
        rc = RenderContext()
        out = StringOutput()
        template.render(self, {} if data is None else data, rc, out)
        return out.into_string()
