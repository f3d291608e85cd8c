"""
Switch helpers.

``{{#switch expr}}`` opens a block scope holding a ``match`` flag and binds
``case`` and ``default`` locally for the extent of its body::

    {{#switch access}}
        {{#case "admin" "owner"}}Admin{{/case}}
        {{#default}}User{{/default}}
    {{/switch}}

The first case whose arguments contain a value equal to the switch value
renders and sets the flag; later cases and default see the flag and skip.
Each case and default is bound to the scope of the switch that created
it, so nested switches never touch each other's flag, even when they
use different helper names.
"""
import logging
from typing import Any, Optional

from .context import BlockContext, RenderContext
from .errors import MissingArgumentError
from .helper import HelperDef
from .values import is_truthy, values_equal

logger = logging.getLogger(__name__)

MATCH_VAR = "match"


def _already_matched(block: BlockContext) -> bool:
    return is_truthy(block.get_local_var(MATCH_VAR))


class _ScopedHelper(HelperDef):
    """Base for helpers that belong to one switch scope."""

    def __init__(self, scope: Optional[BlockContext] = None):
        self.scope = scope

    def _switch_scope(self, rc: RenderContext) -> Optional[BlockContext]:
        # Unbound instances (registered by hand) fall back to the nearest switch.
        if self.scope is not None:
            return self.scope
        return rc.find_block(MATCH_VAR)


class DefaultHelper(_ScopedHelper):
    """Renders its body when no case in its switch has matched.

    Arguments are ignored.
    """

    def call(self, h, r, ctx, rc, out):
        block = self._switch_scope(rc)
        if block is None:
            logger.debug("default: no enclosing switch scope, skipping")
            return

        if _already_matched(block):
            return

        logger.debug("default: no case matched, rendering fallback")
        h.render_template(r, ctx, rc, out)


class CaseHelper(_ScopedHelper):
    """Renders its body for the first matching case of one switch."""

    def __init__(self, expression_value: Any, scope: Optional[BlockContext] = None):
        super().__init__(scope)
        self.expression_value = expression_value

    def call(self, h, r, ctx, rc, out):
        block = self._switch_scope(rc)
        if block is None:
            logger.debug("case: no enclosing switch scope, skipping")
            return

        if _already_matched(block):
            return

        if not any(values_equal(param.value, self.expression_value) for param in h.params):
            return

        logger.debug(f"case: matched {self.expression_value!r}")
        block.set_local_var(MATCH_VAR, True)
        h.render_template(r, ctx, rc, out)


class SwitchHelper(HelperDef):
    """Entry point; register this one globally.

    case_name and default_name are the names the scoped helpers are bound
    to inside the switch body.
    """

    def __init__(self, case_name: str = "case", default_name: str = "default"):
        self.case_name = case_name
        self.default_name = default_name

    def call(self, h, r, ctx, rc, out):
        param = h.param(0)
        if param is None:
            raise MissingArgumentError(h.name, 0)

        block = BlockContext()
        block.set_local_var(MATCH_VAR, False)
        block.register_local_helper(self.case_name, CaseHelper(param.value, scope=block))
        block.register_local_helper(self.default_name, DefaultHelper(scope=block))

        logger.debug(f"switch: entering scope for {param.path or 'literal'}={param.value!r}")
        with rc.scoped_block(block):
            h.render_template(r, ctx, rc, out)


def register_switch_helper(registry, name: str = "switch") -> None:
    """Register the switch helper on a TemplateRegistry."""
    registry.register_helper(name, SwitchHelper())
