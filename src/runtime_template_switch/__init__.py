"""
Switch/case/default block helpers for mustache-style templates.
"""
from .config import EngineConfig
from .context import BlockContext, Output, RenderContext, StringOutput
from .errors import (
    TemplateError,
    TemplateSyntaxError,
    TemplateNotFoundError,
    RenderError,
    MissingArgumentError,
    UnknownHelperError,
    MissingVariableError,
    SecurityError,
)
from .helper import Helper, HelperDef, PathAndValue
from .parser import parse_template
from .registry import TemplateRegistry
from .switch import CaseHelper, DefaultHelper, SwitchHelper, register_switch_helper
from .types import MissingStrategy
from .values import UNDEFINED, is_truthy, values_equal

__all__ = [
    "EngineConfig",
    "BlockContext",
    "Output",
    "RenderContext",
    "StringOutput",
    "TemplateError",
    "TemplateSyntaxError",
    "TemplateNotFoundError",
    "RenderError",
    "MissingArgumentError",
    "UnknownHelperError",
    "MissingVariableError",
    "SecurityError",
    "Helper",
    "HelperDef",
    "PathAndValue",
    "parse_template",
    "TemplateRegistry",
    "CaseHelper",
    "DefaultHelper",
    "SwitchHelper",
    "register_switch_helper",
    "MissingStrategy",
    "UNDEFINED",
    "is_truthy",
    "values_equal",
]
