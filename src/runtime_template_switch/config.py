"""
Engine configuration.

Values resolve in priority order:
1. Direct argument (if not None)
2. Environment variables
3. Configuration dictionary
4. Default value
"""
import os
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field

from .types import MissingStrategy

ENV_MISSING_STRATEGY = "TEMPLATE_MISSING_STRATEGY"
ENV_ESCAPE_HTML = "TEMPLATE_ESCAPE_HTML"


def _resolve(
    arg: Any,
    env_key: str,
    config: Optional[Dict[str, Any]],
    config_key: str,
    default: Any
) -> Any:
    """Pick the first value that is set: argument, env var, config dict, default."""
    if arg is not None:
        return arg

    env_val = os.getenv(env_key)
    if env_val is not None:
        return env_val

    if config and config_key in config:
        return config[config_key]

    return default


def _resolve_bool(
    arg: Any,
    env_key: str,
    config: Optional[Dict[str, Any]],
    config_key: str,
    default: bool
) -> bool:
    """Resolve a flag, accepting strings such as "yes" or "0"."""
    val = _resolve(arg, env_key, config, config_key, default)
    if isinstance(val, str):
        return val.strip().lower() in ("true", "1", "yes", "on")
    return bool(val)


class EngineConfig(BaseModel):
    """Rendering options for a TemplateRegistry."""
    missing_strategy: MissingStrategy = Field(
        default=MissingStrategy.EMPTY,
        description="How paths that resolve to nothing are rendered",
    )
    escape_html: bool = Field(default=True, description="HTML-escape {{path}} output")

    @classmethod
    def load(
        cls,
        config: Optional[Dict[str, Any]] = None,
        missing_strategy: Optional[Union[str, MissingStrategy]] = None,
        escape_html: Optional[bool] = None,
    ) -> 'EngineConfig':
        strategy = _resolve(missing_strategy, ENV_MISSING_STRATEGY, config, "missing_strategy", MissingStrategy.EMPTY)
        if isinstance(strategy, str):
            strategy = strategy.strip().upper()

        return cls(
            missing_strategy=strategy,
            escape_html=_resolve_bool(escape_html, ENV_ESCAPE_HTML, config, "escape_html", True),
        )
