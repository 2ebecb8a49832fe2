"""
TypeScript emitter module.

Renders SDK programs built from a design plan as TypeScript source.
"""

from typing import Any, Dict, Optional

from ...core.config import ConfigError, EmitterConfig, load_config
from .config import validate_typescript_config
from .emitter import TypeScriptEmitter

__all__ = [
    "TypeScriptEmitter",
    "validate_typescript_config",
    # Factory functions
    "create_typescript_emitter",
    "create_compact_emitter",
]


def create_typescript_emitter(
    config: Optional[EmitterConfig] = None, **overrides: Any
) -> TypeScriptEmitter:
    """
    Create a TypeScript emitter.

    Args:
        config: Complete EmitterConfig; when omitted the TypeScript defaults
            are loaded and ``overrides`` merged into them
        **overrides: Option overrides (snake_case or camelCase names)

    Raises:
        ConfigError: If the resulting configuration is invalid
    """
    if config is None:
        config = load_config("typescript", custom_config=overrides or None)

    problems = validate_typescript_config(config)
    if problems:
        raise ConfigError("; ".join(problems))

    return TypeScriptEmitter(config)


def create_compact_emitter() -> TypeScriptEmitter:
    """
    Create emitter for terminator-free, tab-indented output.

    Features:
    - Tabs for indentation
    - No statement terminators
    """
    overrides: Dict[str, Any] = {
        "indentation_style": "tabs",
        "statement_terminators": False,
    }
    return create_typescript_emitter(**overrides)
