"""
SDK code generation module.

Builds an AST from a design plan and renders it with a registered
language emitter.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.config import ConfigManager, EmitterConfig, load_config
from .core.generator import CodeEmitter, GenerationResult, generate_sdk
from .core.plan import DesignPlan
from .registry import (
    EmitterRegistry,
    RegistryError,
    get_emitter,
    get_registry,
    list_supported_languages,
)


def generate_for_plan(
    plan: DesignPlan,
    language: Optional[str] = None,
    config: Optional[Union[EmitterConfig, Dict[str, Any], str, Path]] = None,
) -> GenerationResult:
    """
    Generate SDK source for a design plan.

    Args:
        plan: Design plan
        language: Target language; defaults to the plan's target language
        config: Emitter configuration, override dict, or JSON file path

    Returns:
        GenerationResult with generated code

    Raises:
        RegistryError: If no emitter is registered for the language
    """
    emitter = get_emitter(language or plan.configuration.target_language, config)
    return generate_sdk(emitter, plan)


def quick_generate(
    plan: DesignPlan, language: Optional[str] = None, **options: Any
) -> str:
    """
    Generate SDK source and return the code string.

    Raises:
        RuntimeError: If generation fails
    """
    result = generate_for_plan(plan, language, options or None)

    if result.success:
        return result.code
    raise RuntimeError(
        f"Code generation failed: {result.error_message}"
    ) from result.exception


__all__ = [
    "EmitterRegistry",
    "RegistryError",
    "CodeEmitter",
    "GenerationResult",
    "EmitterConfig",
    "ConfigManager",
    "load_config",
    "generate_sdk",
    "generate_for_plan",
    "quick_generate",
    "get_emitter",
    "get_registry",
    "list_supported_languages",
]
