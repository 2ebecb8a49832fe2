"""
TypeScript-specific configuration validation.

Defaults live in the shared ConfigManager; this module checks the
settings only the TypeScript emitter reads.
"""

from typing import List

from ...core.config import EmitterConfig

VALID_TERMINATORS = {";", ""}


def validate_typescript_config(config: EmitterConfig) -> List[str]:
    """
    Validate TypeScript-specific settings.

    Returns:
        List of validation problems (empty if valid)
    """
    problems = []

    terminator = config.custom.get("statement_terminator", ";")
    if terminator not in VALID_TERMINATORS:
        problems.append(f"Invalid statement_terminator: {terminator!r}")

    if config.line_width < 40:
        problems.append(
            f"line_width too small for TypeScript output: {config.line_width}"
        )

    return problems
