"""
Configuration management for code emission.

Handles loading and merging emitter options from JSON files,
providing per-language defaults and validation.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


INDENTATION_STYLES = {"spaces", "tabs"}

# camelCase spellings accepted from external option records
_KEY_ALIASES = {
    "indentationStyle": "indentation_style",
    "indentation": "indentation_style",
    "indentSize": "indent_size",
    "lineWidth": "line_width",
    "trailingNewline": "trailing_newline",
    "statementTerminators": "statement_terminators",
    "semicolons": "statement_terminators",
}


@dataclass(frozen=True)
class EmitterConfig:
    """Formatting policy for an emitter. Read-only once created."""

    indentation_style: str = "spaces"  # spaces, tabs
    indent_size: int = 2
    line_width: int = 100  # informational, never hard-wrapped
    trailing_newline: bool = True
    statement_terminators: bool = True

    # Language-specific settings
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent_unit(self) -> str:
        """One level of indentation."""
        if self.indentation_style == "tabs":
            return "\t"
        return " " * self.indent_size


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["typescript"] = {
            "indentation_style": "spaces",
            "indent_size": 2,
            "line_width": 100,
            "trailing_newline": True,
            "statement_terminators": True,
            "custom": {"statement_terminator": ";"},
        }

    def get_config(
        self,
        language: str = "typescript",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> EmitterConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        base_config = dict(self._configs.get(language.lower(), {}))
        base_config["custom"] = dict(base_config.get("custom", {}))

        if config_file:
            self._merge(base_config, self._load_config_file(config_file))

        if custom_config:
            self._merge(base_config, custom_config)

        config = self._dict_to_config(base_config)

        problems = self.validate_config(config)
        if problems:
            raise ConfigError("; ".join(problems))

        logger.debug("Loaded %s emitter config: %s", language, config)
        return config

    def _merge(self, target: Dict[str, Any], overrides: Dict[str, Any]):
        for key, value in overrides.items():
            key = _KEY_ALIASES.get(key, key)
            if key == "indentation_style" and value in ("space", "tab"):
                value = f"{value}s"
            if key == "custom" and isinstance(value, dict):
                target["custom"].update(value)
            else:
                target[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file {path}: {str(e)}"
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Failed to load configuration file {path}: {str(e)}"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> EmitterConfig:
        """Convert dictionary to EmitterConfig instance."""
        known_fields = {f.name for f in fields(EmitterConfig)}

        config_args = {}
        custom_args = dict(config_dict.get("custom", {}))

        for key, value in config_dict.items():
            if key == "custom":
                continue
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        config_args["custom"] = custom_args
        return EmitterConfig(**config_args)

    def save_config(self, config: EmitterConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)
        config_dict = asdict(config)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(
                f"Failed to save configuration to {path}: {str(e)}"
            ) from e

    def list_languages(self) -> List[str]:
        """Get list of languages with registered defaults."""
        return list(self._configs.keys())

    def validate_config(self, config: EmitterConfig) -> List[str]:
        """
        Validate an emitter configuration.

        Returns:
            List of validation problems (empty if valid)
        """
        problems = []

        if config.indentation_style not in INDENTATION_STYLES:
            problems.append(f"Invalid indentation_style: {config.indentation_style}")

        if (
            not isinstance(config.indent_size, int)
            or isinstance(config.indent_size, bool)
            or config.indent_size <= 0
        ):
            problems.append(
                f"indent_size must be a positive integer: {config.indent_size}"
            )

        if not isinstance(config.line_width, int) or config.line_width <= 0:
            problems.append(
                f"line_width must be a positive integer: {config.line_width}"
            )

        return problems


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "typescript",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> EmitterConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


# Example configuration file for reference
EXAMPLE_TYPESCRIPT_CONFIG = {
    "indentationStyle": "spaces",
    "indentSize": 4,
    "lineWidth": 120,
    "trailingNewline": True,
    "statementTerminators": False,
}
