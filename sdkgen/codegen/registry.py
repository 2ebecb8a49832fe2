"""
Emitter registry for managing available target languages.

Provides registration and instantiation of language emitters by name
or alias.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import ConfigError, EmitterConfig, load_config
from .core.generator import CodeEmitter

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class EmitterRegistry:
    """Registry for managing available code emitters."""

    def __init__(self):
        """Initialize empty registry."""
        self._emitters: Dict[str, Type[CodeEmitter]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        emitter_class: Type[CodeEmitter],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register an emitter for a language.

        Args:
            language: Primary language name (e.g., 'typescript')
            emitter_class: Class implementing CodeEmitter
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If the class is not an emitter or an alias conflicts
        """
        is_emitter = isinstance(emitter_class, type) and issubclass(
            emitter_class, CodeEmitter
        )
        if not is_emitter:
            raise RegistryError("Emitter class must inherit from CodeEmitter")

        language_key = language.lower()

        if language_key in self._emitters and not replace:
            logger.debug("Emitter for %s already registered", language_key)
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != language_key]

        # Check every alias before touching the tables
        if not replace:
            for alias_key in alias_keys:
                if alias_key in self._emitters:
                    raise RegistryError(
                        f"Alias '{alias_key}' conflicts with existing primary language"
                    )
                target = self._aliases.get(alias_key, language_key)
                if target != language_key:
                    raise RegistryError(
                        f"Alias '{alias_key}' already points to '{target}'"
                    )

        self._emitters[language_key] = emitter_class
        for alias_key in alias_keys:
            self._aliases[alias_key] = language_key
        logger.debug("Registered %s emitter (aliases: %s)", language_key, alias_keys)

    def unregister(self, language: str):
        """Unregister an emitter and its aliases."""
        language_key = language.lower()
        self._emitters.pop(language_key, None)

        for alias in self.get_aliases_for_language(language_key):
            del self._aliases[alias]

    def resolve(self, language: str) -> str:
        """
        Resolve a name or alias to its primary language name.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()
        if language_key in self._emitters:
            return language_key
        if language_key in self._aliases:
            return self._aliases[language_key]

        raise RegistryError(
            f"No emitter registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_emitter_class(self, language: str) -> Type[CodeEmitter]:
        return self._emitters[self.resolve(language)]

    def create_emitter(
        self,
        language: str,
        config: Optional[Union[EmitterConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeEmitter:
        """
        Create emitter instance for language.

        Args:
            language: Language name or alias
            config: Configuration as EmitterConfig, override dict, or JSON file path

        Returns:
            Configured emitter instance

        Raises:
            RegistryError: If the language is unknown or its configuration is invalid
        """
        primary = self.resolve(language)
        emitter_class = self._emitters[primary]

        try:
            if isinstance(config, EmitterConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(primary, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(primary, custom_config=config)
            elif config is None:
                final_config = load_config(primary)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")
        except ConfigError as e:
            raise RegistryError(f"Failed to create {language} emitter: {e}") from e

        return emitter_class(final_config)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._emitters.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        language_key = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == language_key
        )

    def is_supported(self, language: str) -> bool:
        language_key = language.lower()
        return language_key in self._emitters or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Raises:
            RegistryError: If language not found
        """
        primary = self.resolve(language)
        emitter = self.create_emitter(primary)

        return {
            "name": emitter.language_name,
            "class": type(emitter).__name__,
            "file_extension": emitter.file_extension,
            "aliases": self.get_aliases_for_language(primary),
            "module": type(emitter).__module__,
        }


# Global registry instance - created once
_global_registry: Optional[EmitterRegistry] = None


def get_registry() -> EmitterRegistry:
    """Get the global emitter registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = EmitterRegistry()
        _auto_register_emitters(_global_registry)
    return _global_registry


def _auto_register_emitters(registry: EmitterRegistry):
    """Register the emitters that ship with the package."""
    from .languages.typescript import TypeScriptEmitter

    registry.register(
        "typescript", TypeScriptEmitter, aliases=["ts", "javascript", "js"]
    )


# Public API functions using the global registry


def get_emitter(
    language: str,
    config: Optional[Union[EmitterConfig, Dict[str, Any], str, Path]] = None,
) -> CodeEmitter:
    """Get emitter instance from global registry."""
    return get_registry().create_emitter(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)
