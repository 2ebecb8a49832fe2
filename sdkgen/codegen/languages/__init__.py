"""
Language-specific code emitters.

Only the TypeScript-family emitter ships; other languages are covered by
documentation snippets, not by emitters over the shared AST.
"""

from .typescript import (
    TypeScriptEmitter,
    create_compact_emitter,
    create_typescript_emitter,
)

__all__ = [
    "TypeScriptEmitter",
    "create_typescript_emitter",
    "create_compact_emitter",
]
