"""
Core code generation components.

Provides the AST model, design plan records, builders and base classes
used by all language emitters.
"""

from .ast import (
    EXPRESSION_KINDS,
    LINE_KINDS,
    Node,
    OpaqueNode,
    Program,
    RawText,
    node_from_dict,
)
from .config import ConfigError, ConfigManager, EmitterConfig, load_config
from .declarations import (
    build_client_class,
    build_configuration,
    build_error_types,
    build_method,
    build_program,
    build_type_definition,
)
from .generator import (
    CodeEmitter,
    ConstructionError,
    GenerationResult,
    GeneratorError,
    MalformedNodeError,
    generate_sdk,
)
from .lines import LineBuilder
from .naming import to_pascal_case, to_snake_case
from .plan import DesignPlan, categorize_error, plan_from_dict
from .templates import TemplateEngine, TemplateError

__all__ = [
    # AST model
    "Node",
    "Program",
    "RawText",
    "OpaqueNode",
    "node_from_dict",
    "LINE_KINDS",
    "EXPRESSION_KINDS",
    # Design plan
    "DesignPlan",
    "plan_from_dict",
    "categorize_error",
    # Builders
    "build_client_class",
    "build_configuration",
    "build_error_types",
    "build_method",
    "build_program",
    "build_type_definition",
    # Base emitter interface
    "CodeEmitter",
    "LineBuilder",
    "GeneratorError",
    "ConstructionError",
    "MalformedNodeError",
    "GenerationResult",
    "generate_sdk",
    # Naming utilities
    "to_pascal_case",
    "to_snake_case",
    # Configuration system
    "EmitterConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
]
