"""
Documentation configuration, records, and the shared read-only context.

Every section builder reads one DocumentationContext built from the same
design plan the code builders consume, so method names and parameter
lists in the docs match the generated source.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from ..codegen.core.declarations import assign_error_class_names, error_class_name
from ..codegen.core.plan import DesignPlan, ErrorSpec, MethodSpec, TypeSpec
from ..logging_config import get_logger

logger = get_logger(__name__)

DIFFICULTY_TIERS = ("beginner", "intermediate", "advanced")


@dataclass(frozen=True)
class DocumentationConfig:
    """Settings for one documentation run."""

    sdk_name: str
    sdk_version: str = "0.1.0"
    description: str = ""
    audience: str = "intermediate"
    language: str = "typescript"
    auth_required: bool = False
    auth_method: str = "none"
    repository_url: Optional[str] = None
    docs_base_url: Optional[str] = None

    @classmethod
    def from_plan(cls, plan: DesignPlan, **overrides) -> "DocumentationConfig":
        """Derive the configuration from a plan; keyword overrides win."""
        configuration = plan.configuration
        values = {
            "sdk_name": plan.product_name or plan.client_name or "sdk",
            "sdk_version": plan.version,
            "description": plan.description,
            "audience": configuration.audience,
            "language": configuration.target_language,
            "auth_required": configuration.auth_required,
            "auth_method": configuration.auth_method,
        }
        values.update(overrides)
        return cls(**values)

    @property
    def uses_auth(self) -> bool:
        return self.auth_required and self.auth_method != "none"


@dataclass(frozen=True)
class ErrorDocumentation:
    """An error as presented to SDK users."""

    error_code: str
    error_type: str
    description: str = ""
    cause: str = ""
    solution: str = ""
    example: Optional[str] = None
    recoverable: bool = True
    class_name: str = ""  # generated error class

    @classmethod
    def from_spec(
        cls, error: ErrorSpec, class_name: Optional[str] = None
    ) -> "ErrorDocumentation":
        return cls(
            error_code=error.code or "",
            error_type=error.type_name,
            description=error.description,
            cause=error.cause,
            solution=error.remedy,
            example=error.example,
            recoverable=error.recoverable,
            class_name=class_name or error_class_name(error.code or ""),
        )


@dataclass(frozen=True)
class CodeExample:
    """A usage example supplied alongside the plan."""

    title: str
    code: str
    description: str = ""
    language: str = "typescript"
    difficulty: str = "beginner"  # beginner, intermediate, advanced
    tags: Tuple[str, ...] = ()
    output: Optional[str] = None
    explanation: Optional[str] = None


@dataclass(frozen=True)
class DocumentationContext:
    """
    Read-only aggregate consumed by every section builder.

    The name maps follow insertion order, so "the first method" is the
    first method in the plan.
    """

    config: DocumentationConfig
    plan: DesignPlan
    methods: Mapping[str, MethodSpec]
    types: Mapping[str, TypeSpec]
    errors: Mapping[str, ErrorDocumentation]
    examples: Tuple[CodeExample, ...] = ()
    prerequisites: Tuple[str, ...] = ()
    setup_steps: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = field(default=())

    @property
    def first_method(self) -> Optional[MethodSpec]:
        return next(iter(self.methods.values()), None)

    @property
    def client_name(self) -> str:
        return self.plan.client_name or self.config.sdk_name


def _index(kind: str, items, key, warnings: List[str]) -> Mapping:
    """
    Build a name map by insertion. Duplicate keys: the last write wins and a
    warning is recorded.
    """
    index: Dict[str, object] = {}
    for item in items:
        name = key(item)
        if name in index:
            message = (
                f"Duplicate {kind} '{name}': later definition replaces earlier one"
            )
            warnings.append(message)
            logger.warning(message)
        index[name] = item
    return MappingProxyType(index)


def build_context(
    config: DocumentationConfig,
    plan: DesignPlan,
    examples: Optional[List[CodeExample]] = None,
    prerequisites: Optional[List[str]] = None,
    setup_steps: Optional[List[str]] = None,
) -> DocumentationContext:
    """
    Build the documentation context for one generation run.

    Args:
        config: Documentation configuration
        plan: Design plan shared with code generation
        examples: Usage examples grouped later by difficulty
        prerequisites: Extra prerequisite lines contributed upstream
        setup_steps: Ordered setup steps contributed upstream

    Returns:
        DocumentationContext (read-only)
    """
    warnings: List[str] = []

    methods = _index(
        "method", [m for m in plan.methods if m.name], lambda m: m.name, warnings
    )
    types = _index(
        "type", [t for t in plan.types if t.name], lambda t: t.name, warnings
    )
    # Same class names the error-type builder declares
    class_names, _renames = assign_error_class_names(plan.errors)
    errors = _index(
        "error",
        [
            ErrorDocumentation.from_spec(e, name)
            for e, name in zip(plan.errors, class_names)
            if e.code
        ],
        lambda e: e.error_code,
        warnings,
    )

    context = DocumentationContext(
        config=config,
        plan=plan,
        methods=methods,
        types=types,
        errors=errors,
        examples=tuple(examples or ()),
        prerequisites=tuple(prerequisites or ()),
        setup_steps=tuple(setup_steps or ()),
        warnings=tuple(warnings),
    )

    logger.debug(
        "Documentation context: %d methods, %d types, %d errors, %d examples",
        len(methods),
        len(types),
        len(errors),
        len(context.examples),
    )
    return context
