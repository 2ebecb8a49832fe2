"""
Base emitter interface for all code generation targets.

Defines the contract that all language emitters must implement, the
outermost kind dispatch (where unknown kinds degrade to a marker
comment) and the error types raised while building or emitting.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from ...logging_config import get_logger
from .ast import EXPRESSION_KINDS, LINE_KINDS, Node, Program, RawText
from .config import EmitterConfig, load_config
from .lines import LineBuilder
from .plan import DesignPlan

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class ConstructionError(GeneratorError):
    """A design-plan fragment lacks a field needed to build its AST node."""

    def __init__(self, entity: str, field: str, detail: Optional[str] = None):
        self.entity = entity
        self.field = field
        message = f"Cannot build {entity}: missing required field '{field}'"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MalformedNodeError(GeneratorError):
    """A recognized AST node lacks a field needed to render it."""

    def __init__(self, kind: str, field: str):
        self.kind = kind
        self.field = field
        super().__init__(f"Malformed {kind} node: missing required field '{field}'")


LineHandler = Callable[[LineBuilder, Any], None]
ExpressionHandler = Callable[[Any], str]


class CodeEmitter(ABC):
    """Abstract base class for all emitters."""

    def __init__(self, config: Optional[EmitterConfig] = None):
        """Initialize emitter with optional configuration."""
        self.config = config or load_config(self.language_name)
        self._line_handlers = self.line_handlers()
        self._expression_handlers = self.expression_handlers()

        # Every modelled kind must have a handler; only foreign kinds degrade
        missing = (set(LINE_KINDS) - set(self._line_handlers)) | (
            set(EXPRESSION_KINDS) - set(self._expression_handlers)
        )
        if missing:
            raise GeneratorError(
                f"{type(self).__name__} has no handler for: "
                f"{', '.join(sorted(missing))}"
            )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    @abstractmethod
    def line_handlers(self) -> Dict[str, LineHandler]:
        """Map each line-level node kind to the method that renders it."""
        pass

    @abstractmethod
    def expression_handlers(self) -> Dict[str, ExpressionHandler]:
        """Map each expression kind to the method that renders it inline."""
        pass

    @property
    def terminator(self) -> str:
        """Statement terminator, or empty when terminators are disabled."""
        if not self.config.statement_terminators:
            return ""
        return self.config.custom.get("statement_terminator", ";")

    # Walk

    def emit_program(self, program: Program) -> str:
        """
        Render a Program to source text.

        Each top-level declaration is followed by one blank line. Raises
        MalformedNodeError if a recognized node is missing a required field.
        """
        builder = LineBuilder(self.config)
        for node in program.body:
            self.emit_node(builder, node)
            builder.blank()
        return builder.render()

    def emit_statements(self, builder: LineBuilder, nodes: List[Node]) -> None:
        for node in nodes:
            self.emit_node(builder, node)

    def emit_node(self, builder: LineBuilder, node: Node) -> None:
        """Dispatch one node by kind; unknown kinds become a marker comment."""
        kind = getattr(node, "kind", type(node).__name__)
        handler = self._line_handlers.get(kind)
        if handler is None:
            logger.warning("Unsupported node kind %s; emitting marker comment", kind)
            builder.comment(f"Unsupported node kind: {kind}")
            return
        handler(builder, node)

    def emit_expression(self, expr: Node) -> str:
        """Render an expression inline; unknown kinds become an inline marker."""
        kind = getattr(expr, "kind", type(expr).__name__)
        handler = self._expression_handlers.get(kind)
        if handler is None:
            logger.warning("Unsupported expression kind %s; emitting marker", kind)
            return f"/* Unsupported expression kind: {kind} */"
        return handler(expr)

    def emit_operand(self, operand: Any) -> str:
        """Render either case of the raw-text-or-expression operand."""
        if isinstance(operand, RawText):
            return operand.text
        return self.emit_expression(operand)

    # Validation helpers

    @staticmethod
    def require(node: Any, *field_names: str) -> None:
        """Raise MalformedNodeError for the first missing or empty field."""
        for name in field_names:
            value = getattr(node, name, None)
            if value is None or value == "":
                raise MalformedNodeError(node.kind, name)
            if isinstance(value, RawText) and value.text == "":
                raise MalformedNodeError(node.kind, name)

    @staticmethod
    def require_kind(parent: Any, field_name: str, child: Any, kind: str) -> None:
        """Raise MalformedNodeError when a child slot holds a node of another kind."""
        if getattr(child, "kind", None) != kind:
            raise MalformedNodeError(parent.kind, field_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_sdk(emitter: CodeEmitter, plan: DesignPlan) -> GenerationResult:
    """
    Build the SDK Program for a design plan and emit it.

    Args:
        emitter: Emitter for the target language
        plan: Design plan describing the SDK surface

    Returns:
        GenerationResult with code, plan and construction warnings, and
        metadata; on a construction or malformed-node error, a failed
        result carrying the exception
    """
    from .declarations import build_program

    warnings = plan.validate()
    for warning in warnings:
        logger.warning("Design plan: %s", warning)

    try:
        program = build_program(plan, warnings)
        code = emitter.emit_program(program)
    except GeneratorError as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": emitter.language_name,
        "file_extension": emitter.file_extension,
        "client_name": plan.client_name,
        "declaration_count": len(program.body),
        "method_count": len(plan.methods),
        "error_count": len(plan.errors),
    }

    logger.debug(
        "Generated %d declarations for %s", len(program.body), plan.client_name
    )
    return GenerationResult(code, warnings, metadata)
