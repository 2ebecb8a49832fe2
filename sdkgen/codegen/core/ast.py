"""
Language-neutral abstract syntax model for generated SDK source.

Every node is a dataclass carrying a fixed ``kind`` discriminator, so a
renderer can dispatch on ``kind`` alone. Builders create nodes; emitters
only read them.

Operands that may be either pre-rendered text or a nested expression
(call arguments, object values, array elements, binary operands) are
modelled explicitly as ``RawText | Expression``. Plain strings passed to
those fields are wrapped into ``RawText`` on construction.
"""

import json
from dataclasses import MISSING, dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Union


class Node:
    """Base for all AST nodes."""

    kind: ClassVar[str] = "Node"


class Declaration(Node):
    """Top-level declaration (may appear in a Program body)."""


class Statement(Node):
    """Statement inside a function, method or constructor body."""


class Expression(Node):
    """Expression rendered inline."""


@dataclass
class RawText:
    """Pre-rendered source text used verbatim by emitters."""

    text: str


Operand = Union[RawText, Expression]


def to_operand(value: Any) -> Optional[Operand]:
    """Wrap plain strings as ``RawText``; leave nodes and ``None`` untouched."""
    if value is None or isinstance(value, (RawText, Expression)):
        return value
    if isinstance(value, str):
        return RawText(value)
    # Opaque nodes from newer producers still go through the emitter
    if isinstance(value, Node):
        return value
    raise TypeError(f"Operand must be str, RawText or Expression, got {type(value)!r}")


def _to_operands(values: Optional[List[Any]]) -> List[Operand]:
    return [to_operand(v) for v in values or []]


# ---------------------------------------------------------------------------
# Documentation data (not nodes)
# ---------------------------------------------------------------------------


@dataclass
class DocParam:
    name: str
    type: Optional[str] = None
    description: Optional[str] = None


@dataclass
class DocReturn:
    type: Optional[str] = None
    description: Optional[str] = None


@dataclass
class DocComment:
    """Structured doc block; absent parts are omitted when rendered."""

    description: Optional[str] = None
    params: List[DocParam] = field(default_factory=list)
    returns: Optional[DocReturn] = None
    throws: List[str] = field(default_factory=list)
    deprecated: bool = False
    example: Optional[str] = None


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


@dataclass
class Literal(Expression):
    kind: ClassVar[str] = "Literal"

    raw: str
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "Literal":
        """Build a literal whose raw text is the JSON rendering of ``value``."""
        return cls(raw=json.dumps(value), value=value)


@dataclass
class Identifier(Expression):
    kind: ClassVar[str] = "Identifier"

    name: str


@dataclass
class MemberExpression(Expression):
    kind: ClassVar[str] = "MemberExpression"

    object: Operand
    property: str
    computed: bool = False

    def __post_init__(self):
        self.object = to_operand(self.object)


@dataclass
class CallExpression(Expression):
    kind: ClassVar[str] = "CallExpression"

    callee: Operand
    arguments: List[Operand] = field(default_factory=list)

    def __post_init__(self):
        self.callee = to_operand(self.callee)
        self.arguments = _to_operands(self.arguments)


@dataclass
class ObjectProperty:
    key: str
    value: Operand

    def __post_init__(self):
        self.value = to_operand(self.value)


@dataclass
class ObjectExpression(Expression):
    kind: ClassVar[str] = "ObjectExpression"

    properties: List[ObjectProperty] = field(default_factory=list)


@dataclass
class ArrayExpression(Expression):
    kind: ClassVar[str] = "ArrayExpression"

    elements: List[Operand] = field(default_factory=list)

    def __post_init__(self):
        self.elements = _to_operands(self.elements)


@dataclass
class BinaryExpression(Expression):
    kind: ClassVar[str] = "BinaryExpression"

    left: Operand
    operator: str
    right: Operand

    def __post_init__(self):
        self.left = to_operand(self.left)
        self.right = to_operand(self.right)


@dataclass
class UnaryExpression(Expression):
    kind: ClassVar[str] = "UnaryExpression"

    operator: str
    argument: Operand

    def __post_init__(self):
        self.argument = to_operand(self.argument)


@dataclass
class ConditionalExpression(Expression):
    kind: ClassVar[str] = "ConditionalExpression"

    condition: Operand
    consequent: Operand
    alternate: Operand

    def __post_init__(self):
        self.condition = to_operand(self.condition)
        self.consequent = to_operand(self.consequent)
        self.alternate = to_operand(self.alternate)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


@dataclass
class VariableDeclaration(Statement):
    kind: ClassVar[str] = "VariableDeclaration"

    name: str
    binding: str = "const"
    type: Optional[str] = None
    initializer: Optional[Operand] = None

    def __post_init__(self):
        self.initializer = to_operand(self.initializer)


@dataclass
class ExpressionStatement(Statement):
    kind: ClassVar[str] = "ExpressionStatement"

    expression: Operand

    def __post_init__(self):
        self.expression = to_operand(self.expression)


@dataclass
class ReturnStatement(Statement):
    kind: ClassVar[str] = "ReturnStatement"

    argument: Optional[Operand] = None

    def __post_init__(self):
        self.argument = to_operand(self.argument)


@dataclass
class ThrowStatement(Statement):
    kind: ClassVar[str] = "ThrowStatement"

    argument: Operand

    def __post_init__(self):
        self.argument = to_operand(self.argument)


@dataclass
class IfStatement(Statement):
    kind: ClassVar[str] = "IfStatement"

    condition: Operand
    consequent: List[Node] = field(default_factory=list)
    alternate: Optional[List[Node]] = None

    def __post_init__(self):
        self.condition = to_operand(self.condition)


@dataclass
class CatchClause:
    param: str
    body: List[Node] = field(default_factory=list)


@dataclass
class TryCatchStatement(Statement):
    kind: ClassVar[str] = "TryCatchStatement"

    try_block: List[Node] = field(default_factory=list)
    catch_clause: Optional[CatchClause] = None
    finally_block: Optional[List[Node]] = None


# ---------------------------------------------------------------------------
# Declarations and class members
# ---------------------------------------------------------------------------


@dataclass
class ImportName:
    name: str
    alias: Optional[str] = None


@dataclass
class Import(Declaration):
    kind: ClassVar[str] = "Import"

    source: str
    names: List[ImportName] = field(default_factory=list)


@dataclass
class Parameter(Node):
    kind: ClassVar[str] = "Parameter"

    name: str
    type: Optional[str] = None
    optional: bool = False
    default: Optional[str] = None


@dataclass
class PropertyDeclaration(Node):
    kind: ClassVar[str] = "PropertyDeclaration"

    name: str
    type: Optional[str] = None
    optional: bool = False
    readonly: bool = False
    private: bool = False
    initializer: Optional[Operand] = None

    def __post_init__(self):
        self.initializer = to_operand(self.initializer)


@dataclass
class Constructor(Node):
    kind: ClassVar[str] = "Constructor"

    parameters: List[Parameter] = field(default_factory=list)
    body: List[Node] = field(default_factory=list)


@dataclass
class MethodDeclaration(Node):
    kind: ClassVar[str] = "MethodDeclaration"

    name: str
    parameters: List[Parameter] = field(default_factory=list)
    return_type: Optional[str] = None
    body: List[Node] = field(default_factory=list)
    is_async: bool = False
    private: bool = False
    documentation: Optional[DocComment] = None


@dataclass
class ClassDeclaration(Declaration):
    kind: ClassVar[str] = "ClassDeclaration"

    name: str
    superclass: Optional[str] = None
    implements: List[str] = field(default_factory=list)
    properties: List[PropertyDeclaration] = field(default_factory=list)
    constructor: Optional[Constructor] = None
    methods: List[MethodDeclaration] = field(default_factory=list)
    exported: bool = False
    documentation: Optional[str] = None


@dataclass
class InterfaceDeclaration(Declaration):
    kind: ClassVar[str] = "InterfaceDeclaration"

    name: str
    extends: List[str] = field(default_factory=list)
    properties: List[PropertyDeclaration] = field(default_factory=list)
    exported: bool = False
    documentation: Optional[str] = None


@dataclass
class EnumMember:
    name: str
    value: Union[str, int, float]


@dataclass
class EnumDeclaration(Declaration):
    kind: ClassVar[str] = "EnumDeclaration"

    name: str
    members: List[EnumMember] = field(default_factory=list)
    exported: bool = False
    documentation: Optional[str] = None


@dataclass
class FunctionDeclaration(Declaration):
    kind: ClassVar[str] = "FunctionDeclaration"

    name: str
    parameters: List[Parameter] = field(default_factory=list)
    return_type: Optional[str] = None
    body: List[Node] = field(default_factory=list)
    is_async: bool = False
    exported: bool = False
    documentation: Optional[DocComment] = None


@dataclass
class Program(Node):
    kind: ClassVar[str] = "Program"

    body: List[Node] = field(default_factory=list)


@dataclass
class OpaqueNode(Expression, Statement, Declaration):
    """A node of a kind this package does not model; emitters degrade on it."""

    kind: str
    attributes: Dict[str, Any] = field(default_factory=dict)


# Kinds rendered as lines (declarations, members, statements)
LINE_KINDS = tuple(
    cls.kind
    for cls in (
        Import,
        ClassDeclaration,
        InterfaceDeclaration,
        EnumDeclaration,
        FunctionDeclaration,
        PropertyDeclaration,
        Constructor,
        MethodDeclaration,
        VariableDeclaration,
        ExpressionStatement,
        ReturnStatement,
        ThrowStatement,
        IfStatement,
        TryCatchStatement,
    )
)

# Kinds rendered inline
EXPRESSION_KINDS = tuple(
    cls.kind
    for cls in (
        Literal,
        Identifier,
        MemberExpression,
        CallExpression,
        ObjectExpression,
        ArrayExpression,
        BinaryExpression,
        UnaryExpression,
        ConditionalExpression,
    )
)


# ---------------------------------------------------------------------------
# Loading from JSON-shaped dicts
# ---------------------------------------------------------------------------

# Each field table maps a JSON key to (attribute, converter). Converters:
# "node", "nodes", "operand", "operands", "params", "props", "doc" or None.
_NODE_FIELDS: Dict[str, tuple] = {
    "Program": (Program, {"body": ("body", "nodes")}),
    "Import": (Import, {"source": ("source", None), "imports": ("names", "imports")}),
    "Parameter": (
        Parameter,
        {
            "name": ("name", None),
            "parameterType": ("type", None),
            "optional": ("optional", None),
            "defaultValue": ("default", None),
        },
    ),
    "PropertyDeclaration": (
        PropertyDeclaration,
        {
            "name": ("name", None),
            "valueType": ("type", None),
            "optional": ("optional", None),
            "readonly": ("readonly", None),
            "isPrivate": ("private", None),
            "initializer": ("initializer", "operand"),
        },
    ),
    "Constructor": (
        Constructor,
        {"parameters": ("parameters", "params"), "body": ("body", "nodes")},
    ),
    "MethodDeclaration": (
        MethodDeclaration,
        {
            "name": ("name", None),
            "parameters": ("parameters", "params"),
            "returnType": ("return_type", None),
            "body": ("body", "nodes"),
            "isAsync": ("is_async", None),
            "isPrivate": ("private", None),
            "documentation": ("documentation", "doc"),
        },
    ),
    "ClassDeclaration": (
        ClassDeclaration,
        {
            "name": ("name", None),
            "extends": ("superclass", None),
            "implements": ("implements", None),
            "properties": ("properties", "props"),
            "constructor": ("constructor", "node"),
            "methods": ("methods", "nodes"),
            "isExported": ("exported", None),
            "documentation": ("documentation", None),
        },
    ),
    "InterfaceDeclaration": (
        InterfaceDeclaration,
        {
            "name": ("name", None),
            "extends": ("extends", None),
            "properties": ("properties", "props"),
            "isExported": ("exported", None),
            "documentation": ("documentation", None),
        },
    ),
    "EnumDeclaration": (
        EnumDeclaration,
        {
            "name": ("name", None),
            "members": ("members", "members"),
            "isExported": ("exported", None),
            "documentation": ("documentation", None),
        },
    ),
    "FunctionDeclaration": (
        FunctionDeclaration,
        {
            "name": ("name", None),
            "parameters": ("parameters", "params"),
            "returnType": ("return_type", None),
            "body": ("body", "nodes"),
            "isAsync": ("is_async", None),
            "isExported": ("exported", None),
            "documentation": ("documentation", "doc"),
        },
    ),
    "VariableDeclaration": (
        VariableDeclaration,
        {
            "kind": ("binding", None),
            "name": ("name", None),
            "valueType": ("type", None),
            "initializer": ("initializer", "operand"),
        },
    ),
    "ExpressionStatement": (
        ExpressionStatement,
        {"expression": ("expression", "operand")},
    ),
    "ReturnStatement": (ReturnStatement, {"argument": ("argument", "operand")}),
    "ThrowStatement": (ThrowStatement, {"argument": ("argument", "operand")}),
    "IfStatement": (
        IfStatement,
        {
            "condition": ("condition", "operand"),
            "consequent": ("consequent", "nodes"),
            "alternate": ("alternate", "nodes"),
        },
    ),
    "TryCatchStatement": (
        TryCatchStatement,
        {
            "tryBlock": ("try_block", "nodes"),
            "catchClause": ("catch_clause", "catch"),
            "finallyBlock": ("finally_block", "nodes"),
        },
    ),
    "Literal": (Literal, {"raw": ("raw", None), "value": ("value", None)}),
    "Identifier": (Identifier, {"name": ("name", None)}),
    "MemberExpression": (
        MemberExpression,
        {
            "object": ("object", "operand"),
            "property": ("property", None),
            "computed": ("computed", None),
        },
    ),
    "CallExpression": (
        CallExpression,
        {"callee": ("callee", "operand"), "arguments": ("arguments", "operands")},
    ),
    "ObjectExpression": (ObjectExpression, {"properties": ("properties", "entries")}),
    "ArrayExpression": (ArrayExpression, {"elements": ("elements", "operands")}),
    "BinaryExpression": (
        BinaryExpression,
        {
            "left": ("left", "operand"),
            "operator": ("operator", None),
            "right": ("right", "operand"),
        },
    ),
    "UnaryExpression": (
        UnaryExpression,
        {"operator": ("operator", None), "argument": ("argument", "operand")},
    ),
    "ConditionalExpression": (
        ConditionalExpression,
        {
            "condition": ("condition", "operand"),
            "consequent": ("consequent", "operand"),
            "alternate": ("alternate", "operand"),
        },
    ),
}

# Kind names used by the JSON producers that differ from ours
_KIND_ALIASES = {"ImportStatement": "Import"}


def node_from_dict(data: Dict[str, Any]) -> Node:
    """
    Build an AST node from a JSON-shaped dict (``{"type": "...", ...}``).

    Unknown kinds become ``OpaqueNode`` so emitters can degrade on them.
    Missing keys are left as ``None``; emitters report them as malformed.
    """
    node_kind = data.get("type") or data.get("kind")
    node_kind = _KIND_ALIASES.get(node_kind, node_kind)

    if node_kind not in _NODE_FIELDS:
        attributes = {k: v for k, v in data.items() if k not in ("type", "kind")}
        return OpaqueNode(kind=str(node_kind), attributes=attributes)

    node_class, field_table = _NODE_FIELDS[node_kind]
    if node_kind == "Literal" and "raw" not in data and "value" in data:
        data = dict(data, raw=json.dumps(data["value"]))

    kwargs = {}
    for json_key, (attr, converter) in field_table.items():
        if json_key not in data:
            continue
        kwargs[attr] = _convert(data[json_key], converter)

    # Required dataclass fields that the dict omitted are passed as None
    for name, dc_field in node_class.__dataclass_fields__.items():
        if name not in kwargs and dc_field.init:
            if dc_field.default is MISSING and dc_field.default_factory is MISSING:
                kwargs[name] = None

    return node_class(**kwargs)


def _convert(value: Any, converter: Optional[str]) -> Any:
    if value is None or converter is None:
        return value
    if converter == "node":
        return node_from_dict(value)
    if converter in ("nodes", "params", "props"):
        return [node_from_dict(item) for item in value]
    if converter == "operand":
        return value if isinstance(value, str) else node_from_dict(value)
    if converter == "operands":
        return [v if isinstance(v, str) else node_from_dict(v) for v in value]
    if converter == "entries":
        return [
            ObjectProperty(
                key=entry.get("key"),
                value=_convert(entry.get("value"), "operand"),
            )
            for entry in value
        ]
    if converter == "imports":
        return [ImportName(name=i.get("name"), alias=i.get("alias")) for i in value]
    if converter == "members":
        return [EnumMember(name=m.get("name"), value=m.get("value")) for m in value]
    if converter == "catch":
        return CatchClause(
            param=value.get("param"),
            body=[node_from_dict(item) for item in value.get("body", [])],
        )
    if converter == "doc":
        if isinstance(value, str):
            return DocComment(description=value)
        return DocComment(
            description=value.get("description"),
            params=[
                DocParam(p.get("name"), p.get("type"), p.get("description"))
                for p in value.get("params", [])
            ],
            returns=(
                DocReturn(
                    value["returns"].get("type"), value["returns"].get("description")
                )
                if value.get("returns")
                else None
            ),
            throws=list(value.get("throws", [])),
            deprecated=bool(value.get("deprecated", False)),
            example=value.get("example"),
        )
    raise ValueError(f"Unknown converter: {converter}")
