"""
TypeScript emitter implementation.

Renders the language-neutral AST as TypeScript source: curly-brace
blocks, ``name: type`` annotations and JSDoc comments.
"""

import json
from typing import Dict, List, Optional

from ....logging_config import get_logger
from ...core.ast import (
    ArrayExpression,
    BinaryExpression,
    CallExpression,
    ClassDeclaration,
    ConditionalExpression,
    Constructor,
    EnumDeclaration,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    IfStatement,
    Import,
    InterfaceDeclaration,
    Literal,
    MemberExpression,
    MethodDeclaration,
    Node,
    ObjectExpression,
    Parameter,
    PropertyDeclaration,
    ReturnStatement,
    ThrowStatement,
    TryCatchStatement,
    UnaryExpression,
    VariableDeclaration,
)
from ...core.config import EmitterConfig
from ...core.generator import (
    CodeEmitter,
    ExpressionHandler,
    LineHandler,
    MalformedNodeError,
)
from ...core.lines import LineBuilder

logger = get_logger(__name__)

# Prefix operators written as words need a space before the operand
WORD_OPERATORS = {"await", "typeof", "void", "delete", "new"}


class TypeScriptEmitter(CodeEmitter):
    """Code emitter for TypeScript (and plain JavaScript-family) sources."""

    def __init__(self, config: Optional[EmitterConfig] = None):
        super().__init__(config)

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    def line_handlers(self) -> Dict[str, LineHandler]:
        return {
            "Import": self._emit_import,
            "ClassDeclaration": self._emit_class,
            "InterfaceDeclaration": self._emit_interface,
            "EnumDeclaration": self._emit_enum,
            "FunctionDeclaration": self._emit_function,
            "PropertyDeclaration": self._emit_property,
            "Constructor": self._emit_constructor,
            "MethodDeclaration": self._emit_method,
            "VariableDeclaration": self._emit_variable,
            "ExpressionStatement": self._emit_expression_statement,
            "ReturnStatement": self._emit_return,
            "ThrowStatement": self._emit_throw,
            "IfStatement": self._emit_if,
            "TryCatchStatement": self._emit_try,
        }

    def expression_handlers(self) -> Dict[str, ExpressionHandler]:
        return {
            "Literal": self._literal,
            "Identifier": self._identifier,
            "MemberExpression": self._member,
            "CallExpression": self._call,
            "ObjectExpression": self._object,
            "ArrayExpression": self._array,
            "BinaryExpression": self._binary,
            "UnaryExpression": self._unary,
            "ConditionalExpression": self._conditional,
        }

    # ------------------------------------------------------------------
    # Shared pieces
    # ------------------------------------------------------------------

    def _body(self, builder: LineBuilder, statements: List[Node]) -> None:
        builder.block(lambda: self.emit_statements(builder, statements))

    def _params(self, owner: Node, parameters: List[Parameter]) -> str:
        rendered = []
        for index, param in enumerate(parameters):
            self.require_kind(owner, f"parameters[{index}]", param, "Parameter")
            self.require(param, "name")
            text = param.name
            if param.optional and param.default is None:
                text += "?"
            if param.type:
                text += f": {param.type}"
            if param.default is not None:
                text += f" = {param.default}"
            rendered.append(text)
        return ", ".join(rendered)

    @staticmethod
    def _annotation(type_name: Optional[str]) -> str:
        return f": {type_name}" if type_name else ""

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _emit_import(self, builder: LineBuilder, node: Import) -> None:
        self.require(node, "source")
        source = json.dumps(node.source)
        if not node.names:
            builder.line(f"import {source}{self.terminator}")
            return
        names = ", ".join(
            f"{item.name} as {item.alias}" if item.alias else item.name
            for item in node.names
        )
        builder.line(f"import {{ {names} }} from {source}{self.terminator}")

    def _emit_class(self, builder: LineBuilder, node: ClassDeclaration) -> None:
        self.require(node, "name")
        if node.documentation:
            builder.doc_block(description=node.documentation)

        header = "export class " if node.exported else "class "
        header += node.name
        if node.superclass:
            header += f" extends {node.superclass}"
        if node.implements:
            header += f" implements {', '.join(node.implements)}"
        builder.line(header + " {")

        # Members go through emit_node so a foreign kind degrades to a marker
        def members():
            sections = 0
            if node.properties:
                for prop in node.properties:
                    self.emit_node(builder, prop)
                sections += 1
            if node.constructor is not None:
                if sections:
                    builder.blank()
                self.emit_node(builder, node.constructor)
                sections += 1
            for method in node.methods:
                if sections:
                    builder.blank()
                self.emit_node(builder, method)
                sections += 1

        builder.block(members)
        builder.line("}")

    def _emit_interface(self, builder: LineBuilder, node: InterfaceDeclaration) -> None:
        self.require(node, "name")
        if node.documentation:
            builder.doc_block(description=node.documentation)

        header = "export interface " if node.exported else "interface "
        header += node.name
        if node.extends:
            header += f" extends {', '.join(node.extends)}"
        builder.line(header + " {")

        def properties():
            for index, prop in enumerate(node.properties):
                self.require_kind(
                    node, f"properties[{index}]", prop, "PropertyDeclaration"
                )
                self.require(prop, "name")
                readonly = "readonly " if prop.readonly else ""
                optional = "?" if prop.optional else ""
                builder.line(
                    f"{readonly}{prop.name}{optional}"
                    f"{self._annotation(prop.type)}{self.terminator}"
                )

        builder.block(properties)
        builder.line("}")

    def _emit_enum(self, builder: LineBuilder, node: EnumDeclaration) -> None:
        self.require(node, "name")
        if node.documentation:
            builder.doc_block(description=node.documentation)

        header = "export enum " if node.exported else "enum "
        builder.line(f"{header}{node.name} {{")

        def members():
            last = len(node.members) - 1
            for index, member in enumerate(node.members):
                if not member.name:
                    raise MalformedNodeError(node.kind, f"members[{index}].name")
                value = json.dumps(member.value)
                comma = "," if index < last else ""
                builder.line(f"{member.name} = {value}{comma}")

        builder.block(members)
        builder.line("}")

    def _emit_function(self, builder: LineBuilder, node: FunctionDeclaration) -> None:
        self.require(node, "name")
        if node.documentation:
            builder.doc(node.documentation)

        prefix = "export " if node.exported else ""
        if node.is_async:
            prefix += "async "
        builder.line(
            f"{prefix}function {node.name}({self._params(node, node.parameters)})"
            f"{self._annotation(node.return_type)} {{"
        )
        self._body(builder, node.body)
        builder.line("}")

    # ------------------------------------------------------------------
    # Class members
    # ------------------------------------------------------------------

    def _emit_property(self, builder: LineBuilder, node: PropertyDeclaration) -> None:
        self.require(node, "name")
        modifiers = ""
        if node.private:
            modifiers += "private "
        if node.readonly:
            modifiers += "readonly "
        optional = "?" if node.optional else ""
        initializer = ""
        if node.initializer is not None:
            initializer = f" = {self.emit_operand(node.initializer)}"
        builder.line(
            f"{modifiers}{node.name}{optional}{self._annotation(node.type)}"
            f"{initializer}{self.terminator}"
        )

    def _emit_constructor(self, builder: LineBuilder, node: Constructor) -> None:
        builder.line(f"constructor({self._params(node, node.parameters)}) {{")
        self._body(builder, node.body)
        builder.line("}")

    def _emit_method(self, builder: LineBuilder, node: MethodDeclaration) -> None:
        self.require(node, "name")
        if node.documentation:
            builder.doc(node.documentation)

        modifiers = ""
        if node.private:
            modifiers += "private "
        if node.is_async:
            modifiers += "async "
        builder.line(
            f"{modifiers}{node.name}({self._params(node, node.parameters)})"
            f"{self._annotation(node.return_type)} {{"
        )
        self._body(builder, node.body)
        builder.line("}")

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _emit_variable(self, builder: LineBuilder, node: VariableDeclaration) -> None:
        self.require(node, "name")
        binding = node.binding or "const"
        text = f"{binding} {node.name}{self._annotation(node.type)}"
        if node.initializer is not None:
            text += f" = {self.emit_operand(node.initializer)}"
        builder.line(text + self.terminator)

    def _emit_expression_statement(
        self, builder: LineBuilder, node: ExpressionStatement
    ) -> None:
        self.require(node, "expression")
        builder.line(self.emit_operand(node.expression) + self.terminator)

    def _emit_return(self, builder: LineBuilder, node: ReturnStatement) -> None:
        if node.argument is None:
            builder.line("return" + self.terminator)
        else:
            builder.line(f"return {self.emit_operand(node.argument)}{self.terminator}")

    def _emit_throw(self, builder: LineBuilder, node: ThrowStatement) -> None:
        self.require(node, "argument")
        builder.line(f"throw {self.emit_operand(node.argument)}{self.terminator}")

    def _emit_if(self, builder: LineBuilder, node: IfStatement) -> None:
        self.require(node, "condition")
        builder.line(f"if ({self.emit_operand(node.condition)}) {{")
        self._body(builder, node.consequent)
        if node.alternate is not None:
            builder.line("} else {")
            self._body(builder, node.alternate)
        builder.line("}")

    def _emit_try(self, builder: LineBuilder, node: TryCatchStatement) -> None:
        if node.catch_clause is None and node.finally_block is None:
            raise MalformedNodeError(node.kind, "catch_clause")

        builder.line("try {")
        self._body(builder, node.try_block)
        if node.catch_clause is not None:
            if not node.catch_clause.param:
                raise MalformedNodeError(node.kind, "catch_clause.param")
            builder.line(f"}} catch ({node.catch_clause.param}) {{")
            self._body(builder, node.catch_clause.body)
        if node.finally_block is not None:
            builder.line("} finally {")
            self._body(builder, node.finally_block)
        builder.line("}")

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _literal(self, node: Literal) -> str:
        self.require(node, "raw")
        return node.raw

    def _identifier(self, node: Identifier) -> str:
        self.require(node, "name")
        return node.name

    def _member(self, node: MemberExpression) -> str:
        self.require(node, "object", "property")
        obj = self.emit_operand(node.object)
        if node.computed:
            return f"{obj}[{node.property}]"
        return f"{obj}.{node.property}"

    def _call(self, node: CallExpression) -> str:
        self.require(node, "callee")
        args = ", ".join(self.emit_operand(arg) for arg in node.arguments)
        return f"{self.emit_operand(node.callee)}({args})"

    def _object(self, node: ObjectExpression) -> str:
        if not node.properties:
            return "{}"
        entries = []
        for index, prop in enumerate(node.properties):
            if not prop.key:
                raise MalformedNodeError(node.kind, f"properties[{index}].key")
            if prop.value is None:
                raise MalformedNodeError(node.kind, f"properties[{index}].value")
            entries.append(f"{prop.key}: {self.emit_operand(prop.value)}")
        return "{ " + ", ".join(entries) + " }"

    def _array(self, node: ArrayExpression) -> str:
        return "[" + ", ".join(self.emit_operand(e) for e in node.elements) + "]"

    def _binary(self, node: BinaryExpression) -> str:
        self.require(node, "left", "operator", "right")
        left = self.emit_operand(node.left)
        return f"{left} {node.operator} {self.emit_operand(node.right)}"

    def _unary(self, node: UnaryExpression) -> str:
        self.require(node, "operator", "argument")
        separator = " " if node.operator in WORD_OPERATORS else ""
        return f"{node.operator}{separator}{self.emit_operand(node.argument)}"

    def _conditional(self, node: ConditionalExpression) -> str:
        self.require(node, "condition", "consequent", "alternate")
        return (
            f"{self.emit_operand(node.condition)}"
            f" ? {self.emit_operand(node.consequent)}"
            f" : {self.emit_operand(node.alternate)}"
        )
