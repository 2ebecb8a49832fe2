import pytest

from sdkgen.codegen.core.ast import (
    CallExpression,
    CatchClause,
    ClassDeclaration,
    ConditionalExpression,
    Constructor,
    EnumDeclaration,
    EnumMember,
    ExpressionStatement,
    FunctionDeclaration,
    Identifier,
    IfStatement,
    Import,
    ImportName,
    InterfaceDeclaration,
    Literal,
    MemberExpression,
    MethodDeclaration,
    OpaqueNode,
    Parameter,
    Program,
    PropertyDeclaration,
    ReturnStatement,
    TryCatchStatement,
    UnaryExpression,
    VariableDeclaration,
    node_from_dict,
)
from sdkgen.codegen.core.config import ConfigError
from sdkgen.codegen.core.declarations import build_method
from sdkgen.codegen.core.generator import GeneratorError, MalformedNodeError
from sdkgen.codegen.core.lines import LineBuilder
from sdkgen.codegen.languages.typescript import (
    TypeScriptEmitter,
    create_compact_emitter,
    create_typescript_emitter,
)


def emit(emitter, node):
    builder = LineBuilder(emitter.config)
    emitter.emit_node(builder, node)
    return builder.get_lines()


def test_plain_method(emitter):
    method = MethodDeclaration(
        name="ping", return_type="string", body=[ReturnStatement(Literal.of("pong"))]
    )
    assert emit(emitter, method) == ["ping(): string {", '  return "pong";', "}"]


def test_plan_method_signature_matches_plan(emitter, plan):
    lines = emit(emitter, build_method(plan.methods[0], plan.client_name))
    assert "getBalance(address: string): number {" in lines
    assert '  return this.request("GET", "/getBalance", { address: address });' in lines
    assert " * @param {string} address Wallet address" in lines


def test_authenticated_method_guards_credential(emitter, plan):
    lines = emit(emitter, build_method(plan.methods[1], plan.client_name, "api-key"))
    assert (
        "async transfer(to: string, amount: number, memo?: string): Promise<Receipt> {"
        in lines
    )
    assert lines[lines.index("  if (!this.config.apiKey) {") + 1] == (
        '    throw new ConfigError("Authentication is required but not configured");'
    )
    assert (
        '  return this.request("POST", "/transfers", '
        "{ to: to, amount: amount, memo: memo });"
        in lines
    )
    assert " * const result = await client.transfer(to, amount);" in lines


def test_parameter_defaults_and_optionals(emitter):
    function = FunctionDeclaration(
        name="connect",
        parameters=[
            Parameter("url", "string"),
            Parameter("retries", "number", default="3"),
            Parameter("label", "string", optional=True),
        ],
        return_type="void",
        exported=True,
    )
    assert emit(emitter, function)[0] == (
        "export function connect("
        "url: string, retries: number = 3, label?: string): void {"
    )


def test_enum_members_are_quoted_and_comma_separated(emitter):
    enum = EnumDeclaration(
        name="Network",
        exported=True,
        members=[EnumMember("Mainnet", "mainnet"), EnumMember("Testnet", "testnet")],
    )
    assert emit(emitter, enum) == [
        "export enum Network {",
        '  Mainnet = "mainnet",',
        '  Testnet = "testnet"',
        "}",
    ]


def test_interface_properties(emitter):
    interface = InterfaceDeclaration(
        name="Receipt",
        properties=[
            PropertyDeclaration("id", "string", readonly=True),
            PropertyDeclaration("note", "string", optional=True),
        ],
    )
    assert emit(emitter, interface) == [
        "interface Receipt {",
        "  readonly id: string;",
        "  note?: string;",
        "}",
    ]


def test_class_layout_separates_members(emitter):
    cls = ClassDeclaration(
        name="Client",
        superclass="Base",
        exported=True,
        properties=[PropertyDeclaration("config", "Config", private=True)],
        constructor=Constructor(
            parameters=[Parameter("config", "Config")],
            body=[ExpressionStatement(CallExpression("super", ["config"]))],
        ),
        methods=[
            MethodDeclaration(name="a", body=[ReturnStatement()]),
            MethodDeclaration(name="b", is_async=True, private=True),
        ],
    )
    assert emit(emitter, cls) == [
        "export class Client extends Base {",
        "  private config: Config;",
        "",
        "  constructor(config: Config) {",
        "    super(config);",
        "  }",
        "",
        "  a() {",
        "    return;",
        "  }",
        "",
        "  private async b() {",
        "  }",
        "}",
    ]


def test_statements_and_expressions(emitter):
    function = FunctionDeclaration(
        name="pick",
        body=[
            VariableDeclaration(
                "mode",
                binding="let",
                type="string",
                initializer=ConditionalExpression(
                    Identifier("fast"), Literal.of("a"), Literal.of("b")
                ),
            ),
            IfStatement(
                UnaryExpression("typeof", Identifier("x")),
                consequent=[
                    ReturnStatement(
                        MemberExpression(Identifier("items"), "0", computed=True)
                    )
                ],
                alternate=[ReturnStatement(UnaryExpression("!", Identifier("y")))],
            ),
            TryCatchStatement(
                try_block=[
                    ExpressionStatement(UnaryExpression("await", CallExpression("run")))
                ],
                finally_block=[ExpressionStatement(CallExpression("cleanup"))],
            ),
        ],
    )
    assert emit(emitter, function) == [
        "function pick() {",
        '  let mode: string = fast ? "a" : "b";',
        "  if (typeof x) {",
        "    return items[0];",
        "  } else {",
        "    return !y;",
        "  }",
        "  try {",
        "    await run();",
        "  } finally {",
        "    cleanup();",
        "  }",
        "}",
    ]


def test_import_forms(emitter):
    assert emit(emitter, Import("./polyfill")) == ['import "./polyfill";']
    named = Import("axios", [ImportName("get"), ImportName("post", "httpPost")])
    assert emit(emitter, named) == ['import { get, post as httpPost } from "axios";']


def test_unknown_statement_kind_degrades_to_comment(emitter):
    function = FunctionDeclaration(
        name="sum",
        return_type="number",
        body=[OpaqueNode("ForOfStatement"), ReturnStatement(Identifier("total"))],
    )
    assert emit(emitter, function) == [
        "function sum(): number {",
        "  // Unsupported node kind: ForOfStatement",
        "  return total;",
        "}",
    ]


def test_unknown_expression_kind_degrades_inline(emitter):
    lines = emit(emitter, ReturnStatement(OpaqueNode("ArrowFunctionExpression")))
    assert lines == [
        "return /* Unsupported expression kind: ArrowFunctionExpression */;"
    ]


def test_loaded_unknown_kind_degrades(emitter):
    node = node_from_dict(
        {
            "type": "FunctionDeclaration",
            "name": "loop",
            "body": [{"type": "WhileStatement", "test": "true"}],
        }
    )
    assert "  // Unsupported node kind: WhileStatement" in emit(emitter, node)


def test_call_without_callee_is_malformed(emitter):
    node = node_from_dict(
        {"type": "ExpressionStatement", "expression": {"type": "CallExpression"}}
    )
    with pytest.raises(MalformedNodeError) as exc_info:
        emit(emitter, node)
    assert exc_info.value.kind == "CallExpression"
    assert exc_info.value.field == "callee"


def test_try_without_handlers_is_malformed(emitter):
    with pytest.raises(MalformedNodeError) as exc_info:
        emit(emitter, TryCatchStatement(try_block=[ReturnStatement()]))
    assert exc_info.value.field == "catch_clause"


def test_catch_without_param_is_malformed(emitter):
    node = TryCatchStatement(catch_clause=CatchClause(param=""))
    with pytest.raises(MalformedNodeError):
        emit(emitter, node)


def test_emit_program_separates_declarations(emitter):
    program = Program(
        [
            VariableDeclaration("a", initializer=Literal.of(1)),
            VariableDeclaration("b", initializer=Literal.of(2)),
        ]
    )
    assert emitter.emit_program(program) == "const a = 1;\n\nconst b = 2;\n"


def test_compact_emitter_uses_tabs_without_terminators():
    emitter = create_compact_emitter()
    function = FunctionDeclaration(name="f", body=[ReturnStatement(Identifier("x"))])
    assert emit(emitter, function) == ["function f() {", "\treturn x", "}"]


def test_invalid_terminator_is_rejected():
    with pytest.raises(ConfigError):
        create_typescript_emitter(statement_terminator="!")


def test_emitter_without_full_handler_table_fails_at_construction():
    class PartialEmitter(TypeScriptEmitter):
        def expression_handlers(self):
            handlers = super().expression_handlers()
            del handlers["UnaryExpression"]
            return handlers

    with pytest.raises(GeneratorError, match="UnaryExpression"):
        PartialEmitter()


def test_foreign_class_members_degrade_to_markers(emitter):
    node = node_from_dict(
        {
            "type": "ClassDeclaration",
            "name": "Store",
            "properties": [{"type": "IndexSignature", "key": "string"}],
            "constructor": {"type": "StaticBlock"},
            "methods": [{"type": "MethodDeclaration", "name": "size", "body": []}],
        }
    )
    assert emit(emitter, node) == [
        "class Store {",
        "  // Unsupported node kind: IndexSignature",
        "",
        "  // Unsupported node kind: StaticBlock",
        "",
        "  size() {",
        "  }",
        "}",
    ]


def test_foreign_interface_property_is_malformed(emitter):
    node = node_from_dict(
        {
            "type": "InterfaceDeclaration",
            "name": "Shape",
            "properties": [{"type": "CallSignature"}],
        }
    )
    with pytest.raises(MalformedNodeError) as exc_info:
        emit(emitter, node)
    assert exc_info.value.kind == "InterfaceDeclaration"
    assert exc_info.value.field == "properties[0]"


def test_foreign_parameter_is_malformed(emitter):
    node = node_from_dict(
        {
            "type": "FunctionDeclaration",
            "name": "spread",
            "parameters": [{"type": "RestElement", "argument": "items"}],
        }
    )
    with pytest.raises(MalformedNodeError) as exc_info:
        emit(emitter, node)
    assert exc_info.value.kind == "FunctionDeclaration"
    assert exc_info.value.field == "parameters[0]"
