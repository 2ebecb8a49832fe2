"""Property-based checks for the emission pipeline."""

from hypothesis import given
from hypothesis import strategies as st

from sdkgen.codegen.core.ast import (
    EXPRESSION_KINDS,
    LINE_KINDS,
    FunctionDeclaration,
    OpaqueNode,
    ReturnStatement,
)
from sdkgen.codegen.core.generator import generate_sdk
from sdkgen.codegen.core.lines import LineBuilder
from sdkgen.codegen.core.plan import DesignPlan, MethodParameter, MethodSpec
from sdkgen.codegen.languages.typescript import TypeScriptEmitter

identifiers = st.from_regex(r"[a-z][a-zA-Z0-9]{0,12}", fullmatch=True)
type_names = st.sampled_from(
    ["string", "number", "boolean", "Record<string, unknown>", "Item[]"]
)

parameters = st.builds(
    MethodParameter,
    name=identifiers,
    type=type_names,
    optional=st.booleans(),
)

methods = st.builds(
    MethodSpec,
    name=identifiers,
    parameters=st.lists(parameters, max_size=4, unique_by=lambda p: p.name),
    return_type=type_names,
    is_async=st.booleans(),
)

plans = st.builds(
    DesignPlan,
    client_name=st.from_regex(r"[A-Z][a-zA-Z]{2,12}Client", fullmatch=True),
    methods=st.lists(methods, max_size=5, unique_by=lambda m: m.name),
)

foreign_kinds = st.from_regex(r"[A-Z][A-Za-z]{2,20}", fullmatch=True).filter(
    lambda kind: kind not in LINE_KINDS and kind not in EXPRESSION_KINDS
)


@given(st.lists(st.booleans(), max_size=50))
def test_indent_level_never_negative(operations):
    builder = LineBuilder()
    for deeper in operations:
        if deeper:
            builder.indent()
        else:
            builder.outdent()
        assert builder.indent_level >= 0
        builder.line("x")
    assert all(not line.startswith("-") for line in builder.get_lines())


@given(plans)
def test_emission_is_deterministic(plan):
    first = generate_sdk(TypeScriptEmitter(), plan)
    second = generate_sdk(TypeScriptEmitter(), plan)
    assert first.success
    assert first.code == second.code


@given(plans)
def test_emitted_signatures_mirror_plan(plan):
    code = generate_sdk(TypeScriptEmitter(), plan).code
    for method in plan.methods:
        params = ", ".join(
            f"{p.name}{'?' if p.optional else ''}: {p.type}" for p in method.parameters
        )
        prefix = "async " if method.is_async else ""
        assert f"  {prefix}{method.name}({params}): {method.return_type} {{" in code


@given(foreign_kinds)
def test_unknown_kinds_degrade_without_losing_siblings(kind):
    builder = LineBuilder()
    function = FunctionDeclaration(
        name="run", body=[OpaqueNode(kind), ReturnStatement(OpaqueNode(kind))]
    )
    TypeScriptEmitter().emit_node(builder, function)
    assert builder.get_lines() == [
        "function run() {",
        f"  // Unsupported node kind: {kind}",
        f"  return /* Unsupported expression kind: {kind} */;",
        "}",
    ]
