import pytest

from sdkgen.codegen.core.ast import DocComment, DocParam, DocReturn
from sdkgen.codegen.core.config import EmitterConfig
from sdkgen.codegen.core.lines import LineBuilder


def test_lines_are_indented_by_level():
    builder = LineBuilder()
    builder.line("a {")
    builder.indent()
    builder.line("b;")
    builder.outdent()
    builder.line("}")
    assert builder.get_lines() == ["a {", "  b;", "}"]


def test_outdent_is_clamped_at_zero():
    builder = LineBuilder()
    builder.outdent()
    builder.outdent()
    assert builder.indent_level == 0
    builder.line("x")
    assert builder.get_lines() == ["x"]


def test_blank_lines_carry_no_indent():
    builder = LineBuilder()
    builder.indent()
    builder.blank()
    builder.line("")
    assert builder.get_lines() == ["", ""]


def test_block_restores_level_when_callback_raises():
    builder = LineBuilder()

    def fail():
        builder.indent()
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        builder.block(fail)
    assert builder.indent_level == 0


def test_tabs_indentation():
    builder = LineBuilder(EmitterConfig(indentation_style="tabs"))
    with builder.indented():
        builder.line("x")
    assert builder.get_lines() == ["\tx"]


def test_render_adds_single_trailing_newline():
    builder = LineBuilder()
    builder.line("x")
    assert builder.render() == "x\n"

    no_newline = LineBuilder(EmitterConfig(trailing_newline=False))
    no_newline.line("x")
    assert no_newline.render() == "x"


def test_comment_single_and_multiline():
    builder = LineBuilder()
    builder.comment("one\ntwo")
    builder.comment("block", multiline=True)
    assert builder.get_lines() == ["// one", "// two", "/**", " * block", " */"]


def test_doc_block_omits_absent_sections():
    builder = LineBuilder()
    builder.doc_block(description="Only a description")
    assert builder.get_lines() == ["/**", " * Only a description", " */"]


def test_doc_block_separates_present_sections():
    builder = LineBuilder()
    builder.doc(
        DocComment(
            description="Get a balance",
            params=[DocParam("address", "string", "Wallet address")],
            returns=DocReturn("number"),
            throws=["NetworkError"],
            example="client.getBalance(a);",
        )
    )
    assert builder.get_lines() == [
        "/**",
        " * Get a balance",
        " *",
        " * @param {string} address Wallet address",
        " * @returns {number}",
        " * @throws {NetworkError}",
        " *",
        " * @example",
        " * client.getBalance(a);",
        " */",
    ]


def test_empty_doc_block_renders_nothing():
    builder = LineBuilder()
    builder.doc(DocComment())
    assert builder.get_lines() == []
