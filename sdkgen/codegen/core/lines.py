"""
Indentation-aware line accumulator used by emitters.

The builder knows nothing about the target language beyond comment
syntax; emitters decide what goes on each line.
"""

from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, List, Optional

from .ast import DocComment, DocParam, DocReturn
from .config import EmitterConfig


class LineBuilder:
    """Ordered text lines plus a current indent level that never drops below zero."""

    def __init__(self, config: Optional[EmitterConfig] = None):
        self.config = config or EmitterConfig()
        self._lines: List[str] = []
        self._level = 0

    @property
    def indent_level(self) -> int:
        return self._level

    def get_lines(self) -> List[str]:
        """Copy of the lines accumulated so far."""
        return list(self._lines)

    def _prefix(self) -> str:
        return self.config.indent_unit * self._level

    def line(self, text: str = "") -> None:
        """Append one line at the current indent. Empty lines carry no indent."""
        if text == "":
            self._lines.append("")
        else:
            self._lines.append(self._prefix() + text)

    def lines(self, texts: Iterable[str]) -> None:
        """Append several lines at the current indent."""
        for text in texts:
            self.line(text)

    def blank(self) -> None:
        self._lines.append("")

    def comment(self, text: str, multiline: bool = False) -> None:
        """Append a ``//`` comment, or a ``/** */`` block when multiline."""
        if multiline:
            self.line("/**")
            for part in text.split("\n"):
                self.line(f" * {part}".rstrip())
            self.line(" */")
        else:
            for part in text.split("\n"):
                self.line(f"// {part}".rstrip())

    def doc_block(
        self,
        description: Optional[str] = None,
        params: Optional[List[DocParam]] = None,
        returns: Optional[DocReturn] = None,
        throws: Optional[List[str]] = None,
        deprecated: bool = False,
        example: Optional[str] = None,
    ) -> None:
        """
        Append a structured documentation block.

        Sections whose data is absent are left out entirely, and a bare
        `` *`` separator only appears between two sections that are present.
        """
        sections: List[List[str]] = []

        if description:
            sections.append(description.split("\n"))

        tags = []
        for param in params or []:
            type_str = f" {{{param.type}}}" if param.type else ""
            desc = f" {param.description}" if param.description else ""
            tags.append(f"@param{type_str} {param.name}{desc}")
        if returns is not None and (returns.type or returns.description):
            type_str = f" {{{returns.type}}}" if returns.type else ""
            desc = f" {returns.description}" if returns.description else ""
            tags.append(f"@returns{type_str}{desc}")
        for error in throws or []:
            tags.append(f"@throws {{{error}}}")
        if deprecated:
            tags.append("@deprecated")
        if tags:
            sections.append(tags)

        if example:
            sections.append(["@example"] + example.split("\n"))

        if not sections:
            return

        self.line("/**")
        for index, section in enumerate(sections):
            if index > 0:
                self.line(" *")
            for text in section:
                self.line(f" * {text}".rstrip())
        self.line(" */")

    def doc(self, doc: DocComment) -> None:
        """Render a ``DocComment`` through ``doc_block``."""
        self.doc_block(
            description=doc.description,
            params=doc.params,
            returns=doc.returns,
            throws=doc.throws,
            deprecated=doc.deprecated,
            example=doc.example,
        )

    def indent(self) -> None:
        self._level += 1

    def outdent(self) -> None:
        # Clamped at zero; extra calls are a no-op
        self._level = max(0, self._level - 1)

    @contextmanager
    def indented(self) -> Iterator["LineBuilder"]:
        """Indent for the duration of a ``with`` block."""
        level = self._level
        self.indent()
        try:
            yield self
        finally:
            self._level = level

    def block(self, fn: Callable[[], None]) -> None:
        """Run ``fn`` one level deeper, restoring the level even if it raises."""
        with self.indented():
            fn()

    def render(self) -> str:
        """Join lines, adding a trailing newline when configured and missing."""
        code = "\n".join(self._lines)
        if self.config.trailing_newline and not code.endswith("\n"):
            code += "\n"
        return code

    def __str__(self) -> str:
        return self.render()
