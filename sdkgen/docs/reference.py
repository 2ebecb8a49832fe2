"""
API reference builder.

Signatures are written from the plan in the same ``name(param: type): ret``
shape the TypeScript emitter produces.
"""

from typing import List

from ..codegen.core.plan import MethodSpec, TypeSpec, categorize_error, category_label
from .context import DocumentationContext
from .markdown import code_block, join_sections, table


def method_signature(method: MethodSpec) -> str:
    params = []
    for param in method.parameters:
        optional = "?" if param.optional and param.default is None else ""
        text = f"{param.name}{optional}: {param.type}"
        if param.default is not None:
            text += f" = {param.default}"
        params.append(text)
    prefix = "async " if method.is_async else ""
    returns = f": {method.return_type}" if method.return_type else ""
    return f"{prefix}{method.name}({', '.join(params)}){returns}"


class ApiReferenceBuilder:
    """Builds API_REFERENCE.md: methods, then types, then errors."""

    def __init__(self, context: DocumentationContext):
        self.context = context

    def build(self) -> str:
        return join_sections(
            [
                self.build_methods(),
                self.build_types(),
                self.build_errors(),
            ]
        )

    def build_methods(self) -> str:
        if not self.context.methods:
            return "# API Reference\n\nNo methods documented."
        return join_sections(
            [
                f"# API Reference\n\nMethods of `{self.context.client_name}`.",
                join_sections(
                    self.build_method(m) for m in self.context.methods.values()
                ),
            ]
        )

    def build_method(self, method: MethodSpec) -> str:
        lines = [f"## {method.name}()"]
        if method.deprecated:
            lines.extend(["", "> **Deprecated.**"])
        if method.description:
            lines.extend(["", method.description])
        lines.extend(["", code_block(method_signature(method), "typescript")])

        if method.parameters:
            lines.extend(
                [
                    "",
                    "### Parameters",
                    "",
                    table(
                        ["Name", "Type", "Required", "Description"],
                        [
                            [
                                p.name,
                                f"`{p.type}`",
                                "no" if p.optional else "yes",
                                p.description or "",
                            ]
                            for p in method.parameters
                        ],
                    ),
                ]
            )

        if method.return_type:
            lines.extend(["", "### Returns", "", f"`{method.return_type}`"])

        if method.throws:
            lines.extend(["", "### Throws", ""])
            lines.extend(f"- `{name}`" for name in method.throws)

        if method.http_method or method.endpoint:
            parts = [method.http_method, method.endpoint]
            route = " ".join(part for part in parts if part)
            lines.extend(["", f"**Endpoint:** `{route}`"])

        return "\n".join(lines)

    def build_types(self) -> str:
        if not self.context.types:
            return ""
        sections: List[str] = ["## Types"]
        for type_spec in self.context.types.values():
            sections.append(self.build_type(type_spec))
        return join_sections(sections)

    def build_type(self, type_spec: TypeSpec) -> str:
        lines = [f"### {type_spec.name}"]
        if type_spec.description:
            lines.extend(["", type_spec.description])
        lines.append("")
        if type_spec.kind == "enum":
            rows = [[name, f"`{value}`"] for name, value in type_spec.enum_values]
            lines.append(table(["Member", "Value"], rows))
        else:
            lines.append(
                table(
                    ["Field", "Type", "Required", "Description"],
                    [
                        [
                            f.name,
                            f"`{f.type}`",
                            "no" if f.optional else "yes",
                            f.description or "",
                        ]
                        for f in type_spec.fields
                    ],
                )
            )
        return "\n".join(lines)

    def build_errors(self) -> str:
        if not self.context.errors:
            return ""
        rows = [
            [
                f"`{error.error_code}`",
                error.class_name,
                category_label(categorize_error(error.error_type)),
                error.description,
                "yes" if error.recoverable else "no",
            ]
            for error in self.context.errors.values()
        ]
        return "## Errors\n\n" + table(
            ["Code", "Class", "Category", "Description", "Recoverable"], rows
        )
