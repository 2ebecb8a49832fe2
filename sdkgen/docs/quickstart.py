"""Quickstart guide builder."""

from typing import List

from .context import DocumentationContext
from .markdown import bullets, code_block, join_sections, numbered
from .snippets import SnippetRenderer

MAX_COMMON_TASKS = 3


class QuickstartBuilder:
    """Builds QUICKSTART.md: prerequisites, setup, first request, common tasks."""

    def __init__(self, context: DocumentationContext):
        self.context = context
        self.config = context.config
        self.snippets = SnippetRenderer(context)

    def build(self) -> str:
        return join_sections(
            [
                self.build_title(),
                self.build_prerequisites(),
                self.build_setup(),
                self.build_first_request(),
                self.build_common_tasks(),
                self.build_next_steps(),
            ]
        )

    def build_title(self) -> str:
        return "\n".join(
            [
                f"# {self.config.sdk_name} Quickstart",
                "",
                "Get up and running with the SDK in 5 minutes.",
            ]
        )

    def prerequisites(self) -> List[str]:
        items = []
        if self.snippets.runtime:
            items.append(self.snippets.runtime)
        items.extend(self.context.prerequisites)
        if self.config.uses_auth:
            items.append("Your API credentials")
        else:
            items.append("No setup required!")
        return items

    def build_prerequisites(self) -> str:
        return "## Prerequisites\n\n" + bullets(self.prerequisites())

    def build_setup(self) -> str:
        steps = []

        install = self.snippets.install_command()
        if install:
            steps.append(("Install the SDK", code_block(install, "bash")))

        export = self.snippets.export_credential()
        if export:
            steps.append(("Set Your Credentials", code_block(export, "bash")))

        if self.context.setup_steps:
            setup = numbered(list(self.context.setup_steps))
            steps.append(("Configure Your Project", setup))

        if not steps:
            return ""

        lines = ["## Installation & Setup"]
        for index, (title, body) in enumerate(steps, 1):
            lines.extend(["", f"### Step {index}: {title}", "", body])
        return "\n".join(lines)

    def build_first_request(self) -> str:
        method = self.context.first_method
        if method is None or not self.snippets.supported:
            return ""

        code = "\n".join(
            [
                self.snippets.import_statement(),
                "",
                self.snippets.client_construction(),
                "",
                self.snippets.method_call(method),
            ]
        )
        return "\n".join(
            [
                "## Your First Request",
                "",
                code_block(code, self.snippets.fence),
                "",
                f"Success! You just called `{self.snippets.method_name(method)}`.",
            ]
        )

    def build_common_tasks(self) -> str:
        if not self.snippets.supported:
            return ""
        methods = list(self.context.methods.values())[:MAX_COMMON_TASKS]
        if not methods:
            return ""

        lines = ["## Common Tasks"]
        for index, method in enumerate(methods, 1):
            title = f"### Example {index}: {self.snippets.method_name(method)}"
            lines.extend(["", title, ""])
            if method.description:
                lines.extend([method.description, ""])
            call = self.snippets.method_call(method)
            lines.append(code_block(call, self.snippets.fence))
        return "\n".join(lines)

    def build_next_steps(self) -> str:
        return "## Next Steps\n\n" + bullets(
            [
                "Read the [API reference](./API_REFERENCE.md)",
                "Set up [authentication](./AUTHENTICATION.md) if needed",
                "Browse [usage examples](./EXAMPLES.md)",
                "Learn about [error handling](./ERROR_HANDLING.md)",
            ]
        )
