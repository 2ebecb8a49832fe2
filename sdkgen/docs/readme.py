"""
README builder.

Header, quick links, features, installation, quick start, documentation
links, support and license. Links only ever point at sections or
companion documents that were actually produced.
"""

from typing import Collection, Dict, List, Optional, Tuple

from .context import DocumentationContext
from .markdown import anchor, bullets, code_block, join_sections
from .snippets import SnippetRenderer

# Companion documents: key -> (title, relative path, blurb)
COMPANION_DOCS: Dict[str, Tuple[str, str, str]] = {
    "quickstart": (
        "Quickstart Guide",
        "docs/QUICKSTART.md",
        "Get up and running in 5 minutes",
    ),
    "authentication": (
        "Authentication Guide",
        "docs/AUTHENTICATION.md",
        "Set up your API credentials or wallet",
    ),
    "examples": ("Usage Examples", "docs/EXAMPLES.md", "Common use cases with code"),
    "error_handling": (
        "Error Handling",
        "docs/ERROR_HANDLING.md",
        "Understanding error codes and recovery",
    ),
    "api_reference": (
        "API Reference",
        "docs/API_REFERENCE.md",
        "Complete method reference",
    ),
}

INSTALLATION_TITLE = "Installation"
QUICK_START_TITLE = "Quick Start"


class ReadmeBuilder:
    """Builds README.md for one documentation context."""

    def __init__(self, context: DocumentationContext):
        self.context = context
        self.config = context.config
        self.snippets = SnippetRenderer(context)

    def build(self, produced: Optional[Collection[str]] = None) -> str:
        """
        Render the README.

        Args:
            produced: Keys of ``COMPANION_DOCS`` that were generated with
                non-empty content; only those are linked
        """
        produced = [key for key in COMPANION_DOCS if key in set(produced or ())]

        installation = self.build_installation()
        quick_start = self.build_quick_start()

        return join_sections(
            [
                self.build_header(),
                self.build_quick_links(installation, quick_start, produced),
                self.build_features(),
                installation,
                quick_start,
                self.build_documentation_links(produced),
                self.build_support(),
                self.build_license(),
            ]
        )

    def build_header(self) -> str:
        lines = [f"# {self.config.sdk_name}"]
        if self.config.description:
            lines.extend(["", self.config.description])
        lines.extend(["", f"**Version:** {self.config.sdk_version}"])
        return "\n".join(lines)

    def build_quick_links(
        self, installation: str, quick_start: str, produced: List[str]
    ) -> str:
        links = []
        if installation:
            links.append(f"[{INSTALLATION_TITLE}]({anchor(INSTALLATION_TITLE)})")
        if quick_start:
            links.append(f"[{QUICK_START_TITLE}]({anchor(QUICK_START_TITLE)})")
        for key in produced:
            title, path, _ = COMPANION_DOCS[key]
            links.append(f"[{title}](./{path})")
        if self.config.repository_url:
            links.append(f"[GitHub]({self.config.repository_url})")
        if self.config.docs_base_url:
            links.append(f"[Full Documentation]({self.config.docs_base_url})")

        if not links:
            return ""
        return "## Quick Links\n\n" + bullets(links)

    def features(self) -> List[str]:
        features = ["Comprehensive API coverage"]
        method_count = len(self.context.methods)
        if method_count:
            noun = "method" if method_count == 1 else "methods"
            features.append(f"{method_count} well-documented {noun}")
        type_count = len(self.context.types)
        if type_count:
            noun = "type" if type_count == 1 else "types"
            features.append(f"{type_count} typed data {noun}")
        if self.config.uses_auth:
            features.append("Secure authentication support")
        if self.context.errors:
            features.append("Typed error hierarchy with error codes")
        else:
            features.append("Comprehensive error handling")
        return features

    def build_features(self) -> str:
        return "## Features\n\n" + bullets(self.features())

    def build_installation(self) -> str:
        install = self.snippets.install_command()
        if not install:
            return ""
        return "\n".join(
            [
                f"## {INSTALLATION_TITLE}",
                "",
                "### Using Package Manager",
                "",
                code_block(install, "bash"),
                "",
                "### From Source",
                "",
                code_block(
                    "\n".join(
                        [
                            "git clone "
                            + (self.config.repository_url or "<repository-url>"),
                            f"cd {self.config.sdk_name}",
                            self.snippets.source_install_command(),
                        ]
                    ),
                    "bash",
                ),
            ]
        )

    def build_quick_start(self) -> str:
        if not self.snippets.supported:
            return ""
        fence = self.snippets.fence
        lines = [
            f"## {QUICK_START_TITLE}",
            "",
            "### 1. Import the SDK",
            "",
            code_block(self.snippets.import_statement(), fence),
            "",
            "### 2. Create a Client",
            "",
            code_block(self.snippets.client_construction(), fence),
        ]

        method = self.context.first_method
        if method is not None:
            lines.extend(
                [
                    "",
                    "### 3. Make Your First Call",
                    "",
                    code_block(self.snippets.method_call(method), fence),
                ]
            )
        return "\n".join(lines)

    def build_documentation_links(self, produced: List[str]) -> str:
        if not produced:
            return ""
        entries = []
        for key in produced:
            title, path, blurb = COMPANION_DOCS[key]
            entries.append(f"**[{title}](./{path})** - {blurb}")
        return "## Documentation\n\n" + bullets(entries)

    def build_support(self) -> str:
        lines = ["## Support", ""]
        if self.config.repository_url:
            issues = f"{self.config.repository_url}/issues"
            lines.append(f"**GitHub Issues:** [Report bugs]({issues})")
        if self.config.docs_base_url:
            docs_url = self.config.docs_base_url
            lines.append(f"**Documentation:** [{docs_url}]({docs_url})")
        if len(lines) == 2:
            lines.append("Open an issue with the SDK maintainers for help.")
        return "\n".join(lines)

    def build_license(self) -> str:
        return "\n".join(
            [
                "## License",
                "",
                "This SDK is licensed under the MIT License - "
                "see LICENSE file for details.",
            ]
        )
