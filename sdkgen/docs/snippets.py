"""
Language-specific code snippets for documentation.

Snippets are Jinja2 templates keyed by target language. Method and
parameter names come from the design plan verbatim, exactly as the
emitted client declares them; only the call syntax differs per language.
"""

import re
from typing import Any, Dict, List, Optional

from ..codegen.core.plan import CREDENTIALS, MethodSpec
from ..codegen.core.templates import TemplateEngine
from ..logging_config import get_logger
from .context import DocumentationContext

logger = get_logger(__name__)


LANGUAGE_ALIASES = {
    "ts": "typescript",
    "js": "javascript",
    "py": "python",
    "golang": "go",
}

EXPORT_CREDENTIAL = 'export {{ credential.env }}="your-{{ credential.slug }}-here"'

SNIPPET_TEMPLATES: Dict[str, Dict[str, str]] = {
    "typescript": {
        "install": "npm install {{ package }}",
        "source_install": "npm install\nnpm run build",
        "import": "import { {{ client }}, createDefaultConfig } from '{{ package }}';",
        "construct": (
            "const client = new {{ client }}(createDefaultConfig("
            "{% if credential %}process.env.{{ credential.env }}{% endif %}));"
        ),
        "call": (
            "const result = {% if is_async %}await {% endif %}"
            "client.{{ method }}({{ args | join(', ') }});\n"
            "console.log(result);"
        ),
        "export_credential": EXPORT_CREDENTIAL,
    },
    "javascript": {
        "install": "npm install {{ package }}",
        "source_install": "npm install",
        "import": (
            "const { {{ client }}, createDefaultConfig } "
            "= require('{{ package }}');"
        ),
        "construct": (
            "const client = new {{ client }}(createDefaultConfig("
            "{% if credential %}process.env.{{ credential.env }}{% endif %}));"
        ),
        "call": (
            "const result = {% if is_async %}await {% endif %}"
            "client.{{ method }}({{ args | join(', ') }});\n"
            "console.log(result);"
        ),
        "export_credential": EXPORT_CREDENTIAL,
    },
    "python": {
        "install": "pip install {{ package }}",
        "source_install": "pip install -e .",
        "import": (
            "{% if credential %}import os\n\n{% endif %}"
            "from {{ package | snake_case }} import {{ client }}, create_default_config"
        ),
        "construct": (
            "client = {{ client }}(create_default_config("
            "{% if credential %}os.environ[\"{{ credential.env }}\"]{% endif %}))"
        ),
        "call": (
            "result = {% if is_async %}await {% endif %}"
            "client.{{ method }}({{ args | join(', ') }})\n"
            "print(result)"
        ),
        "export_credential": EXPORT_CREDENTIAL,
    },
    "go": {
        "install": "go get {{ module }}",
        "source_install": "go build ./...",
        "import": 'import {{ ident }} "{{ module }}"',
        "construct": (
            "client := {{ ident }}.New{{ client }}({{ ident }}.DefaultConfig("
            "{% if credential %}os.Getenv(\"{{ credential.env }}\"){% endif %}))"
        ),
        "call": (
            "result, err := client.{{ method }}(ctx"
            "{% for arg in args %}, {{ arg }}{% endfor %})\n"
            "if err != nil {\n"
            "\tlog.Fatal(err)\n"
            "}\n"
            "fmt.Println(result)"
        ),
        "export_credential": EXPORT_CREDENTIAL,
    },
}

# Runtime requirement per language, shown as a prerequisite
RUNTIMES = {
    "typescript": "Node.js 18+ and TypeScript 5+",
    "javascript": "Node.js 18+",
    "python": "Python 3.8+",
    "go": "Go 1.21+",
}

_default_engine: Optional[TemplateEngine] = None


def get_snippet_engine() -> TemplateEngine:
    """Template engine preloaded with every snippet template."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
        for language, templates in SNIPPET_TEMPLATES.items():
            for name, content in templates.items():
                _default_engine.add_template(f"{language}/{name}", content)
    return _default_engine


def resolve_language(language: str) -> str:
    language = (language or "").lower()
    return LANGUAGE_ALIASES.get(language, language)


class SnippetRenderer:
    """Renders snippets for the context's target language."""

    def __init__(self, context: DocumentationContext):
        self.context = context
        self.language = resolve_language(context.config.language)
        self._engine = get_snippet_engine()

    @property
    def supported(self) -> bool:
        return self.language in SNIPPET_TEMPLATES

    @property
    def fence(self) -> str:
        return self.language if self.supported else ""

    @property
    def runtime(self) -> Optional[str]:
        return RUNTIMES.get(self.language)

    # Plan names

    def method_name(self, method: MethodSpec) -> str:
        """The plan method name, unchanged for every target language."""
        return method.name

    def argument_names(self, method: MethodSpec) -> List[str]:
        """Plan parameter names up to the last required one."""
        last_required = 0
        for index, param in enumerate(method.parameters):
            if not param.optional:
                last_required = index + 1
        return [p.name for p in method.parameters[:last_required]]

    # Rendering

    def _variables(self) -> Dict[str, Any]:
        config = self.context.config
        credential = None
        stored = CREDENTIALS.get(config.auth_method) if config.uses_auth else None
        if stored is not None:
            credential = {
                "name": stored[0],
                "env": stored[2],
                "slug": stored[2].lower().replace("_", "-"),
            }

        module = config.repository_url or f"github.com/example/{config.sdk_name}"
        module = re.sub(r"^https?://", "", module).rstrip("/")

        return {
            "package": config.sdk_name,
            "client": self.context.client_name,
            "credential": credential,
            "module": module,
            "ident": re.sub(r"[^a-z0-9]", "", module.rsplit("/", 1)[-1].lower())
            or "sdk",
        }

    def render(self, name: str, **extra: Any) -> str:
        """Render one snippet, or "" when the language has no templates."""
        if not self.supported:
            logger.debug("No %s snippet for language %s", name, self.language)
            return ""
        variables = self._variables()
        variables.update(extra)
        return self._engine.render_template(f"{self.language}/{name}", variables)

    def install_command(self) -> str:
        return self.render("install")

    def source_install_command(self) -> str:
        return self.render("source_install")

    def import_statement(self) -> str:
        return self.render("import")

    def client_construction(self) -> str:
        return self.render("construct")

    def export_credential(self) -> str:
        if not self._variables()["credential"]:
            return ""
        return self.render("export_credential")

    def method_call(self, method: MethodSpec) -> str:
        return self.render(
            "call",
            method=self.method_name(method),
            args=self.argument_names(method),
            is_async=method.is_async,
        )
