"""
Top-level documentation generator.

Runs every section builder against one context and drops the documents
whose builder produced nothing.
"""

from dataclasses import asdict, dataclass
from typing import Dict

from ..logging_config import get_logger
from .authentication import AuthenticationBuilder
from .context import DocumentationContext
from .errors import ErrorHandlingBuilder
from .examples import ExamplesBuilder
from .markdown import join_sections
from .quickstart import QuickstartBuilder
from .readme import COMPANION_DOCS, ReadmeBuilder
from .reference import ApiReferenceBuilder

logger = get_logger(__name__)

README_PATH = "README.md"


@dataclass(frozen=True)
class GeneratedDocumentation:
    """The six documentation texts of one run; empty strings were not produced."""

    readme: str
    quickstart: str
    authentication: str
    examples: str
    error_handling: str
    api_reference: str

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)

    def files(self) -> Dict[str, str]:
        """Relative output path -> content, for every non-empty document."""
        paths = {"readme": README_PATH}
        for key, (_title, path, _blurb) in COMPANION_DOCS.items():
            paths[key] = path
        return {paths[key]: text for key, text in self.as_dict().items() if text}

    def combined(self) -> str:
        """All non-empty documents joined with blank lines."""
        return join_sections(self.as_dict().values())


class DocumentationGenerator:
    """Generates all documentation for one context."""

    def __init__(self, context: DocumentationContext):
        self.context = context

    def generate_readme(self, produced=None) -> str:
        return ReadmeBuilder(self.context).build(produced)

    def generate_quickstart(self) -> str:
        return QuickstartBuilder(self.context).build()

    def generate_authentication(self) -> str:
        return AuthenticationBuilder(self.context).build()

    def generate_examples(self) -> str:
        return ExamplesBuilder(self.context).build()

    def generate_error_handling(self) -> str:
        return ErrorHandlingBuilder(self.context).build()

    def generate_api_reference(self) -> str:
        return ApiReferenceBuilder(self.context).build()

    def generate_all(self) -> GeneratedDocumentation:
        """Generate companion documents first so the README links only what exists."""
        companions = {
            "quickstart": self.generate_quickstart(),
            "authentication": self.generate_authentication(),
            "examples": self.generate_examples(),
            "error_handling": self.generate_error_handling(),
            "api_reference": self.generate_api_reference(),
        }
        produced = [key for key, text in companions.items() if text]
        readme = self.generate_readme(produced)

        logger.debug(
            "Generated documentation: readme + %s",
            ", ".join(produced) or "nothing else",
        )
        return GeneratedDocumentation(readme=readme, **companions)
