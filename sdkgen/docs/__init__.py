"""
SDK documentation generation.

Builds README, quickstart, authentication, examples, error-handling and
API reference documents from the same design plan used for code.
"""

from .authentication import AuthenticationBuilder
from .context import (
    CodeExample,
    DocumentationConfig,
    DocumentationContext,
    ErrorDocumentation,
    build_context,
)
from .errors import ErrorHandlingBuilder
from .examples import ExamplesBuilder
from .generator import DocumentationGenerator, GeneratedDocumentation
from .quickstart import QuickstartBuilder
from .readme import ReadmeBuilder
from .reference import ApiReferenceBuilder
from .snippets import SnippetRenderer

__all__ = [
    "CodeExample",
    "DocumentationConfig",
    "DocumentationContext",
    "ErrorDocumentation",
    "build_context",
    "ReadmeBuilder",
    "QuickstartBuilder",
    "AuthenticationBuilder",
    "ExamplesBuilder",
    "ErrorHandlingBuilder",
    "ApiReferenceBuilder",
    "SnippetRenderer",
    "DocumentationGenerator",
    "GeneratedDocumentation",
]
