"""
Naming utilities for derived identifiers.

Names that come straight from a design plan (method and parameter names)
are used verbatim. Names the generator derives itself (error classes
from error codes, enum members from categories, package module names in
snippets) go through the helpers here.
"""

import re
from typing import List


def _words(name: str) -> List[str]:
    """Split an identifier into lowercase words on separators and case humps."""
    name = re.sub(r"[^a-zA-Z0-9]+", " ", name)
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", name)
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1 \2", name)
    return [word.lower() for word in name.split()]


def to_snake_case(name: str) -> str:
    return "_".join(_words(name))


def to_pascal_case(name: str) -> str:
    return "".join(word.capitalize() for word in _words(name))
