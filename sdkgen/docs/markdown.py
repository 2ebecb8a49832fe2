"""Small Markdown helpers shared by the section builders."""

from typing import Iterable, List, Sequence


def join_sections(sections: Iterable[str]) -> str:
    """Join non-empty sections with one blank line between them."""
    return "\n\n".join(section for section in sections if section)


def code_block(code: str, language: str = "") -> str:
    return f"```{language}\n{code}\n```"


def bullets(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def numbered(items: Sequence[str]) -> str:
    return "\n".join(f"{index}. {item}" for index, item in enumerate(items, 1))


def table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a pipe table; pipes inside cells are escaped."""
    lines: List[str] = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("------" for _ in headers) + "|",
    ]
    for row in rows:
        cells = [str(cell).replace("|", "\\|") for cell in row]
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)


def anchor(title: str) -> str:
    """GitHub-style in-page anchor for a heading."""
    slug = "".join(ch for ch in title.lower() if ch.isalnum() or ch in " -")
    return "#" + slug.strip().replace(" ", "-")
