"""
Command-line interface for SDK generation.

Loads a design plan, emits the client source and optionally writes the
documentation set next to it.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import generate_for_plan
from .codegen.core.config import ConfigError
from .codegen.core.generator import GenerationResult
from .codegen.registry import RegistryError, get_language_info, list_supported_languages
from .docs import DocumentationConfig, DocumentationGenerator, build_context
from .logging_config import configure_logging, get_logger
from .utils import PlanLoaderError, load_design_plan

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdkgen",
        description="Generate a client SDK and its documentation from a design plan.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  sdkgen plan.json                       Print the generated client
  sdkgen plan.json -o src/client.ts      Write the client to a file
  sdkgen plan.json --docs ./sdk          Also write README.md and docs/*.md
  sdkgen --list-languages                Show available target languages
""",
    )
    parser.add_argument("plan", nargs="?", metavar="PLAN", help="Design plan JSON file")
    parser.add_argument(
        "--language",
        "-l",
        metavar="LANGUAGE",
        help="Target language (default: the plan's target language)",
    )
    parser.add_argument(
        "--config", metavar="FILE", help="JSON emitter configuration file"
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )
    parser.add_argument(
        "--docs",
        metavar="DIR",
        help="Write README.md and companion documents into this directory",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata and debug logging",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _list_languages() -> int:
    table = Table(
        title="🌐 Supported Languages",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Language", style="bold")
    table.add_column("Extension", style="green")
    table.add_column("Aliases")

    for language in list_supported_languages():
        info = get_language_info(language)
        table.add_row(info["name"], info["file_extension"], ", ".join(info["aliases"]))

    console.print(table)
    return 0


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise CLIError(f"Failed to write {path}: {e}") from e


def _output_code(
    result: GenerationResult, language: str, output: Optional[str]
) -> None:
    if output:
        output_path = Path(output)
        _write_text(output_path, result.code)
        console.print(
            f"[green]✓[/green] Generated {language} code saved to "
            f"[cyan]{output_path}[/cyan]"
        )
        return

    border = "═" * 30
    title = f"📄 Generated {language.title()} Code"
    console.print(f"[green]{border} {title} {border}[/green]\n")
    console.print(Syntax(result.code, language, theme="monokai"))
    console.print(f"\n[green]{border * 3}[/green]")


def _print_metadata(result: GenerationResult) -> None:
    table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Property", style="bold")
    table.add_column("Value", style="green")
    for key, value in result.metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value))
    console.print()
    console.print(table)


def _print_warnings(warnings: List[str]) -> None:
    if not warnings:
        return
    console.print("\n[yellow]⚠️  Warnings:[/yellow]")
    for warning in warnings:
        console.print(f"  [yellow]•[/yellow] {warning}")
    console.print()


def _write_docs(plan, language: str, docs_dir: str) -> List[str]:
    """Generate the documentation set and write it below ``docs_dir``."""
    config = DocumentationConfig.from_plan(plan, language=language)
    context = build_context(config, plan)
    documentation = DocumentationGenerator(context).generate_all()

    root = Path(docs_dir)
    for relative_path, text in documentation.files().items():
        path = root / relative_path
        _write_text(path, text + "\n")
        console.print(f"[green]✓[/green] Wrote [cyan]{path}[/cyan]")
    return list(context.warnings)


def run(args: argparse.Namespace) -> int:
    if args.list_languages:
        return _list_languages()

    if not args.plan:
        raise CLIError("A design plan file is required (see --help)")

    plan = load_design_plan(args.plan)
    language = (args.language or plan.configuration.target_language).lower()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"[green]Generating {language} code...", total=None)
        result = generate_for_plan(plan, language, args.config)
        progress.remove_task(task)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            logger.debug("Generation failure", exc_info=result.exception)
        return 1

    _output_code(result, language, args.output)

    warnings = list(result.warnings)
    if args.docs:
        warnings.extend(_write_docs(plan, language, args.docs))

    if args.verbose and result.metadata:
        _print_metadata(result)
    _print_warnings(warnings)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    try:
        return run(args)
    except (CLIError, PlanLoaderError, RegistryError, ConfigError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        return 130


if __name__ == "__main__":
    sys.exit(main())
