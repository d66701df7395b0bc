"""Command-line interface."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
import yaml

from docsnav import __version__
from docsnav.config import load_document, load_labels
from docsnav.generate import build_navigation, render_json, write_document
from docsnav.labels import DISPLAY_NAME_OVERRIDES
from docsnav.languages import resolve_languages, select_languages
from docsnav.names import merge_overrides


def _make_logger(
    quiet: bool, verbose: bool = False, stderr: bool = False
) -> tuple[Callable[..., None], Callable[..., None]]:
    """Create log and log_verbose functions for CLI output.

    Args:
        quiet: If True, suppress all output.
        verbose: If True, enable verbose logging (quiet overrides this).
        stderr: If True, send every message to stderr.

    Returns:
        Tuple of (log, log_verbose) functions.
    """
    effective_verbose = verbose and not quiet

    def log(msg: str, color: str = "green", err: bool = False) -> None:
        if not quiet:
            typer.secho(msg, fg=color, err=err or stderr)

    def log_verbose(msg: str, color: str = "green", err: bool = False) -> None:
        if effective_verbose:
            typer.secho(msg, fg=color, err=err or stderr)

    return log, log_verbose


def version_callback(value: bool) -> None:
    """Print version and exit if --version flag is set."""
    if value:
        typer.echo(f"docsnav-standalone {__version__}")
        raise typer.Exit()


app = typer.Typer(
    help="Generate docs.json navigation from a documentation content tree.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

DocsOption = Annotated[
    Path,
    typer.Option("--docs", "-d", help="Path to docs.json config file"),
]
ContentRootOption = Annotated[
    Path,
    typer.Option(
        "--content-root", "-r", help="Directory holding one folder per language"
    ),
]
LanguagesOption = Annotated[
    str | None,
    typer.Option(
        "--languages",
        "-l",
        help="Comma-separated language codes (defaults to docs.json, then folders)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Suppress output (exit code only)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show detailed progress"),
]


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Generate docs.json navigation from a documentation content tree."""


@app.command()
def build(
    docs: DocsOption = Path("docs.json"),
    content_root: ContentRootOption = Path("."),
    languages: LanguagesOption = None,
    labels: Annotated[
        Path | None,
        typer.Option("--labels", help="YAML file with extra display-name overrides"),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Print the generated languages instead of writing docs.json",
        ),
    ] = False,
    quiet: QuietOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Rebuild navigation.languages in docs.json from the content tree."""
    # Keep stdout for the JSON preview
    log, log_verbose = _make_logger(quiet, verbose, stderr=dry_run)

    if not content_root.is_dir():
        log(
            f"Error: Content root not found: {content_root}", color="red", err=True
        )
        raise typer.Exit(1)

    try:
        document = load_document(docs)
    except (FileNotFoundError, ValueError) as e:
        log(f"Error loading config: {e}", color="red", err=True)
        raise typer.Exit(1) from None

    overrides = DISPLAY_NAME_OVERRIDES
    if labels is not None:
        try:
            overrides = merge_overrides(DISPLAY_NAME_OVERRIDES, load_labels(labels))
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            log(f"Error loading labels: {e}", color="red", err=True)
            raise typer.Exit(1) from None

    try:
        result = build_navigation(
            document, content_root, languages=languages, overrides=overrides
        )
    except OSError as exc:
        log(f"Error scanning content: {exc}", color="red", err=True)
        raise typer.Exit(1) from None

    for node in result.nodes:
        log_verbose(
            f"{node.language}: {len(node.products)} products, "
            f"{node.page_count} pages"
        )
    for language, reason in result.skipped:
        log_verbose(f"Skipped language {language!r} ({reason})", color="yellow")

    if not result.nodes:
        log("Warning: No languages found to build.", color="yellow", err=True)
        log(
            f"Hint: Create one folder per language under {content_root}, "
            "or pass --languages.",
            color="yellow",
            err=True,
        )

    if dry_run:
        typer.echo(render_json(result.languages), nl=False)
        return

    try:
        write_document(docs, result.document)
    except OSError as exc:
        log(f"Error writing config: {exc}", color="red", err=True)
        raise typer.Exit(1) from None

    log(
        f"Updated {docs} ({len(result.nodes)} languages, {result.page_count} pages)"
    )


@app.command()
def validate(
    docs: DocsOption = Path("docs.json"),
    content_root: ContentRootOption = Path("."),
    languages: LanguagesOption = None,
    quiet: QuietOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Check docs.json and show which languages would be built."""
    log, log_verbose = _make_logger(quiet, verbose)

    try:
        document = load_document(docs)
    except FileNotFoundError:
        log(f"Config invalid: {docs}", color="red", err=True)
        log(f"  Error: File not found: {docs}", color="red", err=True)
        raise typer.Exit(1) from None
    except ValueError as e:
        log(f"Config invalid: {docs}", color="red", err=True)
        log(f"  Error: {e}", color="red", err=True)
        raise typer.Exit(1) from None

    try:
        candidates = resolve_languages(document, content_root, languages)
    except OSError as exc:
        log(f"Error reading content root: {exc}", color="red", err=True)
        raise typer.Exit(1) from None
    selection = select_languages(candidates, content_root)

    log(f"Config valid: {docs}")
    log(f"  Languages: {', '.join(selection.selected) or '(none)'}")
    log(f"  Skipped: {len(selection.skipped)}")

    for language, reason in selection.skipped:
        log_verbose(f"    - {language!r} ({reason})", color="yellow")


if __name__ == "__main__":
    app()
