"""Entry point: flowgen SOURCE / python -m flowgen SOURCE

Reads an OpenAPI document (file or URL), writes one Flow declaration
file per schema definition plus index.js.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from .codegen import generate
from .context_builder import build_context, build_definitions
from .errors import GeneratorError
from .loader import DEFAULT_TIMEOUT, is_url, load_document
from .schema_parser import GeneratorOptions

URL_DESTINATION = Path("flowtype.js")


def default_destination(source: str) -> Path:
    """Output directory used when --destination is not given."""
    if is_url(source):
        return URL_DESTINATION
    return Path(source).with_suffix(".js")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("source")
@click.option(
    "-d",
    "--destination",
    type=click.Path(path_type=Path),
    help="Destination directory for the generated files",
)
@click.option(
    "-cr",
    "--check-required",
    is_flag=True,
    default=False,
    help="Add question mark to optional properties",
)
@click.option("-e", "--exact", is_flag=True, default=False, help="Add exact types")
@click.option(
    "--format/--no-format",
    "format_output",
    default=True,
    show_default=True,
    help="Run generated files through prettier",
)
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Seconds to wait when fetching a document over HTTP",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(
    source: str,
    destination: Path | None,
    check_required: bool,
    exact: bool,
    format_output: bool,
    timeout: float,
    verbose: bool,
) -> None:
    """Generate Flow types from the OpenAPI document at SOURCE."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = GeneratorOptions(check_required=check_required, exact=exact)

    document = load_document(source, timeout=timeout)
    definitions = build_definitions(document, options, source)
    context = build_context(definitions, options)
    generate(context, destination or default_destination(source), format_output=format_output)


def main(argv: list[str] | None = None) -> int:
    """Console script entry point; returns the process exit code."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="flowgen", standalone_mode=False)
    except GeneratorError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
