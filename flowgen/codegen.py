"""Render templates and write generated output.

Takes the context from context_builder and produces one `<Title>.js`
declaration file per definition plus `index.js`.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from functools import lru_cache
from pathlib import Path
from typing import Any

import click
import jinja2

from .errors import FormatterError, OutputWriteError

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
FORMATTER = "prettier"


@lru_cache(maxsize=1)
def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=False,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_type_file(type_context: dict[str, Any]) -> str:
    """Render one declaration file: imports, then the exported alias."""
    return _environment().get_template("definition.js.j2").render(**type_context)


def render_index(titles: list[str]) -> str:
    """Render the index that re-exports every generated type."""
    return _environment().get_template("index.js.j2").render(titles=titles)


def format_source(text: str, file_path: Path) -> str:
    """Run generated text through prettier.

    Prettier resolves its own configuration from `file_path`. When it is
    not installed the text is returned unchanged.
    """
    executable = shutil.which(FORMATTER)
    if executable is None:
        logger.warning("%s not found on PATH; writing unformatted output", FORMATTER)
        return text

    try:
        result = subprocess.run(
            [executable, "--stdin-filepath", str(file_path)],
            input=text,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise FormatterError(f"Failed to run {FORMATTER}: {e}", str(file_path)) from e

    if result.returncode != 0:
        raise FormatterError(result.stderr.strip() or f"{FORMATTER} failed", str(file_path))
    return result.stdout


def write_file(path: Path, text: str, title: str) -> None:
    """Write one generated file, naming the type on failure."""
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(path), title, str(e)) from e


def generate(
    context: dict[str, Any],
    destination: Path,
    *,
    format_output: bool = True,
) -> list[Path]:
    """Render every declaration file and the index into `destination`."""
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(str(destination), None, str(e)) from e

    written: list[Path] = []
    for type_context in context["types"]:
        path = destination / f"{type_context['title']}.js"
        output = render_type_file(type_context)
        if format_output:
            output = format_source(output, path)
        click.echo(f"Generated -> {path}")
        write_file(path, output, type_context["title"])
        written.append(path)

    index_path = destination / "index.js"
    write_file(index_path, render_index(context["titles"]), "index")
    written.append(index_path)

    click.echo("Generated flow types")
    return written
