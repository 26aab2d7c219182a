"""CLI entry point for sharpliner-task-codegen."""

import logging
from pathlib import Path

import click

from sharpliner_task_codegen.config import DEFAULT_BASE_CLASS, DEFAULT_TIMEOUT
from sharpliner_task_codegen.fetcher import FetchError, PageFetcher
from sharpliner_task_codegen.generator.csharp import CSharpGenerator
from sharpliner_task_codegen.generator.validator import validate_identifiers
from sharpliner_task_codegen.parser.base import TaskDescriptor
from sharpliner_task_codegen.parser.detect import detect_source
from sharpliner_task_codegen.parser.snippet import locate_snippet
from sharpliner_task_codegen.parser.structure import parse_snippet

logger = logging.getLogger(__name__)

FORMATS = ["auto", "url", "html", "snippet"]


def _validate_source(ctx, param, value: str) -> str:
    """SOURCE is a URL or an existing file."""
    if value.startswith(("http://", "https://")):
        return value
    if not Path(value).is_file():
        raise click.BadParameter(f"'{value}' is not a URL or an existing file.")
    return value


def _read_snippet(source: str, fmt: str, timeout: float) -> str:
    """Fetch or read the source and return the raw snippet text ('' if none found)."""
    if fmt == "auto":
        fmt = detect_source(source)

    if fmt == "url":
        click.echo(f"// Fetching documentation from: {source}", err=True)
        html = PageFetcher(timeout=timeout).fetch(source)
    else:
        text = Path(source).read_text(encoding="utf-8")
        if fmt == "snippet":
            return text
        html = text

    click.echo("// Extracting YAML snippet text...", err=True)
    return locate_snippet(html)


def _load_task(source: str, fmt: str, timeout: float) -> TaskDescriptor | None:
    """Run fetch -> locate -> parse. Returns None when no snippet was found."""
    try:
        snippet = _read_snippet(source, fmt, timeout)
    except FetchError as e:
        raise click.ClickException(str(e)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Cannot read {source}: {e}") from e

    if not snippet:
        logger.warning("Could not find or extract YAML snippet.")
        return None

    click.echo("// Parsing YAML snippet line by line...", err=True)
    task = parse_snippet(snippet)
    if not task.parameters:
        logger.warning("No input parameters parsed from the snippet.")
    return task


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug diagnostics.")
def main(verbose: bool):
    """Sharpliner Task Codegen — generate C# task models from Azure Pipelines docs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


@main.command()
@click.argument("source", callback=_validate_source)
@click.option("--format", "fmt", default="auto", type=click.Choice(FORMATS), help="Source kind.")
@click.option("-b", "--base-class", default=DEFAULT_BASE_CLASS, envvar="SHARPLINER_BASE_CLASS", show_default=True, help="Base class of the generated record.")
@click.option("-c", "--class-name", default=None, help="Generated class name (default: <TaskName>Task).")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the C# file here instead of stdout.")
@click.option("--timeout", default=DEFAULT_TIMEOUT, envvar="SHARPLINER_FETCH_TIMEOUT", type=float, show_default=True, help="Fetch timeout in seconds.")
def generate(source: str, fmt: str, base_class: str, class_name: str | None, output: Path | None, timeout: float):
    """Generate a C# task class from a documentation URL, HTML page or snippet file."""
    task = _load_task(source, fmt, timeout)
    if task is None:
        return

    for location, error in validate_identifiers(task, class_name).items():
        logger.warning("Invalid C# identifier (%s): %s", location, error)

    click.echo("// Generating C# code...", err=True)
    code = CSharpGenerator(base_class=base_class).generate(task, class_name=class_name)

    if output is None:
        click.echo(code)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(code, encoding="utf-8")
    click.echo(f"C# code saved to {output}", err=True)


@main.command()
@click.argument("source", callback=_validate_source)
@click.option("--format", "fmt", default="auto", type=click.Choice(FORMATS), help="Source kind.")
@click.option("--timeout", default=DEFAULT_TIMEOUT, envvar="SHARPLINER_FETCH_TIMEOUT", type=float, show_default=True, help="Fetch timeout in seconds.")
def parse(source: str, fmt: str, timeout: float):
    """Print the parsed task model as JSON."""
    task = _load_task(source, fmt, timeout)
    if task is None:
        return
    click.echo(task.model_dump_json(indent=2))
