"""
jdent command line interface.

Re-indents each JSON document named on the command line (or standard input)
and writes it to standard output. A document that fails to parse is
reported on standard error and does not stop the remaining ones.
"""

import logging
import sys

import click

from jdent import DEFAULT_INDENT_WIDTH
from jdent import DEFAULT_MAX_DEPTH
from jdent import DocumentResult
from jdent import NumberMode
from jdent import __version__
from jdent import reformat_document

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

STDIN_OPERAND = "-"


def _process(operand: str, options: dict[str, object]) -> bool:
    """Reformats one operand; returns True on success."""
    result: DocumentResult
    if operand == STDIN_OPERAND:
        logger.debug("reading document from standard input")
        result = reformat_document(click.get_binary_stream("stdin"), **options)
    else:
        logger.debug("reading document from %s", operand)
        try:
            with open(operand, "rb") as fp:
                result = reformat_document(fp, **options)
        except OSError as e:
            click.echo(f"cannot open {operand}: {e.strerror}", err=True)
            return False

    if result.error is not None:
        logger.debug("%s: %s", operand, result.error)
        click.echo(f"invalid JSON: {result.error}", err=True)
        return False

    click.echo(result.text)
    return True


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-f",
    "--floats",
    is_flag=True,
    help="Parse numbers as floating point instead of exact decimals.",
)
@click.option(
    "--integers",
    is_flag=True,
    help="Parse numbers as integers; fractions and exponents are rejected.",
)
@click.option(
    "-i",
    "--indent-width",
    type=click.IntRange(min=0),
    default=DEFAULT_INDENT_WIDTH,
    show_default=True,
    help="Spaces per nesting level.",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_DEPTH,
    show_default=True,
    help="Deepest container nesting accepted.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Reject raw control characters inside strings.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
@click.argument("files", nargs=-1, type=click.Path(allow_dash=True))
@click.version_option(__version__, prog_name="jdent")
def main(
    floats: bool,
    integers: bool,
    indent_width: int,
    max_depth: int,
    strict: bool,
    verbose: bool,
    files: tuple[str, ...],
) -> None:
    """Re-indent JSON FILES ("-" for standard input) preserving field order."""
    if floats and integers:
        raise click.UsageError("--floats and --integers are mutually exclusive")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    if floats:
        number_mode = NumberMode.FLOAT
    elif integers:
        number_mode = NumberMode.INTEGER
    else:
        number_mode = NumberMode.EXACT

    options: dict[str, object] = {
        "number_mode": number_mode,
        "indent_width": indent_width,
        "max_depth": max_depth,
        "strict": strict,
    }

    failures = 0
    for operand in files or (STDIN_OPERAND,):
        if not _process(operand, options):
            failures += 1

    if failures:
        logger.debug("%d of %d documents failed", failures, len(files) or 1)
    sys.exit(1 if failures else 0)
