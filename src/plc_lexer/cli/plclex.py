"""
plclex - Lexer Command-Line Interface
=====================================

This module implements the command-line interface for the lexer. It reads
a source file (or stdin), lexes it, and prints the resulting tokens.

Usage Examples
--------------
Lex a file:
    $ plclex program.plc

Lex from stdin:
    $ echo 'let x = 1;' | plclex

JSON output for other tools:
    $ plclex --json program.plc

Include line and column for each token:
    $ plclex --locations program.plc
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from plc_lexer import __version__
from plc_lexer.cli.errors import handle_cli_exception
from plc_lexer.config import OUTPUT_FORMATS, LexConfig
from plc_lexer.diagnostics import locate
from plc_lexer.lexer import Lexer
from plc_lexer.tokens import Token

logger = logging.getLogger(__name__)


# =============================================================================
# Output Formatting
# =============================================================================

def format_tokens_text(
    tokens: list[Token],
    source: str,
    filename: str,
    show_locations: bool = False,
) -> str:
    """Format tokens as one aligned line each: INDEX TYPE LITERAL."""
    lines = []
    for token in tokens:
        prefix = f"{token.index:>6}"
        if show_locations:
            location = locate(source, token.index, filename)
            prefix += f"  {location.line}:{location.column:<4}"
        lines.append(f"{prefix}  {token.type.name:<10}  {token.literal!r}")
    return "\n".join(lines)


def format_tokens_json(
    tokens: list[Token],
    source: str,
    filename: str,
    show_locations: bool = False,
) -> str:
    """Format tokens as a JSON array of objects."""
    entries = []
    for token in tokens:
        entry = token.to_dict()
        if show_locations:
            location = locate(source, token.index, filename)
            entry["line"] = location.line
            entry["column"] = location.column
        entries.append(entry)
    return json.dumps(entries, indent=2)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (default: text, or $PLCLEX_FORMAT)",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Shorthand for --format json",
)
@click.option(
    "--locations",
    is_flag=True,
    help="Show line:column for each token",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="plclex")
def main(
    input_file: Optional[Path],
    output_format: Optional[str],
    as_json: bool,
    locations: bool,
    verbose: bool,
) -> None:
    """
    Lex source code and print its tokens.

    INPUT_FILE is the source file to lex. Reads stdin when omitted or '-'.

    \b
    Examples:
        plclex program.plc              # One token per line
        plclex --json program.plc       # JSON array
        plclex --locations program.plc  # Include line:column
        echo 'x == 1' | plclex          # Lex from stdin

    Exit status is 1 when the source contains a lexical error; the
    diagnostic is printed to stderr with the offending position marked.
    """
    # Environment first, then explicit options
    config = LexConfig.from_env()
    if output_format is not None:
        config.output_format = output_format.lower()
    if as_json:
        config.output_format = "json"
    if locations:
        config.show_locations = True
    if verbose:
        config.verbose = True

    setup_logging(config.verbose)

    if input_file is None or str(input_file) == "-":
        filename = "<stdin>"
    else:
        filename = str(input_file)

    source = None
    try:
        # Keep line endings as-is so indices are offsets into the raw input
        if filename == "<stdin>":
            source = click.get_binary_stream("stdin").read().decode("utf-8")
        else:
            with input_file.open(encoding="utf-8", newline="") as f:
                source = f.read()

        logger.debug(f"Lexing {filename}")
        tokens = Lexer(source).lex()

        if config.output_format == "json":
            output = format_tokens_json(tokens, source, filename, config.show_locations)
        else:
            output = format_tokens_text(tokens, source, filename, config.show_locations)

        if output:
            click.echo(output)

        if config.verbose:
            click.echo(f"{len(tokens)} tokens", err=True)

    except Exception as e:
        handle_cli_exception(e, source=source, filename=filename, verbose=config.verbose)


if __name__ == "__main__":
    main()
