"""
loxscan - Lox Scanner Command-Line Interface
============================================

This module implements the command-line driver for the Lox scanner. It
reads Lox source, scans it, and prints the tokens one per line (or as
JSON). Lexical errors are printed to stderr.

Usage Examples
--------------
Scan a script:
    $ loxscan hello.lox

Scan standard input:
    $ echo 'print 1 + 2;' | loxscan -

Interactive prompt (one line at a time, Ctrl-D to quit):
    $ loxscan

JSON output for tooling:
    $ loxscan --format json hello.lox

Exit Codes
----------
0  - Success
2  - Invalid arguments or unreadable file
65 - The source contains lexical errors
70 - Internal error
"""

import json
import logging
import sys
from typing import List, Optional, TextIO

import click

from loxscan import __version__
from loxscan.cli.errors import ExitCode, handle_cli_exception
from loxscan.config import LOG_LEVELS, OUTPUT_FORMATS, ScanConfig
from loxscan.errors import Diagnostic, ErrorCollector, TooManyErrors
from loxscan.scanner import scan_tokens
from loxscan.tokens import Token


logger = logging.getLogger(__name__)


# =============================================================================
# Output Helpers
# =============================================================================

def setup_logging(config: ScanConfig, verbose: bool) -> None:
    """Configure logging based on verbosity and the configured level."""
    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_tokens(tokens: List[Token], output_format: str) -> str:
    """
    Render tokens for display.

    Args:
        tokens: Tokens to render
        output_format: "text" for one 'TYPE lexeme literal' line per token,
            "json" for a JSON array of token objects

    Returns:
        The rendered text (no trailing newline)
    """
    if output_format == "json":
        return json.dumps([token.to_dict() for token in tokens], indent=2)
    return "\n".join(str(token) for token in tokens)


def echo_diagnostics(diagnostics: List[Diagnostic]) -> None:
    """Print diagnostics to stderr, one per line."""
    for diagnostic in diagnostics:
        click.echo(str(diagnostic), err=True)


def run(source: str, config: ScanConfig) -> bool:
    """
    Scan one piece of source and print its tokens and errors.

    Args:
        source: Lox source code
        config: Active configuration

    Returns:
        True if the source scanned without errors
    """
    collector = ErrorCollector(max_errors=config.max_errors)

    try:
        result = scan_tokens(source, collector)
    except TooManyErrors as e:
        echo_diagnostics(collector.diagnostics)
        click.echo(e.message, err=True)
        return False

    click.echo(format_tokens(result.tokens, config.output_format))
    echo_diagnostics(result.diagnostics)

    if result.had_error:
        logger.info(f"{len(result.diagnostics)} lexical error(s)")
    return not result.had_error


def run_prompt(config: ScanConfig) -> None:
    """
    Interactive mode: scan each input line independently.

    Errors on one line are reported and then forgotten, so a typo does
    not end the session. End of input exits.
    """
    while True:
        click.echo(config.prompt, nl=False)
        line = sys.stdin.readline()
        if not line:
            click.echo()
            break
        run(line, config)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "script",
    required=False,
    type=click.File("r", encoding="utf-8"),
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Token output format (default: text, or $LOXSCAN_FORMAT)",
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=0),
    default=None,
    help="Stop after N errors, 0 for no limit (default: $LOXSCAN_MAX_ERRORS or 0)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: WARNING, or $LOXSCAN_LOG_LEVEL)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(
    script: Optional[TextIO],
    output_format: Optional[str],
    max_errors: Optional[int],
    log_level: Optional[str],
    verbose: bool,
) -> None:
    """
    Scan Lox source code into tokens.

    SCRIPT is a Lox source file, or '-' for standard input. Without
    SCRIPT an interactive prompt scans one line at a time.

    \b
    Examples:
        loxscan hello.lox               # One token per line
        loxscan --format json hello.lox # JSON array of tokens
        loxscan                         # Interactive prompt
    """
    config = ScanConfig.from_env()
    if output_format is not None:
        config.output_format = output_format.lower()
    if max_errors is not None:
        config.max_errors = max_errors
    if log_level is not None:
        config.log_level = log_level.upper()

    setup_logging(config, verbose)

    try:
        if script is None:
            run_prompt(config)
            return

        logger.debug(f"Reading {script.name}")
        source = script.read()

        if not run(source, config):
            sys.exit(ExitCode.SCAN_ERROR)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
