"""
ihex - Intel HEX Command-Line Interface
=======================================

This module implements the command-line interface for the Intel HEX codec.
It provides tools for inspecting, validating and converting .hex files.

Commands
--------
- **info**: Show a summary of a file and its first records
- **validate**: Check every record of a file
- **format**: Rewrite a file in canonical upper-case form
- **tobin**: Write the binary record dump of a file

Usage Examples
--------------
Show file information:
    $ ihex info firmware.hex
    $ ihex info -n 20 firmware.hex

Validate a file:
    $ ihex validate firmware.hex

Normalize a file:
    $ ihex format firmware.hex -o clean.hex

Dump records as binary:
    $ ihex tobin firmware.hex -o firmware.bin
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ihexkit import __version__
from ihexkit.config import CodecConfig, get_default_config
from ihexkit.errors import IntelHexError
from ihexkit.hexfile import HexDocument, format_document_info
from ihexkit.cli.errors import ExitCode, handle_cli_exception

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Context
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Holds the configuration, with command-line options applied on top of
    the environment defaults.
    """

    def __init__(self) -> None:
        defaults = get_default_config()
        self.config = CodecConfig(
            encoding=defaults.encoding,
            info_records=defaults.info_records,
            verbose=defaults.verbose,
        )

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.config.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.config.verbose else "%(message)s",
        )

    def load(self, path: Path) -> HexDocument:
        """Load a document using the configured encoding."""
        logger.debug(f"Loading {path} ({self.config.encoding})")
        document = HexDocument.load_file(path, encoding=self.config.encoding)
        logger.debug(f"Parsed {len(document.records)} records from {path}")
        return document


pass_context = click.make_pass_decorator(Context, ensure=True)


INPUT_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)
OUTPUT_FILE = click.Path(dir_okay=False, path_type=Path)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.version_option(__version__, "--version", "-V", prog_name="ihex")
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@click.option(
    "--encoding",
    default=None,
    help="Text encoding of .hex files (default: ascii)",
)
@pass_context
def main(ctx: Context, verbose: bool, encoding: Optional[str]) -> None:
    """
    Intel HEX file tool.

    Inspect, validate and convert Intel HEX (.hex) firmware files.

    \b
    Commands:
      info      Show file summary and first records
      validate  Check every record
      format    Rewrite in canonical form
      tobin     Write binary record dump

    \b
    Examples:
      ihex info firmware.hex
      ihex validate firmware.hex
      ihex tobin firmware.hex -o firmware.bin
    """
    if verbose:
        ctx.config.verbose = True
    if encoding:
        ctx.config.encoding = encoding
    ctx.setup_logging()


# =============================================================================
# Info Command
# =============================================================================

@main.command("info")
@click.argument("hex_file", type=INPUT_FILE)
@click.option(
    "-n", "--records",
    "max_records",
    type=click.IntRange(min=0),
    default=None,
    help="Number of records to list (default: 5)",
)
@pass_context
def cmd_info(ctx: Context, hex_file: Path, max_records: Optional[int]) -> None:
    """
    Show information about an Intel HEX file.

    \b
    Example:
      ihex info -n 3 firmware.hex
    """
    if max_records is None:
        max_records = ctx.config.info_records

    try:
        document = ctx.load(hex_file)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.config.verbose)

    click.echo(format_document_info(document, max_records=max_records))


# =============================================================================
# Validate Command
# =============================================================================

@main.command("validate")
@click.argument("hex_file", type=INPUT_FILE)
@pass_context
def cmd_validate(ctx: Context, hex_file: Path) -> None:
    """
    Validate every record of an Intel HEX file.

    Exits with status 1 and prints the error chain if any record is
    malformed.
    """
    try:
        document = ctx.load(hex_file)
    except IntelHexError as e:
        click.echo(f"INVALID: {hex_file}")
        click.echo(e.format_chain())
        sys.exit(ExitCode.BUILD_ERROR)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.config.verbose)

    click.echo(
        f"OK: {hex_file} ({len(document.records)} records, "
        f"{document.binary_size()} bytes binary)"
    )


# =============================================================================
# Format Command
# =============================================================================

@main.command("format")
@click.argument("hex_file", type=INPUT_FILE)
@click.option(
    "-o", "--output",
    type=OUTPUT_FILE,
    required=True,
    help="Output .hex file path (required)",
)
@pass_context
def cmd_format(ctx: Context, hex_file: Path, output: Path) -> None:
    """
    Rewrite an Intel HEX file in canonical form.

    Records are written in upper case, one per line, without blank lines
    or a trailing newline.
    """
    try:
        document = ctx.load(hex_file)
        document.save_file(output, encoding=ctx.config.encoding)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.config.verbose, error_type="Format")

    click.echo(f"Wrote {output} ({len(document.records)} records)")


# =============================================================================
# To-Binary Command
# =============================================================================

@main.command("tobin")
@click.argument("hex_file", type=INPUT_FILE)
@click.option(
    "-o", "--output",
    type=OUTPUT_FILE,
    required=True,
    help="Output binary file path (required)",
)
@pass_context
def cmd_tobin(ctx: Context, hex_file: Path, output: Path) -> None:
    """
    Write the binary form of every record to a file.

    The output is each record's [length][address][type][payload][checksum]
    bytes back to back. It is not a memory image.
    """
    try:
        document = ctx.load(hex_file)
        document.save_binary(output)
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.config.verbose, error_type="Conversion")

    click.echo(f"Wrote {output} ({document.binary_size()} bytes)")


if __name__ == "__main__":
    main()
