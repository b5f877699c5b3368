"""
stew3d - 3000 Disassembler Command-Line Interface
=================================================

Disassembles a 3000 binary and prints the listing.

Usage Examples
--------------
Disassemble a file:
    $ stew3d program.bin

Read the binary from stdin:
    $ cat program.bin | stew3d

Show statistics about the binary:
    $ stew3d program.bin --stats

List the binary next to the source it was assembled from:
    $ stew3d program.bin --side-by-side program.3000.s

Fail on anything that does not decode cleanly:
    $ stew3d program.bin --strict

Output to file:
    $ stew3d program.bin -o listing.txt

Copyright (c) 2026 stew3d Contributors
"""

import logging
from pathlib import Path
from typing import Optional

import click

from stew3d import __version__
from stew3d.cli.errors import handle_cli_exception
from stew3d.config import DisassemblerConfig, UnresolvedPolicy
from stew3d.disassembler import Disassembler
from stew3d.errors import InputError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def read_input(input_file: Optional[Path]) -> tuple[bytes, str]:
    """
    Read the binary and pick its display name.

    Returns:
        (data, name) - name is "stdin" when reading standard input

    Raises:
        InputError: If the input is empty
    """
    if input_file is None or str(input_file) == "-":
        data = click.get_binary_stream("stdin").read()
        name = "stdin"
    else:
        data = input_file.read_bytes()
        name = str(input_file)

    if not data:
        raise InputError(f"{name} is empty")

    return data, name


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
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-s", "--stats",
    is_flag=True,
    help="Show statistics about the binary",
)
@click.option(
    "--side-by-side",
    "source_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="List the binary next to the assembly source it was built from",
)
@click.option(
    "--unresolved",
    type=click.Choice([policy.value for policy in UnresolvedPolicy]),
    default=None,
    help="How to treat jump/call targets that are not instruction starts "
         "(default: raw, or $STEW3D_UNRESOLVED)",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on unknown opcodes, truncated instructions and unresolved targets "
         "(default: off, or $STEW3D_STRICT)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="stew3d")
def main(
    input_file: Optional[Path],
    output: Optional[Path],
    stats: bool,
    source_file: Optional[Path],
    unresolved: Optional[str],
    strict: Optional[bool],
    verbose: bool,
) -> None:
    """
    Disassemble 3000 machine code.

    FILE is the binary to disassemble. If omitted (or "-"), reads from stdin.

    Examples:

        # Disassemble with statistics
        stew3d program.bin --stats

        # Compare against the assembler source
        stew3d program.bin --side-by-side program.3000.s
    """
    setup_logging(verbose)

    try:
        config = DisassemblerConfig.from_env()
        if unresolved is not None:
            config.unresolved = UnresolvedPolicy(unresolved)
        if strict is not None:
            config.strict = strict
        config.show_stats = stats

        data, name = read_input(input_file)
        source = source_file.read_text(encoding="utf-8") if source_file else None

        if verbose:
            click.echo(f"Input file: {name} ({len(data)} bytes)", err=True)

        disasm = Disassembler(config)
        result = disasm.disassemble(data)
        text = disasm.render(result, name=name, source=source)

        if output:
            output.write_text(text, encoding="utf-8")
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(text, nl=False)

        if verbose:
            click.echo(f"Instructions disassembled: {len(result.instructions)}", err=True)
            click.echo(f"Labels: {len(result.labels)}", err=True)
            for anomaly in result.anomalies:
                logger.info(f"anomaly at {anomaly}")

    except Exception as e:
        handle_cli_exception(e, verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
