"""
Disassembly Listing Renderer
============================

Turns decoded units and their label table into listing text.

Listing Format
--------------
    Disassembly of file `simple.bin` (8 bytes)

    00:    7f 0a    |   mvi 10, a
    02:    bc 05    |   call l0
    04:    c7       |   hlt
    05:             | l0:
    05:    0c 04    |   addi 4, a
    07:    bd       |   ret

The address column is six characters wide and the byte column eight (the
width of three bytes), so the ``|`` separator stays in the same column
whatever the instruction length or label name.

Side-by-side mode pairs the listing columns with the assembly source the
binary was built from, in the same layout the assembler prints:

                  | entry:
    00:     7f 0a | 	mvi 10, a
    02:     bc 05 | 	call add_4

Copyright (c) 2026 stew3d Contributors
"""

import logging
from collections.abc import Sequence
from typing import Optional

from stew3d.cpu import OperandKind
from stew3d.disassembler.decoder import DecodedUnit, RawByte
from stew3d.disassembler.labels import LabelTable

logger = logging.getLogger(__name__)

# Indent for instruction text in the generated listing
TAB = "  "

ADDRESS_WIDTH = 6
BYTES_WIDTH = 8

# Column widths of the assembler's side-by-side listing (the address
# column widens for programs that reach $100)
SOURCE_ADDRESS_WIDTH = 3
SOURCE_BYTES_WIDTH = 10


# =============================================================================
# Column Helpers
# =============================================================================

def format_header(name: str, total_bytes: int) -> str:
    return f"Disassembly of file `{name}` ({total_bytes} bytes)"


def format_bytes(raw: bytes) -> str:
    """Format bytes as space-separated lower-case hex pairs."""
    return " ".join(f"{b:02x}" for b in raw)


def format_line(address: Optional[int], raw: bytes, text: str) -> str:
    """
    Format one listing line.

    Args:
        address: Address for the address column (None leaves it blank)
        raw: Bytes for the byte column
        text: Assembly text after the separator
    """
    address_col = f"{address:02x}:" if address is not None else ""
    return f"{address_col:{ADDRESS_WIDTH}} {format_bytes(raw):{BYTES_WIDTH}} | {text}"


def format_operand(value: int, kind: OperandKind, labels: LabelTable) -> str:
    """
    Format a single operand value.

    Immediates are decimal, as the assembler writes them. Code addresses
    use their label, or hex when the target received no label.
    """
    if kind is OperandKind.CODE_ADDRESS:
        label = labels.get(value)
        if label is not None:
            return label
        return f"0x{value:02x}"
    return str(value)


def instruction_text(unit: DecodedUnit, labels: LabelTable) -> str:
    """Assembly text for a unit, without indentation."""
    if isinstance(unit, RawByte):
        return f".byte 0x{unit.value:02x}  ; {unit.reason}"

    operand_text = tuple(
        format_operand(value, kind, labels) for value, kind in unit.operand_fields()
    )
    return unit.spec.format(operand_text)


# =============================================================================
# Listing
# =============================================================================

def render_lines(instructions: Sequence[DecodedUnit], labels: LabelTable) -> list[str]:
    """Listing lines for the units, with label declarations in place."""
    lines = []
    for unit in instructions:
        if unit.address in labels:
            lines.append(format_line(unit.address, b"", f"{labels[unit.address]}:"))
        lines.append(format_line(unit.address, unit.raw_bytes, TAB + instruction_text(unit, labels)))
    return lines


def render(
    filename: str,
    total_bytes: int,
    instructions: Sequence[DecodedUnit],
    labels: LabelTable,
) -> str:
    """
    Render a complete disassembly listing.

    Args:
        filename: Display name for the header
        total_bytes: Size of the binary
        instructions: Decoded units in address order
        labels: Label table from ``resolve``

    Returns:
        Listing text ending with a newline
    """
    output_lines = [format_header(filename, total_bytes), ""]
    output_lines.extend(render_lines(instructions, labels))
    return "\n".join(output_lines) + "\n"


# =============================================================================
# Side-by-Side Listing
# =============================================================================

def _source_address_width(instructions: Sequence[DecodedUnit]) -> int:
    if not instructions:
        return SOURCE_ADDRESS_WIDTH
    last = max(unit.address for unit in instructions)
    return max(SOURCE_ADDRESS_WIDTH, len(f"{last:02x}:"))


def _format_source_line(address: Optional[int], raw: bytes, text: str, address_width: int) -> str:
    address_col = f"{address:02x}:" if address is not None else ""
    return f"{address_col:<{address_width}}{format_bytes(raw):>{SOURCE_BYTES_WIDTH}} | {text}"


def _strip_comment(line: str) -> str:
    return line.split(";", 1)[0].strip()


def _is_label(text: str) -> bool:
    return text.endswith(":") and len(text.split()) == 1


def render_side_by_side(
    filename: str,
    total_bytes: int,
    instructions: Sequence[DecodedUnit],
    source: str,
    labels: Optional[LabelTable] = None,
) -> str:
    """
    Render the decoded units next to the assembly source they came from.

    Each instruction line of the source takes the next decoded unit and
    shows its address and bytes. Label lines keep the source's own names
    and are printed with blank columns. Comments and blank lines are
    dropped. Units left over once the source runs out are listed with
    generated text; source lines left over once the units run out are
    listed with blank columns. The address column grows to fit the
    highest address so the separator never moves.

    Args:
        filename: Display name for the header
        total_bytes: Size of the binary
        instructions: Decoded units in address order
        source: Assembly source text
        labels: Generated labels, used for leftover units only

    Returns:
        Listing text ending with a newline
    """
    labels = labels if labels is not None else LabelTable()
    width = _source_address_width(instructions)
    output_lines = [format_header(filename, total_bytes), ""]
    units = iter(instructions)
    matched = 0

    for line in source.splitlines():
        text = _strip_comment(line)
        if not text:
            continue

        if _is_label(text):
            output_lines.append(_format_source_line(None, b"", text, width))
            continue

        unit = next(units, None)
        if unit is None:
            output_lines.append(_format_source_line(None, b"", f"\t{text}", width))
            continue

        matched += 1
        output_lines.append(_format_source_line(unit.address, unit.raw_bytes, f"\t{text}", width))

    leftover = list(units)
    if leftover:
        logger.debug(f"source covers {matched} units, listing {len(leftover)} more from the binary")
    for unit in leftover:
        if unit.address in labels:
            output_lines.append(_format_source_line(None, b"", f"{labels[unit.address]}:", width))
        output_lines.append(
            _format_source_line(unit.address, unit.raw_bytes, "\t" + instruction_text(unit, labels), width)
        )

    return "\n".join(output_lines) + "\n"
