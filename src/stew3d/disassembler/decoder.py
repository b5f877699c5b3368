"""
3000 Decoder
============

Splits a raw machine-code buffer into instructions.

The decoder walks the buffer from offset 0. At each position it reads an
opcode byte, looks it up in the instruction set table, and consumes as many
bytes as the opcode declares. Bytes that cannot start a well-formed
instruction become one-byte ``RawByte`` units:

    - the byte is not an opcode (UNKNOWN_OPCODE)
    - the opcode declares more bytes than remain (TRUNCATED)

so the result always covers every byte of the buffer exactly once and
decoding never fails, whatever the input.

Usage:
    units = decode(bytes([0x7F, 0x0A, 0xBC, 0x05, 0xC7]))
    for unit in units:
        print(f"{unit.address:02x}: {unit.raw_bytes.hex(' ')}")

Copyright (c) 2026 stew3d Contributors
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from stew3d.cpu import OpcodeSpec, OperandKind, get_opcode_spec

logger = logging.getLogger(__name__)


# =============================================================================
# Data Structures
# =============================================================================

@dataclass(frozen=True)
class Instruction:
    """
    A single decoded 3000 instruction.

    Attributes:
        address: Offset of the opcode byte in the buffer
        raw_bytes: Exact bytes consumed (opcode followed by operands)
        spec: Instruction set entry for the opcode
        operands: Operand values in encoding order. Code-address operands
                  hold the raw destination offset; labels are assigned later.
    """
    address: int
    raw_bytes: bytes
    spec: OpcodeSpec
    operands: tuple[int, ...] = ()

    @property
    def opcode(self) -> int:
        return self.spec.opcode

    @property
    def mnemonic(self) -> str:
        return self.spec.mnemonic

    @property
    def size(self) -> int:
        return len(self.raw_bytes)

    @property
    def code_targets(self) -> tuple[int, ...]:
        """Destination offsets carried by code-address operands."""
        return tuple(
            value
            for value, operand in zip(self.operands, self.spec.operands)
            if operand.kind is OperandKind.CODE_ADDRESS
        )

    def operand_fields(self) -> Iterable[tuple[int, OperandKind]]:
        """Pair every operand value with its kind."""
        return zip(self.operands, (operand.kind for operand in self.spec.operands))


class RawByteReason(Enum):
    """Why a byte could not be decoded as part of an instruction."""
    UNKNOWN_OPCODE = "unknown opcode"
    TRUNCATED = "truncated instruction"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RawByte:
    """
    A byte that does not start a well-formed instruction.

    Attributes:
        address: Offset of the byte in the buffer
        value: The byte itself
        reason: Unknown opcode, or an opcode whose operands run past the end
    """
    address: int
    value: int
    reason: RawByteReason = RawByteReason.UNKNOWN_OPCODE

    @property
    def mnemonic(self) -> None:
        return None

    @property
    def operands(self) -> tuple[int, ...]:
        return ()

    @property
    def raw_bytes(self) -> bytes:
        return bytes([self.value])

    @property
    def size(self) -> int:
        return 1

    @property
    def code_targets(self) -> tuple[int, ...]:
        return ()


DecodedUnit = Union[Instruction, RawByte]


# =============================================================================
# Decoder
# =============================================================================

def decode_one(buffer: bytes, offset: int = 0) -> DecodedUnit:
    """
    Decode the unit that starts at ``offset``.

    Args:
        buffer: Machine code
        offset: Position of the candidate opcode byte

    Returns:
        An Instruction, or a RawByte if no well-formed instruction starts here

    Raises:
        ValueError: If offset is outside the buffer
    """
    if not 0 <= offset < len(buffer):
        raise ValueError(f"Offset {offset} beyond data length {len(buffer)}")

    byte = buffer[offset]
    spec = get_opcode_spec(byte)

    if spec is None:
        logger.debug(f"0x{offset:02x}: unknown opcode {byte:02x}, emitting raw byte")
        return RawByte(offset, byte, RawByteReason.UNKNOWN_OPCODE)

    available = len(buffer) - offset
    if available < spec.size:
        logger.debug(
            f"0x{offset:02x}: {spec.mnemonic} needs {spec.size} bytes, "
            f"{available} left, emitting raw byte"
        )
        return RawByte(offset, byte, RawByteReason.TRUNCATED)

    raw = bytes(buffer[offset:offset + spec.size])

    # Every operand on the 3000 is one byte wide, but honour the declared
    # width so the layout stays the single source of truth.
    operands = []
    position = 1
    for operand in spec.operands:
        operands.append(int.from_bytes(raw[position:position + operand.width], "big"))
        position += operand.width

    return Instruction(offset, raw, spec, tuple(operands))


def decode(buffer: bytes, limit: Optional[int] = None) -> list[DecodedUnit]:
    """
    Decode a whole buffer into instructions and raw-byte fallbacks.

    The units are returned in increasing address order and partition
    ``[0, len(buffer))``: each unit starts where the previous one ended.

    Args:
        buffer: Machine code
        limit: Maximum number of units to decode (None = whole buffer)

    Returns:
        List of Instruction and RawByte units (empty for an empty buffer)
    """
    units: list[DecodedUnit] = []
    cursor = 0

    while cursor < len(buffer):
        if limit is not None and len(units) >= limit:
            break
        unit = decode_one(buffer, cursor)
        units.append(unit)
        cursor += unit.size

    logger.debug(f"decoded {len(units)} units from {len(buffer)} bytes")
    return units
