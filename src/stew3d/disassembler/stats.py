"""
Binary Statistics
=================

Summarises a decoded program: how many instructions it holds, how its
bytes split between opcodes, operands and undecodable raw bytes, and how
many instructions of each length it contains.

Copyright (c) 2026 stew3d Contributors
"""

from dataclasses import dataclass
from typing import Sequence

from stew3d.disassembler.decoder import DecodedUnit, Instruction, RawByte


@dataclass(frozen=True)
class BinaryStats:
    """
    Statistics about a decoded binary.

    Attributes:
        total_instrs: Number of decoded instructions (raw bytes excluded)
        total_bytes: Size of the program
        opcode_bytes: Bytes holding opcodes
        operand_bytes: Bytes holding operands
        raw_bytes: Bytes that could not be decoded
        single_byte_instrs: Instructions of length 1
        two_byte_instrs: Instructions of length 2
        three_byte_instrs: Instructions of length 3
    """
    total_instrs: int = 0
    total_bytes: int = 0
    opcode_bytes: int = 0
    operand_bytes: int = 0
    raw_bytes: int = 0
    single_byte_instrs: int = 0
    two_byte_instrs: int = 0
    three_byte_instrs: int = 0

    @classmethod
    def from_instructions(cls, instructions: Sequence[DecodedUnit]) -> "BinaryStats":
        """Collect statistics from the output of ``decode``."""
        decoded = [unit for unit in instructions if isinstance(unit, Instruction)]
        sizes = [unit.size for unit in decoded]

        return cls(
            total_instrs=len(decoded),
            total_bytes=sum(unit.size for unit in instructions),
            opcode_bytes=len(decoded),
            operand_bytes=sum(size - 1 for size in sizes),
            raw_bytes=sum(1 for unit in instructions if isinstance(unit, RawByte)),
            single_byte_instrs=sizes.count(1),
            two_byte_instrs=sizes.count(2),
            three_byte_instrs=sizes.count(3),
        )

    @staticmethod
    def _percentage(count: int, total: int) -> float:
        if total == 0:
            return 0.0
        return count / total * 100.0

    def __str__(self) -> str:
        return "\n".join([
            f"Program size: {self.total_bytes} bytes",
            f"Instructions: {self.total_instrs}",
            f"Opcodes:      {self.opcode_bytes} ({self._percentage(self.opcode_bytes, self.total_bytes):.2f}%)",
            f"Operands:     {self.operand_bytes} ({self._percentage(self.operand_bytes, self.total_bytes):.2f}%)",
            f"Raw bytes:    {self.raw_bytes} ({self._percentage(self.raw_bytes, self.total_bytes):.2f}%)",
            "Instruction breakdown:",
            f"  1-byte: {self.single_byte_instrs} ({self._percentage(self.single_byte_instrs, self.total_instrs):.2f}%)",
            f"  2-byte: {self.two_byte_instrs} ({self._percentage(self.two_byte_instrs, self.total_instrs):.2f}%)",
            f"  3-byte: {self.three_byte_instrs} ({self._percentage(self.three_byte_instrs, self.total_instrs):.2f}%)",
        ])

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_instrs": self.total_instrs,
            "total_bytes": self.total_bytes,
            "opcode_bytes": self.opcode_bytes,
            "operand_bytes": self.operand_bytes,
            "raw_bytes": self.raw_bytes,
            "single_byte_instrs": self.single_byte_instrs,
            "two_byte_instrs": self.two_byte_instrs,
            "three_byte_instrs": self.three_byte_instrs,
        }
