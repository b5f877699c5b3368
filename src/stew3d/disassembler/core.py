"""
Disassembly Pipeline
====================

Runs the three stages in order over an in-memory binary:

    bytes -> decode -> resolve -> render

and applies the configured policy for problems found along the way.
Each stage finishes before the next one starts; nothing is streamed.

Usage:
    disasm = Disassembler()
    result = disasm.disassemble(data)
    print(disasm.render(result, name="simple.bin"))

Copyright (c) 2026 stew3d Contributors
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from stew3d.config import DisassemblerConfig, UnresolvedPolicy
from stew3d.disassembler.decoder import DecodedUnit, RawByte, RawByteReason, decode
from stew3d.disassembler.labels import LabelTable, resolve, unresolved_targets
from stew3d.disassembler.render import render, render_side_by_side
from stew3d.disassembler.stats import BinaryStats
from stew3d.errors import (
    DisassemblyError,
    TruncatedInstructionError,
    UnknownOpcodeError,
    UnresolvedTargetError,
)
from stew3d.cpu import get_opcode_spec

logger = logging.getLogger(__name__)


# =============================================================================
# Anomalies
# =============================================================================

class AnomalyKind(Enum):
    UNKNOWN_OPCODE = "unknown opcode"
    TRUNCATED_INSTRUCTION = "truncated instruction"
    UNRESOLVED_TARGET = "unresolved target"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DecodeAnomaly:
    """
    Something in the binary that did not decode cleanly.

    Attributes:
        address: Address of the offending unit
        kind: What went wrong
        value: The raw byte (unknown/truncated) or the target (unresolved)
        available: Bytes left from the address onwards (truncated only)
    """
    address: int
    kind: AnomalyKind
    value: int
    available: int = 0

    def to_error(self) -> DisassemblyError:
        """Build the exception strict mode raises for this anomaly."""
        if self.kind is AnomalyKind.UNKNOWN_OPCODE:
            return UnknownOpcodeError(self.value, self.address)
        if self.kind is AnomalyKind.TRUNCATED_INSTRUCTION:
            spec = get_opcode_spec(self.value)
            return TruncatedInstructionError(
                self.value, self.address, needed=spec.size, available=self.available
            )
        return UnresolvedTargetError(self.value, self.address)

    def __str__(self) -> str:
        return f"0x{self.address:02x}: {self.kind} (0x{self.value:02x})"


def find_anomalies(
    instructions: Sequence[DecodedUnit],
    labels: LabelTable,
    total_bytes: Optional[int] = None,
) -> list[DecodeAnomaly]:
    """
    Collect raw-byte fallbacks and unresolved targets, in address order.

    Args:
        instructions: Output of ``decode``
        labels: Output of ``resolve`` for the same units
        total_bytes: Size of the binary (defaults to the units' total size)
    """
    if total_bytes is None:
        total_bytes = sum(unit.size for unit in instructions)

    anomalies = []
    unresolved = {}
    for address, target in unresolved_targets(instructions, labels):
        unresolved.setdefault(address, []).append(target)

    for unit in instructions:
        if isinstance(unit, RawByte):
            if unit.reason is RawByteReason.UNKNOWN_OPCODE:
                anomalies.append(DecodeAnomaly(unit.address, AnomalyKind.UNKNOWN_OPCODE, unit.value))
            else:
                anomalies.append(DecodeAnomaly(
                    unit.address,
                    AnomalyKind.TRUNCATED_INSTRUCTION,
                    unit.value,
                    available=total_bytes - unit.address,
                ))
        for target in unresolved.get(unit.address, ()):
            anomalies.append(DecodeAnomaly(unit.address, AnomalyKind.UNRESOLVED_TARGET, target))

    return anomalies


# =============================================================================
# Pipeline
# =============================================================================

@dataclass(frozen=True)
class Disassembly:
    """
    Result of disassembling a binary.

    Attributes:
        data: The input bytes
        instructions: Decoded units in address order
        labels: Labels for referenced instruction starts
        anomalies: Problems found in the binary, in address order
    """
    data: bytes
    instructions: tuple[DecodedUnit, ...]
    labels: LabelTable
    anomalies: tuple[DecodeAnomaly, ...] = field(default_factory=tuple)

    @property
    def stats(self) -> BinaryStats:
        return BinaryStats.from_instructions(self.instructions)


class Disassembler:
    """
    Disassembler for 3000 machine code.

    Attributes:
        config: Policy settings for anomalies and output
    """

    def __init__(self, config: Optional[DisassemblerConfig] = None):
        self.config = config or DisassemblerConfig()

    def disassemble(self, data: bytes) -> Disassembly:
        """
        Decode a binary and resolve its labels.

        Raises:
            DisassemblyError: In strict mode, for the first anomaly found
            UnresolvedTargetError: Under UnresolvedPolicy.ERROR, for the first
                                   unresolved target
        """
        data = bytes(data)
        instructions = tuple(decode(data))
        labels = resolve(instructions)
        anomalies = tuple(find_anomalies(instructions, labels, len(data)))

        self._apply_policy(anomalies)

        return Disassembly(data, instructions, labels, anomalies)

    def _apply_policy(self, anomalies: Sequence[DecodeAnomaly]) -> None:
        if self.config.strict and anomalies:
            raise anomalies[0].to_error()

        for anomaly in anomalies:
            if anomaly.kind is not AnomalyKind.UNRESOLVED_TARGET:
                continue
            if self.config.unresolved is UnresolvedPolicy.ERROR:
                raise anomaly.to_error()
            if self.config.unresolved is UnresolvedPolicy.WARN:
                logger.warning(
                    f"instruction at 0x{anomaly.address:02x} targets 0x{anomaly.value:02x}, "
                    f"which is not an instruction start"
                )

    def render(
        self,
        result: Disassembly,
        name: str = "stdin",
        source: Optional[str] = None,
    ) -> str:
        """
        Render a disassembly as listing text.

        Args:
            result: Output of ``disassemble``
            name: Display name for the header
            source: Assembly source for side-by-side output (optional)
        """
        if source is not None:
            text = render_side_by_side(name, len(result.data), result.instructions, source, result.labels)
        else:
            text = render(name, len(result.data), result.instructions, result.labels)

        if self.config.show_stats:
            header, rest = text.split("\n", 1)
            text = f"{header}\n\n{result.stats}\n{rest}"

        return text

    def disassemble_to_text(
        self,
        data: bytes,
        name: str = "stdin",
        source: Optional[str] = None,
    ) -> str:
        """Disassemble and return the complete listing."""
        return self.render(self.disassemble(data), name=name, source=source)
