"""
Label Resolution
================

Assigns synthetic labels to jump and call targets.

Resolution runs over the fully decoded instruction list rather than while
decoding, because a jump can target an address that has not been decoded
yet. A target receives a label only when it is the start address of some
decoded unit; targets that land inside an instruction or past the end of
the buffer are left unresolved and rendered as plain numbers.

Labels are numbered by address, not by the order in which they are first
referenced: the lowest labelled address is always ``l0``.

Copyright (c) 2026 stew3d Contributors
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Optional

from stew3d.disassembler.decoder import DecodedUnit

logger = logging.getLogger(__name__)

LABEL_PREFIX = "l"


class LabelTable(Mapping):
    """
    Read-only mapping of instruction address to label name.

    Every key is the start address of a decoded unit and every name is
    unique, so the table can also be queried in reverse with
    ``address_of``.
    """

    def __init__(self, labels: Optional[Mapping[int, str]] = None):
        self._by_address: dict[int, str] = dict(sorted((labels or {}).items()))
        self._by_name: dict[str, int] = {name: address for address, name in self._by_address.items()}
        if len(self._by_name) != len(self._by_address):
            raise ValueError("label names must be unique")

    def __getitem__(self, address: int) -> str:
        return self._by_address[address]

    def __iter__(self) -> Iterator[int]:
        return iter(self._by_address)

    def __len__(self) -> int:
        return len(self._by_address)

    def address_of(self, name: str) -> Optional[int]:
        """Return the address a label names, or None for an unknown label."""
        return self._by_name.get(name)

    def __repr__(self) -> str:
        entries = ", ".join(f"0x{address:02x}: {name!r}" for address, name in self._by_address.items())
        return f"LabelTable({{{entries}}})"


def resolve(instructions: Sequence[DecodedUnit]) -> LabelTable:
    """
    Build the label table for a decoded program.

    Args:
        instructions: Output of ``decode``, in address order

    Returns:
        LabelTable naming every referenced address that starts a unit
    """
    starts = {unit.address for unit in instructions}

    referenced = {
        target
        for unit in instructions
        for target in unit.code_targets
        if target in starts
    }

    labels = LabelTable({
        address: f"{LABEL_PREFIX}{index}"
        for index, address in enumerate(sorted(referenced))
    })
    logger.debug(f"resolved {len(labels)} labels")
    return labels


def unresolved_targets(
    instructions: Sequence[DecodedUnit],
    labels: LabelTable,
) -> list[tuple[int, int]]:
    """
    List control transfers whose target received no label.

    Returns:
        (instruction address, target) pairs in instruction order
    """
    return [
        (unit.address, target)
        for unit in instructions
        for target in unit.code_targets
        if target not in labels
    ]
