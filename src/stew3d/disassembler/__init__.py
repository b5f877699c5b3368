"""
stew3d Disassembler Module
==========================

Decoding, label resolution and listing output for 3000 machine code.

Usage:
    from stew3d.disassembler import decode, resolve, render

    units = decode(data)
    labels = resolve(units)
    print(render("program.bin", len(data), units, labels), end="")

    # Or in one step, with configurable anomaly handling
    from stew3d.disassembler import Disassembler
    print(Disassembler().disassemble_to_text(data, name="program.bin"), end="")

Copyright (c) 2026 stew3d Contributors
"""

from .decoder import Instruction, RawByte, RawByteReason, DecodedUnit, decode, decode_one
from .labels import LabelTable, resolve, unresolved_targets
from .render import render, render_side_by_side, format_line, format_header
from .stats import BinaryStats
from .core import (
    AnomalyKind,
    DecodeAnomaly,
    Disassembler,
    Disassembly,
    find_anomalies,
)

__all__ = [
    "Instruction",
    "RawByte",
    "RawByteReason",
    "DecodedUnit",
    "decode",
    "decode_one",
    "LabelTable",
    "resolve",
    "unresolved_targets",
    "render",
    "render_side_by_side",
    "format_line",
    "format_header",
    "BinaryStats",
    "AnomalyKind",
    "DecodeAnomaly",
    "Disassembler",
    "Disassembly",
    "find_anomalies",
]
