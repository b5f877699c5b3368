"""
stew3d - Disassembler for the 3000 8-bit Processor
===================================================

This package turns raw 3000 machine code into readable assembly listings.
The 3000 is a small accumulator-style 8-bit processor with 1 to 3 byte
instructions and single-byte jump and call targets.

Main Components
---------------
- **cpu**: the 3000 instruction set table
- **disassembler**: decoder, label resolver, listing renderer and statistics
- **cli**: the ``stew3d`` command-line tool

Quick Start
-----------
    >>> from stew3d import Disassembler
    >>> data = bytes([0x7F, 0x0A, 0xBC, 0x05, 0xC7, 0x0C, 0x04, 0xBD])
    >>> print(Disassembler().disassemble_to_text(data, name="simple.bin"), end="")
    Disassembly of file `simple.bin` (8 bytes)
    <BLANKLINE>
    00:    7f 0a    |   mvi 10, a
    02:    bc 05    |   call l0
    04:    c7       |   hlt
    05:             | l0:
    05:    0c 04    |   addi 4, a
    07:    bd       |   ret

Or use the command-line tool:
    $ stew3d simple.bin
    $ stew3d simple.bin --stats
    $ stew3d simple.bin --side-by-side simple.3000.s

Copyright (c) 2026 stew3d Contributors
"""

__version__ = "1.0.0"
__author__ = "stew3d Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from stew3d.config import DisassemblerConfig, UnresolvedPolicy
from stew3d.disassembler import (
    BinaryStats,
    Disassembler,
    Disassembly,
    Instruction,
    LabelTable,
    RawByte,
    decode,
    render,
    resolve,
)
from stew3d.errors import (
    Stew3dError,
    DisassemblyError,
    UnknownOpcodeError,
    TruncatedInstructionError,
    UnresolvedTargetError,
    InputError,
)

__all__ = [
    "__version__",
    "DisassemblerConfig",
    "UnresolvedPolicy",
    "BinaryStats",
    "Disassembler",
    "Disassembly",
    "Instruction",
    "LabelTable",
    "RawByte",
    "decode",
    "render",
    "resolve",
    "Stew3dError",
    "DisassemblyError",
    "UnknownOpcodeError",
    "TruncatedInstructionError",
    "UnresolvedTargetError",
    "InputError",
]
