"""
stew3d CPU Package
==================

Architecture definitions for the 3000 processor, shared by the decoder,
the label resolver and the renderer.

Usage:
    from stew3d.cpu import OPCODE_TABLE, OperandKind, lookup_opcode

    spec = lookup_opcode(0x7F)
    print(spec.mnemonic, spec.size)   # mvi 2

Copyright (c) 2026 stew3d Contributors
"""

# =============================================================================
# Public API Exports
# =============================================================================

from stew3d.cpu.opcodes import (
    # Core types
    OperandKind,
    OperandSpec,
    OpcodeSpec,
    # Master instruction database
    OPCODE_TABLE,
    OPCODE_MIN,
    OPCODE_MAX,
    # Instruction set reference lists
    MNEMONICS,
    JUMP_MNEMONICS,
    # Lookup functions
    get_opcode_spec,
    lookup_opcode,
    is_valid_opcode,
    is_control_transfer,
)

__all__ = [
    # Core types
    "OperandKind",
    "OperandSpec",
    "OpcodeSpec",
    # Master instruction database
    "OPCODE_TABLE",
    "OPCODE_MIN",
    "OPCODE_MAX",
    # Instruction set reference lists
    "MNEMONICS",
    "JUMP_MNEMONICS",
    # Lookup functions
    "get_opcode_spec",
    "lookup_opcode",
    "is_valid_opcode",
    "is_control_transfer",
]
