"""
stew3d Error Hierarchy
======================

This module defines the exception hierarchy for the stew3d disassembler.
All exceptions inherit from Stew3dError, allowing callers to catch every
disassembler-related error with a single except clause.

Exception Hierarchy
-------------------
Stew3dError (base)
├── DisassemblyError (problems found in the machine code)
│   ├── UnknownOpcodeError - byte is not a 3000 opcode
│   ├── TruncatedInstructionError - instruction runs past end of input
│   └── UnresolvedTargetError - jump/call target is not an instruction start
└── InputError - input could not be read, or is empty

Design Philosophy
-----------------
The decoder never raises for malformed bytes: unknown and truncated
instructions degrade to single raw bytes so that any binary can be listed.
These exceptions exist for the places where a caller asks for fail-fast
behaviour (strict mode, the ``error`` unresolved-target policy) and for
direct opcode lookups.

Error messages follow this format:
    error at 0xNN: description

Copyright (c) 2026 stew3d Contributors
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class Stew3dError(Exception):
    """
    Base exception for all stew3d errors.

        try:
            disassembler.disassemble(data)
        except Stew3dError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Disassembly Exceptions
# =============================================================================

class DisassemblyError(Stew3dError):
    """
    Base exception for problems found while decoding machine code.

    Attributes:
        message: The error description
        address: Offset in the binary where the problem was found (optional)
    """

    def __init__(self, message: str, address: Optional[int] = None):
        self.message = message
        self.address = address
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.address is None:
            return f"error: {self.message}"
        return f"error at 0x{self.address:02x}: {self.message}"


class UnknownOpcodeError(DisassemblyError):
    """
    A byte does not match any entry in the 3000 opcode table.

    Attributes:
        byte: The offending byte value
    """

    def __init__(self, byte: int, address: Optional[int] = None):
        self.byte = byte
        super().__init__(f"invalid opcode `{byte:02x}`", address)


class TruncatedInstructionError(DisassemblyError):
    """
    An opcode declares more bytes than remain in the input.

    Attributes:
        opcode: The opcode byte that started the instruction
        needed: Total size declared by the opcode
        available: Bytes actually remaining from the opcode onwards
    """

    def __init__(
        self,
        opcode: int,
        address: Optional[int] = None,
        needed: int = 0,
        available: int = 0,
    ):
        self.opcode = opcode
        self.needed = needed
        self.available = available
        super().__init__(
            f"unexpected end of file while processing instruction with opcode "
            f"{opcode:02x} (needs {needed} bytes, {available} available)",
            address,
        )


class UnresolvedTargetError(DisassemblyError):
    """
    A jump or call operand does not land on an instruction boundary.

    Attributes:
        target: The destination offset carried by the operand
    """

    def __init__(self, target: int, address: Optional[int] = None):
        self.target = target
        super().__init__(
            f"control transfer to 0x{target:02x} does not land on an instruction",
            address,
        )


# =============================================================================
# Input Exceptions
# =============================================================================

class InputError(Stew3dError):
    """
    Raised when the binary to disassemble cannot be obtained.

    Examples:
        - File is empty
        - File is unreadable
    """
    pass
