"""
3000 Instruction Set Definition
===============================

This module defines the complete instruction set of the 3000, a small
accumulator-style 8-bit processor. Every instruction is one opcode byte
followed by zero, one or two single-byte operands, so instructions are
1 to 3 bytes long.

Registers
---------
- a, b, c: general purpose 8-bit registers
- z: the zero register (reads as 0, writes discarded)
- sp: stack pointer

Operand Kinds
-------------
1. **IMMEDIATE**: a literal byte (e.g. ``mvi 10, a``). Stack offsets used by
   ``lds``/``sts``/``stsi`` are immediates too.
2. **CODE_ADDRESS**: a byte offset into the program, used by the jumps and
   ``call``. These are the operands the disassembler turns into labels.

Opcode Map
----------
Opcodes are dense from $00 to $C8. Families occupy consecutive ranges in
the order listed in ``_INSTRUCTION_SET`` below; the opcode of an entry is
its position in that list.

    $00-$0B add      $0C-$0F addi     $10-$1B addc     $1C-$1F addci
    $20-$28 sub      $29-$2C subi     $2D-$35 subb     $36-$39 subbi
    $3A-$3F and      $40-$42 ani      $43-$48 or       $49-$4B ori
    $4C-$51 xor      $52-$54 xri      $55-$57 not      $58-$5A neg
    $5B-$66 inr/inr2/inr3             $67-$72 dcr/dcr2/dcr3
    $73-$7E mov      $7F-$81 mvi      $82-$8A ld       $8B-$96 st
    $97-$99 lds      $9A-$9D sts      $9E     stsi     $9F-$AA cmp
    $AB-$B0 cmpi     $B1-$BB jumps    $BC     call     $BD     ret
    $BE-$C0 out      $C1     outi     $C2     dic      $C3     did
    $C4-$C6 dd       $C7     hlt      $C8     nop

Copyright (c) 2026 stew3d Contributors
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from stew3d.errors import UnknownOpcodeError


# =============================================================================
# Operand Descriptors
# =============================================================================

class OperandKind(Enum):
    """How an operand byte is interpreted."""
    IMMEDIATE = auto()     # Literal value
    CODE_ADDRESS = auto()  # Destination offset of a jump or call

    def __str__(self) -> str:
        return {
            OperandKind.IMMEDIATE: "immediate",
            OperandKind.CODE_ADDRESS: "code address",
        }[self]


@dataclass(frozen=True)
class OperandSpec:
    """
    Layout of one operand.

    Attributes:
        kind: Whether the operand is an immediate or a code address
        width: Operand width in bytes (always 1 on the 3000)
    """
    kind: OperandKind
    width: int = 1


IMM = OperandSpec(OperandKind.IMMEDIATE)
ADDR = OperandSpec(OperandKind.CODE_ADDRESS)


# =============================================================================
# Opcode Specification
# =============================================================================

@dataclass(frozen=True)
class OpcodeSpec:
    """
    Static description of a single opcode.

    The ``form`` is the text that follows the mnemonic, with ``{0}`` and
    ``{1}`` standing for the operand values in encoding order. Fixed
    register operands are part of the form: opcode $7F is ``mvi`` with
    form ``"{0}, a"``, opcode $00 is ``add`` with form ``"a, a"``.

    Attributes:
        opcode: The opcode byte
        mnemonic: Instruction mnemonic (e.g. "mvi", "call")
        form: Operand template (empty for bare instructions like "ret")
        operands: Operand descriptors in encoding order
    """
    opcode: int
    mnemonic: str
    form: str
    operands: tuple[OperandSpec, ...] = ()

    @property
    def size(self) -> int:
        """Total encoded length: the opcode byte plus every operand."""
        return 1 + sum(operand.width for operand in self.operands)

    def format(self, operand_text: tuple[str, ...] = ()) -> str:
        """Render ``mnemonic form`` with already-formatted operand strings."""
        if not self.form:
            return self.mnemonic
        return f"{self.mnemonic} {self.form.format(*operand_text)}"

    def __repr__(self) -> str:
        return f"OpcodeSpec(opcode=${self.opcode:02X}, {self.format(('N', 'M'))!r}, size={self.size})"


# =============================================================================
# Instruction Set
# =============================================================================
# One entry per opcode, in opcode order starting at OPCODE_MIN.
# Entry: (mnemonic, form, operand descriptors)
# =============================================================================

OPCODE_MIN = 0x00
OPCODE_MAX = 0xC8

_INSTRUCTION_SET: tuple[tuple[str, str, tuple[OperandSpec, ...]], ...] = (
    # -------------------------------------------------------------------------
    # $00-$1F: add / addi / addc / addci
    # -------------------------------------------------------------------------
    ("add", "a, a", ()),
    ("add", "a, b", ()),
    ("add", "a, c", ()),
    ("add", "a, sp", ()),
    ("add", "b, a", ()),
    ("add", "b, b", ()),
    ("add", "b, c", ()),
    ("add", "b, sp", ()),
    ("add", "c, a", ()),
    ("add", "c, b", ()),
    ("add", "c, c", ()),
    ("add", "c, sp", ()),

    ("addi", "{0}, a", (IMM,)),
    ("addi", "{0}, b", (IMM,)),
    ("addi", "{0}, c", (IMM,)),
    ("addi", "{0}, sp", (IMM,)),

    ("addc", "a, a", ()),
    ("addc", "a, b", ()),
    ("addc", "a, c", ()),
    ("addc", "a, sp", ()),
    ("addc", "b, a", ()),
    ("addc", "b, b", ()),
    ("addc", "b, c", ()),
    ("addc", "b, sp", ()),
    ("addc", "c, a", ()),
    ("addc", "c, b", ()),
    ("addc", "c, c", ()),
    ("addc", "c, sp", ()),

    ("addci", "{0}, a", (IMM,)),
    ("addci", "{0}, b", (IMM,)),
    ("addci", "{0}, c", (IMM,)),
    ("addci", "{0}, sp", (IMM,)),

    # -------------------------------------------------------------------------
    # $20-$39: sub / subi / subb / subbi
    # -------------------------------------------------------------------------
    ("sub", "b, a", ()),
    ("sub", "c, a", ()),
    ("sub", "a, b", ()),
    ("sub", "c, b", ()),
    ("sub", "a, c", ()),
    ("sub", "b, c", ()),
    ("sub", "a, sp", ()),
    ("sub", "b, sp", ()),
    ("sub", "c, sp", ()),

    ("subi", "{0}, a", (IMM,)),
    ("subi", "{0}, b", (IMM,)),
    ("subi", "{0}, c", (IMM,)),
    ("subi", "{0}, sp", (IMM,)),

    ("subb", "b, a", ()),
    ("subb", "c, a", ()),
    ("subb", "a, b", ()),
    ("subb", "c, b", ()),
    ("subb", "a, c", ()),
    ("subb", "b, c", ()),
    ("subb", "a, sp", ()),
    ("subb", "b, sp", ()),
    ("subb", "c, sp", ()),

    ("subbi", "{0}, a", (IMM,)),
    ("subbi", "{0}, b", (IMM,)),
    ("subbi", "{0}, c", (IMM,)),
    ("subbi", "{0}, sp", (IMM,)),

    # -------------------------------------------------------------------------
    # $3A-$5A: logic
    # -------------------------------------------------------------------------
    ("and", "b, a", ()),
    ("and", "c, a", ()),
    ("and", "a, b", ()),
    ("and", "c, b", ()),
    ("and", "a, c", ()),
    ("and", "b, c", ()),

    ("ani", "{0}, a", (IMM,)),
    ("ani", "{0}, b", (IMM,)),
    ("ani", "{0}, c", (IMM,)),

    ("or", "b, a", ()),
    ("or", "c, a", ()),
    ("or", "a, b", ()),
    ("or", "c, b", ()),
    ("or", "a, c", ()),
    ("or", "b, c", ()),

    ("ori", "{0}, a", (IMM,)),
    ("ori", "{0}, b", (IMM,)),
    ("ori", "{0}, c", (IMM,)),

    ("xor", "b, a", ()),
    ("xor", "c, a", ()),
    ("xor", "a, b", ()),
    ("xor", "c, b", ()),
    ("xor", "a, c", ()),
    ("xor", "b, c", ()),

    ("xri", "{0}, a", (IMM,)),
    ("xri", "{0}, b", (IMM,)),
    ("xri", "{0}, c", (IMM,)),

    ("not", "a", ()),
    ("not", "b", ()),
    ("not", "c", ()),

    ("neg", "a", ()),
    ("neg", "b", ()),
    ("neg", "c", ()),

    # -------------------------------------------------------------------------
    # $5B-$72: increment / decrement by 1, 2 or 3
    # -------------------------------------------------------------------------
    ("inr", "a", ()),
    ("inr", "b", ()),
    ("inr", "c", ()),
    ("inr", "sp", ()),

    ("inr2", "a", ()),
    ("inr2", "b", ()),
    ("inr2", "c", ()),
    ("inr2", "sp", ()),

    ("inr3", "a", ()),
    ("inr3", "b", ()),
    ("inr3", "c", ()),
    ("inr3", "sp", ()),

    ("dcr", "a", ()),
    ("dcr", "b", ()),
    ("dcr", "c", ()),
    ("dcr", "sp", ()),

    ("dcr2", "a", ()),
    ("dcr2", "b", ()),
    ("dcr2", "c", ()),
    ("dcr2", "sp", ()),

    ("dcr3", "a", ()),
    ("dcr3", "b", ()),
    ("dcr3", "c", ()),
    ("dcr3", "sp", ()),

    # -------------------------------------------------------------------------
    # $73-$9E: data movement
    # -------------------------------------------------------------------------
    ("mov", "a, b", ()),
    ("mov", "a, c", ()),
    ("mov", "b, a", ()),
    ("mov", "b, c", ()),
    ("mov", "c, a", ()),
    ("mov", "c, b", ()),
    ("mov", "z, a", ()),
    ("mov", "z, b", ()),
    ("mov", "z, c", ()),
    ("mov", "sp, a", ()),
    ("mov", "sp, b", ()),
    ("mov", "sp, c", ()),

    ("mvi", "{0}, a", (IMM,)),
    ("mvi", "{0}, b", (IMM,)),
    ("mvi", "{0}, c", (IMM,)),

    ("ld", "a, a", ()),
    ("ld", "b, a", ()),
    ("ld", "c, a", ()),
    ("ld", "a, b", ()),
    ("ld", "b, b", ()),
    ("ld", "c, b", ()),
    ("ld", "a, c", ()),
    ("ld", "b, c", ()),
    ("ld", "c, c", ()),

    ("st", "a, a", ()),
    ("st", "a, b", ()),
    ("st", "a, c", ()),
    ("st", "b, a", ()),
    ("st", "b, b", ()),
    ("st", "b, c", ()),
    ("st", "c, a", ()),
    ("st", "c, b", ()),
    ("st", "c, c", ()),
    ("st", "z, a", ()),
    ("st", "z, b", ()),
    ("st", "z, c", ()),

    ("lds", "{0}, a", (IMM,)),
    ("lds", "{0}, b", (IMM,)),
    ("lds", "{0}, c", (IMM,)),

    ("sts", "a, {0}", (IMM,)),
    ("sts", "b, {0}", (IMM,)),
    ("sts", "c, {0}", (IMM,)),
    ("sts", "z, {0}", (IMM,)),

    ("stsi", "{0}, {1}", (IMM, IMM)),

    # -------------------------------------------------------------------------
    # $9F-$B0: comparison
    # -------------------------------------------------------------------------
    ("cmp", "a, b", ()),
    ("cmp", "a, c", ()),
    ("cmp", "a, z", ()),
    ("cmp", "b, a", ()),
    ("cmp", "b, c", ()),
    ("cmp", "b, z", ()),
    ("cmp", "c, a", ()),
    ("cmp", "c, b", ()),
    ("cmp", "c, z", ()),
    ("cmp", "z, a", ()),
    ("cmp", "z, b", ()),
    ("cmp", "z, c", ()),

    ("cmpi", "a, {0}", (IMM,)),
    ("cmpi", "{0}, a", (IMM,)),
    ("cmpi", "b, {0}", (IMM,)),
    ("cmpi", "{0}, b", (IMM,)),
    ("cmpi", "c, {0}", (IMM,)),
    ("cmpi", "{0}, c", (IMM,)),

    # -------------------------------------------------------------------------
    # $B1-$BD: control transfer
    # -------------------------------------------------------------------------
    ("jmp", "{0}", (ADDR,)),
    ("je", "{0}", (ADDR,)),
    ("jne", "{0}", (ADDR,)),
    ("jg", "{0}", (ADDR,)),
    ("jge", "{0}", (ADDR,)),
    ("jl", "{0}", (ADDR,)),
    ("jle", "{0}", (ADDR,)),
    ("ja", "{0}", (ADDR,)),
    ("jae", "{0}", (ADDR,)),
    ("jb", "{0}", (ADDR,)),
    ("jbe", "{0}", (ADDR,)),
    ("call", "{0}", (ADDR,)),
    ("ret", "", ()),

    # -------------------------------------------------------------------------
    # $BE-$C8: I/O and machine control
    # -------------------------------------------------------------------------
    ("out", "a", ()),
    ("out", "b", ()),
    ("out", "c", ()),

    ("outi", "{0}", (IMM,)),
    ("dic", "{0}", (IMM,)),
    ("did", "{0}", (IMM,)),

    ("dd", "a", ()),
    ("dd", "b", ()),
    ("dd", "c", ()),

    ("hlt", "", ()),
    ("nop", "", ()),
)


def _build_opcode_table() -> dict[int, OpcodeSpec]:
    """
    Number the instruction set entries and index them by opcode byte.

    Raises:
        RuntimeError: If the list no longer fills $00-$C8 exactly
    """
    table = {
        opcode: OpcodeSpec(opcode, mnemonic, form, operands)
        for opcode, (mnemonic, form, operands) in enumerate(_INSTRUCTION_SET, start=OPCODE_MIN)
    }
    if max(table) != OPCODE_MAX:
        raise RuntimeError(f"opcode table ends at ${max(table):02X}, expected ${OPCODE_MAX:02X}")
    return table


# Master table: opcode byte -> OpcodeSpec
OPCODE_TABLE: dict[int, OpcodeSpec] = _build_opcode_table()


# =============================================================================
# Instruction Set Reference Lists
# =============================================================================

MNEMONICS: frozenset[str] = frozenset(spec.mnemonic for spec in OPCODE_TABLE.values())

# Conditional and unconditional jumps (call is a control transfer but not a jump)
JUMP_MNEMONICS: frozenset[str] = frozenset({
    "jmp", "je", "jne", "jg", "jge", "jl", "jle", "ja", "jae", "jb", "jbe",
})


# =============================================================================
# Lookup Functions
# =============================================================================

def get_opcode_spec(byte: int) -> Optional[OpcodeSpec]:
    """Return the spec for an opcode byte, or None if the byte is not an opcode."""
    return OPCODE_TABLE.get(byte)


def lookup_opcode(byte: int, address: Optional[int] = None) -> OpcodeSpec:
    """
    Return the spec for an opcode byte.

    Args:
        byte: Candidate opcode
        address: Where the byte was found, for the error message

    Raises:
        UnknownOpcodeError: If the byte is not a 3000 opcode
    """
    spec = OPCODE_TABLE.get(byte)
    if spec is None:
        raise UnknownOpcodeError(byte, address)
    return spec


def is_valid_opcode(byte: int) -> bool:
    return byte in OPCODE_TABLE


def is_control_transfer(spec: OpcodeSpec) -> bool:
    """True for instructions that carry a code-address operand."""
    return any(operand.kind is OperandKind.CODE_ADDRESS for operand in spec.operands)
