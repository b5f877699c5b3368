#!/usr/bin/env python3
"""
stew3d Disassembler Demo
========================

This script demonstrates how to use the stew3d library to:
1. Disassemble a binary with the default settings
2. Inspect decoded instructions and labels
3. Print statistics about the binary
4. List the binary next to its assembly source
5. Fail fast with strict mode

Usage:
    python examples/disassemble_demo.py

Copyright (c) 2026 stew3d Contributors
"""

from pathlib import Path

from stew3d import Disassembler, DisassemblerConfig, DisassemblyError


def main():
    here = Path(__file__).parent
    data = (here / "simple.bin").read_bytes()

    # ==========================================================================
    # 1. Disassemble with the default settings
    # ==========================================================================
    disasm = Disassembler()
    result = disasm.disassemble(data)
    print(disasm.render(result, name="simple.bin"))

    # ==========================================================================
    # 2. Walk the decoded units
    # ==========================================================================
    for unit in result.instructions:
        label = result.labels.get(unit.address, "")
        print(f"{unit.address:02x} {label:4} {unit.mnemonic} {unit.operands}")
    print()

    # ==========================================================================
    # 3. Statistics
    # ==========================================================================
    print(result.stats)
    print()

    # ==========================================================================
    # 4. Side-by-side with the source
    # ==========================================================================
    source = (here / "simple.3000.s").read_text()
    print(disasm.render(result, name="simple.bin", source=source))

    # ==========================================================================
    # 5. Strict mode refuses bytes that are not instructions
    # ==========================================================================
    strict = Disassembler(DisassemblerConfig(strict=True))
    try:
        strict.disassemble(data + bytes([0xDF]))
    except DisassemblyError as e:
        print(e)


if __name__ == "__main__":
    main()
