"""
stew3d Command-Line Interface
=============================

- **stew3d**: 3000 disassembler

Implemented as a Click application with help and error reporting.

Copyright (c) 2026 stew3d Contributors
"""

__all__ = ["stew3d"]
