"""
stew3d Configuration
====================

Settings that change how the disassembler reacts to problems in the
machine code. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (the CLI overrides the environment)

Environment variables (all optional):
    STEW3D_UNRESOLVED: "raw", "warn" or "error"
    STEW3D_STRICT: "1"/"true"/"yes" to enable strict mode

Copyright (c) 2026 stew3d Contributors
"""

import os
from dataclasses import dataclass
from enum import Enum


class UnresolvedPolicy(Enum):
    """
    What to do with a jump or call whose target is not an instruction start.

    RAW:   render the target as a number, silently
    WARN:  render the target as a number and log a warning
    ERROR: abort with UnresolvedTargetError
    """
    RAW = "raw"
    WARN = "warn"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class DisassemblerConfig:
    """
    Configuration for a disassembly run.

    Attributes:
        unresolved: Policy for unresolved control-transfer targets (default: RAW)
        strict: Abort on the first unknown opcode, truncated instruction or
                unresolved target instead of degrading to raw output
                (default: False)
        show_stats: Include binary statistics after the header (default: False)
    """
    unresolved: UnresolvedPolicy = UnresolvedPolicy.RAW
    strict: bool = False
    show_stats: bool = False

    @classmethod
    def from_env(cls) -> "DisassemblerConfig":
        """
        Create DisassemblerConfig from environment variables.

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if unresolved := os.environ.get("STEW3D_UNRESOLVED"):
            try:
                config.unresolved = UnresolvedPolicy(unresolved.strip().lower())
            except ValueError:
                pass  # Ignore invalid values

        if strict := os.environ.get("STEW3D_STRICT"):
            config.strict = strict.strip().lower() in _TRUE_VALUES

        return config
