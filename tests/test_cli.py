"""
CLI Tests for stew3d
====================

Exercises the click command end to end with CliRunner.

Copyright (c) 2026 stew3d Contributors
"""

from click.testing import CliRunner

from stew3d.cli.errors import ExitCode
from stew3d.cli.stew3d import main


SIMPLE = bytes([0x7F, 0x0A, 0xBC, 0x05, 0xC7, 0x0C, 0x04, 0xBD])

SIMPLE_SOURCE = """\
entry:
  mvi 10, a
  call add_4
  hlt
add_4:
  addi 4, a
  ret
"""


class TestStew3dCLI:
    """Tests for the stew3d CLI tool."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_cli_help(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Disassemble 3000 machine code" in result.output

    def test_cli_version(self):
        result = self.runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_cli_basic_disassembly(self, tmp_path):
        test_file = tmp_path / "simple.bin"
        test_file.write_bytes(SIMPLE)

        result = self.runner.invoke(main, [str(test_file)])

        assert result.exit_code == 0
        assert f"Disassembly of file `{test_file}` (8 bytes)" in result.output
        assert "call l0" in result.output
        assert "| l0:" in result.output

    def test_cli_stdin(self):
        result = self.runner.invoke(main, [], input=SIMPLE)

        assert result.exit_code == 0
        assert "Disassembly of file `stdin` (8 bytes)" in result.output
        assert "mvi 10, a" in result.output

    def test_cli_dash_reads_stdin(self):
        result = self.runner.invoke(main, ["-"], input=SIMPLE)

        assert result.exit_code == 0
        assert "`stdin`" in result.output

    def test_cli_empty_file(self, tmp_path):
        test_file = tmp_path / "empty.bin"
        test_file.write_bytes(b"")

        result = self.runner.invoke(main, [str(test_file)])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "is empty" in result.output

    def test_cli_missing_file(self, tmp_path):
        result = self.runner.invoke(main, [str(tmp_path / "missing.bin")])

        assert result.exit_code == 2

    def test_cli_stats(self, tmp_path):
        test_file = tmp_path / "simple.bin"
        test_file.write_bytes(SIMPLE)

        result = self.runner.invoke(main, [str(test_file), "--stats"])

        assert result.exit_code == 0
        assert "Program size: 8 bytes" in result.output
        assert "Instructions: 5" in result.output

    def test_cli_side_by_side(self, tmp_path):
        test_file = tmp_path / "simple.bin"
        test_file.write_bytes(SIMPLE)
        source_file = tmp_path / "simple.3000.s"
        source_file.write_text(SIMPLE_SOURCE)

        result = self.runner.invoke(main, [str(test_file), "--side-by-side", str(source_file)])

        assert result.exit_code == 0
        assert "02:     bc 05 | \tcall add_4" in result.output
        assert " | add_4:" in result.output

    def test_cli_unknown_opcode_lenient(self, tmp_path):
        test_file = tmp_path / "bad.bin"
        test_file.write_bytes(bytes([0x80, 0x05, 0xC5, 0xDF, 0xC7]))

        result = self.runner.invoke(main, [str(test_file)])

        assert result.exit_code == 0
        assert ".byte 0xdf" in result.output

    def test_cli_strict(self, tmp_path):
        test_file = tmp_path / "bad.bin"
        test_file.write_bytes(bytes([0x80, 0x05, 0xC5, 0xDF, 0xC7]))

        result = self.runner.invoke(main, [str(test_file), "--strict"])

        assert result.exit_code == ExitCode.DISASSEMBLY_ERROR
        assert "invalid opcode" in result.output

    def test_cli_strict_from_env(self, tmp_path):
        test_file = tmp_path / "bad.bin"
        test_file.write_bytes(bytes([0xDF]))

        result = self.runner.invoke(main, [str(test_file)], env={"STEW3D_STRICT": "1"})
        assert result.exit_code == ExitCode.DISASSEMBLY_ERROR

        result = self.runner.invoke(
            main, [str(test_file), "--no-strict"], env={"STEW3D_STRICT": "1"}
        )
        assert result.exit_code == 0

    def test_cli_unresolved_error(self, tmp_path):
        test_file = tmp_path / "jump.bin"
        test_file.write_bytes(bytes([0x7F, 0x0A, 0xB1, 0x01]))

        result = self.runner.invoke(main, [str(test_file), "--unresolved", "error"])

        assert result.exit_code == ExitCode.DISASSEMBLY_ERROR
        assert "0x01" in result.output

    def test_cli_unresolved_invalid_choice(self, tmp_path):
        test_file = tmp_path / "simple.bin"
        test_file.write_bytes(SIMPLE)

        result = self.runner.invoke(main, [str(test_file), "--unresolved", "maybe"])

        assert result.exit_code == 2

    def test_cli_output_file(self, tmp_path):
        test_file = tmp_path / "simple.bin"
        test_file.write_bytes(SIMPLE)
        output_file = tmp_path / "listing.txt"

        result = self.runner.invoke(main, [str(test_file), "-o", str(output_file)])

        assert result.exit_code == 0
        assert output_file.exists()
        content = output_file.read_text()
        assert "addi 4, a" in content
        assert "addi 4, a" not in result.output

    def test_cli_verbose(self, tmp_path):
        test_file = tmp_path / "simple.bin"
        test_file.write_bytes(SIMPLE)

        result = self.runner.invoke(main, [str(test_file), "-v"])

        assert result.exit_code == 0
        assert "Instructions disassembled: 5" in result.output
