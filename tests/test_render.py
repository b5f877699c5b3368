"""
Unit Tests for the Listing Renderer
===================================

Test coverage includes:
- The exact listing of the worked example
- Label declaration lines and operand substitution
- Raw byte placeholders and unresolved targets
- Column alignment
- Side-by-side listings against assembly source

Copyright (c) 2026 stew3d Contributors
"""

from stew3d.disassembler import (
    LabelTable,
    decode,
    format_header,
    format_line,
    render,
    render_side_by_side,
    resolve,
)


SIMPLE = bytes([0x7F, 0x0A, 0xBC, 0x05, 0xC7, 0x0C, 0x04, 0xBD])

SIMPLE_SOURCE = """\
entry:
  mvi 10, a
  call add_4
  hlt
add_4:
  addi 4, a
  ret

; side by side mode from assembler:
;               | entry:
; 00:     7f 0a | \tmvi 10, a
; 02:     bc 05 | \tcall add_4
; 04:        c7 | \thlt
;               | add_4:
; 05:     0c 04 | \taddi 4, a
; 07:        bd | \tret
"""

# Column of the "|" separator in the generated listing
SEPARATOR_COLUMN = 16


def listing(data, name="test.bin"):
    units = decode(data)
    return render(name, len(data), units, resolve(units))


def body(text):
    """Listing lines after the header and blank line."""
    return text.splitlines()[2:]


class TestRender:
    """Tests for the generated listing."""

    def test_simple_listing(self):
        expected = "\n".join([
            "Disassembly of file `simple.bin` (8 bytes)",
            "",
            "00:    7f 0a    |   mvi 10, a",
            "02:    bc 05    |   call l0",
            "04:    c7       |   hlt",
            "05:" + " " * 13 + "| l0:",
            "05:    0c 04    |   addi 4, a",
            "07:    bd       |   ret",
        ]) + "\n"
        assert listing(SIMPLE, "simple.bin") == expected

    def test_empty(self):
        text = render("empty.bin", 0, [], LabelTable())
        assert text == "Disassembly of file `empty.bin` (0 bytes)\n\n"

    def test_label_precedes_instruction(self):
        lines = body(listing(SIMPLE))
        assert lines[3].endswith("| l0:")
        assert lines[4].endswith("addi 4, a")

    def test_unknown_opcode_placeholder(self):
        lines = body(listing(bytes([0xC8, 0xDF, 0xC7])))
        assert lines[1].startswith("01:")
        assert lines[1].endswith(".byte 0xdf  ; unknown opcode")
        assert lines[2].endswith("hlt")

    def test_truncated_placeholder(self):
        lines = body(listing(bytes([0xC7, 0x9E, 0x05])))
        assert lines[1].endswith(".byte 0x9e  ; truncated instruction")

    def test_unresolved_target_rendered_as_number(self):
        lines = body(listing(bytes([0x7F, 0x0A, 0xB1, 0x01])))
        assert lines[1].endswith("jmp 0x01")

    def test_operand_forms(self):
        data = bytes([
            0x9E, 0x03, 0x07,  # stsi 3, 7
            0x9A, 0x05,        # sts a, 5
            0xAB, 0x09,        # cmpi a, 9
            0xAC, 0x09,        # cmpi 9, a
            0xC1, 0x01,        # outi 1
            0x00,              # add a, a
        ])
        texts = [line.split("|", 1)[1].strip() for line in body(listing(data))]
        assert texts == ["stsi 3, 7", "sts a, 5", "cmpi a, 9", "cmpi 9, a", "outi 1", "add a, a"]

    def test_immediates_are_decimal(self):
        lines = body(listing(bytes([0x7F, 0xFF])))
        assert lines[0].endswith("mvi 255, a")

    def test_columns_aligned(self):
        """Separator stays put across 1-3 byte instructions and l0..l11."""
        count = 12
        base = count * 2
        data = bytearray()
        for i in reversed(range(count)):
            data += bytes([0xB1, base + i])
        data += bytes([0xC8] * count)
        data += bytes([0x9E, 0x01, 0x02, 0xDF])

        lines = body(listing(bytes(data)))
        assert any("jmp l11" in line for line in lines)
        assert any(line.endswith("| l10:") for line in lines)
        for line in lines:
            assert line.index("|") == SEPARATOR_COLUMN, line

    def test_wide_addresses(self):
        """Addresses above 0xff widen the address column without moving the separator."""
        data = bytes([0xC8] * 0x101)
        lines = body(listing(data))
        assert lines[-1].startswith("100:")
        assert lines[-1].index("|") == SEPARATOR_COLUMN

    def test_format_line(self):
        assert format_line(0x07, bytes([0xBD]), "  ret") == "07:    bd       |   ret"

    def test_format_header(self):
        assert format_header("stdin", 3) == "Disassembly of file `stdin` (3 bytes)"


class TestRenderSideBySide:
    """Tests for listings paired with assembly source."""

    def setup_method(self):
        self.units = decode(SIMPLE)
        self.labels = resolve(self.units)

    def test_matches_assembler_listing(self):
        text = render_side_by_side("simple.bin", 8, self.units, SIMPLE_SOURCE, self.labels)
        expected = "\n".join([
            "Disassembly of file `simple.bin` (8 bytes)",
            "",
            " " * 13 + " | entry:",
            "00:     7f 0a | \tmvi 10, a",
            "02:     bc 05 | \tcall add_4",
            "04:        c7 | \thlt",
            " " * 13 + " | add_4:",
            "05:     0c 04 | \taddi 4, a",
            "07:        bd | \tret",
        ]) + "\n"
        assert text == expected

    def test_same_rows_as_reference_comment(self):
        """The rendered rows equal the listing quoted in the source's comment."""
        text = render_side_by_side("simple.bin", 8, self.units, SIMPLE_SOURCE, self.labels)
        quoted = [
            line[2:] for line in SIMPLE_SOURCE.splitlines()
            if line.startswith("; ") and "|" in line
        ]
        assert body(text) == quoted

    def test_leftover_units_use_generated_text(self):
        source = "  mvi 10, a\n"
        lines = body(render_side_by_side("x", 8, self.units, source, self.labels))

        assert lines[0] == "00:     7f 0a | \tmvi 10, a"
        assert lines[1] == "02:     bc 05 | \tcall l0"
        assert " | l0:" in lines[3]
        assert lines[4] == "05:     0c 04 | \taddi 4, a"

    def test_leftover_source_lines(self):
        source = "  hlt\n  ret\n"
        units = decode(bytes([0xC7]))
        lines = body(render_side_by_side("x", 1, units, source))
        assert lines == ["00:        c7 | \thlt", " " * 13 + " | \tret"]

    def test_empty_source(self):
        lines = body(render_side_by_side("x", 8, self.units, "", self.labels))
        assert len(lines) == 6

    def test_alignment_past_ff(self):
        units = decode(bytes([0xC8]) * 0x101)
        source = "  nop\n" * 0x101
        lines = body(render_side_by_side("x", 0x101, units, source))

        assert len(lines) == 0x101
        assert {line.index("|") for line in lines} == {15}
        assert lines[0] == "00:" + " " * 9 + "c8 | \tnop"
        assert lines[-1] == "100:" + " " * 8 + "c8 | \tnop"

    def test_alignment_past_ff_with_labels(self):
        data = bytes([0xC8]) * 0x100 + bytes([0xB1, 0x00])
        units = decode(data)
        lines = body(render_side_by_side("x", len(data), units, "", resolve(units)))

        assert lines[0] == " " * 14 + " | l0:"
        assert {line.index("|") for line in lines} == {15}
