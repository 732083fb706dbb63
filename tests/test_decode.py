"""Tests for instruction decoding and disassembly."""

import pytest
from chip8 import decode, disassemble


class TestDecode:

    def test_fields(self):
        instruction = decode(0xD12A)
        assert instruction.raw == 0xD12A
        assert instruction.opcode == 0xD
        assert instruction.x == 0x1
        assert instruction.y == 0x2
        assert instruction.n == 0xA
        assert instruction.nn == 0x2A
        assert instruction.nnn == 0x12A


class TestDisassemble:

    @pytest.mark.parametrize("word, text", [
        (0x00E0, "CLS"),
        (0x00EE, "RET"),
        (0x0123, "SYS 0x123"),
        (0x1234, "JP 0x234"),
        (0x2ABC, "CALL 0xABC"),
        (0x3A0F, "SE VA, 0x0F"),
        (0x5120, "SE V1, V2"),
        (0x600A, "LD V0, 0x0A"),
        (0x8014, "ADD V0, V1"),
        (0x801E, "SHL V0, V1"),
        (0xB200, "JP V0, 0x200"),
        (0xD015, "DRW V0, V1, 5"),
        (0xE29E, "SKP V2"),
        (0xE2A1, "SKNP V2"),
        (0xF30A, "LD V3, K"),
        (0xF533, "LD B, V5"),
        (0xFF65, "LD VF, [I]"),
    ])
    def test_known(self, word, text):
        assert disassemble(word) == text

    @pytest.mark.parametrize("word", [0xFFFF, 0x8128, 0x5121, 0xE0FF])
    def test_unknown(self, word):
        assert disassemble(word) == f"DW 0x{word:04X}"
