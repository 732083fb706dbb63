"""Tests for ALU operations (8xxx)."""

import pytest
from chip8 import execute, UnknownOpcode
from chip8.instructions.alu import alu_add, alu_sub_xy, alu_sub_yx
from conftest import set_registers


class TestBasicALU:
    """Test basic ALU operations."""

    def test_alu_set_basic(self, fresh_state, devices):
        """8XY0 - Set VX = VY."""
        state = set_registers(fresh_state, V1=0x42, V2=0x99)

        state = execute(state, 0x8120, devices)  # V1 = V2

        assert state.V[1] == 0x99
        assert state.V[2] == 0x99

    def test_alu_or_basic(self, fresh_state, devices):
        """8XY1 - OR operation."""
        state = set_registers(fresh_state, V1=0xF0, V2=0x0F)

        state = execute(state, 0x8121, devices)  # V1 |= V2

        assert state.V[1] == 0xFF

    def test_alu_and_basic(self, fresh_state, devices):
        """8XY2 - AND operation."""
        state = set_registers(fresh_state, V1=0xF0, V2=0xF1)

        state = execute(state, 0x8122, devices)  # V1 &= V2

        assert state.V[1] == 0xF0

    def test_alu_xor_basic(self, fresh_state, devices):
        """8XY3 - XOR operation."""
        state = set_registers(fresh_state, V1=0xFF, V2=0x0F)

        state = execute(state, 0x8123, devices)  # V1 ^= V2

        assert state.V[1] == 0xF0

    def test_logical_ops_leave_vf_alone(self, fresh_state, devices):
        """8XY1/8XY2/8XY3 - VF keeps its previous value."""
        for instruction in (0x8121, 0x8122, 0x8123):
            state = set_registers(fresh_state, V1=0x0F, V2=0xF0, VF=0x07)
            state = execute(state, instruction, devices)
            assert state.V[15] == 0x07


class TestArithmetic:
    """Test add and subtract flag semantics."""

    @pytest.mark.parametrize("a, b", [
        (0, 0), (1, 2), (100, 155), (100, 156), (0xFF, 0x01), (0xFF, 0xFF), (0x80, 0x80),
    ])
    def test_add_carry(self, fresh_state, devices, a, b):
        """8XY4 - VF = 1 iff a + b > 255, result wraps."""
        state = set_registers(fresh_state, V1=a, V2=b)

        state = execute(state, 0x8124, devices)

        assert state.V[1] == (a + b) % 256
        assert state.V[15] == int(a + b > 255)

    @pytest.mark.parametrize("a, b", [
        (10, 5), (5, 10), (7, 7), (0, 1), (0xFF, 0), (0, 0xFF),
    ])
    def test_sub_no_borrow(self, fresh_state, devices, a, b):
        """8XY5 - VF = 1 iff VX > VY strictly, result wraps."""
        state = set_registers(fresh_state, V3=a, V4=b)

        state = execute(state, 0x8345, devices)

        assert state.V[3] == (a - b) % 256
        assert state.V[15] == int(a > b)

    @pytest.mark.parametrize("a, b", [(10, 5), (5, 10), (7, 7)])
    def test_subn(self, fresh_state, devices, a, b):
        """8XY7 - VX = VY - VX, VF = 1 iff VY > VX."""
        state = set_registers(fresh_state, V3=a, V4=b)

        state = execute(state, 0x8347, devices)

        assert state.V[3] == (b - a) % 256
        assert state.V[15] == int(b > a)

    def test_add_exhaustive_sample(self, fresh_state, devices):
        """8XY4 over a sweep of operand pairs."""
        for a in range(0, 256, 15):
            for b in range(0, 256, 17):
                state = set_registers(fresh_state, V0=a, V1=b)
                state = execute(state, 0x8014, devices)
                assert int(state.V[0]) == (a + b) % 256
                assert int(state.V[15]) == int(a + b > 255)

    def test_flag_overwrites_result_in_vf(self, fresh_state, devices):
        """8XY4 with X = F - the carry flag is written last."""
        state = set_registers(fresh_state, VF=0x01, V1=0x02)

        state = execute(state, 0x8F14, devices)  # sum 3, no carry

        assert state.V[15] == 0


class TestArithmeticAllOperands:
    """Flag and wraparound rules over every pair of 8-bit operands."""

    def test_add_all_pairs(self):
        for a in range(256):
            for b in range(256):
                assert alu_add(a, b) == ((a + b) % 256, int(a + b > 255)), (a, b)

    def test_sub_all_pairs(self):
        for a in range(256):
            for b in range(256):
                assert alu_sub_xy(a, b) == ((a - b) % 256, int(a > b)), (a, b)

    def test_subn_all_pairs(self):
        for a in range(256):
            for b in range(256):
                assert alu_sub_yx(a, b) == ((b - a) % 256, int(b > a)), (a, b)


class TestShifts:
    """Test shift operations."""

    def test_shift_right_captures_lsb(self, fresh_state, devices):
        """8XY6 - VF = old bit 0."""
        state = set_registers(fresh_state, V1=0x05)

        state = execute(state, 0x8106, devices)

        assert state.V[1] == 0x02
        assert state.V[15] == 1

    def test_shift_right_uses_vx_not_vy(self, fresh_state, devices):
        """8XY6 - VY is ignored."""
        state = set_registers(fresh_state, V1=0x08, V2=0xFF)

        state = execute(state, 0x8126, devices)

        assert state.V[1] == 0x04
        assert state.V[15] == 0

    def test_shift_left_raw_flag(self, fresh_state, devices):
        """8XYE - VF holds the masked high bit (0x80), not 1."""
        state = set_registers(fresh_state, V1=0x81)

        state = execute(state, 0x810E, devices)

        assert state.V[1] == 0x02
        assert state.V[15] == 0x80

    def test_shift_left_no_high_bit(self, fresh_state, devices):
        state = set_registers(fresh_state, V1=0x41)

        state = execute(state, 0x810E, devices)

        assert state.V[1] == 0x82
        assert state.V[15] == 0

    def test_shift_left_normalized_flag(self, normalized_state, devices):
        """8XYE - normalize_shift_flag stores 1 instead of 0x80."""
        state = set_registers(normalized_state, V1=0x81)

        state = execute(state, 0x810E, devices)

        assert state.V[1] == 0x02
        assert state.V[15] == 1


class TestUndefinedALU:

    @pytest.mark.parametrize("n", [0x8, 0x9, 0xA, 0xB, 0xC, 0xD, 0xF])
    def test_undefined_alu_raises(self, fresh_state, devices, n):
        with pytest.raises(UnknownOpcode) as excinfo:
            execute(fresh_state, 0x8120 | n, devices)
        assert excinfo.value.opcode == 0x8120 | n
