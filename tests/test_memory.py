"""Tests for memory and register operations."""

import jax.numpy as jnp
import pytest
from chip8 import execute, create_state, MachineConfig
from chip8.constants import FONT_DATA, PROGRAM_START
from conftest import set_registers


class TestBasicMemory:
    """Test basic memory operations."""

    def test_set_basic(self, fresh_state, devices):
        """6XNN - Set VX = NN."""
        state = execute(fresh_state, 0x600A, devices)  # V0 = 0xA
        assert state.V[0] == 0xA

    def test_add_basic(self, fresh_state, devices):
        """7XNN - Add NN to VX."""
        state = set_registers(fresh_state, V1=0x10)
        state = execute(state, 0x7105, devices)  # V1 += 5
        assert state.V[1] == 0x15

    def test_add_wraps_without_flag(self, fresh_state, devices):
        """7XNN - Overflow wraps and VF is untouched."""
        state = set_registers(fresh_state, V1=0xFF, VF=0x00)
        state = execute(state, 0x7102, devices)
        assert state.V[1] == 0x01
        assert state.V[15] == 0


class TestIndexRegister:
    """Test I register operations."""

    def test_set_index_basic(self, fresh_state, devices):
        """ANNN - Set I register to NNN."""
        state = execute(fresh_state, 0xA123, devices)  # I = 0x123
        assert state.I == 0x123

    def test_set_index_zero(self, fresh_state, devices):
        """ANNN - Set I register to zero."""
        state = execute(fresh_state, 0xA123, devices)
        state = execute(state, 0xA000, devices)
        assert state.I == 0x000

    def test_set_index_maximum(self, fresh_state, devices):
        """ANNN - Set I register to maximum 12-bit value."""
        state = execute(fresh_state, 0xAFFF, devices)
        assert state.I == 0xFFF


class TestRandom:
    """Test CXNN."""

    def test_random_masked(self, fresh_state, devices):
        """CXNN - result never has bits outside NN."""
        state = fresh_state
        for _ in range(20):
            state = execute(state, 0xC30F, devices)
            assert (int(state.V[3]) & 0xF0) == 0

    def test_random_zero_mask(self, fresh_state, devices):
        state = set_registers(fresh_state, V3=0xAA)
        state = execute(state, 0xC300, devices)
        assert state.V[3] == 0

    def test_random_advances_rng(self, fresh_state, devices):
        state = execute(fresh_state, 0xC3FF, devices)
        assert not jnp.array_equal(state.rng, fresh_state.rng)

    def test_random_is_seeded(self, devices):
        a = execute(create_state(MachineConfig(seed=7)), 0xC3FF, devices)
        b = execute(create_state(MachineConfig(seed=7)), 0xC3FF, devices)
        assert a.V[3] == b.V[3]


class TestInitialState:
    """Test machine state creation."""

    def test_font_loaded_at_zero(self, fresh_state):
        assert len(FONT_DATA) == 80
        assert jnp.array_equal(fresh_state.memory[0x000:0x050], jnp.array(FONT_DATA, dtype=jnp.uint8))

    def test_rest_of_memory_zero(self, fresh_state):
        assert not jnp.any(fresh_state.memory[0x050:])

    def test_registers_and_pc(self, fresh_state):
        assert not jnp.any(fresh_state.V)
        assert fresh_state.I == 0
        assert fresh_state.pc == PROGRAM_START
        assert fresh_state.stack.pointer == 0
        assert fresh_state.delay_timer == 0
        assert fresh_state.sound_timer == 0
        assert not fresh_state.paused

    def test_stack_capacity_from_config(self):
        state = create_state(MachineConfig(stack_size=4))
        assert state.stack.capacity == 4
