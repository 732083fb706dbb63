"""Test configuration and fixtures for CHIP-8 interpreter tests."""

import pytest
import jax.numpy as jnp
from chip8 import create_state, create_devices, Interpreter, MachineConfig


@pytest.fixture
def fresh_state():
    """Provide a fresh machine state for each test."""
    return create_state()


@pytest.fixture
def devices():
    """Provide a blank display and an idle keypad."""
    return create_devices()


@pytest.fixture
def interpreter():
    """Provide an interpreter with default configuration."""
    return Interpreter()


@pytest.fixture
def normalized_state():
    """Provide a state that stores 0/1 in VF for 8XYE."""
    return create_state(MachineConfig(normalize_shift_flag=True))


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def set_registers(state, **values):
    """Helper to set registers by name, e.g. set_registers(state, V1=5, VF=1)."""
    V = state.V
    for name, value in values.items():
        V = V.at[int(name[1:], 16)].set(value)
    return state.replace(V=V)
