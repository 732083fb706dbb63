"""CHIP-8 machine state structures."""

import jax
import jax.numpy as jnp
from flax.struct import dataclass, PyTreeNode, field

from chip8.config import MachineConfig
from chip8.constants import PROGRAM_START, FONT_START, FONT_DATA, MEMORY_SIZE, NUM_REGISTERS, STACK_SIZE


@dataclass(frozen=True)
class StackState:
    """Fixed-capacity call stack for subroutine return addresses."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = 0

    @property
    def capacity(self) -> int:
        return self.data.shape[0]


class MachineState(PyTreeNode):
    """Main CHIP-8 machine state.

    The frame buffer is not part of the state; it belongs to the display
    device and is only mutated through ``toggle_pixel``/``clear``.
    ``waiting_register`` holds the target register of a pending FX0A, or -1.
    """
    rng: jax.random.PRNGKey
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.astype(PROGRAM_START, jnp.uint16))
    stack: StackState = field(default_factory=lambda: StackState())
    delay_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    sound_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))
    paused: bool = False
    waiting_register: int = -1
    config: MachineConfig = field(pytree_node=False, default_factory=MachineConfig)


def create_state(config: MachineConfig = None) -> MachineState:
    """Create initial machine state with font data loaded."""
    if config is None:
        config = MachineConfig()
    state = MachineState(
        rng=jax.random.PRNGKey(config.seed),
        stack=StackState(data=jnp.zeros(config.stack_size, dtype=jnp.uint16)),
        config=config,
    )
    return state.replace(memory=state.memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(
        jnp.array(FONT_DATA, dtype=jnp.uint8)
    ))


def set_register(state: MachineState, index: int, value: int) -> MachineState:
    """Write an 8-bit value into VX, wrapping modulo 256."""
    return state.replace(V=state.V.at[index].set(value & 0xFF))


def set_pc(state: MachineState, address: int) -> MachineState:
    return state.replace(pc=jnp.astype(address & 0xFFFF, jnp.uint16))


def set_index(state: MachineState, address: int) -> MachineState:
    return state.replace(I=jnp.astype(address & 0xFFFF, jnp.uint16))
