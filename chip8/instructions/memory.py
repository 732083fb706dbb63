"""CHIP-8 register load and immediate instructions."""

import jax
from chip8.state import MachineState, set_register, set_index
from chip8.decode import DecodedInstruction
from chip8.devices import Devices


def execute_set(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """6XNN - Set VX = NN."""
    return set_register(state, instruction.x, instruction.nn)


def execute_add(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """7XNN - Add NN to VX. Wraps, VF is not affected."""
    return set_register(state, instruction.x, int(state.V[instruction.x]) + instruction.nn)


def execute_set_index(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """ANNN - Set I = NNN."""
    return set_index(state, instruction.nnn)


def execute_random(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """CXNN - Set VX = random & NN."""
    key, subkey = jax.random.split(state.rng)
    random_value = int(jax.random.randint(subkey, shape=(), minval=0, maxval=256))
    return set_register(state.replace(rng=key), instruction.x, random_value & instruction.nn)
