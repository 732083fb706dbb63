"""CHIP-8 miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp
from chip8.state import MachineState, set_register, set_index
from chip8.decode import DecodedInstruction
from chip8.devices import Devices
from chip8.constants import ADDRESS_MASK, FONT_START, FONT_GLYPH_SIZE
from chip8.errors import UnknownOpcode
from chip8.keypad import check_key


def execute_get_delay_timer(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """FX07 - Set VX to delay timer value."""
    return set_register(state, instruction.x, int(state.delay_timer))


def execute_wait_for_key(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """FX0A - Pause until the next key press, which is stored in VX.

    Only records the continuation; the driver resumes the machine through
    :func:`resume_with_key`.
    """
    return state.replace(paused=True, waiting_register=instruction.x)


def resume_with_key(state: MachineState, key: int) -> MachineState:
    """Complete a pending FX0A with the pressed key. Raises ValueError for keys outside 0..F."""
    check_key(key)
    if state.waiting_register < 0:
        return state
    state = set_register(state, state.waiting_register, key)
    return state.replace(paused=False, waiting_register=-1)


def execute_set_delay_timer(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=state.V[instruction.x])


def execute_set_sound_timer(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=state.V[instruction.x])


def execute_add_to_index(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """FX1E - Add VX to I register. VF is not affected."""
    return set_index(state, int(state.I) + int(state.V[instruction.x]))


def execute_font_character(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """FX29 - Set I to location of sprite for digit VX."""
    digit = int(state.V[instruction.x]) & 0xF
    return set_index(state, FONT_START + digit * FONT_GLYPH_SIZE)


def execute_bcd_conversion(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = int(state.V[instruction.x])
    digits = jnp.array([value // 100, (value // 10) % 10, value % 10], dtype=jnp.uint8)
    indices = (jnp.arange(3) + int(state.I)) & ADDRESS_MASK
    return state.replace(memory=state.memory.at[indices].set(digits))


def execute_store_registers(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """FX55 - Store V0 through VX in memory starting at I. I is unchanged."""
    count = instruction.x + 1
    indices = (jnp.arange(count) + int(state.I)) & ADDRESS_MASK
    return state.replace(memory=state.memory.at[indices].set(state.V[:count]))


def execute_load_registers(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """FX65 - Load V0 through VX from memory starting at I. I is unchanged."""
    count = instruction.x + 1
    indices = (jnp.arange(count) + int(state.I)) & ADDRESS_MASK
    return state.replace(V=state.V.at[:count].set(state.memory[indices]))


MISC_INSTRUCTIONS = {
    0x07: execute_get_delay_timer,
    0x0A: execute_wait_for_key,
    0x15: execute_set_delay_timer,
    0x18: execute_set_sound_timer,
    0x1E: execute_add_to_index,
    0x29: execute_font_character,
    0x33: execute_bcd_conversion,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}


def execute_misc_instruction(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """Dispatch misc instructions on the low byte."""
    handler = MISC_INSTRUCTIONS.get(instruction.nn)
    if handler is None:
        raise UnknownOpcode(instruction.raw)
    return handler(state, instruction, devices)
