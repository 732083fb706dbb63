"""Main CHIP-8 execution engine."""

from typing import Union

import jax.numpy as jnp
from chip8.state import MachineState, set_pc
from chip8.decode import DecodedInstruction, decode
from chip8.devices import Devices
from chip8.constants import ADDRESS_MASK, PROGRAM_START, MAX_PROGRAM_SIZE
from chip8.errors import MachineFault, ProgramTooLarge
from chip8.instructions.system import execute_system_instruction
from chip8.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset, execute_skip_if_key
)
from chip8.instructions.alu import execute_alu_operation
from chip8.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chip8.instructions.display import execute_display
from chip8.instructions.misc import execute_misc_instruction


INSTRUCTION_CLASSES = [
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    execute_jump_with_offset,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
]


def execute(state: MachineState, instruction: Union[int, DecodedInstruction], devices: Devices) -> MachineState:
    """Execute single CHIP-8 instruction.

    Dispatches on the first nibble; the 0, 8, E and F classes dispatch again
    on their low nibble or byte. Raises :class:`~chip8.errors.UnknownOpcode`
    for words outside the instruction set.
    """
    if not isinstance(instruction, DecodedInstruction):
        instruction = decode(instruction)
    return INSTRUCTION_CLASSES[instruction.opcode](state, instruction, devices)


def _pack_u16(high: int, low: int) -> int:
    """Pack two bytes into a big-endian word."""
    return (high << 8) | low


def fetch(state: MachineState) -> tuple[MachineState, int]:
    """Fetch next instruction from memory and advance PC by 2."""
    pc = int(state.pc)
    instruction = _pack_u16(int(state.memory[pc & ADDRESS_MASK]), int(state.memory[(pc + 1) & ADDRESS_MASK]))
    return set_pc(state, pc + 2), instruction


def step(state: MachineState, devices: Devices) -> MachineState:
    """Fetch and execute one instruction.

    Faults raised during execution are tagged with the address the
    instruction was fetched from.
    """
    address = int(state.pc)
    state, instruction = fetch(state)
    try:
        return execute(state, instruction, devices)
    except MachineFault as fault:
        fault.pc = address
        raise


def tick_timers(state: MachineState) -> MachineState:
    """Decrement the delay and sound timers toward zero."""
    return state.replace(
        delay_timer=jnp.astype(max(int(state.delay_timer) - 1, 0), jnp.uint8),
        sound_timer=jnp.astype(max(int(state.sound_timer) - 1, 0), jnp.uint8),
    )


def load_program(state: MachineState, program: bytes) -> MachineState:
    """Copy a program image into memory starting at 0x200."""
    program = bytes(program)
    if len(program) > MAX_PROGRAM_SIZE:
        raise ProgramTooLarge(len(program), MAX_PROGRAM_SIZE)
    if not program:
        return state
    program_array = jnp.array(list(program), dtype=jnp.uint8)
    new_memory = state.memory.at[PROGRAM_START:PROGRAM_START + len(program)].set(program_array)
    return state.replace(memory=new_memory)


def load_rom(state: MachineState, filename: str) -> MachineState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    with open(filename, 'rb') as f:
        rom_data = f.read()
    return load_program(state, rom_data)
