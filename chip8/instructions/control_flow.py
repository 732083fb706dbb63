"""CHIP-8 control flow instructions."""

from chip8.state import MachineState, set_pc
from chip8.decode import DecodedInstruction
from chip8.devices import Devices
from chip8.errors import UnknownOpcode
from chip8.stack import push


def execute_jump(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """1NNN - Jump to address NNN."""
    return set_pc(state, instruction.nnn)


def execute_call(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, int(state.pc)))
    return execute_jump(state, instruction, devices)


def make_skip_instruction(condition_fn, require_zero_n=False):
    """Factory for skip instructions."""
    def skip_instruction(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
        if require_zero_n and instruction.n != 0:
            raise UnknownOpcode(instruction.raw)
        if condition_fn(state, instruction):
            return set_pc(state, int(state.pc) + 2)
        return state
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) != inst.nn
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) == int(state.V[inst.y]),
    require_zero_n=True,
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: int(state.V[inst.x]) != int(state.V[inst.y]),
    require_zero_n=True,
)


def execute_jump_with_offset(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """BNNN - Jump to address NNN + V0."""
    return set_pc(state, instruction.nnn + int(state.V[0]))


def execute_skip_if_key(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """EX9E/EXA1 - Skip if key pressed/not pressed."""
    if instruction.nn not in (0x9E, 0xA1):
        raise UnknownOpcode(instruction.raw)

    key_index = int(state.V[instruction.x]) & 0xF
    key_pressed = devices.keypad.is_pressed(key_index)
    is_not_instruction = instruction.nn == 0xA1

    if key_pressed ^ is_not_instruction:
        return set_pc(state, int(state.pc) + 2)
    return state
