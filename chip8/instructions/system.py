"""CHIP-8 system instructions (0x0xxx)."""

from chip8.state import MachineState, set_pc
from chip8.decode import DecodedInstruction
from chip8.devices import Devices
from chip8.stack import pop


def no_op(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """0NNN - Machine code routine call, ignored by interpreters."""
    return state


def execute_clear_screen(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """00E0 - Clear display."""
    devices.display.clear()
    return state


def execute_return(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack)
    return set_pc(state.replace(stack=stack), address)


SYSTEM_INSTRUCTIONS = {
    0x00E0: execute_clear_screen,
    0x00EE: execute_return,
}


def execute_system_instruction(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """Dispatch system instructions."""
    handler = SYSTEM_INSTRUCTIONS.get(instruction.raw, no_op)
    return handler(state, instruction, devices)
