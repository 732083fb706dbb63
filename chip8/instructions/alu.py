"""CHIP-8 ALU operations (8xxx).

Each operation maps (VX, VY) to (result, flag). A flag of None leaves VF
alone; otherwise VF is written after VX, so the flag wins when X is F.
"""

from typing import Optional

from chip8.state import MachineState, set_register
from chip8.decode import DecodedInstruction
from chip8.devices import Devices
from chip8.constants import FLAG_REGISTER
from chip8.errors import UnknownOpcode


def alu_set(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY0 - Set: VX = VY."""
    return vy, None


def alu_or(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy, None


def alu_and(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy, None


def alu_xor(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy, None


def alu_add(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY4 - Add: VX += VY, VF = carry."""
    result = vx + vy
    return result & 0xFF, int(result > 0xFF)


def alu_sub_xy(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY5 - Subtract: VX -= VY, VF = 1 if VX > VY (no borrow)."""
    return (vx - vy) & 0xFF, int(vx > vy)


def alu_shift_right(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY6 - Shift right: VX >>= 1, VF = old least significant bit."""
    return vx >> 1, vx & 0x01


def alu_sub_yx(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XY7 - Subtract: VX = VY - VX, VF = 1 if VY > VX (no borrow)."""
    return (vy - vx) & 0xFF, int(vy > vx)


def alu_shift_left(vx: int, vy: int) -> tuple[int, Optional[int]]:
    """8XYE - Shift left: VX <<= 1, VF = old most significant bit, unshifted (0x80 or 0)."""
    return (vx << 1) & 0xFF, vx & 0x80


ALU_OPERATIONS = {
    0x0: alu_set,
    0x1: alu_or,
    0x2: alu_and,
    0x3: alu_xor,
    0x4: alu_add,
    0x5: alu_sub_xy,
    0x6: alu_shift_right,
    0x7: alu_sub_yx,
    0xE: alu_shift_left,
}


def execute_alu_operation(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """8XYN - ALU operations dispatcher."""
    operation = ALU_OPERATIONS.get(instruction.n)
    if operation is None:
        raise UnknownOpcode(instruction.raw)

    vx = int(state.V[instruction.x])
    vy = int(state.V[instruction.y])
    result, vf = operation(vx, vy)

    if vf is not None and operation is alu_shift_left and state.config.normalize_shift_flag:
        vf = int(vf != 0)

    state = set_register(state, instruction.x, result)
    if vf is not None:
        state = set_register(state, FLAG_REGISTER, vf)
    return state
