"""CHIP-8 display operations."""

from chip8.state import MachineState, set_register
from chip8.decode import DecodedInstruction
from chip8.devices import Devices
from chip8.constants import ADDRESS_MASK, FLAG_REGISTER, SPRITE_WIDTH


def execute_display(state: MachineState, instruction: DecodedInstruction, devices: Devices) -> MachineState:
    """DXYN - XOR an 8xN sprite from memory[I] onto the display at (VX, VY).

    VF is cleared first and set to 1 if any toggle erased a lit pixel.
    Coordinates wrap at the screen edges, per pixel.
    """
    sprite_x = int(state.V[instruction.x])
    sprite_y = int(state.V[instruction.y])
    base = int(state.I)
    state = set_register(state, FLAG_REGISTER, 0)

    collision = False
    for row in range(instruction.n):
        sprite_byte = int(state.memory[(base + row) & ADDRESS_MASK])
        for col in range(SPRITE_WIDTH):
            if sprite_byte & (0x80 >> col):
                if devices.display.toggle_pixel(sprite_x + col, sprite_y + row):
                    collision = True

    return set_register(state, FLAG_REGISTER, int(collision))
