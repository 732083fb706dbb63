"""CHIP-8 interpreter package."""

from chip8.config import MachineConfig
from chip8.state import MachineState, StackState, create_state
from chip8.emulator import execute, fetch, step, load_program, load_rom, tick_timers
from chip8.decode import DecodedInstruction, decode, disassemble
from chip8.devices import Devices, create_devices
from chip8.display import Display
from chip8.keypad import Keypad
from chip8.speaker import ToneDevice, SilentSpeaker
from chip8.interpreter import Interpreter
from chip8.errors import (
    Chip8Error, MachineFault, UnknownOpcode, StackOverflow, StackUnderflow,
    ProgramTooLarge, MachineHalted,
)
from chip8.constants import *

__all__ = [
    "MachineConfig",
    "MachineState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "step",
    "load_program",
    "load_rom",
    "tick_timers",
    "DecodedInstruction",
    "decode",
    "disassemble",
    "Devices",
    "create_devices",
    "Display",
    "Keypad",
    "ToneDevice",
    "SilentSpeaker",
    "Interpreter",
    "Chip8Error",
    "MachineFault",
    "UnknownOpcode",
    "StackOverflow",
    "StackUnderflow",
    "ProgramTooLarge",
    "MachineHalted",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
]
