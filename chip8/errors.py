"""CHIP-8 error types."""

from typing import Optional


class Chip8Error(Exception):
    """Base class for all emulator errors."""


class MachineFault(Chip8Error):
    """Fatal error raised while executing an instruction.

    ``pc`` is the address the faulting instruction was fetched from. It is
    filled in by :func:`chip8.emulator.step` when the fault escapes
    :func:`chip8.emulator.execute`.
    """

    def __init__(self, message: str, pc: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.pc = pc

    def __str__(self) -> str:
        if self.pc is None:
            return self.message
        return f"{self.message} at PC=0x{self.pc:03X}"


class UnknownOpcode(MachineFault):
    """Instruction word matches no known opcode pattern."""

    def __init__(self, opcode: int, pc: Optional[int] = None):
        super().__init__(f"Unknown opcode 0x{opcode:04X}", pc)
        self.opcode = opcode


class StackOverflow(MachineFault):
    """Subroutine call with a full call stack."""

    def __init__(self, depth: int, pc: Optional[int] = None):
        super().__init__(f"Stack overflow (depth {depth})", pc)
        self.depth = depth


class StackUnderflow(MachineFault):
    """Return from subroutine with an empty call stack."""

    def __init__(self, pc: Optional[int] = None):
        super().__init__("Stack underflow (return with empty stack)", pc)


class ProgramTooLarge(Chip8Error):
    """Program image does not fit in memory above PROGRAM_START."""

    def __init__(self, size: int, capacity: int):
        super().__init__(f"Program is {size} bytes, only {capacity} bytes available")
        self.size = size
        self.capacity = capacity


class MachineHalted(Chip8Error):
    """Interpreter was used after a fatal fault."""
