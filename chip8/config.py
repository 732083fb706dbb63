"""Interpreter configuration."""

from flax.struct import dataclass

from chip8.constants import INSTRUCTIONS_PER_FRAME, STACK_SIZE, TONE_FREQUENCY


@dataclass
class MachineConfig:
    """Static settings for one machine instance.

    Attributes:
        seed: Seed for the PRNG used by CXNN
        instructions_per_frame: Instructions executed per 60 Hz frame
        stack_size: Maximum call depth before StackOverflow
        normalize_shift_flag: Store 0/1 in VF for 8XYE instead of the raw
            masked bit (VX & 0x80)
        tone_frequency: Pitch of the buzzer in Hz
    """
    seed: int = 0
    instructions_per_frame: int = INSTRUCTIONS_PER_FRAME
    stack_size: int = STACK_SIZE
    normalize_shift_flag: bool = False
    tone_frequency: int = TONE_FREQUENCY
