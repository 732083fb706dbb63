"""Command line entry point."""

import argparse
import sys

from tqdm import tqdm

from chip8.config import MachineConfig
from chip8.constants import INSTRUCTIONS_PER_FRAME
from chip8.display import display_to_text
from chip8.errors import Chip8Error
from chip8.interpreter import Interpreter
from chip8.logging import MachineLogger
from chip8.rendering import COLOR_SCHEMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chip8",
        description="Run a CHIP-8 program",
    )
    parser.add_argument("rom", type=str, help="Path to the program image")
    parser.add_argument(
        "--scale",
        type=int,
        default=10,
        help="Window pixels per CHIP-8 pixel (default: 10)",
    )
    parser.add_argument(
        "--ipf",
        type=int,
        default=INSTRUCTIONS_PER_FRAME,
        help=f"Instructions per 60 Hz frame (default: {INSTRUCTIONS_PER_FRAME})",
    )
    parser.add_argument(
        "--color-scheme",
        type=str,
        default="classic",
        choices=sorted(COLOR_SCHEMES),
        help="Display colors (default: classic)",
    )
    parser.add_argument("--seed", type=int, default=0, help="PRNG seed for CXNN (default: 0)")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level; DEBUG traces every instruction (default: INFO)",
    )
    parser.add_argument(
        "--normalize-shift-flag",
        action="store_true",
        help="Store 0/1 in VF for 8XYE instead of the raw high bit",
    )
    parser.add_argument(
        "--headless",
        type=int,
        metavar="FRAMES",
        default=None,
        help="Run FRAMES frames without a window and print the screen",
    )
    return parser


def run_headless(interpreter: Interpreter, frames: int) -> int:
    try:
        for _ in tqdm(range(frames), desc="frames", unit="frame", disable=frames < 60):
            interpreter.run_frame()
    except Chip8Error:
        return 1
    finally:
        print(display_to_text(interpreter.display))
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = MachineConfig(
        seed=args.seed,
        instructions_per_frame=args.ipf,
        normalize_shift_flag=args.normalize_shift_flag,
    )
    logger = MachineLogger(log_level=args.log_level)
    interpreter = Interpreter(config, logger=logger)

    try:
        interpreter.load_rom(args.rom)
    except (OSError, Chip8Error) as e:
        logger.error(f"Cannot load {args.rom}: {e}")
        return 1

    if args.headless is not None:
        return run_headless(interpreter, args.headless)

    from chip8.host import run_emulator
    run_emulator(interpreter, scale=args.scale, color_scheme=args.color_scheme)
    return 0


if __name__ == "__main__":
    sys.exit(main())
