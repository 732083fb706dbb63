import time

from chip8 import Interpreter, MachineConfig
from chip8.display import display_to_text


# Draw the digits 0-F in two rows of eight, then loop forever.
#   V0 = digit, V1 = x, V2 = y
PROGRAM = bytes([
    0x60, 0x00,  # 0x200: LD V0, 0x00
    0x61, 0x02,  # 0x202: LD V1, 0x02
    0x62, 0x04,  # 0x204: LD V2, 0x04
    0xF0, 0x29,  # 0x206: LD F, V0
    0xD1, 0x25,  # 0x208: DRW V1, V2, 5
    0x70, 0x01,  # 0x20A: ADD V0, 0x01
    0x71, 0x07,  # 0x20C: ADD V1, 0x07
    0x30, 0x08,  # 0x20E: SE V0, 0x08
    0x12, 0x16,  # 0x210: JP 0x216
    0x61, 0x02,  # 0x212: LD V1, 0x02
    0x62, 0x10,  # 0x214: LD V2, 0x10
    0x30, 0x10,  # 0x216: SE V0, 0x10
    0x12, 0x06,  # 0x218: JP 0x206
    0x12, 0x1A,  # 0x21A: JP 0x21A
])

if __name__ == "__main__":
    interpreter = Interpreter(MachineConfig(instructions_per_frame=20))
    interpreter.load_program(PROGRAM)

    start = time.time()
    for _ in range(10):
        interpreter.run_frame()
    print("Execution time (s):", time.time() - start)

    print(display_to_text(interpreter.display))
