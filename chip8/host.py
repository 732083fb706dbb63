"""
pygame front end: window, keyboard and buzzer around an Interpreter.
"""

import numpy as np
import pygame

from chip8.constants import SCREEN_WIDTH, SCREEN_HEIGHT, TIMER_FREQUENCY, TONE_FREQUENCY
from chip8.errors import Chip8Error
from chip8.interpreter import Interpreter
from chip8.speaker import ToneDevice

# COSMAC VIP hex keypad laid over the left side of a QWERTY keyboard
KEY_MAP = {
    pygame.K_1: 0x1, pygame.K_2: 0x2, pygame.K_3: 0x3, pygame.K_4: 0xC,
    pygame.K_q: 0x4, pygame.K_w: 0x5, pygame.K_e: 0x6, pygame.K_r: 0xD,
    pygame.K_a: 0x7, pygame.K_s: 0x8, pygame.K_d: 0x9, pygame.K_f: 0xE,
    pygame.K_z: 0xA, pygame.K_x: 0x0, pygame.K_c: 0xB, pygame.K_v: 0xF,
}

SAMPLE_RATE = 44100


def square_wave(frequency: int = TONE_FREQUENCY, sample_rate: int = SAMPLE_RATE,
                amplitude: int = 4096) -> np.ndarray:
    """One second of a square wave as int16 samples."""
    t = np.arange(sample_rate)
    high = ((2 * frequency * t) // sample_rate) % 2 == 0
    return np.where(high, amplitude, -amplitude).astype(np.int16)


class PygameSpeaker(ToneDevice):
    """Square-wave buzzer looping through pygame.mixer."""

    def __init__(self, frequency: int = TONE_FREQUENCY):
        super().__init__(frequency)
        _, _, channels = pygame.mixer.get_init()
        wave = square_wave(frequency)
        if channels > 1:
            wave = np.ascontiguousarray(np.repeat(wave[:, None], channels, axis=1))
        self.sound = pygame.sndarray.make_sound(wave)

    def _start(self):
        self.sound.play(loops=-1)

    def _stop(self):
        self.sound.stop()


def paint(screen, interpreter: Interpreter, scale: int, color_scheme: str):
    rgb = interpreter.display.to_rgb(scale, color_scheme)
    surface = pygame.surfarray.make_surface(rgb.transpose(1, 0, 2))
    screen.blit(surface, (0, 0))


def run_emulator(interpreter: Interpreter, scale: int = 10, color_scheme: str = "classic"):
    """Main loop: 60 frames per second until the window is closed or ESC."""
    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale))
    pygame.display.set_caption("CHIP-8")
    clock = pygame.time.Clock()
    logger = interpreter.logger

    if pygame.mixer.get_init():
        interpreter.speaker = PygameSpeaker(interpreter.config.tone_frequency)
    else:
        logger.warning("Audio unavailable, running without sound")

    running = True
    suspended = False

    logger.info("Controls: ESC=Quit, F1=Pause, F5=Reset")

    try:
        while running:
            clock.tick(TIMER_FREQUENCY)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_F1:
                        suspended = not suspended
                        logger.info("Paused" if suspended else "Resumed")
                    elif event.key == pygame.K_F5:
                        interpreter.reset()
                        suspended = False
                        logger.info("Reset")
                    elif event.key in KEY_MAP:
                        interpreter.keypad.press(KEY_MAP[event.key])
                elif event.type == pygame.KEYUP:
                    if event.key in KEY_MAP:
                        interpreter.keypad.release(KEY_MAP[event.key])

            if not suspended and not interpreter.halted:
                try:
                    interpreter.run_frame()
                except Chip8Error:
                    interpreter.speaker.stop()
                    logger.error("Press F5 to reset or ESC to quit")

            paint(screen, interpreter, scale, color_scheme)
            pygame.display.flip()
    finally:
        interpreter.speaker.stop()
        pygame.quit()
