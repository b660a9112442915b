"""Play BitRun in a terminal, one frame per key read from standard input."""

import argparse
import random
import sys
from typing import Optional, Sequence

from .display import Display
from .game import CALIBRATION_MS, HEIGHT, WIDTH, Game
from .matrix import LedMatrix

ADC_MAX = 4095
ADC_CENTER = 2048
BOOT_MS = 1000
SAMPLE_INTERVAL_MS = 5
STATUS_INTERVAL_MS = 1000

_KEY_HELP = (
    "Each character of an input line is one frame: w/a/s/d move, "
    "b starts or restarts, p and j pause, q quits, anything else idles."
)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command-line options."""
    parser = argparse.ArgumentParser(prog="bitrun", description=_KEY_HELP)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for pixel placement")
    parser.add_argument("--frame-ms", type=_positive_int, default=30,
                        help="milliseconds per frame (default 30)")
    parser.add_argument("--quiet", action="store_true",
                        help="do not print the screen after each line")
    parser.add_argument("--log", action="store_true",
                        help="print the status report every second of play")
    return parser.parse_args(argv)


def key_to_axes(key: str, center: tuple) -> tuple:
    """Return the joystick readings (x, y) that a movement key stands for."""
    cx, cy = center
    return {
        "w": (cx, ADC_MAX),
        "s": (cx, 0),
        "a": (0, cy),
        "d": (ADC_MAX, cy),
    }.get(key.lower(), (cx, cy))


class _Session:
    def __init__(self, game: Game, frame_ms: int, log: bool):
        self.game = game
        self.frame_ms = frame_ms
        self.log = log
        self.clock = BOOT_MS
        self.last_log = 0
        self.axes = (ADC_CENTER, ADC_CENTER)

    def frame(self, key: str) -> None:
        game = self.game
        self.clock += self.frame_ms
        command = key.lower()
        if command == "b" and game.press_start(self.clock):
            samples = CALIBRATION_MS // SAMPLE_INTERVAL_MS
            game.calibrate([(ADC_CENTER, ADC_CENTER)] * samples)
            self.clock += CALIBRATION_MS
            game.start_round()
        elif command == "p":
            game.press_pause(self.clock)
        elif command == "j":
            game.press_joystick(self.clock)

        if not game.started:
            game.draw_splash()
            return
        if game.over:
            game.draw_game_over()
            return
        if game.paused:
            game.draw_pause()
            return

        self.axes = key_to_axes(key, (game.center_x, game.center_y))
        if self.log and self.clock - self.last_log >= STATUS_INTERVAL_MS:
            print(game.status_line(*self.axes))
            self.last_log = self.clock
        for event in game.step(*self.axes, self.clock):
            print(f"event: {event.value}")
        if game.over:
            game.draw_game_over()
        else:
            game.draw_play(self.clock)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on lines of keys from standard input."""
    args = parse_args(argv)
    display = Display(WIDTH, HEIGHT)
    game = Game(display, LedMatrix(lambda word: None), random.Random(args.seed))
    session = _Session(game, args.frame_ms, args.log)
    for line in sys.stdin:
        for key in line.strip():
            if key.lower() == "q":
                return 0
            session.frame(key)
        if not args.quiet:
            print(display.render())
        print(game.status_line(*session.axes))
    return 0