"""Game rules for BitRun: move a square around the screen and collect pixels."""

import random
from enum import Enum
from typing import Iterable, Optional

from .display import Display
from .matrix import LedMatrix

WIDTH = 128
HEIGHT = 64
PLAYER_SIZE = 8
PIXEL_SIZE = 4
BORDER = 2
DEAD_ZONE = 200
SPEED = 2
CALIBRATION_MS = 2000
MAX_LIVES = 3
DEBOUNCE_MS = 200
IMMUNE_MS = 1500
BLINK_MS = 150
SCORE_AREA = (2, 2, 50, 10)
"""Rectangle (x, y, width, height) kept free of pixels so the score stays readable."""


class Indicator(Enum):
    """Colour of the status LED."""

    OFF = "off"
    GREEN = "green"
    BLUE = "blue"
    RED = "red"


class Event(Enum):
    """Things that happen during a step and call for a sound."""

    PIXEL_COLLECTED = "pixel collected"
    LIFE_LOST = "life lost"
    GAME_OVER = "game over"


def rects_overlap(ax: int, ay: int, aw: int, ah: int,
                  bx: int, by: int, bw: int, bh: int) -> bool:
    """Return whether two axis-aligned rectangles overlap."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def hits_border(x: int, y: int, width: int, height: int) -> bool:
    """Return whether a rectangle reaches into the border of the play area."""
    return (x < BORDER or y < BORDER
            or x + width > WIDTH - BORDER or y + height > HEIGHT - BORDER)


def draw_filled_rect(display: Display, x: int, y: int, width: int, height: int) -> None:
    """Light every pixel of a rectangle."""
    for i in range(x, x + width):
        for j in range(y, y + height):
            display.pixel(i, j, True)


def draw_border(display: Display, x: int, y: int, width: int, height: int) -> None:
    """Light the one-pixel outline of a rectangle."""
    for i in range(x, x + width):
        display.pixel(i, y, True)
        display.pixel(i, y + height - 1, True)
    for j in range(y, y + height):
        display.pixel(x, j, True)
        display.pixel(x + width - 1, j, True)


class Game:
    """State of one BitRun machine: buttons, joystick calibration and play."""

    def __init__(self, display: Display, matrix: Optional[LedMatrix] = None,
                 rng: Optional[random.Random] = None):
        self.display = display
        self.matrix = matrix
        self.rng = rng if rng is not None else random.Random()
        self.started = False
        self.paused = False
        self.over = False
        self.score = 0
        self.lives = MAX_LIVES
        self.center_x = 2048
        self.center_y = 2048
        self.player_x = (WIDTH - PLAYER_SIZE) // 2
        self.player_y = (HEIGHT - PLAYER_SIZE) // 2
        self.pixel_x = BORDER
        self.pixel_y = BORDER
        self.immune_until = 0
        self.splash_frame = 0
        self._last_press = {"start": 0, "pause": 0, "joystick": 0}

    def _debounced(self, button: str, now_ms: int) -> bool:
        if now_ms - self._last_press[button] < DEBOUNCE_MS:
            return False
        self._last_press[button] = now_ms
        return True

    def press_start(self, now_ms: int) -> bool:
        """Handle the start button; return True when a new round should begin."""
        if not self._debounced("start", now_ms):
            return False
        if self.over:
            self.over = False
            self.started = True
            return True
        if not self.started:
            self.started = True
            return True
        return False

    def _toggle_pause(self, button: str, now_ms: int) -> bool:
        if not self._debounced(button, now_ms):
            return False
        if self.started and not self.over:
            self.paused = not self.paused
            return True
        return False

    def press_pause(self, now_ms: int) -> bool:
        """Handle the pause button; return True when the pause state changed."""
        return self._toggle_pause("pause", now_ms)

    def press_joystick(self, now_ms: int) -> bool:
        """Handle the joystick button, which also pauses; True when toggled."""
        return self._toggle_pause("joystick", now_ms)

    def indicator(self) -> Indicator:
        """Return the colour the status LED shows for the current state."""
        if self.over:
            return Indicator.RED
        if self.paused:
            return Indicator.BLUE
        if self.started:
            return Indicator.GREEN
        return Indicator.OFF

    def calibrate(self, samples: Iterable[tuple]) -> None:
        """Set the joystick centre to the mean of (x, y) resting readings."""
        readings = list(samples)
        if not readings:
            raise ValueError("calibration needs at least one sample")
        self.center_x = sum(x for x, _ in readings) // len(readings)
        self.center_y = sum(y for _, y in readings) // len(readings)

    def _place_pixel(self) -> None:
        while True:
            self.pixel_x = BORDER + self.rng.randrange(WIDTH - 2 * BORDER - PIXEL_SIZE)
            self.pixel_y = BORDER + self.rng.randrange(HEIGHT - 2 * BORDER - PIXEL_SIZE)
            if not rects_overlap(self.pixel_x, self.pixel_y, PIXEL_SIZE, PIXEL_SIZE,
                                 *SCORE_AREA):
                return

    def start_round(self) -> None:
        """Reset the player, score and lives, and place a new pixel."""
        self.started = True
        self.player_x = (WIDTH - PLAYER_SIZE) // 2
        self.player_y = (HEIGHT - PLAYER_SIZE) // 2
        self.score = 0
        self.lives = MAX_LIVES
        self.over = False
        self.paused = False
        self.immune_until = 0
        self._place_pixel()

    def step(self, x: int, y: int, now_ms: int) -> list:
        """Advance one frame with joystick readings (x, y); return the events."""
        if not self.started or self.paused or self.over:
            return []
        events = []
        if self.immune_until > 0 and now_ms >= self.immune_until:
            self.immune_until = 0

        dx = dy = 0
        if x > self.center_x + DEAD_ZONE:
            dx = SPEED
        elif x < self.center_x - DEAD_ZONE:
            dx = -SPEED
        if y > self.center_y + DEAD_ZONE:
            dy = -SPEED
        elif y < self.center_y - DEAD_ZONE:
            dy = SPEED

        new_x = self.player_x + dx
        new_y = self.player_y + dy
        blocked = hits_border(new_x, new_y, PLAYER_SIZE, PLAYER_SIZE)

        if self.immune_until == 0 and blocked:
            self.lives -= 1
            events.append(Event.LIFE_LOST)
            if self.lives <= 0:
                self.over = True
                if self.matrix is not None:
                    self.matrix.turn_off()
                events.append(Event.GAME_OVER)
                return events
            self.immune_until = now_ms + IMMUNE_MS

        if not blocked or self.immune_until > 0:
            self.player_x = new_x
            self.player_y = new_y

        if rects_overlap(self.player_x, self.player_y, PLAYER_SIZE, PLAYER_SIZE,
                         self.pixel_x, self.pixel_y, PIXEL_SIZE, PIXEL_SIZE):
            self.score += 1
            self._place_pixel()
            events.append(Event.PIXEL_COLLECTED)
        return events

    def status_line(self, x: int, y: int) -> str:
        """Return the serial status report for joystick readings (x, y)."""
        if self.paused:
            state = "Pausado"
        elif self.over:
            state = "Game Over"
        else:
            state = "Jogando"
        return (f"Joystick X: {x}, Joystick Y: {y}, "
                f"Posição Jogador: ({self.player_x}, {self.player_y}), "
                f"Estado: {state}, Pontuação: {self.score}, Vidas: {self.lives}")

    def _show_lives(self, lives: int) -> None:
        if self.matrix is not None:
            self.matrix.show_lives(lives, self.paused)

    def draw_splash(self) -> None:
        """Draw the next frame of the animated title screen."""
        self.splash_frame += 1
        blink = (self.splash_frame // 30) % 2 == 0
        offset = (self.splash_frame // 20) % 4
        d = self.display
        d.fill(False)
        for px, py in ((5, 5), (WIDTH - 6, 5), (5, HEIGHT - 6), (WIDTH - 6, HEIGHT - 6)):
            d.pixel(px, py, True)
        for i in range(offset, WIDTH - offset):
            d.pixel(i, offset, True)
            d.pixel(i, HEIGHT - 1 - offset, True)
        for j in range(offset, HEIGHT - offset):
            d.pixel(offset, j, True)
            d.pixel(WIDTH - 1 - offset, j, True)
        d.draw_string("BitRun", (WIDTH - 6 * 6) // 2, 12)
        if blink:
            d.draw_string("[B] START", (WIDTH - 7 * 6) // 2, HEIGHT - 18)
            d.draw_string(">", (WIDTH - 7 * 6) // 2 - 8, HEIGHT - 18)
        d.send_data()
        self._show_lives(MAX_LIVES)

    def draw_pause(self) -> None:
        """Draw the pause screen."""
        d = self.display
        d.fill(False)
        d.draw_string("JOGO PAUSADO", (WIDTH - 12 * 6) // 2, 20)
        d.draw_string("A Continuar", (WIDTH - 12 * 6) // 2, HEIGHT - 20)
        d.send_data()
        self._show_lives(self.lives)

    def draw_game_over(self) -> None:
        """Draw the game-over screen with the final score."""
        d = self.display
        d.fill(False)
        d.draw_string("GAME OVER", (WIDTH - 9 * 6) // 2, 16)
        text = f"Pontos: {self.score}"
        d.draw_string(text, ((WIDTH - len(text) * 6) // 2) & 0xFF, 32)
        d.draw_string("[B] Reinicia", (WIDTH - 11 * 6) // 2, HEIGHT - 16)
        d.send_data()
        self._show_lives(0)

    def draw_play(self, now_ms: int) -> None:
        """Draw the play field; the player blinks while immune."""
        d = self.display
        d.fill(False)
        draw_border(d, 0, 0, WIDTH, HEIGHT)
        hidden = self.immune_until > 0 and (now_ms // BLINK_MS) % 2 == 0
        if not hidden:
            draw_filled_rect(d, self.player_x, self.player_y, PLAYER_SIZE, PLAYER_SIZE)
        draw_filled_rect(d, self.pixel_x, self.pixel_y, PIXEL_SIZE, PIXEL_SIZE)
        d.draw_string(f"Pontos: {self.score}", 2, 2)
        self._show_lives(self.lives)
        d.send_data()