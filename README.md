# bitrun

BitRun is a tiny arcade game: steer an 8x8 square around a 128x64
monochrome screen and collect the 4x4 "pixel" that appears at random
places, never under the score in the top-left corner. Every collected
pixel is worth one point. Touching the 2-pixel border of the play area
costs a life and grants 1.5 seconds of immunity, during which the player
blinks and may pass through the edge. After three lives the game is over
and the final score is shown.

Remaining lives are shown as a digit on a simulated 5x5 LED matrix: green
while playing, blue while paused, red when the game is over.

## Installing

```
pip install .
```

The package has no dependencies beyond the standard library.

## Playing

The `bitrun` command plays the game in a terminal, reading lines of keys
from standard input:

```
bitrun
```

Each character of an input line is one frame:

- `w`, `a`, `s`, `d` move the player up, left, down or right for that frame;
- `b` starts the game from the splash screen, or a new round after game over;
- `p` and `j` pause and resume (the pause button and the joystick button);
- `q` quits;
- any other character lets a frame pass without movement.

Buttons are debounced for 200 ms of game time, so pressing the same button
in two consecutive frames counts only once. After each line the screen is
printed as text (`#` for a lit pixel), followed by a status line with the
joystick readings, player position, state, score and lives. Events during
play are printed as `event: pixel collected`, `event: life lost` and
`event: game over`.

Options:

- `--seed N` seeds the random placement of pixels, for repeatable games;
- `--frame-ms N` sets the game time of one frame in milliseconds (default 30);
- `--quiet` leaves out the printed screen after each line;
- `--log` also prints the status line once every second of play.

## Using the pieces as a library

- `bitrun.display.Display` keeps a page-organised frame buffer for an
  SSD1306-style screen and draws pixels, lines (`line`, `hline`, `vline`),
  rectangles (`rect`) and text (`draw_char`, `draw_string`) with the
  built-in 8x8 font, plus a compact 5x5 digit set (`draw_small_number`).
  Drawing outside the screen is ignored; `get_pixel` raises `IndexError`
  there. `render` gives a text picture of the buffer. `command`, `config`
  and `send_data` write controller bytes through the `transport` callable
  the display was created with, called as `transport(address, data)`;
  without a transport the display only keeps its buffer.
- `bitrun.font` exposes the glyph data through `glyph` (unknown characters
  are blank) and `small_digit` (digits only, `ValueError` otherwise).
- `bitrun.matrix.LedMatrix` drives a 25-pixel matrix through a sink that
  receives 32-bit words holding GRB colours; `show_lives(lives, paused)`
  shows a digit from 0 to 3, `turn_off` clears it, and `frame` holds the
  colours last shown. `rgb_to_grb` packs a colour.
- `bitrun.game.Game` holds the game state and rules: `press_start`,
  `press_pause` and `press_joystick` with debounce, `indicator` for the
  status LED colour, `calibrate` for the joystick centre, `start_round`,
  one `step(x, y, now_ms)` per frame returning the `Event`s that happened,
  `status_line`, and the `draw_splash`, `draw_pause`, `draw_play` and
  `draw_game_over` screens. Joystick readings are 12-bit values; a reading
  more than 200 away from the centre moves the player 2 pixels, and both
  axes may move at once.

The collision rules are plain functions:

```python
from bitrun.game import hits_border, rects_overlap

rects_overlap(0, 0, 8, 8, 4, 4, 4, 4)   # True: the squares overlap
hits_border(0, 0, 8, 8)                 # True: inside the 2-pixel border
hits_border(60, 28, 8, 8)               # False: well inside the field
```

## What it does not do

The package does not talk to a real screen, LED matrix, joystick, buttons
or buzzers. The terminal game advances only when a key is read, in game
time rather than wall-clock time, and only moves in the four key
directions. Sounds are not played; the events that would sound are
printed instead.

## Running the tests

```
pip install .[test]
pytest
```