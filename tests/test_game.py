import random

import pytest

from bitrun.display import Display
from bitrun.game import (
    BORDER,
    DEAD_ZONE,
    HEIGHT,
    IMMUNE_MS,
    MAX_LIVES,
    PIXEL_SIZE,
    PLAYER_SIZE,
    SCORE_AREA,
    SPEED,
    WIDTH,
    Event,
    Game,
    Indicator,
    draw_border,
    draw_filled_rect,
    hits_border,
    rects_overlap,
)
from bitrun.matrix import (
    GAME_OVER_COLOR,
    LIFE_PATTERNS,
    PAUSED_COLOR,
    PLAYING_COLOR,
    LedMatrix,
)


def make_game(seed=7):
    display = Display(WIDTH, HEIGHT)
    matrix = LedMatrix(lambda word: None)
    return Game(display, matrix, random.Random(seed))


def started_game():
    game = make_game()
    assert game.press_start(1000)
    game.calibrate([(2048, 2048)] * 10)
    game.start_round()
    game.pixel_x, game.pixel_y = 100, 50
    return game


def test_rects_overlap_and_touching_edges():
    assert rects_overlap(0, 0, 8, 8, 4, 4, 4, 4)
    assert not rects_overlap(0, 0, 8, 8, 8, 0, 4, 4)
    assert not rects_overlap(0, 0, 8, 8, 0, 8, 4, 4)


def test_hits_border_limits():
    assert not hits_border(BORDER, BORDER, PLAYER_SIZE, PLAYER_SIZE)
    assert hits_border(BORDER - 1, BORDER, PLAYER_SIZE, PLAYER_SIZE)
    right = WIDTH - BORDER - PLAYER_SIZE
    assert not hits_border(right, BORDER, PLAYER_SIZE, PLAYER_SIZE)
    assert hits_border(right + 1, BORDER, PLAYER_SIZE, PLAYER_SIZE)
    bottom = HEIGHT - BORDER - PLAYER_SIZE
    assert hits_border(BORDER, bottom + 1, PLAYER_SIZE, PLAYER_SIZE)


def test_draw_helpers():
    display = Display(WIDTH, HEIGHT)
    draw_filled_rect(display, 10, 10, 3, 3)
    assert display.get_pixel(11, 11)
    assert not display.get_pixel(13, 11)
    draw_border(display, 20, 20, 5, 5)
    assert display.get_pixel(20, 24)
    assert not display.get_pixel(22, 22)


def test_start_is_debounced():
    game = make_game()
    assert not game.press_start(100)
    assert not game.started
    assert game.press_start(300)
    assert game.started
    assert not game.press_start(900)


def test_pause_buttons():
    game = make_game()
    assert not game.press_pause(1000)
    game = started_game()
    assert game.press_pause(1100)
    assert game.paused
    assert not game.press_pause(1200)
    assert game.paused
    assert game.press_joystick(1250)
    assert not game.paused


def test_indicator_states():
    game = make_game()
    assert game.indicator() is Indicator.OFF
    game = started_game()
    assert game.indicator() is Indicator.GREEN
    game.press_pause(2000)
    assert game.indicator() is Indicator.BLUE
    game.over = True
    assert game.indicator() is Indicator.RED


def test_calibrate_mean_and_empty():
    game = make_game()
    game.calibrate([(100, 200), (300, 401)])
    assert (game.center_x, game.center_y) == (200, 300)
    with pytest.raises(ValueError):
        game.calibrate([])


@pytest.mark.parametrize("seed", range(30))
def test_pixel_placement_avoids_border_and_score(seed):
    game = make_game(seed)
    game.start_round()
    assert not hits_border(game.pixel_x, game.pixel_y, PIXEL_SIZE, PIXEL_SIZE)
    assert not rects_overlap(game.pixel_x, game.pixel_y, PIXEL_SIZE, PIXEL_SIZE,
                             *SCORE_AREA)
    assert game.lives == MAX_LIVES
    assert game.score == 0


def test_movement_directions_and_dead_zone():
    game = started_game()
    x0, y0 = game.player_x, game.player_y
    assert game.step(2048 + DEAD_ZONE, 2048 - DEAD_ZONE, 2000) == []
    assert (game.player_x, game.player_y) == (x0, y0)
    game.step(4095, 2048, 2030)
    assert game.player_x == x0 + SPEED
    game.step(2048, 4095, 2060)
    assert game.player_y == y0 - SPEED
    game.step(0, 0, 2090)
    assert (game.player_x, game.player_y) == (x0, y0)


def test_border_costs_lives_until_game_over():
    game = started_game()
    game.player_x = BORDER
    assert game.step(0, 2048, 2000) == [Event.LIFE_LOST]
    assert game.lives == MAX_LIVES - 1
    assert game.immune_until == 2000 + IMMUNE_MS
    assert game.player_x == BORDER - SPEED
    assert game.step(0, 2048, 2030) == []
    assert game.lives == MAX_LIVES - 1
    assert game.step(0, 2048, 3500) == [Event.LIFE_LOST]
    assert game.lives == 1
    assert game.step(0, 2048, 5000) == [Event.LIFE_LOST, Event.GAME_OVER]
    assert game.over
    assert game.matrix.frame == (0,) * 25
    assert game.step(4095, 2048, 6000) == []


def test_collecting_a_pixel():
    game = started_game()
    game.pixel_x, game.pixel_y = game.player_x, game.player_y
    assert game.step(2048, 2048, 2000) == [Event.PIXEL_COLLECTED]
    assert game.score == 1
    assert not rects_overlap(game.pixel_x, game.pixel_y, PIXEL_SIZE, PIXEL_SIZE,
                             *SCORE_AREA)


def test_paused_game_does_not_move():
    game = started_game()
    game.press_pause(2000)
    x0 = game.player_x
    assert game.step(4095, 2048, 2100) == []
    assert game.player_x == x0


def test_status_line():
    game = started_game()
    line = game.status_line(11, 22)
    assert "Joystick X: 11" in line
    assert "Estado: Jogando" in line
    assert "Vidas: 3" in line
    game.press_pause(2000)
    assert "Estado: Pausado" in game.status_line(0, 0)


def test_draw_play_blinks_while_immune():
    game = started_game()
    game.draw_play(2000)
    assert game.display.get_pixel(0, 0)
    assert game.display.get_pixel(game.player_x + 1, game.player_y + 1)
    assert game.matrix.frame == tuple(
        PLAYING_COLOR if lit else 0 for lit in LIFE_PATTERNS[MAX_LIVES])
    game.immune_until = 3500
    game.draw_play(2100)
    assert not game.display.get_pixel(game.player_x + 1, game.player_y + 1)
    game.draw_play(2250)
    assert game.display.get_pixel(game.player_x + 1, game.player_y + 1)


def test_splash_animation():
    game = make_game()
    game.draw_splash()
    assert game.splash_frame == 1
    assert game.display.get_pixel(0, 0)
    assert game.display.get_pixel(5, 5)
    for _ in range(19):
        game.draw_splash()
    assert not game.display.get_pixel(0, 0)
    assert game.display.get_pixel(1, 1)


def test_pause_and_game_over_screens_colour_matrix():
    game = started_game()
    game.press_pause(2000)
    game.draw_pause()
    assert game.matrix.frame[0] == PAUSED_COLOR
    game.press_pause(2500)
    game.over = True
    game.draw_game_over()
    assert game.matrix.frame == tuple(
        GAME_OVER_COLOR if lit else 0 for lit in LIFE_PATTERNS[0])