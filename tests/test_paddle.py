import pygame
import pytest

from config import PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_BOTTOM_OFFSET
from paddle import Paddle


@pytest.fixture
def paddle():
    return Paddle(pygame.Surface((1000, 800)))


def test_starts_centred_near_the_bottom(paddle):
    bounds = paddle.get_bounds()
    assert bounds.centerx == 500
    assert bounds.top == 800 - PADDLE_BOTTOM_OFFSET
    assert bounds.size == (PADDLE_WIDTH, PADDLE_HEIGHT)


def test_get_bounds_is_a_copy(paddle):
    bounds = paddle.get_bounds()
    bounds.x = 0
    assert paddle.rect.x != 0


def test_moves_at_paddle_speed(paddle):
    x = paddle.rect.x
    paddle.move_right(0.5)
    assert paddle.rect.x == x + PADDLE_SPEED // 2
    paddle.move_left(0.25)
    assert paddle.rect.x == x + PADDLE_SPEED // 4


def test_movement_is_clamped_to_window(paddle):
    paddle.move_left(100)
    assert paddle.rect.left == 0
    paddle.move_right(100)
    assert paddle.rect.right == 1000


def test_small_steps_accumulate(paddle):
    x = paddle.rect.x
    for _ in range(10):
        paddle.move_right(0.001)  # 0.3 px each
    assert paddle.rect.x == x + 3


def test_width_powerup_grows_then_restores(paddle):
    centre = paddle.rect.centerx
    paddle.set_width(1.5, 5.0)
    paddle.update(0.15)
    assert PADDLE_WIDTH < paddle.width < PADDLE_WIDTH * 1.5
    paddle.update(0.15)
    assert paddle.width == int(PADDLE_WIDTH * 1.5)
    assert abs(paddle.rect.centerx - centre) <= 1
    paddle.update(5.0)
    assert paddle.width == PADDLE_WIDTH
    assert paddle.time_in_new_size == 0


def test_widened_paddle_stays_on_screen(paddle):
    paddle.move_right(100)
    paddle.set_width(1.5, 5.0)
    paddle.update(0.3)
    assert paddle.rect.right <= 1000


def test_render(paddle):
    paddle.render()
    assert tuple(paddle.screen.get_at(paddle.rect.center))[:3] == (0, 255, 255)
