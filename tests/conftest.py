import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import collections
import random
import pygame
import pytest

import audio
import config


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def restore_shared_state():
    controls = config.CURRENT_CONTROLS.copy()
    sfx = dict(audio._SFX_SETTINGS)
    yield
    config.CURRENT_CONTROLS.clear()
    config.CURRENT_CONTROLS.update(controls)
    audio._SFX_SETTINGS.update(sfx)


class FakeHost:
    """Stands in for the game manager from the ball's point of view."""

    def __init__(self, paddle=None, response=0):
        # default paddle sits far outside any test window
        self.paddle = paddle if paddle is not None else pygame.Rect(-5000, -5000, 10, 10)
        self.response = response
        self.lives_lost = 0
        self.brick_queries = []
        self.levels_completed = 0

    def lose_life(self):
        self.lives_lost += 1

    def paddle_bounds(self):
        return self.paddle

    def check_brick_collision(self, rect, direction):
        self.brick_queries.append((pygame.Rect(rect), pygame.Vector2(direction)))
        return self.response

    def level_complete(self):
        self.levels_completed += 1


class RecordingSound:
    def __init__(self):
        self.plays = []

    def play(self, pitch=1.0):
        self.plays.append(pitch)


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def make_ball(host):
    from ball import Ball

    def _make(size=(2000, 2000), velocity=config.BALL_VELOCITY, rng=None, owner=None):
        screen = pygame.Surface(size)
        b = Ball(screen, velocity, owner or host, rng or random.Random(7))
        b.paddle_hit_sound = RecordingSound()
        b.brick_break_sound = RecordingSound()
        return b

    return _make


@pytest.fixture
def no_keys():
    return collections.defaultdict(bool)
