import random

import pygame
import pytest

from utils import Particle, clamp, spawn_debris


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_debris_is_reproducible_with_a_seeded_rng():
    rect = pygame.Rect(100, 100, 80, 30)
    first = spawn_debris(rect, (255, 0, 0), rng=random.Random(7))
    second = spawn_debris(rect, (255, 0, 0), rng=random.Random(7))
    assert [(p.pos, p.vel, p.friction, p.life, p.size) for p in first] == \
           [(p.pos, p.vel, p.friction, p.life, p.size) for p in second]
    assert all(0.90 <= p.friction <= 0.97 for p in first)


def test_debris_does_not_touch_the_global_rng():
    random.seed(11)
    expected = random.random()
    random.seed(11)
    spawn_debris(pygame.Rect(0, 0, 10, 10), (255, 0, 0), rng=random.Random(1))
    assert random.random() == expected


def test_friction_is_frame_rate_independent():
    fast = Particle(0, 0, (120, 0), (255, 255, 255), life=5.0, friction=0.95)
    slow = Particle(0, 0, (120, 0), (255, 255, 255), life=5.0, friction=0.95)
    for _ in range(4):
        fast.update(1 / 120)
    for _ in range(2):
        slow.update(1 / 60)
    assert fast.vel.x == pytest.approx(slow.vel.x)
    # one 60 Hz frame applies the friction exactly once
    assert slow.vel.x == pytest.approx(120 * 0.95 ** 2)


def test_particle_expires_and_fades():
    p = Particle(0, 0, (0, 0), (255, 255, 255), life=1.0, size=4, friction=0.9)
    assert p.update(0.5)
    assert p.alpha == 127
    assert p.size == 2
    assert not p.update(0.5)
