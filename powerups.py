import pygame, random
from typing import List, Optional, Tuple
from config import (WIDTH, HEIGHT, POWERUP_COLORS, POWERUP_DURATION, POWERUP_FALL_SPEED,
                    POWERUP_RADIUS, POWERUP_SOUND, BRICK_TOP_OFFSET)
from audio import load_sound_or_silent

# -----------------------------------------------------------------------------
# Powerups – pickups fall from the top; catching one with the paddle applies
# its effect to the ball or the paddle. Only one effect is shown at a time.
# -----------------------------------------------------------------------------

__all__ = ["Powerup", "BigPaddle", "SmallPaddle", "SlowBall", "FastBall", "FireBall",
           "POWERUP_TYPES", "PowerupManager"]


class Powerup:
    """A falling pickup. Subclasses say what catching it does."""
    name = 'powerup'

    def __init__(self, x: float, y: float, duration: float = POWERUP_DURATION):
        self.pos = pygame.Vector2(x, y)
        self.duration = duration
        self.radius = POWERUP_RADIUS

    @property
    def color(self):
        return POWERUP_COLORS.get(self.name, (255, 255, 255))

    def update(self, dt: float, screen_h: int) -> bool:
        """Fall; returns False once below the bottom of the screen."""
        self.pos.y += POWERUP_FALL_SPEED * dt
        return self.pos.y - self.radius <= screen_h

    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.pos.x - self.radius), int(self.pos.y - self.radius),
                           self.radius * 2, self.radius * 2)

    def apply(self, ball, paddle) -> float:
        """Apply the effect and return how long it lasts."""
        raise NotImplementedError

    def draw(self, screen: pygame.Surface):
        centre = (int(self.pos.x), int(self.pos.y))
        pygame.draw.circle(screen, self.color, centre, self.radius)
        pygame.draw.circle(screen, (0, 0, 0), centre, self.radius, 2)


class BigPaddle(Powerup):
    name = 'big_paddle'

    def apply(self, ball, paddle) -> float:
        paddle.set_width(1.5, self.duration)
        return self.duration


class SmallPaddle(Powerup):
    name = 'small_paddle'

    def apply(self, ball, paddle) -> float:
        paddle.set_width(0.67, self.duration)
        return self.duration


class SlowBall(Powerup):
    name = 'slow_ball'

    def apply(self, ball, paddle) -> float:
        ball.set_velocity(0.5, self.duration)
        return self.duration


class FastBall(Powerup):
    name = 'fast_ball'

    def apply(self, ball, paddle) -> float:
        ball.set_velocity(2.0, self.duration)
        return self.duration


class FireBall(Powerup):
    name = 'fireball'

    def apply(self, ball, paddle) -> float:
        ball.enable_fireball(self.duration)
        return self.duration


POWERUP_TYPES = [BigPaddle, SmallPaddle, SlowBall, FastBall, FireBall]


class PowerupManager:
    def __init__(self, screen: pygame.Surface, paddle, ball, rng=random):
        self.screen = screen
        self.paddle = paddle
        self.ball = ball
        self.rng = rng
        self.powerups: List[Powerup] = []
        # (name, seconds left) of the effect currently shown, if any
        self._in_effect: Optional[Tuple[str, float]] = None
        self.pickup_sound = load_sound_or_silent(POWERUP_SOUND)

    def spawn_powerup(self, kind=None) -> Powerup:
        """Drop a pickup of *kind* (random when None) somewhere along the top."""
        cls = kind or self.rng.choice(POWERUP_TYPES)
        win_w = self.screen.get_width() if self.screen else WIDTH
        x = self.rng.uniform(POWERUP_RADIUS, win_w - POWERUP_RADIUS)
        pu = cls(x, BRICK_TOP_OFFSET)
        self.powerups.append(pu)
        print(f"[DEBUG] [Powerup] Spawned {pu.name} at x={x:.0f}")
        return pu

    def update(self, dt: float):
        screen_h = self.screen.get_height() if self.screen else HEIGHT
        self.powerups = [pu for pu in self.powerups if pu.update(dt, screen_h)]
        if self._in_effect:
            name, left = self._in_effect
            left -= dt
            self._in_effect = (name, left) if left > 0 else None
        self.check_collision()

    def check_collision(self):
        paddle_rect = self.paddle.get_bounds()
        for pu in self.powerups[:]:
            if pu.rect().colliderect(paddle_rect):
                self.powerups.remove(pu)
                self._collect(pu)

    def _collect(self, pu: Powerup):
        self._clear_previous(pu)
        duration = pu.apply(self.ball, self.paddle)
        self._in_effect = (pu.name, duration)
        self.pickup_sound.play()
        print(f"[DEBUG] [Powerup] Collected {pu.name} for {duration:.1f}s")

    def _clear_previous(self, incoming: Powerup):
        """A new pickup replaces whatever effect of the other kind is running."""
        if not self._in_effect:
            return
        prev = self._in_effect[0]
        if prev == 'fireball' and incoming.name != 'fireball':
            self.ball.clear_fireball()
        if prev in ('slow_ball', 'fast_ball') and incoming.name not in ('slow_ball', 'fast_ball'):
            self.ball.clear_speed()
        if prev in ('big_paddle', 'small_paddle') and incoming.name not in ('big_paddle', 'small_paddle'):
            self.paddle.set_width(1.0, 0.0)

    def powerup_in_effect(self) -> Optional[Tuple[str, float]]:
        return self._in_effect

    def render(self):
        for pu in self.powerups:
            pu.draw(self.screen)
