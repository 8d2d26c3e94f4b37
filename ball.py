import pygame, random
from typing import List
from config import (BALL_RADIUS, BALL_VELOCITY, BALL_RESPAWN, TRAIL_STEP, TRAIL_LIFETIME,
                    TRAIL_POINT_RADIUS, TRAIL_BASE_ALPHA, WHITE, CYAN,
                    PADDLE_HIT_SOUND, BRICK_BREAK_SOUND)
from audio import load_sound_or_silent
from brick_manager import HIT_HORIZONTAL, HIT_VERTICAL

# -----------------------------------------------------------------------------
# Ball – the one ball in play, its fading trail and its powerup timer.
# -----------------------------------------------------------------------------

__all__ = ["Ball", "TrailPoint"]

# Trail dots are drawn offset by half their radius from the sampled position
_TRAIL_DRAW_OFFSET = TRAIL_POINT_RADIUS / 2

# Brick-break pitch stops rising after this many bricks in one combo
_MAX_COMBO_STEPS = 6


class TrailPoint:
    """A short-lived dot left behind at one of the ball's past positions."""
    __slots__ = ("pos", "lifetime", "alpha")

    def __init__(self, pos, lifetime: float = TRAIL_LIFETIME):
        self.pos = pygame.Vector2(pos)
        self.lifetime = lifetime
        self.alpha = TRAIL_BASE_ALPHA

    def update(self, dt: float) -> bool:
        """Age the point by *dt*. Returns False once it should be removed."""
        self.lifetime -= dt
        if self.lifetime <= 0:
            return False
        # Faded against 255, not against the starting lifetime
        self.alpha = max(0, min(255, int(255 * self.lifetime)))
        return True

    def draw(self, screen: pygame.Surface):
        r = TRAIL_POINT_RADIUS
        dot = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
        pygame.draw.circle(dot, (*WHITE, self.alpha), (r, r), r)
        centre = self.pos + pygame.Vector2(_TRAIL_DRAW_OFFSET, _TRAIL_DRAW_OFFSET)
        screen.blit(dot, (int(centre.x) - r, int(centre.y) - r))


class Ball:
    """The ball: integrates its own motion and resolves its own collisions.

    *host* is the object the ball reports to and queries each frame. It must
    provide ``lose_life()``, ``paddle_bounds() -> pygame.Rect`` and
    ``check_brick_collision(rect, direction) -> int``. The ball never owns it.
    """

    def __init__(self, screen: pygame.Surface, velocity: float, host, rng=random):
        self.screen = screen
        self.host = host
        self.rng = rng
        self.radius = BALL_RADIUS
        self.velocity = velocity
        self.position = pygame.Vector2(BALL_RESPAWN)
        self.direction = pygame.Vector2(1, 1)
        self.color = CYAN
        # --- powerup state ---
        self.is_fireball = False
        self.powerup_time_remaining = 0.0
        # --- trail ---
        self.trail: List[TrailPoint] = []
        self.trail_timer = 0.0
        # bricks broken since the paddle last touched the ball
        self.brick_combo = 0
        # --- audio ---
        self.paddle_hit_sound = load_sound_or_silent(PADDLE_HIT_SOUND)
        self.brick_break_sound = load_sound_or_silent(BRICK_BREAK_SOUND)

    # ------------------------------------------------------------------
    # Powerups
    # ------------------------------------------------------------------
    def set_velocity(self, coeff: float, duration: float):
        """Run at *coeff* times the base speed for *duration* seconds."""
        self.velocity = coeff * BALL_VELOCITY
        self.powerup_time_remaining = duration

    def enable_fireball(self, duration: float):
        """Pass through bricks for *duration* seconds (<= 0 clears instead)."""
        if duration <= 0:
            self.clear_fireball()
            return
        self.is_fireball = True
        self.powerup_time_remaining = duration

    def clear_fireball(self):
        self.is_fireball = False
        self.powerup_time_remaining = 0.0

    def clear_speed(self):
        self.velocity = BALL_VELOCITY
        if not self.is_fireball:
            self.powerup_time_remaining = 0.0

    def _tick_powerup(self, dt: float):
        if self.powerup_time_remaining > 0:
            self.powerup_time_remaining -= dt
        elif self.velocity != BALL_VELOCITY:
            # speed powerup ran out
            self.velocity = BALL_VELOCITY
        else:
            # fireball only settles once the speed already has
            self.clear_fireball()
            self.color = CYAN

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------
    def update(self, dt: float):
        self._tick_powerup(dt)

        if self.is_fireball:
            flicker = self.rng.randrange(50) + 205  # 205..254
            self.color = (flicker, flicker // 2, 0)

        self.position += self.direction * self.velocity * dt

        pos = pygame.Vector2(self.position)
        win_w, win_h = self.screen.get_size()

        self._update_trail(dt)

        # --- walls ---
        if (pos.x >= win_w - 2 * self.radius and self.direction.x > 0) or (pos.x <= 0 and self.direction.x < 0):
            self.direction.x *= -1

        # --- ceiling ---
        if pos.y <= 0 and self.direction.y < 0:
            self.direction.y *= -1

        # --- fell out of the bottom ---
        if pos.y > win_h:
            self.position.xy = BALL_RESPAWN
            self.direction.xy = (1, 1)
            self.host.lose_life()

        self._check_paddle()
        self._check_bricks()

    def _update_trail(self, dt: float):
        self.trail_timer += dt
        if self.trail_timer >= TRAIL_STEP:
            self.trail_timer = 0.0
            self.trail.append(TrailPoint(self.position))
        self.trail = [point for point in self.trail if point.update(dt)]

    def _check_paddle(self):
        paddle = self.host.paddle_bounds()
        if not self.rect().colliderect(paddle):
            return
        self.direction.y *= -1
        self.paddle_hit_sound.play()
        self.brick_combo = 0
        # Steer by where the paddle was struck: left edge -1 .. right edge +1
        proportion = (self.position.x - paddle.left) / paddle.width
        self.direction.x = proportion * 2.0 - 1.0
        # Lift the ball out of the paddle so it cannot sink into it
        self.position.y = paddle.top - 2 * self.radius

    def _check_bricks(self):
        response = self.host.check_brick_collision(self.rect(), self.direction)
        if self.is_fireball:
            return  # fireball smashes straight through
        if response == HIT_HORIZONTAL:
            self.direction.x *= -1
        elif response == HIT_VERTICAL:
            self.direction.y *= -1
        else:
            return
        self.brick_break_sound.play(pitch=self._combo_pitch())
        self.brick_combo += 1

    def _combo_pitch(self) -> float:
        """Two semitones higher for every brick in the current combo (capped)."""
        semitones = min(self.brick_combo, _MAX_COMBO_STEPS) * 2
        return pow(2, semitones / 12.0)

    # ------------------------------------------------------------------
    # Geometry & rendering
    # ------------------------------------------------------------------
    def rect(self) -> pygame.Rect:
        d = 2 * self.radius
        return pygame.Rect(round(self.position.x - self.radius),
                           round(self.position.y - self.radius), d, d)

    def render(self):
        for point in self.trail:
            point.draw(self.screen)
        pygame.draw.circle(self.screen, self.color,
                           (int(self.position.x), int(self.position.y)), self.radius)
