import pygame, random
from typing import List, Tuple
from config import (WIDTH, BRICK_ROWS, BRICK_COLS, BRICK_WIDTH, BRICK_HEIGHT, BRICK_SPACING,
                    BRICK_TOP_OFFSET, BRICK_COLOR_TOP, BRICK_COLOR_BOTTOM)
from utils import spawn_debris

# -----------------------------------------------------------------------------
# Brick grid – collision queries from the ball and shatter debris.
# -----------------------------------------------------------------------------

__all__ = ["Brick", "BrickManager", "NO_HIT", "HIT_HORIZONTAL", "HIT_VERTICAL"]

# Responses returned by BrickManager.check_collision
NO_HIT = 0
HIT_HORIZONTAL = 1   # struck a left/right face – flip x
HIT_VERTICAL = 2     # struck a top/bottom face – flip y


class Brick:
    def __init__(self, x, y, w, h, color):
        self.rect = pygame.Rect(x, y, w, h)
        self.color = color

    def draw(self, screen: pygame.Surface):
        pygame.draw.rect(screen, self.color, self.rect)
        shade = tuple(max(0, c - 60) for c in self.color)
        pygame.draw.rect(screen, shade, self.rect, 2)


def row_colors(rows: int, top=BRICK_COLOR_TOP, bottom=BRICK_COLOR_BOTTOM) -> List[Tuple[int, int, int]]:
    """Return *rows* colours blended evenly from *top* to *bottom*."""
    import numpy as np
    if rows <= 0:
        return []
    t = np.linspace(0.0, 1.0, rows)[:, None]
    grad = (1 - t) * np.array(top, dtype=float) + t * np.array(bottom, dtype=float)
    return [tuple(int(round(c)) for c in row) for row in grad]


class BrickManager:
    """Owns the bricks. The ball asks it about collisions every frame."""

    def __init__(self, screen: pygame.Surface, host=None, rng=random):
        self.screen = screen
        self.host = host  # notified through level_complete() when emptied
        self.rng = rng
        self.bricks: List[Brick] = []
        self.particles = []

    def create_bricks(self, rows=BRICK_ROWS, cols=BRICK_COLS, brick_w=BRICK_WIDTH,
                      brick_h=BRICK_HEIGHT, spacing=BRICK_SPACING, top=BRICK_TOP_OFFSET):
        """Lay out a *rows* x *cols* grid centred horizontally."""
        self.bricks = []
        self.particles = []
        total_w = cols * brick_w + (cols - 1) * spacing
        screen_w = self.screen.get_width() if self.screen else WIDTH
        left = (screen_w - total_w) // 2
        for r, color in enumerate(row_colors(rows)):
            y = top + r * (brick_h + spacing)
            for c in range(cols):
                x = left + c * (brick_w + spacing)
                self.bricks.append(Brick(x, y, brick_w, brick_h, color))
        print(f"[DEBUG] [Bricks] Built {len(self.bricks)} bricks")

    def brick_count(self) -> int:
        return len(self.bricks)

    # ------------------------------------------------------------------
    # Collision
    # ------------------------------------------------------------------
    def check_collision(self, ball_rect: pygame.Rect, direction) -> int:
        """Break the first brick overlapping *ball_rect* and report the face hit.

        The axis with the smaller penetration depth is the one the ball came
        through. On a perfect corner the axis the ball is travelling along more
        steeply wins.
        """
        for brick in self.bricks:
            if not ball_rect.colliderect(brick.rect):
                continue
            response = _collision_axis(ball_rect, brick.rect, direction)
            self._break(brick)
            return response
        return NO_HIT

    def _break(self, brick: Brick):
        self.bricks.remove(brick)
        self.particles.extend(spawn_debris(brick.rect, brick.color, rng=self.rng))
        if not self.bricks and self.host is not None:
            self.host.level_complete()

    # ------------------------------------------------------------------
    # Frame hooks
    # ------------------------------------------------------------------
    def update(self, dt: float):
        self.particles = [p for p in self.particles if p.update(dt)]

    def render(self):
        for brick in self.bricks:
            brick.draw(self.screen)
        for p in self.particles:
            p.draw(self.screen)


def _collision_axis(ball: pygame.Rect, brick: pygame.Rect, direction) -> int:
    dx = ball.centerx - brick.centerx
    dy = ball.centery - brick.centery
    overlap_x = (brick.width + ball.width) / 2 - abs(dx)
    overlap_y = (brick.height + ball.height) / 2 - abs(dy)
    if overlap_x < overlap_y:
        return HIT_HORIZONTAL
    if overlap_y < overlap_x:
        return HIT_VERTICAL
    return HIT_HORIZONTAL if abs(direction[0]) > abs(direction[1]) else HIT_VERTICAL
