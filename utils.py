# Utility helpers: asset paths, font loading and the debris particle

import pygame, random, sys, os
from pathlib import Path


def resource_path(relative: str) -> str:
    """Return an absolute path to *relative* that works both from source and
    when the program is bundled (PyInstaller/py2app).

    Example::

        snd = pygame.mixer.Sound(resource_path("Audio/paddle_hit.wav"))

    """
    if os.path.isabs(relative):
        return relative
    base_path = getattr(sys, "_MEIPASS", Path(__file__).resolve().parent)
    return str(Path(base_path) / relative)


def load_font(font_name, size: int) -> pygame.font.Font:
    """Load a font through resource_path, falling back to pygame's default."""
    if font_name:
        try:
            font_path = resource_path(font_name)
            if os.path.isfile(font_path):
                return pygame.font.Font(font_path, size)
        except (pygame.error, OSError) as e:
            print(f"[Font] Failed to load {font_name}: {e}")
    return pygame.font.Font(None, size)


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


# --- Simple particle for brick debris ---
class Particle:
    __slots__ = ("pos", "vel", "color", "life", "size", "alpha", "_base_size", "_base_life", "friction")
    def __init__(self, x, y, vel, color, life, size=3, friction=None):
        self.pos = pygame.Vector2(x, y)
        self.vel = pygame.Vector2(vel)  # pixels per second
        self.color = color
        self.life = life  # seconds
        self._base_life = life
        self.size = size
        self._base_size = size
        self.alpha = 255
        # Per-particle friction so debris decelerates unevenly
        self.friction = friction if friction is not None else random.uniform(0.90, 0.97)
    def update(self, dt):
        """Advance the particle; returns False once it has expired."""
        self.pos += self.vel * dt
        self.vel *= self.friction ** (dt * 60)  # friction is per 1/60 s frame
        self.life -= dt
        if self.life > 0:
            life_ratio = self.life / self._base_life
            self.alpha = int(255 * life_ratio)
            self.size = max(1, int(round(self._base_size * life_ratio)))
        return self.life > 0
    def draw(self, surf):
        if self.life <= 0:
            return
        d = self.size * 2
        dot = pygame.Surface((d, d), pygame.SRCALPHA)
        pygame.draw.circle(dot, (*self.color[:3], self.alpha), (self.size, self.size), self.size)
        surf.blit(dot, (int(self.pos.x) - self.size, int(self.pos.y) - self.size))


def spawn_debris(rect: pygame.Rect, color, count=12, rng=random):
    """Return a burst of particles flying out of *rect*."""
    parts = []
    for _ in range(count):
        angle = rng.uniform(0, 360)
        speed = rng.uniform(60, 220)
        vel = pygame.Vector2(speed, 0).rotate(angle)
        x = rng.uniform(rect.left, rect.right)
        y = rng.uniform(rect.top, rect.bottom)
        parts.append(Particle(x, y, vel, color, rng.uniform(0.3, 0.7), size=rng.choice((2, 3, 4)),
                              friction=rng.uniform(0.90, 0.97)))
    return parts
