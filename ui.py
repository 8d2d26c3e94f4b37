import pygame
from config import WHITE, BLACK, YELLOW, BALL_RADIUS, CYAN, POWERUP_COLORS, POWERUP_DURATION
from utils import load_font

class UI:
    """HUD: remaining lives, the active powerup bar and a centred banner."""

    BAR_WIDTH = 200
    BAR_HEIGHT = 12

    def __init__(self, screen: pygame.Surface, lives: int):
        self.screen = screen
        self.lives = lives
        self.banner_font = load_font(None, 72)
        self.small_font = load_font(None, 24)
        self.banner = None

    def lose_life(self):
        self.lives = max(0, self.lives - 1)

    def set_banner(self, text):
        """Show *text* in the middle of the screen (None hides it)."""
        self.banner = text

    def render(self, powerup_in_effect=None):
        self._draw_lives()
        if powerup_in_effect:
            self._draw_powerup(*powerup_in_effect)
        if self.banner:
            self._draw_banner(self.banner)

    def _draw_lives(self):
        r = BALL_RADIUS
        for i in range(self.lives):
            centre = (20 + r + i * (r * 2 + 10), 20 + r)
            pygame.draw.circle(self.screen, CYAN, centre, r)

    def _draw_powerup(self, name, seconds_left):
        ratio = max(0.0, min(1.0, seconds_left / POWERUP_DURATION))
        w = self.screen.get_width()
        outline = pygame.Rect(w - self.BAR_WIDTH - 20, 20, self.BAR_WIDTH, self.BAR_HEIGHT)
        fill = outline.copy()
        fill.width = int(self.BAR_WIDTH * ratio)
        pygame.draw.rect(self.screen, POWERUP_COLORS.get(name, WHITE), fill)
        pygame.draw.rect(self.screen, WHITE, outline, 1)
        label = self.small_font.render(name.replace('_', ' ').title(), True, WHITE)
        self.screen.blit(label, label.get_rect(topright=(outline.right, outline.bottom + 4)))

    def _draw_banner(self, text):
        w, h = self.screen.get_size()
        shadow = self.banner_font.render(text, True, BLACK)
        main = self.banner_font.render(text, True, YELLOW)
        rect = main.get_rect(center=(w // 2, h // 2))
        self.screen.blit(shadow, rect.move(3, 3))
        self.screen.blit(main, rect)
