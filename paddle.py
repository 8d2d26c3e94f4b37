import pygame
from config import WIDTH, HEIGHT, PADDLE_WIDTH, PADDLE_HEIGHT, PADDLE_SPEED, PADDLE_BOTTOM_OFFSET, PADDLE_COLOR

class Paddle:
    def __init__(self, screen: pygame.Surface = None):
        self.screen = screen
        win_w, win_h = screen.get_size() if screen else (WIDTH, HEIGHT)
        self.bounds_width = win_w
        self.base_width = PADDLE_WIDTH
        self.width = PADDLE_WIDTH       # width currently drawn (mid-animation)
        self.target_width = PADDLE_WIDTH
        self.rect = pygame.Rect((win_w - PADDLE_WIDTH) // 2,
                                win_h - PADDLE_BOTTOM_OFFSET,
                                PADDLE_WIDTH, PADDLE_HEIGHT)
        self.speed = PADDLE_SPEED
        # x kept as float so slow frames still move the paddle
        self._x = float(self.rect.x)
        # --- width powerup ---
        self.time_in_new_size = 0.0
        self.width_anim_time = 0.3      # seconds to ease between widths
        self._width_animating = False
        self._width_anim_from = self.width
        self._width_anim_elapsed = 0.0

    # Movement ---------------------------------------------------
    def move_left(self, dt: float):
        self._move(-self.speed * dt)

    def move_right(self, dt: float):
        self._move(self.speed * dt)

    def _move(self, dx: float):
        self._x = max(0.0, min(self.bounds_width - self.rect.width, self._x + dx))
        self.rect.x = round(self._x)

    # Width powerup ----------------------------------------------
    def set_width(self, coeff: float, duration: float):
        """Grow or shrink to *coeff* times the base width for *duration* seconds."""
        self.time_in_new_size = duration
        self._start_width_animation(coeff * self.base_width)

    def update(self, dt: float):
        # Call this every frame to tick the powerup and animate width
        if self.time_in_new_size > 0:
            self.time_in_new_size -= dt
            if self.time_in_new_size <= 0:
                self.time_in_new_size = 0.0
                self._start_width_animation(self.base_width)
        if self._width_animating:
            self._width_anim_elapsed += dt
            t = min(1.0, self._width_anim_elapsed / self.width_anim_time)
            # Ease in-out cubic
            ease = 3*t**2 - 2*t**3
            new_width = int(self._width_anim_from + (self.target_width - self._width_anim_from) * ease)
            self._apply_width(new_width)
            if t >= 1.0:
                self._width_animating = False

    def _start_width_animation(self, to_width):
        self._width_anim_from = self.width
        self.target_width = int(to_width)
        self._width_anim_elapsed = 0.0
        self._width_animating = True

    def _apply_width(self, new_width: int):
        center = self._x + self.rect.width / 2
        self.rect.width = new_width
        self.width = new_width
        self._x = max(0.0, min(self.bounds_width - new_width, center - new_width / 2))
        self.rect.x = round(self._x)

    # Interface --------------------------------------------------
    def get_bounds(self) -> pygame.Rect:
        return self.rect.copy()

    def render(self):
        pygame.draw.rect(self.screen, PADDLE_COLOR, self.rect)
