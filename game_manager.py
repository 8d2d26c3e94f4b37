import pygame, random
from config import (BALL_VELOCITY, STARTING_LIVES, POWERUP_SPAWN_INTERVAL, POWERUP_SPAWN_CHANCE,
                    BG, is_control_pressed)
from paddle import Paddle
from ball import Ball
from brick_manager import BrickManager
from powerups import PowerupManager
from ui import UI

class GameManager:
    """Wires the game objects together and owns the session state.

    It is also the ball's host: the ball calls back into ``lose_life``,
    ``paddle_bounds`` and ``check_brick_collision`` every frame.
    """

    def __init__(self, screen: pygame.Surface, rng=random):
        self.screen = screen
        self.rng = rng
        self.restart()

    def restart(self):
        """Throw away the current session and build a fresh one."""
        self.lives = STARTING_LIVES
        self.paused = False
        self.level_completed = False
        self.time = 0.0
        self.time_last_powerup_spawn = 0.0
        self.paddle = Paddle(self.screen)
        self.brick_manager = BrickManager(self.screen, self, self.rng)
        self.brick_manager.create_bricks()
        self.ball = Ball(self.screen, BALL_VELOCITY, self, self.rng)
        self.powerup_manager = PowerupManager(self.screen, self.paddle, self.ball, self.rng)
        self.ui = UI(self.screen, self.lives)
        print(f"[Game] New game: {self.lives} lives, {self.brick_manager.brick_count()} bricks")

    # ------------------------------------------------------------------
    # Ball host interface
    # ------------------------------------------------------------------
    def lose_life(self):
        self.lives -= 1
        self.ui.lose_life()
        print(f"[Game] Life lost, {self.lives} left")

    def paddle_bounds(self) -> pygame.Rect:
        return self.paddle.get_bounds()

    def check_brick_collision(self, ball_rect: pygame.Rect, direction) -> int:
        return self.brick_manager.check_collision(ball_rect, direction)

    def level_complete(self):
        self.level_completed = True
        print("[Game] Level completed")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def game_over(self) -> bool:
        return self.lives <= 0

    def toggle_pause(self):
        if self.game_over or self.level_completed:
            return
        self.paused = not self.paused
        print(f"[DEBUG] [Game] paused={self.paused}")

    # ------------------------------------------------------------------
    # Frame hooks
    # ------------------------------------------------------------------
    def update(self, dt: float, keys=None):
        """Advance one frame. *keys* is a pygame.key.get_pressed() snapshot."""
        if self.game_over:
            self.ui.set_banner("Game over.")
            return
        if self.level_completed:
            self.ui.set_banner("Level completed.")
            return
        if self.paused:
            self.ui.set_banner("Paused")
            return
        self.ui.set_banner(None)

        self.time += dt
        self._maybe_spawn_powerup()

        if keys is not None:
            if is_control_pressed('paddle_left', keys):
                self.paddle.move_left(dt)
            if is_control_pressed('paddle_right', keys):
                self.paddle.move_right(dt)

        self.paddle.update(dt)
        self.ball.update(dt)
        self.brick_manager.update(dt)
        self.powerup_manager.update(dt)

    def _maybe_spawn_powerup(self):
        if self.time - self.time_last_powerup_spawn < POWERUP_SPAWN_INTERVAL:
            return
        self.time_last_powerup_spawn = self.time
        if self.rng.random() < POWERUP_SPAWN_CHANCE:
            self.powerup_manager.spawn_powerup()

    def render(self):
        self.screen.fill(BG)
        self.paddle.render()
        self.brick_manager.render()
        self.powerup_manager.render()
        self.ball.render()
        self.ui.render(self.powerup_manager.powerup_in_effect())
