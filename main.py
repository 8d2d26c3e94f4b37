import pygame, sys
from config import WIDTH, HEIGHT, FPS, TITLE, get_control_key, load_settings
from audio import set_sfx_volume
from game_manager import GameManager


def run():
    pygame.init()
    try:
        pygame.mixer.init()
    except pygame.error as e:
        print("[Audio] Mixer unavailable, running without sound:", e)

    settings = load_settings()
    set_sfx_volume(settings.get('sfx_volume', 0.75), settings.get('sfx_muted', False))

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    game = GameManager(screen)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0  # seconds since the last frame

        # --- Event handling ---
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN:
                if e.key == get_control_key('quit'):
                    running = False
                elif e.key == get_control_key('pause'):
                    game.toggle_pause()
                elif e.key == get_control_key('restart'):
                    game.restart()

        # --- Update & draw ---
        game.update(dt, pygame.key.get_pressed())
        game.render()
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    run()
    sys.exit()
