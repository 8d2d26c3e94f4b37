import os
import json
import builtins as _builtins
import pygame

# --- Constants ---
WIDTH, HEIGHT = 1000, 800
FPS = 60
TITLE = "Breakout"

# Ball
BALL_RADIUS = 10
BALL_VELOCITY = 350          # base speed in pixels per second
BALL_RESPAWN = (0, 300)      # where the ball reappears after a lost life

# Ball trail
TRAIL_STEP = 0.04            # seconds between trail points
TRAIL_LIFETIME = 0.5         # seconds a trail point survives
TRAIL_POINT_RADIUS = 3
TRAIL_BASE_ALPHA = 200

# Paddle
PADDLE_WIDTH = 150
PADDLE_HEIGHT = 20
PADDLE_SPEED = 300           # pixels per second
PADDLE_BOTTOM_OFFSET = 50    # gap between paddle and bottom of the window

# Bricks
BRICK_ROWS = 5
BRICK_COLS = 10
BRICK_WIDTH = 80
BRICK_HEIGHT = 30
BRICK_SPACING = 5
BRICK_TOP_OFFSET = 60

# Powerups
POWERUP_DURATION = 5.0       # seconds an effect lasts
POWERUP_SPAWN_INTERVAL = 6.0 # minimum seconds between spawns
POWERUP_SPAWN_CHANCE = 0.5   # chance a spawn attempt succeeds
POWERUP_FALL_SPEED = 150     # pixels per second
POWERUP_RADIUS = 15

STARTING_LIVES = 3

# Colors
WHITE  = (255,255,255)
BLACK  = (0,0,0)
RED    = (255,0,0)
GREEN  = (0,255,0)
BLUE   = (0,0,255)
YELLOW = (255,255,0)
CYAN   = (0,255,255)
ORANGE = (255,140,0)
BG     = (30,30,30)
PADDLE_COLOR = (0,255,255)

# Brick colour gradient, top row to bottom row
BRICK_COLOR_TOP    = (220, 60, 60)
BRICK_COLOR_BOTTOM = (60, 120, 220)

# Powerup colour palette
POWERUP_COLORS = {
    'big_paddle':   (0,200,0),      # green
    'small_paddle': (200,0,200),    # purple
    'slow_ball':    (0,120,255),    # blue
    'fast_ball':    (255,255,0),    # yellow
    'fireball':     (255,140,0),    # orange
}

# --- Audio ---
PADDLE_HIT_SOUND  = "Audio/paddle_hit.wav"
BRICK_BREAK_SOUND = "Audio/brick_break.wav"
POWERUP_SOUND     = "Audio/powerup.wav"

SETTINGS_FILE = 'game_settings.json'

# --- Control Settings ---
# Default key bindings for game controls
DEFAULT_CONTROLS = {
    'paddle_left': pygame.K_LEFT,
    'paddle_right': pygame.K_RIGHT,
    'pause': pygame.K_p,
    'restart': pygame.K_r,
    'quit': pygame.K_ESCAPE
}

# Secondary bindings that always work alongside the remappable ones
ALT_CONTROLS = {
    'paddle_left': pygame.K_a,
    'paddle_right': pygame.K_d,
}

# Current control mappings (can be modified by the settings file)
CURRENT_CONTROLS = DEFAULT_CONTROLS.copy()

# Control action descriptions for the UI
CONTROL_DESCRIPTIONS = {
    'paddle_left': 'Paddle Left',
    'paddle_right': 'Paddle Right',
    'pause': 'Pause',
    'restart': 'Restart',
    'quit': 'Quit'
}

_KEY_DISPLAY_NAMES = {
    'left': '←',
    'right': '→',
    'up': '↑',
    'down': '↓',
    'space': 'SPACE',
    'escape': 'ESC',
    'return': 'ENTER',
}

def get_key_name(key_code):
    """Get a readable name for a pygame key code."""
    key_name = pygame.key.name(key_code)
    return _KEY_DISPLAY_NAMES.get(key_name, key_name.upper())

def update_control_mapping(action, new_key):
    """Update a control mapping."""
    CURRENT_CONTROLS[action] = new_key

def get_control_key(action):
    """Get the current key mapping for a control action."""
    return CURRENT_CONTROLS.get(action, DEFAULT_CONTROLS.get(action))

def is_control_pressed(action, keys):
    """Check if the key (or its alternate) for an action is currently pressed."""
    key = get_control_key(action)
    if key is not None and keys[key]:
        return True
    alt = ALT_CONTROLS.get(action)
    return bool(alt is not None and keys[alt])

# --- Settings file ---
DEFAULT_SETTINGS = {
    'sfx_volume': 0.75,
    'sfx_muted': False,
    'controls': DEFAULT_CONTROLS.copy()
}

def load_settings(path=SETTINGS_FILE):
    """Load settings from file or fall back to defaults.

    Unknown keys are kept, missing ones come from DEFAULT_SETTINGS, and
    control mappings found in the file are applied to CURRENT_CONTROLS.
    """
    settings = dict(DEFAULT_SETTINGS)
    settings['controls'] = DEFAULT_CONTROLS.copy()
    try:
        if os.path.exists(path):
            with open(path, 'r') as f:
                loaded = json.load(f)
            settings.update(loaded)
            for action, key in loaded.get('controls', {}).items():
                if action in DEFAULT_CONTROLS:
                    update_control_mapping(action, key)
    except (OSError, ValueError, AttributeError) as e:
        print(f"[Options] Failed to load settings: {e}")
        settings = dict(DEFAULT_SETTINGS)
        settings['controls'] = DEFAULT_CONTROLS.copy()
    return settings

def save_settings(settings, path=SETTINGS_FILE):
    """Save settings to file. Returns True on success."""
    try:
        data = dict(settings)
        data['controls'] = CURRENT_CONTROLS.copy()
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)
        return True
    except (OSError, TypeError) as e:
        print(f"[Options] Failed to save settings: {e}")
        return False

DEBUG = False  # Set to True to see [DEBUG] console logs

_original_print = _builtins.print

def _debug_filter_print(*args, **kwargs):
    """Custom print that omits messages starting with '[DEBUG]' when DEBUG is False."""
    if not DEBUG:
        if args and isinstance(args[0], str) and args[0].startswith("[DEBUG]"):
            return  # Skip debug message
    _original_print(*args, **kwargs)

_builtins.print = _debug_filter_print
