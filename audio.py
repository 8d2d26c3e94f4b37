import pygame
from typing import Dict, Optional
from utils import resource_path

# -----------------------------------------------------------------------------
# Sound effects – load once, play fire-and-forget, stay silent when missing.
# -----------------------------------------------------------------------------

__all__ = ["AssetLoadError", "SoundEffect", "load_sound", "load_sound_or_silent",
           "pitch_shift", "set_sfx_volume"]

# Shared SFX settings applied to every effect before it plays
_SFX_SETTINGS = {'volume': 0.75, 'muted': False}


class AssetLoadError(Exception):
    """A sound asset could not be opened or decoded."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"could not load sound '{path}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


def load_sound(path: str) -> pygame.mixer.Sound:
    """Return a pygame Sound for *path* or raise AssetLoadError."""
    if not pygame.mixer.get_init():
        raise AssetLoadError(path, "mixer not initialised")
    try:
        return pygame.mixer.Sound(resource_path(path))
    except (pygame.error, OSError) as e:
        raise AssetLoadError(path, str(e)) from e


class SoundEffect:
    """Thin wrapper around a pygame Sound. A None sound plays nothing."""

    def __init__(self, sound: Optional[pygame.mixer.Sound], path: str = "", base_volume: float = 1.0):
        self.sound = sound
        self.path = path
        self.base_volume = base_volume
        # Pitch-shifted copies, keyed by factor
        self._variants: Dict[float, pygame.mixer.Sound] = {}

    @property
    def silent(self) -> bool:
        return self.sound is None

    def play(self, pitch: float = 1.0):
        if self.sound is None:
            return
        snd = self.sound
        if pitch != 1.0:
            snd = self._variant(pitch)
        _apply_volume(snd, self.base_volume)
        snd.play()

    def _variant(self, factor: float) -> pygame.mixer.Sound:
        if factor not in self._variants:
            self._variants[factor] = pitch_shift(self.sound, factor)
        return self._variants[factor]


def load_sound_or_silent(path: str, base_volume: float = 1.0) -> SoundEffect:
    """Load *path*; on failure log it and hand back a silent SoundEffect."""
    try:
        sound = load_sound(path)
    except AssetLoadError as e:
        print(f"[Audio] Failed to load {e.path}: {e.reason}")
        return SoundEffect(None, path, base_volume)
    print(f"[DEBUG] [Audio] Loaded {path}")
    return SoundEffect(sound, path, base_volume)


def pitch_shift(sound: pygame.mixer.Sound, factor: float) -> pygame.mixer.Sound:
    """Resample *sound* so it plays *factor* times higher (and shorter).

    Samples are picked at evenly spaced indices along the first axis, so mono
    and multi-channel buffers are handled alike.
    """
    import numpy as np
    samples = pygame.sndarray.array(sound)
    count = samples.shape[0]
    picks = np.linspace(0, count - 1, max(1, int(count / factor))).round().astype(np.intp)
    return pygame.sndarray.make_sound(np.ascontiguousarray(samples[picks]))


def set_sfx_volume(volume: float, muted: bool = False):
    """Update the volume used by every SoundEffect from now on."""
    _SFX_SETTINGS['volume'] = max(0.0, min(1.0, float(volume)))
    _SFX_SETTINGS['muted'] = bool(muted)


def _apply_volume(sound: pygame.mixer.Sound, base_volume: float):
    if _SFX_SETTINGS['muted']:
        sound.set_volume(0)
    else:
        sound.set_volume(base_volume * _SFX_SETTINGS['volume'])
