"""
Sound effects and background beat, played from tick events.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

import pygame

from asteroid_blaster.env.event import Event, EventType

log = logging.getLogger(__name__)

DEFAULT_SOUNDS = {
    "laser": ("laser.wav", 0.5),
    "hit": ("hit.wav", 1.0),
    "explode": ("explode.wav", 0.8),
    "thrust": ("thrust.wav", 0.5),
    "beat_low": ("music-low.wav", 1.0),
    "beat_high": ("music-high.wav", 1.0),
}


class AudioPlayer:
    """
    Fire-and-forget sound playback through pygame.mixer.

    A player created with `enabled=False`, or whose mixer cannot start,
    accepts every call and plays nothing. Sounds whose file is missing are
    skipped individually.
    """

    def __init__(
        self,
        sound_dir: Union[str, Path, None] = None,
        enabled: bool = True,
        music: bool = True,
    ):
        self.sound_dir = Path(sound_dir) if sound_dir is not None else None
        self.enabled = enabled and self.sound_dir is not None
        self.music = music
        self.sounds: dict[str, pygame.mixer.Sound] = {}

        if self.enabled:
            self._load_sounds()

    def _load_sounds(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            log.warning(f"Audio disabled, mixer unavailable: {e}")
            self.enabled = False
            return

        for name, (filename, volume) in DEFAULT_SOUNDS.items():
            path = self.sound_dir / filename
            if not path.exists():
                log.warning(f"Sound file {path} not found, '{name}' will be silent")
                continue
            try:
                sound = pygame.mixer.Sound(str(path))
            except pygame.error as e:
                log.warning(f"Could not load sound {path}: {e}")
                continue
            sound.set_volume(volume)
            self.sounds[name] = sound

    def _play(self, name: str, loops: int = 0) -> None:
        if not self.enabled:
            return
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play(loops=loops)

    def play_laser_fire(self) -> None:
        self._play("laser")

    def play_laser_hit(self) -> None:
        self._play("hit")

    def play_ship_explosion(self) -> None:
        self._play("explode")

    def play_thrust(self) -> None:
        self._play("thrust", loops=-1)

    def stop_thrust(self) -> None:
        sound = self.sounds.get("thrust")
        if sound is not None:
            sound.stop()

    def play_beat(self, high: bool = False) -> None:
        if self.music:
            self._play("beat_high" if high else "beat_low")

    def set_beat_tempo(self, ratio: float) -> None:
        """Notification only: the session times the beats and emits one event per beat."""
        log.debug(f"Beat tempo ratio now {ratio:.2f}")

    def close(self) -> None:
        for sound in self.sounds.values():
            sound.stop()
        self.sounds.clear()


def dispatch_audio(events: Iterable[Event], player: AudioPlayer) -> None:
    """Route a tick's events to the matching player calls."""
    for event in events:
        match event.event_type:
            case EventType.LASER_FIRED:
                player.play_laser_fire()
            case EventType.ASTEROID_DESTROYED:
                player.play_laser_hit()
            case EventType.SHIP_EXPLODED:
                player.play_ship_explosion()
            case EventType.THRUST_STARTED:
                player.play_thrust()
            case EventType.THRUST_STOPPED:
                player.stop_thrust()
            case EventType.BEAT:
                player.play_beat(event.high)
            case EventType.BEAT_TEMPO:
                player.set_beat_tempo(event.amount)
