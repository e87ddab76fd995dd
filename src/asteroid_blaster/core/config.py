import math
from dataclasses import dataclass, fields
from typing import Any, Tuple

import numpy as np
from omegaconf import DictConfig, OmegaConf

from .constants import MIN_ASTEROID_VERTICES, Tier


class ConfigurationError(ValueError):
    """Raised when a game configuration value is out of range."""


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for the asteroid field simulation.

    Durations are in seconds, distances in pixels, speeds in pixels per
    second and turn speed in degrees per second. The simulation itself works
    in ticks; the derived per-tick values are exposed as properties.

    Attributes:
        fps: Simulation tick rate.
        world_size: Width and height of the playfield.
        lives: Lives at the start of a game.
        ship_size: Ship diameter.
        ship_turn_speed: Rotation speed while a turn key is held.
        ship_thrust: Thrust acceleration.
        ship_friction: Friction coefficient applied while not thrusting.
        ship_explosion_duration: How long the ship explodes before a life is lost.
        ship_blink_duration: Length of one invulnerability blink.
        ship_invulnerability_duration: Invulnerability window after (re)spawning.
        asteroid_count: Large asteroids at level 0; one more per level.
        asteroid_speed: Maximum speed per axis at level 0.
        asteroid_size: Diameter of a large asteroid.
        asteroid_vertices: Average vertex count of an asteroid outline.
        asteroid_randomness: Per-vertex radius jitter, in [0, 1).
        laser_max_count: Maximum lasers alive at once.
        laser_speed: Laser speed.
        laser_max_distance: Laser range as a fraction of the playfield width.
        laser_explosion_duration: Length of the laser hit flash.
        text_fade_duration: Time for a banner to fade out.
        score_large: Points for a large asteroid.
        score_medium: Points for a medium asteroid.
        score_small: Points for a small asteroid.
        show_bounding: Draw collision circles (debug).
    """

    fps: int = 30
    world_size: Tuple[float, float] = (800.0, 600.0)
    lives: int = 3

    # Ship
    ship_size: float = 30.0
    ship_turn_speed: float = 360.0
    ship_thrust: float = 5.0
    ship_friction: float = 0.7
    ship_explosion_duration: float = 0.3
    ship_blink_duration: float = 0.1
    ship_invulnerability_duration: float = 3.0

    # Asteroids
    asteroid_count: int = 3
    asteroid_speed: float = 50.0
    asteroid_size: float = 100.0
    asteroid_vertices: int = 10
    asteroid_randomness: float = 0.4

    # Lasers
    laser_max_count: int = 10
    laser_speed: float = 500.0
    laser_max_distance: float = 0.4
    laser_explosion_duration: float = 0.1

    # Presentation
    text_fade_duration: float = 2.5
    show_bounding: bool = False

    # Scoring
    score_large: int = 20
    score_medium: int = 50
    score_small: int = 100

    def __post_init__(self) -> None:
        if len(self.world_size) != 2:
            raise ConfigurationError(
                f"world_size must have two entries, got {self.world_size}"
            )
        object.__setattr__(
            self, "world_size", (float(self.world_size[0]), float(self.world_size[1]))
        )

        positive = [
            "fps",
            "lives",
            "ship_size",
            "ship_turn_speed",
            "ship_thrust",
            "ship_explosion_duration",
            "ship_blink_duration",
            "ship_invulnerability_duration",
            "asteroid_count",
            "asteroid_size",
            "asteroid_vertices",
            "laser_max_count",
            "laser_speed",
            "laser_max_distance",
            "laser_explosion_duration",
            "text_fade_duration",
        ]
        for name in positive:
            value = getattr(self, name)
            if value <= 0:
                raise ConfigurationError(f"{name} must be positive, got {value}")

        non_negative = [
            "ship_friction",
            "asteroid_speed",
            "score_large",
            "score_medium",
            "score_small",
        ]
        for name in non_negative:
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative, got {value}")

        if min(self.world_size) <= 0:
            raise ConfigurationError(f"world_size must be positive, got {self.world_size}")
        if not 0 <= self.asteroid_randomness < 1:
            raise ConfigurationError(
                f"asteroid_randomness must be in [0, 1), got {self.asteroid_randomness}"
            )
        if self.asteroid_vertices // 2 < MIN_ASTEROID_VERTICES:
            raise ConfigurationError(
                f"asteroid_vertices must be at least {2 * MIN_ASTEROID_VERTICES} so every "
                f"outline has {MIN_ASTEROID_VERTICES} or more corners, got {self.asteroid_vertices}"
            )

    @classmethod
    def from_cfg(cls, cfg: DictConfig | dict[str, Any] | None) -> "GameConfig":
        """Build a GameConfig from the `game` node of a Hydra/OmegaConf config."""
        if cfg is None:
            return cls()
        if isinstance(cfg, DictConfig):
            values = OmegaConf.to_container(cfg, resolve=True)
        else:
            values = dict(cfg)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown game config keys: {unknown}")

        if "world_size" in values:
            values["world_size"] = tuple(values["world_size"])
        return cls(**values)

    # Derived per-tick quantities

    def _ticks(self, seconds: float) -> int:
        # Rounded first so 0.1 s at 30 fps is 3 ticks, not 4
        return math.ceil(round(seconds * self.fps, 6))

    @property
    def width(self) -> float:
        return self.world_size[0]

    @property
    def height(self) -> float:
        return self.world_size[1]

    @property
    def ship_radius(self) -> float:
        return self.ship_size / 2

    @property
    def ship_turn_rate(self) -> float:
        """Radians per tick."""
        return float(np.deg2rad(self.ship_turn_speed)) / self.fps

    @property
    def explosion_ticks(self) -> int:
        return self._ticks(self.ship_explosion_duration)

    @property
    def blink_ticks(self) -> int:
        return self._ticks(self.ship_blink_duration)

    @property
    def blink_count(self) -> int:
        return math.ceil(round(self.ship_invulnerability_duration / self.ship_blink_duration, 6))

    @property
    def laser_explosion_ticks(self) -> int:
        return self._ticks(self.laser_explosion_duration)

    @property
    def laser_range(self) -> float:
        return self.laser_max_distance * self.width

    @property
    def text_fade_step(self) -> float:
        return 1.0 / (self.text_fade_duration * self.fps)

    def tier_radius(self, tier: Tier) -> int:
        # 1/2, 1/4, 1/8 of the nominal size
        return math.ceil(self.asteroid_size / 2 ** (tier + 1))

    def tier_score(self, tier: Tier) -> int:
        return {
            Tier.LARGE: self.score_large,
            Tier.MEDIUM: self.score_medium,
            Tier.SMALL: self.score_small,
        }[tier]
