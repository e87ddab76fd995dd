import logging
import math

import numpy as np

from asteroid_blaster.core.config import ConfigurationError, GameConfig
from asteroid_blaster.core.constants import (
    DIFFICULTY_STEP,
    SHIP_NOSE_FACTOR,
    START_HEADING_DEG,
    Tier,
)
from .entities import Asteroid, Laser, Ship
from .geometry import distance, heading

log = logging.getLogger(__name__)

MAX_SPAWN_ATTEMPTS = 10_000


class EntityFactory:
    """
    Builds ships, asteroids and lasers with their initial kinematic state.

    All randomness comes from the injected generator, so a seeded generator
    reproduces the same asteroid field.
    """

    def __init__(self, config: GameConfig, rng: np.random.Generator | None = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()

    def create_ship(self) -> Ship:
        return Ship(
            position=complex(self.config.width / 2, self.config.height / 2),
            angle=float(np.deg2rad(START_HEADING_DEG)),
            radius=self.config.ship_radius,
            blink_time=self.config.blink_ticks,
            blink_number=self.config.blink_count,
        )

    def _random_velocity_component(self, max_speed: float) -> float:
        sign = 1.0 if self.rng.random() < 0.5 else -1.0
        return self.rng.uniform(0.0, max_speed) * sign

    def create_asteroid(self, position: complex, tier: Tier, level: int) -> Asteroid:
        config = self.config
        difficulty = 1 + DIFFICULTY_STEP * level
        max_speed = config.asteroid_speed * difficulty / config.fps

        velocity = complex(
            self._random_velocity_component(max_speed),
            self._random_velocity_component(max_speed),
        )

        low = math.floor(config.asteroid_vertices / 2)
        num_vertices = int(
            self.rng.integers(low, low + config.asteroid_vertices, endpoint=True)
        )
        offsets = self.rng.uniform(
            1 - config.asteroid_randomness,
            1 + config.asteroid_randomness,
            size=num_vertices,
        )
        offsets.setflags(write=False)

        return Asteroid(
            position=position,
            velocity=velocity,
            radius=config.tier_radius(tier),
            tier=tier,
            angle=self.rng.uniform(0.0, 2 * np.pi),
            offsets=offsets,
        )

    def safe_spawn_distance(self) -> float:
        return self.config.tier_radius(Tier.LARGE) * 2 + self.config.ship_radius

    def spawn_level_asteroids(self, level: int, ship_position: complex) -> list[Asteroid]:
        """
        Create the large asteroids that open a level.

        Positions closer to the ship than `safe_spawn_distance` are redrawn.
        """
        count = self.config.asteroid_count + level
        min_distance = self.safe_spawn_distance()

        asteroids = []
        for _ in range(count):
            for _ in range(MAX_SPAWN_ATTEMPTS):
                candidate = complex(
                    self.rng.uniform(0.0, self.config.width),
                    self.rng.uniform(0.0, self.config.height),
                )
                if distance(candidate, ship_position) >= min_distance:
                    break
            else:
                raise ConfigurationError(
                    f"Playfield {self.config.world_size} has no room for asteroids "
                    f"{min_distance:.1f}px away from the ship"
                )
            asteroids.append(self.create_asteroid(candidate, Tier.LARGE, level))

        log.debug(f"Spawned {count} asteroids for level {level}")
        return asteroids

    def split_asteroid(self, asteroid: Asteroid, level: int) -> list[Asteroid]:
        """Two fragments of the next tier at the same spot, none for the smallest."""
        if asteroid.tier == Tier.SMALL:
            return []
        child_tier = Tier(asteroid.tier + 1)
        return [
            self.create_asteroid(asteroid.position, child_tier, level)
            for _ in range(2)
        ]

    def create_laser(self, ship: Ship) -> Laser:
        direction = heading(ship.angle)
        return Laser(
            position=ship.position + SHIP_NOSE_FACTOR * ship.radius * direction,
            velocity=self.config.laser_speed / self.config.fps * direction,
        )
