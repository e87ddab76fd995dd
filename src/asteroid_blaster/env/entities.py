"""
Entities of the asteroid field: the ship, its lasers and the asteroids.

Entities compare by identity so they can be looked up in the live
collections while those are being rebuilt during a tick.
"""

from dataclasses import dataclass, field

import numpy as np

from asteroid_blaster.core.constants import Tier


@dataclass(eq=False)
class Laser:
    position: complex
    velocity: complex  # pixels per tick
    distance: float = 0.0
    explosion_time: int = 0  # 0 = flying

    @property
    def exploding(self) -> bool:
        return self.explosion_time > 0


@dataclass(eq=False)
class Asteroid:
    position: complex
    velocity: complex  # pixels per tick
    radius: float
    tier: Tier
    angle: float
    offsets: np.ndarray  # read-only per-vertex radius multipliers

    @property
    def num_vertices(self) -> int:
        return len(self.offsets)


@dataclass(eq=False)
class Ship:
    """
    The player ship.

    Attributes:
        position: Centre of the ship.
        angle: Heading in radians, counter-clockwise, 0 pointing right.
        rotation: Angular velocity in radians per tick, set by the input layer.
        velocity: Pixels per tick.
        radius: Collision radius.
        explosion_time: Ticks of explosion left; while positive the ship is
            uncontrollable and cannot collide.
        blink_time: Ticks left in the current blink.
        blink_number: Blinks left; while positive the ship is invulnerable.
        thrusting: Thrust intent.
        shoot_allowed: Cleared on firing, set again when the fire key is released.
        dead: Set on game over.
        lasers: Live lasers, owned by the ship.
    """

    position: complex
    angle: float
    radius: float
    blink_time: int
    blink_number: int
    rotation: float = 0.0
    velocity: complex = 0j
    explosion_time: int = 0
    thrusting: bool = False
    shoot_allowed: bool = True
    dead: bool = False
    lasers: list[Laser] = field(default_factory=list)

    @property
    def exploding(self) -> bool:
        return self.explosion_time > 0

    @property
    def invulnerable(self) -> bool:
        return self.blink_number > 0

    @property
    def blink_on(self) -> bool:
        return self.blink_number % 2 == 0

    @property
    def can_collide(self) -> bool:
        return not (self.exploding or self.invulnerable or self.dead)
