"""
Per-tick kinematics for the ship, its lasers and the asteroids.

All quantities are per tick: velocities in pixels per tick, rotation in
radians per tick. The functions mutate the entities in place; anything that
affects lives, score or level is reported back to the caller.
"""

from asteroid_blaster.core.config import GameConfig
from .entities import Asteroid, Ship
from .geometry import heading, wrap_position


def apply_thrust(ship: Ship, config: GameConfig) -> None:
    """Accelerate along the heading, or let friction bleed off speed."""
    if ship.thrusting and not ship.dead:
        ship.velocity += config.ship_thrust / config.fps * heading(ship.angle)
    else:
        ship.velocity -= config.ship_friction * ship.velocity / config.fps


def move_ship(ship: Ship) -> bool:
    """
    Rotate and translate the ship, or count down its explosion.

    Returns:
        True on the tick the explosion countdown reaches zero.
    """
    if ship.dead:
        return False

    if ship.exploding:
        ship.explosion_time -= 1
        return ship.explosion_time == 0

    ship.angle += ship.rotation
    ship.position += ship.velocity
    return False


def update_ship(ship: Ship, config: GameConfig) -> bool:
    """Thrust, motion and wraparound for one tick. Returns `move_ship`'s flag."""
    apply_thrust(ship, config)
    explosion_finished = move_ship(ship)
    ship.position = wrap_position(ship.position, config.world_size, ship.radius)
    return explosion_finished


def _wrap_laser(position: complex, world_size: tuple[float, float]) -> complex:
    # Lasers teleport exactly at the edges, no radius buffer
    x, y = position.real, position.imag
    width, height = world_size
    if x < 0:
        x = width
    elif x > width:
        x = 0.0
    if y < 0:
        y = height
    elif y > height:
        y = 0.0
    return complex(x, y)


def update_lasers(ship: Ship, config: GameConfig) -> None:
    """
    Advance, expire and wrap the ship's lasers.

    A laser is dropped once it has travelled past its range or once its hit
    flash has run out. The live list is rebuilt rather than edited in place.
    """
    survivors = []
    for laser in ship.lasers:
        if laser.distance > config.laser_range:
            continue

        if laser.exploding:
            laser.explosion_time -= 1
            if laser.explosion_time == 0:
                continue
        else:
            laser.position += laser.velocity
            laser.distance += abs(laser.velocity)

        laser.position = _wrap_laser(laser.position, config.world_size)
        survivors.append(laser)

    ship.lasers = survivors


def update_asteroids(asteroids: list[Asteroid], config: GameConfig) -> None:
    for asteroid in asteroids:
        asteroid.position = wrap_position(
            asteroid.position + asteroid.velocity, config.world_size, asteroid.radius
        )


def update_invulnerability(ship: Ship, config: GameConfig) -> None:
    """Count down the blink timer; each expiry uses up one blink."""
    if ship.exploding or ship.blink_number == 0:
        return

    ship.blink_time -= 1
    if ship.blink_time == 0:
        ship.blink_time = config.blink_ticks
        ship.blink_number -= 1

