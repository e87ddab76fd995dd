"""
Collision detection and scoring.

Hit tests are circle approximations: the ship and asteroids are circles of
their radius, lasers are points. Detection is done on the post-move
positions of the tick; destruction is then applied to the session.
"""

from typing import TYPE_CHECKING

from .entities import Asteroid, Laser, Ship
from .event import Event, EventType
from .geometry import distance

if TYPE_CHECKING:
    from .session import GameSession


def find_ship_collision(ship: Ship, asteroids: list[Asteroid]) -> Asteroid | None:
    """First asteroid, in collection order, overlapping a collidable ship."""
    if not ship.can_collide:
        return None
    for asteroid in asteroids:
        if distance(ship.position, asteroid.position) < ship.radius + asteroid.radius:
            return asteroid
    return None


def find_laser_hits(
    asteroids: list[Asteroid], lasers: list[Laser]
) -> list[tuple[Asteroid, Laser]]:
    """
    Pair asteroids with the laser that destroys them this tick.

    Asteroids are scanned newest first and, for each, lasers newest first.
    A laser scores at most one hit and only while it is still flying; an
    asteroid is destroyed by at most one laser.
    """
    hits = []
    spent: set[Laser] = set()
    for asteroid in reversed(asteroids):
        for laser in reversed(lasers):
            if laser.exploding or laser in spent:
                continue
            if distance(asteroid.position, laser.position) < asteroid.radius:
                spent.add(laser)
                hits.append((asteroid, laser))
                break
    return hits


def destroy_asteroid(session: "GameSession", asteroid: Asteroid) -> None:
    """
    Remove an asteroid, split it, award its score and advance the level
    once the field is empty.
    """
    config = session.config
    fragments = session.factory.split_asteroid(asteroid, session.level)

    session.asteroids.remove(asteroid)
    session.asteroids.extend(fragments)

    points = config.tier_score(asteroid.tier)
    session.emit(
        Event(EventType.ASTEROID_DESTROYED, tier=asteroid.tier, amount=points)
    )
    session.add_score(points)

    session.asteroids_remaining -= 1
    if session.asteroids_remaining <= 0:
        ratio = 1.0
    else:
        ratio = session.asteroids_remaining / session.asteroids_total
    session.beat.set_ratio(ratio)
    session.emit(Event(EventType.BEAT_TEMPO, amount=ratio))

    if not session.asteroids:
        session.level += 1
        session.emit(Event(EventType.LEVEL_CLEARED, amount=session.level))
        session.start_level()


def resolve_ship_collision(session: "GameSession") -> bool:
    """Explode the ship on its first overlapping asteroid. At most one per tick."""
    asteroid = find_ship_collision(session.ship, session.asteroids)
    if asteroid is None:
        return False
    session.explode_ship()
    destroy_asteroid(session, asteroid)
    return True


def resolve_laser_hits(session: "GameSession") -> int:
    """
    Apply this tick's laser hits.

    Fragments spawned by a hit, and asteroids of a level started by the last
    hit, are not tested until the next tick.
    """
    hits = find_laser_hits(session.asteroids, session.ship.lasers)
    for asteroid, laser in hits:
        laser.explosion_time = session.config.laser_explosion_ticks
        destroy_asteroid(session, asteroid)
    return len(hits)
