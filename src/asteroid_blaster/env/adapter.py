from asteroid_blaster.core.types import RenderAsteroid, RenderLaser, RenderShip, RenderState
from .session import GameSession


def session_to_render_state(session: GameSession) -> RenderState:
    """
    Snapshot a session for the renderer.

    Args:
        session: The live game session.

    Returns:
        Immutable RenderState decoupled from further simulation.
    """
    ship = session.ship
    render_ship = RenderShip(
        position=ship.position,
        angle=ship.angle,
        radius=ship.radius,
        thrusting=ship.thrusting and not ship.dead,
        exploding=ship.exploding,
        visible=ship.blink_on and not ship.dead,
    )

    asteroids = tuple(
        RenderAsteroid(
            position=a.position,
            radius=a.radius,
            angle=a.angle,
            offsets=a.offsets,
        )
        for a in session.asteroids
    )
    lasers = tuple(
        RenderLaser(position=laser.position, exploding=laser.exploding)
        for laser in ship.lasers
    )

    return RenderState(
        ship=render_ship,
        asteroids=asteroids,
        lasers=lasers,
        score=session.score,
        high_score=session.high_score,
        lives=session.lives,
        level=session.level,
        banner_text=session.banner_text,
        banner_alpha=session.banner_alpha,
    )
