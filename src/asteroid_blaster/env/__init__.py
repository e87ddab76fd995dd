from .entities import Asteroid, Laser, Ship
from .event import Event, EventType
from .factory import EntityFactory
from .session import GameSession

__all__ = [
    "Asteroid",
    "Laser",
    "Ship",
    "Event",
    "EventType",
    "EntityFactory",
    "GameSession",
]
