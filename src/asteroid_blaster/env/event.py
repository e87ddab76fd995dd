from dataclasses import dataclass
from enum import StrEnum, auto

from asteroid_blaster.core.constants import Tier


class EventType(StrEnum):
    LASER_FIRED = auto()
    ASTEROID_DESTROYED = auto()
    HIGH_SCORE = auto()
    SHIP_EXPLODED = auto()
    SHIP_RESPAWNED = auto()
    LIFE_LOST = auto()
    LEVEL_CLEARED = auto()
    GAME_OVER = auto()
    NEW_GAME = auto()
    THRUST_STARTED = auto()
    THRUST_STOPPED = auto()
    BEAT = auto()
    BEAT_TEMPO = auto()


@dataclass(frozen=True)
class Event:
    event_type: EventType
    tier: Tier | None = None
    amount: float | None = None  # points, score, lives, level or tempo ratio
    high: bool = False  # beat tone
