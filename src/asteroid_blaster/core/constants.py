"""
Central constants and enumerations for Asteroid Blaster.

Holds the asteroid tiers, input intents and game phases shared by the
simulation, the input layer and the collaborators that consume tick events.
"""

from enum import IntEnum, StrEnum, auto


class Tier(IntEnum):
    """Asteroid size class. Lower value means bigger rock."""

    LARGE = 0
    MEDIUM = 1
    SMALL = 2


class InputAction(StrEnum):
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    THRUST = auto()
    FIRE = auto()


class GamePhase(StrEnum):
    SPAWNING = auto()
    PLAYING = auto()
    SHIP_EXPLODING = auto()
    RESPAWNING = auto()
    GAME_OVER = auto()


# Each large asteroid eventually yields 1 + 2 + 4 rocks once fully split.
ASTEROIDS_PER_LARGE = 7

# Level difficulty multiplier applied to asteroid speed: 1 + step * level
DIFFICULTY_STEP = 0.1

# Ship geometry relative to its radius
SHIP_NOSE_FACTOR = 4 / 3

# Beat tempo: seconds between beats = 1 - BEAT_SPEEDUP * (1 - ratio)
BEAT_SPEEDUP = 0.75

START_HEADING_DEG = 90.0

# Fewest corners an asteroid outline may have; vertex counts start at half the average
MIN_ASTEROID_VERTICES = 3
