"""
Planar helpers for the asteroid field.

Positions are complex numbers (x + 1j * y) in screen coordinates, so y grows
downwards.
"""

import numpy as np


def distance(p: complex, q: complex) -> float:
    """Euclidean distance between two points."""
    return abs(p - q)


def heading(angle: float) -> complex:
    """Unit vector for a heading angle measured counter-clockwise on screen."""
    return complex(np.cos(angle), -np.sin(angle))


def wrap_coordinate(value: float, bound: float, margin: float) -> float:
    """
    Teleport a coordinate to the opposite edge once it is fully off-screen.

    An object of radius `margin` leaves the playfield only when its centre is
    beyond the edge by more than `margin`; it then re-enters with the same
    offset on the other side.
    """
    if value < -margin:
        return bound + margin
    if value > bound + margin:
        return -margin
    return value


def wrap_position(
    position: complex, world_size: tuple[float, float], margin: float = 0.0
) -> complex:
    """Apply `wrap_coordinate` independently to both axes."""
    return complex(
        wrap_coordinate(position.real, world_size[0], margin),
        wrap_coordinate(position.imag, world_size[1], margin),
    )
