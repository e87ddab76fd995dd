"""
Asteroid Blaster: a fixed-tick asteroid shooter.

The simulation lives in `asteroid_blaster.env`; rendering, audio and input
are thin pygame collaborators driven by its tick events.
"""

__version__ = "0.1.0"
