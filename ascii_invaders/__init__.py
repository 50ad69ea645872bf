"""
ASCII Invaders - Terminal Space Shooter
A small terminal space invaders game with a separate render thread

Controls:
  Left/Right arrows - Move ship
  Space - Shoot
  Esc or Q - Quit
"""

__version__ = "0.1.0"


class InvadersError(Exception):
    """Base class for errors raised by the game"""
