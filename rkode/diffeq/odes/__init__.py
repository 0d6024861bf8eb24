"""
RKODE ODEs

Available ODE systems:
- LorenzSystem: Classic chaotic attractor
- ExponentialGrowth: dy/dt = rate * y, exact solution known
"""

from .lorenz import LorenzSystem
from .exponential import ExponentialGrowth

__all__ = [
    'LorenzSystem',
    'ExponentialGrowth',
]
