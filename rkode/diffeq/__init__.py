"""
RKODE Differential Equations

Base classes:
- BaseODE: Abstract base for ODE systems

ODEs (rkode.diffeq.odes):
- LorenzSystem, ExponentialGrowth
"""

from .base import BaseODE
from .odes import LorenzSystem, ExponentialGrowth

__all__ = [
    'BaseODE',
    'LorenzSystem',
    'ExponentialGrowth',
]
