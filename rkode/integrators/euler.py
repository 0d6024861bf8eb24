"""
Euler Integrator - 1st order explicit method.

y_next = y + h * f(t, y)
"""

from typing import Tuple

from .base import BaseIntegrator
from ..state import VectorState


class EulerIntegrator(BaseIntegrator):
    """Forward Euler integrator (1st order)."""

    def step(self, t: float, y: VectorState, h: float) -> Tuple[float, VectorState]:
        return t + h, y.axpy(h, self.evaluate(t, y))

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1
