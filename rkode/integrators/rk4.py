"""
RK4 Integrator - classic 4th order Runge-Kutta method.

For dy/dt = f(t, y):
    k1 = f(t, y)
    k2 = f(t + h/2, y + h/2 * k1)
    k3 = f(t + h/2, y + h/2 * k2)
    k4 = f(t + h, y + h * k3)
    y_next = y + h/6 * (k1 + 2*k2 + 2*k3 + k4)
"""

from typing import Tuple

from .base import BaseIntegrator
from ..state import VectorState


class RK4Integrator(BaseIntegrator):
    """Classic 4th order fixed-step Runge-Kutta integrator."""

    def step(self, t: float, y: VectorState, h: float) -> Tuple[float, VectorState]:
        """
        RK4 step. Evaluates f exactly four times, in stage order.

        Args:
            t: Current time
            y: Current state
            h: Step size

        Returns:
            (t + h, y_next)
        """
        half = 0.5 * h
        k1 = self.evaluate(t, y)
        k2 = self.evaluate(t + half, y.axpy(half, k1))
        k3 = self.evaluate(t + half, y.axpy(half, k2))
        k4 = self.evaluate(t + h, y.axpy(h, k3))
        sixth = h / 6.0
        y_next = y.linear_combination(
            (sixth, 2.0 * sixth, 2.0 * sixth, sixth),
            (k1, k2, k3, k4)
        )
        return t + h, y_next

    @property
    def name(self) -> str:
        return "rk4"

    @property
    def order(self) -> int:
        return 4
