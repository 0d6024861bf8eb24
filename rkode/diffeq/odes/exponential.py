"""
Exponential Growth
dy/dt = rate * y, with exact solution y0 * exp(rate * t)
"""

import math
import torch
from ..base import BaseODE


class ExponentialGrowth(BaseODE):
    """
    Scalar linear ODE dy/dt = rate * y.

    Smooth and with a closed-form solution, so it is the standard problem for
    measuring convergence order.

    Args:
        rate: Growth rate (default: 1.0)
        y0: Value at t0 (default: 1.0)
        t0: Initial time (default: 0.0)
        domain_t: Time domain (default: (t0, t0 + 1))
    """

    def __init__(
        self,
        rate: float = 1.0,
        y0: float = 1.0,
        t0: float = 0.0,
        domain_t=None
    ):
        super().__init__(domain_t=domain_t or (t0, t0 + 1.0), output_dim=1)
        self.rate = rate
        self.y0 = y0
        self.t0 = t0
        self.name = "ExponentialGrowth"

    def initial_condition(self) -> torch.Tensor:
        return torch.tensor([self.y0], dtype=torch.float64)

    def get_params(self):
        return {'rate': self.rate, 'y0': self.y0, 't0': self.t0}

    def exact_solution(self, t: float) -> torch.Tensor:
        return torch.tensor(
            [self.y0 * math.exp(self.rate * (t - self.t0))],
            dtype=torch.float64
        )

    def get_ode_func(self):
        rate = self.rate

        def growth_ode(t, y):
            return rate * y

        return growth_ode
