"""
Lorenz System
Classic chaotic dynamical system
"""

import torch
from ..base import BaseODE


class LorenzSystem(BaseODE):
    """
    Lorenz System (Chaotic ODEs).

    ODEs:
    - dx/dt = sigma * (y - x)
    - dy/dt = x * (rho - z) - y
    - dz/dt = x * y - beta * z

    The iconic chaotic attractor, demonstrating sensitivity to initial conditions.

    Args:
        sigma: Prandtl number (default: 10.0)
        rho: Rayleigh number (default: 28.0)
        beta: Geometric factor (default: 8/3)
        initial_state: Starting point (default: (1, 0, 0))
        domain_t: Time domain (default: (0, 25))
    """

    def __init__(
        self,
        sigma: float = 10.0,
        rho: float = 28.0,
        beta: float = 8.0/3.0,
        initial_state=(1.0, 0.0, 0.0),
        domain_t=(0.0, 25.0)
    ):
        super().__init__(domain_t=domain_t, output_dim=3)
        self.sigma = sigma
        self.rho = rho
        self.beta = beta
        self.initial_state = tuple(float(v) for v in initial_state)
        self.name = "LorenzSystem"

    def initial_condition(self) -> torch.Tensor:
        return torch.tensor(self.initial_state, dtype=torch.float64)

    def get_params(self):
        return {
            'sigma': self.sigma,
            'rho': self.rho,
            'beta': self.beta
        }

    def get_ode_func(self):
        """Get ODE function f(t, state) for the integrators."""
        sigma, rho, beta = self.sigma, self.rho, self.beta

        def lorenz_ode(t, state):
            x, y, z = state
            dx_dt = sigma * (y - x)
            dy_dt = x * (rho - z) - y
            dz_dt = x * y - beta * z
            return torch.stack([dx_dt, dy_dt, dz_dt])

        return lorenz_ode
