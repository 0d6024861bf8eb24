"""
Base ODE Class

Abstract base class for first-order ODE systems dy/dt = f(t, y).
"""

from abc import ABC, abstractmethod
import torch
from typing import Optional, Tuple


class BaseODE(ABC):
    """
    Abstract base class for ODE systems.

    Args:
        domain_t: Tuple (t_min, t_max) for temporal domain
        output_dim: Dimension of state vector
    """

    def __init__(
        self,
        domain_t: Tuple[float, float] = (0.0, 100.0),
        output_dim: int = 1
    ):
        self.domain_t = domain_t
        self.output_dim = output_dim
        self.name = "BaseODE"

    @abstractmethod
    def initial_condition(self) -> torch.Tensor:
        """
        Return initial state vector.

        Returns:
            Initial state [output_dim]
        """
        pass

    @abstractmethod
    def get_params(self) -> dict:
        """Get equation parameters."""
        pass

    @abstractmethod
    def get_ode_func(self):
        """
        Get the ODE function for numerical integration.

        Returns:
            Callable: Function f(t, y) -> dy/dt
        """
        pass

    def exact_solution(self, t: float) -> Optional[torch.Tensor]:
        """Compute exact solution if available."""
        return None

    def get_domain(self) -> dict:
        """Get temporal domain bounds."""
        return {'t_min': self.domain_t[0], 't_max': self.domain_t[1]}

    def __repr__(self):
        return f"{self.name}(t={self.domain_t}, dim={self.output_dim})"
