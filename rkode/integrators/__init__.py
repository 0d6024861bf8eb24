"""
Fixed-step integrators for dy/dt = f(t, y).

Available integrators:
- euler: 1st order, one derivative evaluation per step
- rk4: classic 4th order Runge-Kutta
"""

from .base import BaseIntegrator, DerivativeFunction, TIME_TOLERANCE
from .euler import EulerIntegrator
from .rk4 import RK4Integrator

_INTEGRATORS = {
    'euler': EulerIntegrator,
    'rk4': RK4Integrator,
}


def get_integrator(name: str, **kwargs) -> BaseIntegrator:
    """
    Factory function to get integrator by name.

    Args:
        name: Integrator name ('euler', 'rk4')
        **kwargs: Configuration passed to the integrator constructor

    Returns:
        BaseIntegrator instance

    Example:
        >>> integrator = get_integrator('rk4', derivative=f, initial_time=0.0,
        ...                             initial_value=[1.0], step_size=0.1)
        >>> y = integrator.integrate(1.0)
    """
    if name not in _INTEGRATORS:
        raise ValueError(
            f"Unknown integrator: {name}. "
            f"Choose from {list(_INTEGRATORS.keys())}"
        )
    return _INTEGRATORS[name](**kwargs)


__all__ = [
    'BaseIntegrator',
    'DerivativeFunction',
    'EulerIntegrator',
    'RK4Integrator',
    'TIME_TOLERANCE',
    'get_integrator',
]
