"""
Convergence Analysis
Observed order of accuracy from errors at several step sizes
"""

import numpy as np
from typing import Dict, List, Sequence

from .metrics import ERROR_NORMS


def estimate_convergence_order(
    step_sizes: Sequence[float],
    errors: Sequence[float]
) -> float:
    """
    Estimate p in error ~ C * h^p by a least-squares fit in log-log space.

    Args:
        step_sizes: Step sizes h (at least two, distinct)
        errors: Global errors at a fixed time, one per step size

    Returns:
        Observed order p
    """
    h = np.asarray(step_sizes, dtype=np.float64)
    err = np.asarray(errors, dtype=np.float64)
    if h.shape != err.shape or h.size < 2:
        raise ValueError("Need at least two (step_size, error) pairs of equal length")
    if np.any(h <= 0) or np.any(err <= 0):
        raise ValueError("Step sizes and errors must be strictly positive")

    slope, _ = np.polyfit(np.log(h), np.log(err), 1)
    return float(slope)


def compute_error_ratios(errors: Sequence[float]) -> List[float]:
    """Ratios e_i / e_{i+1} for successive refinements."""
    return [errors[i] / errors[i + 1] for i in range(len(errors) - 1)]


def run_convergence_study(
    integrator_name: str,
    ode,
    t_end: float,
    step_sizes: Sequence[float],
    norm: str = 'max'
) -> Dict[str, object]:
    """
    Integrate an ODE with a known exact solution at several step sizes.

    Args:
        integrator_name: Name accepted by get_integrator ('euler', 'rk4')
        ode: ODE with exact_solution() (e.g. ExponentialGrowth)
        t_end: Time at which the global error is measured
        step_sizes: Step sizes to try
        norm: Error measure ('max', 'l2', 'relative')

    Returns:
        Dict with 'norm', 'step_sizes', 'errors', 'ratios', 'order', 'steps'
    """
    from ..integrators import get_integrator

    if norm not in ERROR_NORMS:
        raise ValueError(
            f"Unknown norm: {norm}. "
            f"Choose from {list(ERROR_NORMS.keys())}"
        )
    error_fn = ERROR_NORMS[norm]

    t0 = ode.get_domain()['t_min']
    exact = ode.exact_solution(t_end)
    if exact is None:
        raise ValueError(f"{ode.name} has no exact solution")

    errors = []
    steps = []
    for h in step_sizes:
        integrator = get_integrator(
            integrator_name,
            derivative=ode.get_ode_func(),
            initial_time=t0,
            initial_value=ode.initial_condition(),
            step_size=h
        )
        y = integrator.integrate(t_end)
        errors.append(error_fn(y, exact))
        steps.append(integrator.iterations_needed)

    return {
        'norm': norm,
        'step_sizes': list(step_sizes),
        'errors': errors,
        'ratios': compute_error_ratios(errors),
        'order': estimate_convergence_order(step_sizes, errors),
        'steps': steps,
    }
