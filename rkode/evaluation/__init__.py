"""
RKODE Evaluation Module

Submodules:
- metrics: L2, max and relative errors
- convergence: observed order of accuracy
"""

from .metrics import (
    ERROR_NORMS,
    compute_l2_error,
    compute_relative_error,
    compute_max_error,
)
from .convergence import (
    estimate_convergence_order,
    compute_error_ratios,
    run_convergence_study,
)

__all__ = [
    'ERROR_NORMS',
    'compute_l2_error',
    'compute_relative_error',
    'compute_max_error',
    'estimate_convergence_order',
    'compute_error_ratios',
    'run_convergence_study',
]
