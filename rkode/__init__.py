"""
RKODE: fixed-step Runge-Kutta integration of ODE systems

Advances dy/dt = f(t, y) with fixed steps and reports the state at arbitrary
query times, landing exactly on each one.

Modules:
- integrators: RK4, Euler, get_integrator
- state: VectorState
- diffeq: ODE systems (Lorenz, ExponentialGrowth)
- callbacks: StepBudget, ProgressCallback, TrajectoryRecorder
- evaluation: error metrics, convergence order
"""

__version__ = "0.1.0"

from .errors import (
    IntegratorError,
    NotConfiguredError,
    InvalidConfigurationError,
    DimensionMismatchError,
    BackwardIntegrationError,
    StepBudgetExceededError,
)
from .state import VectorState
from .integrators import get_integrator, BaseIntegrator, EulerIntegrator, RK4Integrator
from .diffeq import BaseODE, LorenzSystem, ExponentialGrowth
from .callbacks import Callback, StepBudget, ProgressCallback, TrajectoryRecorder
from .evaluation import estimate_convergence_order, run_convergence_study

__all__ = [
    # Errors
    'IntegratorError',
    'NotConfiguredError',
    'InvalidConfigurationError',
    'DimensionMismatchError',
    'BackwardIntegrationError',
    'StepBudgetExceededError',
    # State
    'VectorState',
    # Integrators
    'get_integrator',
    'BaseIntegrator',
    'EulerIntegrator',
    'RK4Integrator',
    # DiffEq
    'BaseODE',
    'LorenzSystem',
    'ExponentialGrowth',
    # Callbacks
    'Callback',
    'StepBudget',
    'ProgressCallback',
    'TrajectoryRecorder',
    # Evaluation
    'estimate_convergence_order',
    'run_convergence_study',
]
