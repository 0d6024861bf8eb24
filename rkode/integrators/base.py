"""
Base Integrator ABC for fixed-step time-stepping.

Solves dy/dt = f(t, y) by repeated fixed steps. Subclasses provide the single
step formula; this class owns configuration, the current time/value and the
advance-to-time loop.
"""

import math
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple

import torch

from ..errors import (
    BackwardIntegrationError,
    InvalidConfigurationError,
    NotConfiguredError,
)
from ..state import VectorState, as_vector

# Relative (to the step size) slack when comparing times, so that rounding in
# accumulated time never produces an extra sliver step.
TIME_TOLERANCE = 1e-9

DerivativeFunction = Callable[[float, torch.Tensor], Sequence[float]]


def _check_time(value, name: str) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidConfigurationError(f"{name} must be finite, got {value}")
    return value


class BaseIntegrator(ABC):
    """
    Abstract base class for fixed-step integrators.

    Args:
        derivative: Function f(t, y) -> dy/dt (optional, can be set later)
        initial_time: Start time t0 (optional)
        initial_value: Initial state y(t0) (optional)
        step_size: Fixed step size h > 0 (optional)
        callbacks: Step callbacks (optional)
    """

    def __init__(
        self,
        derivative: Optional[DerivativeFunction] = None,
        initial_time: Optional[float] = None,
        initial_value=None,
        step_size: Optional[float] = None,
        callbacks: Optional[list] = None
    ):
        self._derivative = None
        self._initial_time = None
        self._initial_value = None
        self._step_size = None

        self._current_time = None
        self._current_value = None
        self._iterations_needed = 0
        self._total_steps = 0

        self.callbacks = list(callbacks or [])

        if derivative is not None:
            self.derivative = derivative
        if initial_time is not None:
            self.initial_time = initial_time
        if initial_value is not None:
            self.initial_value = initial_value
        if step_size is not None:
            self.step_size = step_size

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def derivative(self) -> Optional[DerivativeFunction]:
        """The differential function f(t, y)."""
        return self._derivative

    @derivative.setter
    def derivative(self, func: DerivativeFunction) -> None:
        if not callable(func):
            raise InvalidConfigurationError(
                f"derivative must be callable, got {type(func).__name__}"
            )
        self._derivative = func

    @property
    def initial_time(self) -> Optional[float]:
        return self._initial_time

    @initial_time.setter
    def initial_time(self, value: float) -> None:
        self._initial_time = _check_time(value, 'initial_time')
        self.reset()

    @property
    def initial_value(self) -> Optional[torch.Tensor]:
        if self._initial_value is None:
            return None
        return self._initial_value.to_tensor()

    @initial_value.setter
    def initial_value(self, value) -> None:
        self._initial_value = VectorState(value)
        self.reset()

    @property
    def step_size(self) -> Optional[float]:
        return self._step_size

    @step_size.setter
    def step_size(self, value: float) -> None:
        try:
            h = float(value)
        except (TypeError, ValueError):
            raise InvalidConfigurationError(f"step_size must be a real number, got {value!r}")
        if not math.isfinite(h) or h <= 0.0:
            raise InvalidConfigurationError(
                f"step_size must be finite and strictly positive, got {value}"
            )
        self._step_size = h

    def missing_configuration(self) -> List[str]:
        """Names of configuration fields that are still unset."""
        fields = {
            'derivative': self._derivative,
            'initial_time': self._initial_time,
            'initial_value': self._initial_value,
            'step_size': self._step_size,
        }
        return [name for name, value in fields.items() if value is None]

    @property
    def is_configured(self) -> bool:
        return not self.missing_configuration()

    def reset(self) -> None:
        """Re-seed current time/value from the initial conditions."""
        self._current_time = self._initial_time
        self._current_value = self._initial_value
        self._iterations_needed = 0
        self._total_steps = 0

    def add_callback(self, callback) -> None:
        """Add a step callback."""
        self.callbacks.append(callback)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current_time(self) -> Optional[float]:
        return self._current_time

    @property
    def current_value(self) -> Optional[torch.Tensor]:
        if self._current_value is None:
            return None
        return self._current_value.to_tensor()

    @property
    def dimension(self) -> Optional[int]:
        if self._initial_value is None:
            return None
        return len(self._initial_value)

    @property
    def iterations_needed(self) -> int:
        """Steps (full and partial) taken by the last integrate() call."""
        return self._iterations_needed

    @property
    def total_steps(self) -> int:
        """Steps taken since the integrator was last (re)configured."""
        return self._total_steps

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def evaluate(self, t: float, y: VectorState) -> VectorState:
        """
        Evaluate the derivative function and check its output length.

        The function receives a copy of the state, so it cannot modify
        committed values. Its exceptions propagate unchanged.
        """
        dy = as_vector(self._derivative(t, y.to_tensor()), context='derivative')
        y.check_length(dy, context='derivative')
        return VectorState._wrap(dy)

    @abstractmethod
    def step(self, t: float, y: VectorState, h: float) -> Tuple[float, VectorState]:
        """
        Advance (t, y) by one step of size h.

        Args:
            t: Current time
            y: Current state
            h: Step size

        Returns:
            (t_next, y_next)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return integrator name."""
        pass

    @property
    def order(self) -> int:
        """Return global order of accuracy."""
        return 1

    def integrate(self, target_time: float) -> torch.Tensor:
        """
        Advance to target_time and return the state there.

        Takes full steps of step_size while they fit, then one partial step
        of the remaining distance so the integrator lands exactly on
        target_time. iterations_needed is recomputed for this call.

        Args:
            target_time: Time to integrate to (>= current_time)

        Returns:
            State at target_time [dim]
        """
        missing = self.missing_configuration()
        if missing:
            raise NotConfiguredError(missing)

        target = _check_time(target_time, 'target_time')
        if target < self._current_time:
            raise BackwardIntegrationError(self._current_time, target)

        self._iterations_needed = 0
        h = self._step_size
        tol = TIME_TOLERANCE * h

        for callback in self.callbacks:
            callback.on_integrate_start(self, target)

        while target - self._current_time > tol:
            remaining = target - self._current_time
            dt = h if remaining >= h - tol else remaining
            if self._current_time + dt <= self._current_time:
                raise InvalidConfigurationError(
                    f"step_size {dt} cannot be resolved at t={self._current_time}: "
                    f"time would not advance"
                )

            for callback in self.callbacks:
                callback.on_step_start(self, self._iterations_needed)

            t_next, y_next = self.step(self._current_time, self._current_value, dt)
            if target - t_next <= tol:
                t_next = target

            # Commit only after the whole step succeeded
            self._current_time = t_next
            self._current_value = y_next
            self._iterations_needed += 1
            self._total_steps += 1

            for callback in self.callbacks:
                callback.on_step_end(self, self._iterations_needed)

        self._current_time = target

        for callback in self.callbacks:
            callback.on_integrate_end(self)

        return self._current_value.to_tensor()

    def integrate_many(self, times: Sequence[float]) -> Tuple[torch.Tensor, List[int]]:
        """
        Integrate through a non-decreasing sequence of query times.

        Args:
            times: Query times

        Returns:
            states: [len(times), dim]
            steps: Steps needed for each query
        """
        states = []
        steps = []
        for t in times:
            states.append(self.integrate(t))
            steps.append(self._iterations_needed)
        if not states:
            return torch.empty((0, self.dimension or 0), dtype=torch.float64), steps
        return torch.stack(states), steps

    def __repr__(self):
        return (
            f"{type(self).__name__}(t={self._current_time}, "
            f"h={self._step_size}, dim={self.dimension})"
        )
