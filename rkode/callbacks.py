"""
Integration Callbacks
StepBudget, ProgressCallback, TrajectoryRecorder
"""

from abc import ABC
from typing import Optional

from .errors import StepBudgetExceededError


class Callback(ABC):
    """Base callback class."""

    def on_integrate_start(self, integrator, target_time: float) -> None:
        pass

    def on_step_start(self, integrator, step: int) -> None:
        pass

    def on_step_end(self, integrator, step: int) -> None:
        pass

    def on_integrate_end(self, integrator) -> None:
        pass


class StepBudget(Callback):
    """
    Abort integration once a maximum number of steps is reached.

    The step that would exceed the budget is never taken, so the integrator
    keeps the last committed time/value.

    Args:
        max_steps: Maximum number of steps allowed
        per_call: Count steps per integrate() call (default: True).
            If False, count steps across all calls.
        verbose: Print a message when the budget is hit (default: False)
    """

    def __init__(
        self,
        max_steps: int,
        per_call: bool = True,
        verbose: bool = False
    ):
        if max_steps < 0:
            raise ValueError(f"max_steps must be non-negative, got {max_steps}")
        self.max_steps = max_steps
        self.per_call = per_call
        self.verbose = verbose
        self.steps = 0

    def on_integrate_start(self, integrator, target_time: float) -> None:
        if self.per_call:
            self.steps = 0

    def on_step_start(self, integrator, step: int) -> None:
        if self.steps >= self.max_steps:
            if self.verbose:
                print(f"Step budget exhausted at t={integrator.current_time}")
            raise StepBudgetExceededError(self.max_steps)

    def on_step_end(self, integrator, step: int) -> None:
        self.steps += 1


class ProgressCallback(Callback):
    """
    Print integration progress.

    Args:
        print_every: Print every N steps (default: 100)
    """

    def __init__(self, print_every: int = 100):
        if print_every < 1:
            raise ValueError(f"print_every must be at least 1, got {print_every}")
        self.print_every = print_every
        self.target_time: Optional[float] = None

    def on_integrate_start(self, integrator, target_time: float) -> None:
        self.target_time = target_time

    def on_step_end(self, integrator, step: int) -> None:
        if step % self.print_every == 0:
            print(
                f"Step {step} | t: {integrator.current_time:.6f}"
                f" / {self.target_time:.6f}"
            )

    def on_integrate_end(self, integrator) -> None:
        print(
            f"Reached t={integrator.current_time:.6f} "
            f"in {integrator.iterations_needed} steps"
        )


class TrajectoryRecorder(Callback):
    """
    Record (t, y) after every committed step.

    Args:
        record_initial: Also record the state before the first step of each call
    """

    def __init__(self, record_initial: bool = True):
        self.record_initial = record_initial
        self.times = []
        self.values = []

    def on_integrate_start(self, integrator, target_time: float) -> None:
        if self.record_initial and not self.times:
            self._record(integrator)

    def on_step_end(self, integrator, step: int) -> None:
        self._record(integrator)

    def _record(self, integrator) -> None:
        self.times.append(integrator.current_time)
        self.values.append(integrator.current_value)

    def clear(self) -> None:
        self.times = []
        self.values = []
