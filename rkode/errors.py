"""
Integrator Errors
Raised synchronously at the failing call, never swallowed.
"""


class IntegratorError(Exception):
    """Base class for all integrator errors."""
    pass


class NotConfiguredError(IntegratorError, RuntimeError):
    """Integration requested before the integrator was fully configured."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            f"Integrator is not configured, missing: {', '.join(self.missing)}"
        )


class InvalidConfigurationError(IntegratorError, ValueError):
    """A configuration value (step size, time, function) is not acceptable."""
    pass


class DimensionMismatchError(IntegratorError, ValueError):
    """Vector length differs from the fixed state dimension."""

    def __init__(self, expected: int, got: int, context: str = 'vector'):
        self.expected = expected
        self.got = got
        super().__init__(f"{context} has length {got}, expected {expected}")


class BackwardIntegrationError(IntegratorError, ValueError):
    """Target time lies before the current integration time."""

    def __init__(self, current_time: float, target_time: float):
        self.current_time = current_time
        self.target_time = target_time
        super().__init__(
            f"Cannot integrate backward from t={current_time} to t={target_time}"
        )


class StepBudgetExceededError(IntegratorError, RuntimeError):
    """A step budget callback aborted the integration loop."""

    def __init__(self, budget: int):
        self.budget = budget
        super().__init__(f"Step budget of {budget} steps exceeded")
