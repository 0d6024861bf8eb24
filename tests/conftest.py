"""Shared fixtures for the integrator tests."""

import pytest

from rkode.diffeq import LorenzSystem, ExponentialGrowth
from rkode.integrators import RK4Integrator


def lorenz_floats(t, s, sigma=10.0, rho=28.0, beta=8.0 / 3.0):
    x, y, z = s
    return [sigma * (y - x), x * (rho - z) - y, x * y - beta * z]


def rk4_step_floats(f, t, y, h):
    """Plain-float RK4 step, used as an independent reference."""
    k1 = f(t, y)
    k2 = f(t + h / 2, [yi + h / 2 * ki for yi, ki in zip(y, k1)])
    k3 = f(t + h / 2, [yi + h / 2 * ki for yi, ki in zip(y, k2)])
    k4 = f(t + h, [yi + h * ki for yi, ki in zip(y, k3)])
    return t + h, [
        yi + h / 6 * (a + 2 * b + 2 * c + d)
        for yi, a, b, c, d in zip(y, k1, k2, k3, k4)
    ]


@pytest.fixture
def lorenz():
    return LorenzSystem()


@pytest.fixture
def growth():
    return ExponentialGrowth(rate=1.0, y0=1.0)


@pytest.fixture
def lorenz_rk4(lorenz):
    return RK4Integrator(
        derivative=lorenz.get_ode_func(),
        initial_time=0.0,
        initial_value=lorenz.initial_condition(),
        step_size=0.1
    )


@pytest.fixture
def growth_rk4(growth):
    return RK4Integrator(
        derivative=growth.get_ode_func(),
        initial_time=0.0,
        initial_value=growth.initial_condition(),
        step_size=0.1
    )
