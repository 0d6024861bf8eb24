import math

import pytest
import torch

from rkode.diffeq import ExponentialGrowth, LorenzSystem
from rkode.evaluation import (
    ERROR_NORMS,
    compute_error_ratios,
    compute_l2_error,
    compute_max_error,
    compute_relative_error,
    estimate_convergence_order,
    run_convergence_study,
)


def test_error_metrics():
    pred = torch.tensor([1.0, 2.0, 2.0], dtype=torch.float64)
    target = torch.tensor([1.0, 2.0, 4.0], dtype=torch.float64)
    assert compute_l2_error(pred, target) == pytest.approx(2.0)
    assert compute_max_error(pred, target) == pytest.approx(2.0)
    assert compute_relative_error(pred, target) == pytest.approx(2.0 / 21 ** 0.5)


def test_estimate_convergence_order_synthetic():
    hs = [0.1, 0.05, 0.025]
    errors = [3.0 * h ** 4 for h in hs]
    assert estimate_convergence_order(hs, errors) == pytest.approx(4.0)
    assert compute_error_ratios(errors) == pytest.approx([16.0, 16.0])


@pytest.mark.parametrize("hs,errors", [
    ([0.1], [1e-3]),
    ([0.1, 0.05], [1e-3]),
    ([0.1, 0.05], [1e-3, 0.0]),
])
def test_estimate_convergence_order_invalid(hs, errors):
    with pytest.raises(ValueError):
        estimate_convergence_order(hs, errors)


@pytest.mark.parametrize("name,hs,order", [
    ('rk4', [0.1, 0.05, 0.025], 4.0),
    ('euler', [0.01, 0.005, 0.0025], 1.0),
])
def test_run_convergence_study(name, hs, order):
    result = run_convergence_study(name, ExponentialGrowth(), 1.0, hs)
    assert result['order'] == pytest.approx(order, abs=0.2)
    assert result['steps'] == [round(1.0 / h) for h in hs]
    assert all(e > 0 for e in result['errors'])


def test_run_convergence_study_needs_exact_solution():
    with pytest.raises(ValueError):
        run_convergence_study('rk4', LorenzSystem(), 1.0, [0.1, 0.05])


@pytest.mark.parametrize("norm", ['max', 'l2', 'relative'])
def test_run_convergence_study_norms(norm):
    result = run_convergence_study('rk4', ExponentialGrowth(), 1.0, [0.1, 0.05, 0.025], norm=norm)
    assert result['norm'] == norm
    assert result['order'] == pytest.approx(4.0, abs=0.2)


def test_run_convergence_study_norms_agree_for_scalar():
    hs = [0.1, 0.05]
    by_norm = {
        norm: run_convergence_study('rk4', ExponentialGrowth(), 1.0, hs, norm=norm)['errors']
        for norm in ERROR_NORMS
    }
    # one component: max and l2 coincide, relative divides by e
    assert by_norm['l2'] == pytest.approx(by_norm['max'])
    assert by_norm['relative'] == pytest.approx([e / math.e for e in by_norm['max']])


def test_run_convergence_study_unknown_norm():
    with pytest.raises(ValueError, match="Unknown norm"):
        run_convergence_study('rk4', ExponentialGrowth(), 1.0, [0.1, 0.05], norm='l1')
