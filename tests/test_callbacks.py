import pytest

from rkode.callbacks import Callback, ProgressCallback, StepBudget, TrajectoryRecorder
from rkode.errors import StepBudgetExceededError


def test_step_budget_aborts_loop(growth_rk4):
    growth_rk4.add_callback(StepBudget(3))
    with pytest.raises(StepBudgetExceededError) as exc:
        growth_rk4.integrate(1.0)
    assert exc.value.budget == 3
    assert growth_rk4.iterations_needed == 3
    assert growth_rk4.current_time == pytest.approx(0.3)

    # budget resets per call
    growth_rk4.integrate(0.5)
    assert growth_rk4.iterations_needed == 2


def test_step_budget_cumulative(growth_rk4):
    growth_rk4.add_callback(StepBudget(4, per_call=False))
    growth_rk4.integrate(0.3)
    with pytest.raises(StepBudgetExceededError):
        growth_rk4.integrate(0.6)
    assert growth_rk4.current_time == pytest.approx(0.4)


def test_step_budget_rejects_negative():
    with pytest.raises(ValueError):
        StepBudget(-1)


def test_progress_callback_prints(growth_rk4, capsys):
    growth_rk4.add_callback(ProgressCallback(print_every=2))
    growth_rk4.integrate(0.5)
    out = capsys.readouterr().out
    assert "Step 2 | t: 0.200000 / 0.500000" in out
    assert "Step 4 |" in out
    assert "Step 5 |" not in out
    assert "Reached t=0.500000 in 5 steps" in out


def test_trajectory_recorder(growth_rk4):
    recorder = TrajectoryRecorder()
    growth_rk4.add_callback(recorder)
    growth_rk4.integrate(0.25)
    assert recorder.times == pytest.approx([0.0, 0.1, 0.2, 0.25])
    assert len(recorder.values) == 4
    assert recorder.values[0].tolist() == [1.0]

    growth_rk4.integrate(0.3)
    assert recorder.times[-1] == pytest.approx(0.3)
    assert len(recorder.times) == 5

    recorder.clear()
    assert recorder.times == []


def test_callback_hook_order(growth_rk4):
    events = []

    class Tracer(Callback):
        def on_integrate_start(self, integrator, target_time):
            events.append(('start', target_time))

        def on_step_start(self, integrator, step):
            events.append(('step_start', step))

        def on_step_end(self, integrator, step):
            events.append(('step_end', step))

        def on_integrate_end(self, integrator):
            events.append(('end', integrator.current_time))

    growth_rk4.add_callback(Tracer())
    growth_rk4.integrate(0.2)
    assert events == [
        ('start', 0.2),
        ('step_start', 0), ('step_end', 1),
        ('step_start', 1), ('step_end', 2),
        ('end', 0.2),
    ]


@pytest.mark.parametrize("print_every", [0, -5])
def test_progress_callback_rejects_non_positive_interval(print_every):
    with pytest.raises(ValueError):
        ProgressCallback(print_every=print_every)
