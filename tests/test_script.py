import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / 'scripts' / 'integrate.py'


@pytest.fixture
def script():
    module_spec = importlib.util.spec_from_file_location('integrate_script', SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


def test_default_run_reproduces_lorenz_table(script, capsys):
    results = script.main([])
    out = capsys.readouterr().out
    assert out.startswith("Classic 4th order Runge-Kutta")
    assert "1.00: [" in out
    assert "(2 steps)" in out
    assert results['steps'] == [0, 2, 2, 2, 2, 2]
    assert results['times'] == pytest.approx([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])
    assert results['states'][0] == [1.0, 0.0, 0.0]


def test_config_overrides_and_output(script, tmp_path):
    config = tmp_path / 'config.json'
    config.write_text(json.dumps({'step_size': 0.05, 'n_queries': 2}))
    output = tmp_path / 'out' / 'results.json'

    script.main(['--config', str(config), '--output', str(output)])

    saved = json.loads(output.read_text())
    assert saved['steps'] == [0, 4, 4]
    assert saved['step_size'] == 0.05
    assert saved['params']['rho'] == 28.0


def test_unknown_config_key(script, tmp_path):
    config = tmp_path / 'config.json'
    config.write_text(json.dumps({'nope': 1}))
    with pytest.raises(SystemExit):
        script.main(['--config', str(config)])


def test_exponential_with_euler(script):
    results = script.main(['--system', 'exponential', '--integrator', 'euler',
                           '--step_size', '0.1', '--query_step', '0.5', '--n_queries', '1'])
    assert results['steps'] == [0, 5]
    assert results['states'][1][0] == pytest.approx(1.1 ** 5)


def test_step_budget_option(script):
    from rkode.errors import StepBudgetExceededError
    with pytest.raises(StepBudgetExceededError):
        script.main(['--max_steps', '1'])


def test_format_state(script):
    assert script.format_state([1.0]) == "[    1.00000000000000]"
