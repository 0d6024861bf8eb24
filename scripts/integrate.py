#!/usr/bin/env python
"""
RKODE Integration Script

Integrates the Lorenz attractor (or exponential growth) with a fixed-step
integrator and prints the state at evenly spaced query times.

Usage:
    python integrate.py
    python integrate.py --system lorenz --step_size 0.01 --query_step 0.2 --n_queries 10
    python integrate.py --integrator euler --output results.json
"""

import argparse
import json
from pathlib import Path

import numpy as np
from tqdm import tqdm

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from rkode.diffeq import LorenzSystem, ExponentialGrowth
from rkode.integrators import get_integrator
from rkode.callbacks import StepBudget


# ODE registry
SYSTEMS = {
    'lorenz': LorenzSystem,
    'exponential': ExponentialGrowth,
}

TITLES = {
    'rk4': 'Classic 4th order Runge-Kutta',
    'euler': 'Forward Euler',
}


def get_system(args):
    """Create ODE system based on args."""
    if args.system == 'lorenz':
        return LorenzSystem(
            sigma=args.sigma,
            rho=args.rho,
            beta=args.beta,
            initial_state=args.initial_state or (1.0, 0.0, 0.0)
        )
    elif args.system == 'exponential':
        y0 = args.initial_state[0] if args.initial_state else 1.0
        return ExponentialGrowth(rate=args.rate, y0=y0, t0=args.t0)
    else:
        raise ValueError(f"Unknown system: {args.system}")


def format_state(values) -> str:
    return '[' + ', '.join(f"{v:20.14f}" for v in values) + ']'


def build_parser():
    parser = argparse.ArgumentParser(description='Integrate an ODE with RKODE')

    # System
    parser.add_argument('--system', type=str, default='lorenz',
                        choices=list(SYSTEMS.keys()),
                        help='ODE system')
    parser.add_argument('--sigma', type=float, default=10.0)
    parser.add_argument('--rho', type=float, default=28.0)
    parser.add_argument('--beta', type=float, default=8.0 / 3.0)
    parser.add_argument('--rate', type=float, default=1.0,
                        help='Growth rate for the exponential system')
    parser.add_argument('--initial_state', type=float, nargs='+', default=None,
                        help='Initial state (default: system default)')

    # Integrator
    parser.add_argument('--integrator', type=str, default='rk4',
                        choices=list(TITLES.keys()))
    parser.add_argument('--t0', type=float, default=0.0,
                        help='Initial time')
    parser.add_argument('--step_size', type=float, default=0.1,
                        help='Fixed integration step size')
    parser.add_argument('--max_steps', type=int, default=None,
                        help='Abort a query after this many steps (optional)')

    # Queries
    parser.add_argument('--query_step', type=float, default=0.2,
                        help='Spacing between query times')
    parser.add_argument('--n_queries', type=int, default=5,
                        help='Number of query times after t0')

    # I/O
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config.json overriding the defaults (optional)')
    parser.add_argument('--output', type=str, default=None,
                        help='Output file for results (optional)')
    parser.add_argument('--progress', action='store_true',
                        help='Show a progress bar over query times')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load config if provided
    if args.config:
        with open(args.config, 'r') as f:
            config = json.load(f)
        for key, value in config.items():
            if not hasattr(args, key):
                parser.error(f"Unknown config key: {key}")
            setattr(args, key, value)

    system = get_system(args)
    integrator = get_integrator(
        args.integrator,
        derivative=system.get_ode_func(),
        initial_time=args.t0,
        initial_value=system.initial_condition(),
        step_size=args.step_size
    )
    if args.max_steps is not None:
        integrator.add_callback(StepBudget(args.max_steps))

    print(TITLES[args.integrator])

    query_times = args.t0 + args.query_step * np.arange(args.n_queries + 1)
    results = {'system': system.name, 'params': system.get_params(),
               'integrator': args.integrator, 'step_size': args.step_size,
               'times': [], 'states': [], 'steps': []}

    for t in tqdm(query_times, desc='Integrating', disable=not args.progress):
        y = integrator.integrate(float(t))
        tqdm.write(f"{t:.2f}: {format_state(y.tolist())} ({integrator.iterations_needed} steps)")

        results['times'].append(float(t))
        results['states'].append(y.tolist())
        results['steps'].append(integrator.iterations_needed)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(results, f, indent=2)
        print(f"Results saved to {output_path}")

    return results


if __name__ == '__main__':
    main()
