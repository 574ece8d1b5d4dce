#!/usr/bin/env python3
"""
PSO Runner Script

Runs the optimizer on one of the bundled cost functions with the reference
settings from CONFIG.EXAMPLE_SETTINGS, any of which can be overridden on
the command line.
"""

import argparse
import os
import sys
from pathlib import Path

from PSO_ENGINE import CONFIG
from PSO_ENGINE.Graphics.graphing import generate_timestamped_filename, plot_gbest_convergence
from PSO_ENGINE.Logs import logger
from PSO_ENGINE.Logs.logger import log_error, log_header, log_info
from PSO_ENGINE.ObjectiveFunctions.Loader import load_objective_function, objective_function_classes
from PSO_ENGINE.PSO.Errors import PSOError
from PSO_ENGINE.PSO.PSO import PSO
from PSO_ENGINE.PSO.Report import log_result, print_particles, print_result

module_name = Path(__file__).stem


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Minimize a bundled cost function with Particle Swarm Optimization')

    parser.add_argument('--function', type=str, choices=sorted(objective_function_classes), default='quadratic',
                        help='Cost function to minimize (default: quadratic)')
    parser.add_argument('--list-functions', action='store_true',
                        help='List available cost functions and exit')

    # Run configuration; None means "use the function's reference setting"
    parser.add_argument('--particles', type=int, default=None, help='Number of particles')
    parser.add_argument('--iterations', type=int, default=None, help='Iteration budget')
    parser.add_argument('--max-error', type=float, default=None,
                        help='Stop once the best cost is below this value')
    parser.add_argument('--omega', type=float, default=None, help='Inertia weight w')
    parser.add_argument('--c1', type=float, default=None, help='Cognitive coefficient')
    parser.add_argument('--c2', type=float, default=None, help='Social coefficient')
    parser.add_argument('--seed', type=int, default=None, help='Random seed (default: unseeded)')

    # Output
    parser.add_argument('--print-particles', action='store_true',
                        help='Print every particle position before and after the run')
    parser.add_argument('--plot', action='store_true',
                        help=f'Save the global best convergence plot under {CONFIG.FIGURES_DIR}')
    parser.add_argument('--quiet', action='store_true', help='Do not log every iteration')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser


def resolve_settings(args) -> dict:
    """Reference settings for args.function, overridden by any flag that was given."""
    settings = dict(CONFIG.EXAMPLE_SETTINGS[args.function])
    overrides = {
        "n_particles": args.particles,
        "n_iterations": args.iterations,
        "max_error": args.max_error,
        "omega": args.omega,
        "c1": args.c1,
        "c2": args.c2,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})
    return settings


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_functions:
        print("Available cost functions:")
        for name, function_class in sorted(objective_function_classes.items()):
            print(f"  {name}: {function_class.__name__}")
        return 0

    if args.debug:
        logger.set_debug(True)

    settings = resolve_settings(args)
    objective = load_objective_function(args.function)

    log_header(f"***** PSO: {objective.__class__.__name__} *****", module_name)
    log_info("Configuration:", module_name)
    for key, value in settings.items():
        log_info(f"  {key}: {value}", module_name)
    log_info(f"  bounds: {objective.bounds}", module_name)

    try:
        with PSO(objective, objective.bounds,
                 n_particles=settings["n_particles"],
                 n_iterations=settings["n_iterations"],
                 max_error=settings["max_error"],
                 params=(settings["omega"], settings["c1"], settings["c2"]),
                 seed=args.seed,
                 log_progress=not args.quiet) as pso:
            if args.print_particles:
                print_particles(pso)

            result = pso.run()

            if args.print_particles:
                print_particles(pso)
            print_result(pso)
    except PSOError as e:
        log_error(f"PSO run failed: {e}", module_name)
        return 1

    log_result(result, args.function)

    if args.plot:
        save_path = os.path.join(CONFIG.FIGURES_DIR, generate_timestamped_filename(f"gbest_{args.function}"))
        plot_gbest_convergence(result.history, function_name=args.function,
                               max_error=settings["max_error"], save_path=save_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
