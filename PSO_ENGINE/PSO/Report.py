# File: PSO_ENGINE/PSO/Report.py
# Plain-text output for a swarm and its result. Presentation only; nothing
# here changes the optimizer state.

import sys
from pathlib import Path

from PSO_ENGINE.Logs.logger import log_header, log_info, log_success, log_warning
from PSO_ENGINE.PSO.Errors import PSOStateError
from PSO_ENGINE.PSO.PSO import PSO, PSOResult

module_name = Path(__file__).stem


def format_particles(pso: PSO) -> str:
    """One line per particle: 'particle[i]  [j] value    [j+1] value ...'."""
    lines = []
    for i, position in enumerate(pso.positions):
        coords = "".join(f"[{j}] {value:f}    " for j, value in enumerate(position))
        lines.append(f"particle[{i}]  {coords}")
    return "\n".join(lines)


def format_best_particle(pso: PSO) -> str:
    if not pso.valid:
        raise PSOStateError("PSO is not initialized or has been released")
    return ", ".join(f"{value:f}" for value in pso.global_best_position)


def format_best_value(pso: PSO) -> str:
    return f"{pso.global_best_value:f}"


def print_particles(pso: PSO, file=None):
    print(format_particles(pso), file=file if file is not None else sys.stdout)


def print_result(pso: PSO, file=None):
    """Prints the result banner used by the example programs."""
    out = file if file is not None else sys.stdout
    print("**********************", file=out)
    print("Result", file=out)
    print(f"Particle: {{{format_best_particle(pso)}}}", file=out)
    print(f"Error: {format_best_value(pso)}", file=out)
    print("**********************", file=out)


def log_result(result: PSOResult, function_name: str = ""):
    """Logs a PSOResult summary through the project logger."""
    title = f"PSO result{f' for {function_name}' if function_name else ''}"
    log_header(title, module_name)
    log_info(f"  State: {result.state.value}", module_name)
    log_info(f"  Iterations: {result.iterations}", module_name)
    log_info(f"  Best position: {result.position.tolist()}", module_name)
    if result.converged:
        log_success(f"  Best value: {result.value:.10f}", module_name)
    else:
        log_warning(f"  Best value: {result.value:.10f} (not below the error threshold)", module_name)
