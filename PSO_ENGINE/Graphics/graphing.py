# File: PSO_ENGINE/Graphics/graphing.py
# Optional matplotlib figures for a PSO run: the global best convergence
# curve and a 2D snapshot of the swarm over the cost landscape.

import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from PSO_ENGINE import CONFIG
from PSO_ENGINE.Logs.logger import log_info, log_warning
from PSO_ENGINE.PSO.Bounds import axis_low_high

# --- Module Name for Logging ---
module_name = Path(__file__).stem  # Gets 'graphing'


def generate_timestamped_filename(base_name: str, extension: str = "png") -> str:
    """Returns 'YYYYMMDD_HHMMSS_base_name.extension'."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{timestamp}_{base_name}.{extension}"


def _finish(fig, save_path: Optional[str], show: bool):
    if save_path is not None:
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(save_path)
        log_info(f"Saved figure to {save_path}", module_name)
    if show:
        plt.show()
    plt.close(fig)
    return save_path


def plot_gbest_convergence(history: Sequence[float],
                           function_name: str = "",
                           max_error: Optional[float] = None,
                           save_path: Optional[str] = None,
                           show: bool = False,
                           log_scale: bool = False):
    """
    Plots the global best value after each iteration.

    Args:
        history: PSOResult.history.
        function_name: Used in the title and the default file name.
        max_error: Draws the convergence threshold as a horizontal line.
        save_path: Output file. Defaults to a timestamped file in CONFIG.FIGURES_DIR.
        show: Also open an interactive window.
        log_scale: Logarithmic y axis (only if every value is positive).

    Returns:
        The path the figure was written to, or None if there was nothing to plot.
    """
    values = np.asarray(history, dtype=float)
    if values.size == 0:
        log_warning("Empty gbest history, nothing to plot.", module_name)
        return None

    if save_path is None:
        base = f"gbest_convergence_{function_name}" if function_name else "gbest_convergence"
        save_path = os.path.join(CONFIG.FIGURES_DIR, generate_timestamped_filename(base))

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(np.arange(values.size), values, marker='o', markersize=3, label='Global Best')
    if max_error is not None:
        ax.axhline(max_error, color='r', linestyle='--', linewidth=1, label='Max error')
    if log_scale:
        if np.all(values > 0):
            ax.set_yscale('log')
        else:
            log_warning("Non-positive gbest values, keeping a linear y axis.", module_name)
    ax.set_title(f"Global Best Convergence{f' - {function_name}' if function_name else ''}")
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Global best value")
    ax.grid(True, alpha=0.3)
    ax.legend()
    return _finish(fig, save_path, show)


def plot_swarm_positions(pso,
                         cost_function=None,
                         resolution: int = 100,
                         save_path: Optional[str] = None,
                         show: bool = False):
    """
    Draws the particles and the global best of a 2D swarm, over a contour
    plot of cost_function when one is given.
    """
    if pso.n_axis != 2:
        raise ValueError("Swarm plot only supports 2D swarms.")

    low, high = axis_low_high(pso.limits)
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.set_xlim(low[0], high[0])
    ax.set_ylim(low[1], high[1])
    ax.set_title("Swarm Optimization - Particle Positions")
    ax.set_xlabel("x1")
    ax.set_ylabel("x2")

    if cost_function is not None:
        x = np.linspace(low[0], high[0], resolution)
        y = np.linspace(low[1], high[1], resolution)
        X, Y = np.meshgrid(x, y)
        Z = np.array([
            cost_function(np.array([x_val, y_val]))
            for x_val, y_val in zip(np.ravel(X), np.ravel(Y))
        ]).reshape(X.shape)
        ax.contourf(X, Y, Z, levels=50, cmap='viridis', alpha=0.6)
        ax.contour(X, Y, Z, levels=20, colors='k', linewidths=0.2, alpha=0.3)

    positions = pso.positions
    ax.plot(positions[:, 0], positions[:, 1], 'bo', markersize=4, label='Particles')
    ax.plot([pso.global_best_position[0]], [pso.global_best_position[1]], 'ro', label='Global Best')
    ax.legend()

    if save_path is None:
        save_path = os.path.join(CONFIG.FIGURES_DIR, generate_timestamped_filename("swarm_positions"))
    return _finish(fig, save_path, show)
