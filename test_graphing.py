#!/usr/bin/env python3
"""
Tests for the optional matplotlib figures.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from PSO_ENGINE import CONFIG
from PSO_ENGINE.Graphics.graphing import (
    generate_timestamped_filename,
    plot_gbest_convergence,
    plot_swarm_positions,
)
from PSO_ENGINE.ObjectiveFunctions.QuadraticBowl import QuadraticBowlFunction
from PSO_ENGINE.PSO.PSO import PSO


def test_timestamped_filename():
    name = generate_timestamped_filename("gbest", "svg")
    assert name.endswith("_gbest.svg")
    assert len(name.split("_")[0]) == 8


def test_plot_gbest_convergence(tmp_path):
    path = tmp_path / "nested" / "convergence.png"
    saved = plot_gbest_convergence([10.0, 5.0, 5.0, 1.0], function_name="sphere", max_error=0.3,
                                   save_path=str(path), log_scale=True)
    assert saved == str(path)
    assert path.exists()


def test_plot_gbest_convergence_default_location(tmp_path, monkeypatch):
    monkeypatch.setattr(CONFIG, "FIGURES_DIR", str(tmp_path))
    saved = plot_gbest_convergence([3.0, -1.0], log_scale=True)
    assert saved is not None
    assert saved.startswith(str(tmp_path))
    assert len(list(tmp_path.glob("*_gbest_convergence.png"))) == 1


def test_plot_empty_history():
    assert plot_gbest_convergence([]) is None


def test_plot_swarm_positions(tmp_path):
    bowl = QuadraticBowlFunction()
    pso = PSO(bowl, [(10, -10), (-20, 20)], n_particles=10, n_iterations=3, seed=0, log_progress=False)
    pso.run()
    path = tmp_path / "swarm.png"
    plot_swarm_positions(pso, cost_function=bowl, resolution=20, save_path=str(path))
    assert path.exists()


def test_plot_swarm_positions_requires_2d(tmp_path):
    pso = PSO(lambda x: float(np.sum(x)), [(0, 1)] * 3, n_particles=2, n_iterations=1, seed=0,
              log_progress=False)
    with pytest.raises(ValueError):
        plot_swarm_positions(pso, save_path=str(tmp_path / "x.png"))
