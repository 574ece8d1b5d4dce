#!/usr/bin/env python3
"""
Tests for the bundled cost functions and the loader.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from PSO_ENGINE.Logs.logger import log_header, log_info, log_success
from PSO_ENGINE.ObjectiveFunctions.Loader import load_objective_function, objective_function_classes
from PSO_ENGINE.ObjectiveFunctions.QuadraticBowl import QuadraticBowlFunction
from PSO_ENGINE.ObjectiveFunctions.Rosenbrock import RosenbrockFunction
from PSO_ENGINE.ObjectiveFunctions.SineTaylor import SineTaylorFunction
from PSO_ENGINE.ObjectiveFunctions.Sphere import SphereFunction


def test_quadratic_bowl_minimum():
    log_header("=== Quadratic Bowl Test ===", "test_functions")
    bowl = QuadraticBowlFunction()
    assert bowl.evaluate(np.array([5.2, 3.0])) == pytest.approx(119.8)
    assert bowl(np.array([0.0, 0.0])) == pytest.approx(300.0)
    # Any step away from the vertex costs more
    for dx, dy in [(0.1, 0), (-0.1, 0), (0, 0.1), (0, -0.1)]:
        assert bowl(np.array([5.2 + dx, 3.0 + dy])) > 119.8
    log_info(f"Bounds: {bowl.bounds}", "test_functions")
    assert bowl.bounds == [(-10, 10), (-20, 20)]


def test_quadratic_bowl_offset():
    bowl = QuadraticBowlFunction(offset=119.8)
    assert bowl(np.array([5.2, 3.0])) == pytest.approx(0.0, abs=1e-9)
    assert bowl.minimum_value == pytest.approx(0.0)


def test_sine_taylor():
    log_header("=== Sine Taylor Test ===", "test_functions")
    fit = SineTaylorFunction()
    assert fit.dim == 3
    assert fit.x.shape == (1000,)
    assert fit.x[0] == pytest.approx(-np.pi)
    assert fit.x[-1] < np.pi

    # All-zero polynomial: mean of sin^2 over a full period
    assert fit(np.zeros(3)) == pytest.approx(0.5, abs=1e-6)
    taylor = fit(np.array([1.0, -1.0 / 6.0, 1.0 / 120.0]))
    assert taylor < 0.1
    log_success(f"Taylor coefficients error: {taylor:.6f}", "test_functions")


def test_sphere_and_rosenbrock():
    sphere = SphereFunction(dim=4)
    assert sphere(np.zeros(4)) == 0.0
    assert sphere(np.array([1.0, 2.0, 0.0, 0.0])) == 5.0

    rosenbrock = RosenbrockFunction(dim=3)
    assert rosenbrock(np.ones(3)) == 0.0
    assert rosenbrock(np.zeros(3)) == 2.0
    assert len(rosenbrock.bounds) == 3


def test_loader():
    assert set(objective_function_classes) == {"quadratic", "sine_taylor", "sphere", "rosenbrock"}
    assert isinstance(load_objective_function("sphere", dim=3), SphereFunction)
    with pytest.raises(ValueError):
        load_objective_function("ackley")


def test_plot_3d_surface(tmp_path):
    bowl = QuadraticBowlFunction()
    path = tmp_path / "bowl.png"
    bowl.plot_3d_surface(resolution=20, save_path=str(path))
    assert path.exists()

    with pytest.raises(ValueError):
        SineTaylorFunction().plot_3d_surface()


if __name__ == "__main__":
    test_quadratic_bowl_minimum()
    test_sine_taylor()
