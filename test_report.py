#!/usr/bin/env python3
"""
Tests for the plain-text swarm and result output.
"""

import io

import numpy as np
import pytest

from PSO_ENGINE.PSO.Errors import PSOStateError
from PSO_ENGINE.PSO.PSO import PSO, PSOResult, PSOState
from PSO_ENGINE.PSO.Report import (
    format_best_particle,
    format_best_value,
    format_particles,
    log_result,
    print_particles,
    print_result,
)


def make_pso():
    pso = PSO(lambda x: float(np.sum(x ** 2)), [(-1, 1), (-2, 2)], n_particles=3, n_iterations=2,
              seed=5, log_progress=False)
    pso.positions[:] = [[0.5, -1.0], [0.25, 1.5], [-1.0, 2.0]]
    return pso


def test_format_particles():
    pso = make_pso()
    lines = format_particles(pso).splitlines()
    assert len(lines) == 3
    assert lines[0] == "particle[0]  [0] 0.500000    [1] -1.000000    "
    assert lines[2].startswith("particle[2]  [0] -1.000000")


def test_best_particle_and_value():
    pso = make_pso()
    pso.find_best_global_particle()
    assert format_best_particle(pso) == "0.500000, -1.000000"
    assert format_best_value(pso) == "1.250000"


def test_print_particles_and_result():
    pso = make_pso()
    pso.find_best_global_particle()
    out = io.StringIO()
    print_particles(pso, file=out)
    print_result(pso, file=out)
    text = out.getvalue()
    assert "particle[1]" in text
    assert "Particle: {0.500000, -1.000000}" in text
    assert "Error: 1.250000" in text


def test_released_pso_cannot_be_reported():
    pso = make_pso()
    pso.release()
    with pytest.raises(PSOStateError):
        format_best_particle(pso)
    with pytest.raises(PSOStateError):
        format_particles(pso)


def test_log_result(capsys):
    result = PSOResult(position=np.array([1.0, 2.0]), value=0.125, state=PSOState.CONVERGED,
                       iterations=4, history=[1.0, 0.5, 0.25, 0.125])
    log_result(result, "sphere")
    out = capsys.readouterr().out
    assert "PSO result for sphere" in out
    assert "State: converged" in out
    assert "Iterations: 4" in out
    assert "0.1250000000" in out

    exhausted = PSOResult(position=np.array([1.0]), value=3.0, state=PSOState.EXHAUSTED, iterations=21)
    log_result(exhausted)
    assert "not below the error threshold" in capsys.readouterr().out
