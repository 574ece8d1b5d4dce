# File: PSO_ENGINE/PSO/PSO.py
# Particle Swarm Optimization engine: swarm initialization, the per-iteration
# evaluate / move cycle and the iterate-until-convergence loop.

import numbers
import traceback
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from PSO_ENGINE import CONFIG
from PSO_ENGINE.Logs.logger import log_debug, log_error, log_header, log_info, log_success, log_warning
from PSO_ENGINE.PSO.Bounds import axis_low_high, clamp, validate_limits
from PSO_ENGINE.PSO.Errors import (
    CostFunctionError,
    InvalidArgumentError,
    OutOfMemoryError,
    PSOStateError,
)
from PSO_ENGINE.PSO.Particle import Particle
from PSO_ENGINE.PSO.SwarmStore import ArrayAllocator, SwarmStore

# --- Module Name for Logging ---
module_name = Path(__file__).stem  # Gets 'PSO'


class PSOState(Enum):
    READY = "ready"
    ITERATING = "iterating"
    CONVERGED = "converged"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


TERMINAL_STATES = (PSOState.CONVERGED, PSOState.EXHAUSTED, PSOState.FAILED)


@dataclass
class PSOResult:
    """Outcome of a PSO run."""

    position: np.ndarray
    value: float
    state: PSOState
    iterations: int
    history: List[float] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.state is PSOState.CONVERGED


def _check_count(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        log_error(f"{name} invalid: {value!r}", module_name)
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


def _check_params(params) -> Tuple[float, float, float]:
    if params is None:
        log_error("Invalid argument params: None", module_name)
        raise InvalidArgumentError("params (w, c1, c2) are required")
    try:
        values = tuple(float(p) for p in params)
    except (TypeError, ValueError) as e:
        log_error(f"Invalid argument params: {e}", module_name)
        raise InvalidArgumentError(f"params must be three real numbers (w, c1, c2): {e}") from e
    if len(values) != 3:
        log_error(f"Invalid argument params: expected 3 values, got {len(values)}", module_name)
        raise InvalidArgumentError(f"params must be three real numbers (w, c1, c2), got {len(values)}")
    return values


class PSO:
    """
    Global-best Particle Swarm Optimizer minimizing a scalar cost function
    over a box-bounded domain.

    A PSO object is one run: it is initialized once, iterated until it
    converges or exhausts its iteration budget, and then only its result
    can be read.

    Attributes:
        particles (List[Particle]): The swarm, in evaluation order.
        global_best_position (np.ndarray): Best position seen by any particle.
        global_best_value (float): Cost at global_best_position.
        history (List[float]): global_best_value after each completed iteration.
        state (PSOState): Where the run is in its lifecycle.
    """

    def __init__(self,
                 cost_function: Callable[[np.ndarray], float],
                 limits: Sequence[Sequence[float]],
                 n_particles: int = CONFIG.DEFAULT_N_PARTICLES,
                 n_iterations: int = CONFIG.DEFAULT_N_ITERATIONS,
                 max_error: float = CONFIG.DEFAULT_MAX_ERROR,
                 params: Optional[Sequence[float]] = (CONFIG.DEFAULT_OMEGA, CONFIG.DEFAULT_C1, CONFIG.DEFAULT_C2),
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None,
                 sentinel_value: float = CONFIG.SENTINEL_VALUE,
                 allocator: Optional[ArrayAllocator] = None,
                 log_progress: bool = CONFIG.LOG_PROGRESS):
        """
        Validates the inputs, allocates the swarm and places every particle.

        Args:
            cost_function: Pure function mapping a position vector to a real cost.
            limits: One (value, value) pair per axis; pair order does not matter.
            n_particles (int): Population size, > 0.
            n_iterations (int): Iteration budget, > 0.
            max_error (float): The run converges once the global best cost is below this.
            params: Update rule coefficients (w, c1, c2).
            seed (int): Seed for a fresh numpy Generator. Ignored if rng is given.
            rng (np.random.Generator): Random source for the whole run.
            sentinel_value (float): Initial personal/global best value; must exceed any real cost.
            allocator (ArrayAllocator): Source of the state arrays.
            log_progress (bool): Log the global best value after every iteration.

        Raises:
            InvalidArgumentError: on any invalid input.
            OutOfMemoryError: if the swarm cannot be allocated. Nothing stays allocated.
        """
        self.valid = False
        self.state = None

        if cost_function is None or not callable(cost_function):
            log_error(f"Invalid argument cost_function: {cost_function!r}", module_name)
            raise InvalidArgumentError("cost_function must be callable")
        self.n_particles = _check_count("n_particles", n_particles)
        self.n_iterations = _check_count("n_iterations", n_iterations)
        self.max_iterations = self.n_iterations
        self.n_axis = validate_limits(limits)
        self.w, self.c1, self.c2 = _check_params(params)
        try:
            self.max_error = float(max_error)
            self.sentinel_value = float(sentinel_value)
        except (TypeError, ValueError) as e:
            log_error(f"Invalid max_error / sentinel_value: {e}", module_name)
            raise InvalidArgumentError(f"max_error and sentinel_value must be real numbers: {e}") from e

        self.cost_function = cost_function
        self.log_progress = log_progress
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        self.allocator = allocator if allocator is not None else ArrayAllocator()
        self.store = SwarmStore(self.allocator)
        self.particles: List[Particle] = []
        self.global_best_position: Optional[np.ndarray] = None
        self.global_best_value = self.sentinel_value
        self.limits: Optional[np.ndarray] = None

        self.iteration = 0
        self.history: List[float] = []

        raw_limits = np.asarray(limits, dtype=np.float64)
        try:
            self.store.allocate(self.n_particles, self.n_axis)
            self._init_particles(raw_limits)

            self.global_best_position = self.allocator.allocate((self.n_axis,), label="global_best_position")
            self.global_best_position[:] = self.particles[0].position

            self.limits = self.allocator.allocate((self.n_axis, 2), label="limits")
            self.limits[:] = raw_limits
        except OutOfMemoryError:
            log_error("Not possible to initialize PSO, releasing partial allocations.", module_name)
            self._release_arrays()
            raise

        self.valid = True
        self.state = PSOState.READY
        log_info(f"Initialized PSO: {self.n_particles} particles, {self.n_axis} axes, "
                 f"w={self.w}, c1={self.c1}, c2={self.c2}", module_name)

    # --- Initialization ---

    def _init_particles(self, raw_limits: np.ndarray):
        """Random positions inside the domain, zero velocity, best position = position."""
        low, high = axis_low_high(raw_limits)
        self.store.velocities[:] = 0.0
        self.store.positions[:] = self.rng.uniform(low, high, size=(self.n_particles, self.n_axis))
        self.store.best_positions[:] = self.store.positions
        self.particles = [Particle(self.store, i, self.sentinel_value) for i in range(self.n_particles)]
        log_debug(f"Placed {self.n_particles} particles inside {raw_limits.tolist()}", module_name)

    def _release_arrays(self):
        self.particles = []
        self.store.release()
        if self.global_best_position is not None:
            self.allocator.free(self.global_best_position, label="global_best_position")
            self.global_best_position = None
        if self.limits is not None:
            self.allocator.free(self.limits, label="limits")
            self.limits = None

    def release(self):
        """Frees every array owned by the run. The object is unusable afterwards."""
        if not self.valid:
            return
        self._release_arrays()
        self.valid = False
        log_debug("PSO released.", module_name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.release()
        return False

    # --- State views ---

    @property
    def positions(self) -> np.ndarray:
        self._check_valid()
        return self.store.positions

    @property
    def velocities(self) -> np.ndarray:
        self._check_valid()
        return self.store.velocities

    @property
    def best_positions(self) -> np.ndarray:
        self._check_valid()
        return self.store.best_positions

    @property
    def best_values(self) -> np.ndarray:
        self._check_valid()
        return np.array([p.best_value for p in self.particles])

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def _check_valid(self):
        if not self.valid:
            log_error("PSO is not initialized or has been released", module_name)
            raise PSOStateError("PSO is not initialized or has been released")

    def _check_runnable(self):
        self._check_valid()
        if self.finished:
            log_error(f"PSO run already finished ({self.state.value})", module_name)
            raise PSOStateError(f"PSO run already finished ({self.state.value})")

    # --- Iteration ---

    def _evaluate(self, particle: Particle) -> float:
        try:
            cost = float(self.cost_function(particle.read_only_position()))
        except Exception as e:
            self.state = PSOState.FAILED
            log_error(f"Cost function failed for particle {particle.index} at {particle.position}: {e}", module_name)
            log_error(traceback.format_exc(), module_name)
            raise CostFunctionError(
                f"cost function failed for particle {particle.index} in iteration {self.iteration}: {e}",
                particle_index=particle.index,
                iteration=self.iteration,
            ) from e
        if not np.isfinite(cost):
            log_debug(f"Non-finite cost ({cost}) for particle {particle.index}.", module_name)
        return cost

    def find_best_global_particle(self):
        """
        Evaluates every particle once, in order, and updates personal and
        global bests. Only a strictly lower cost replaces a best, so on a tie
        the particle evaluated first keeps the global best.
        """
        self._check_runnable()
        for particle in self.particles:
            cost = self._evaluate(particle)
            particle.value = cost

            if cost < particle.best_value:
                particle.best_value = cost
                particle.best_position[:] = particle.position

            if cost < self.global_best_value:
                self.global_best_value = cost
                self.global_best_position[:] = particle.position

    def update_particles(self):
        """
        Moves every particle:
            v = w * v + c1 * r1 * (pbest - x) + c2 * r2 * (gbest - x)
            x = clamp(x + v)
        r1, r2 are drawn once per particle and shared by all of its axes.
        Clamping truncates the position only; the velocity keeps its value.
        """
        self._check_runnable()

        # Row i holds (r1, r2) for particle i
        r = self.rng.random((self.n_particles, 2))
        r1 = r[:, 0:1]
        r2 = r[:, 1:2]

        positions = self.store.positions
        velocities = self.store.velocities

        cognitive = self.c1 * r1 * (self.store.best_positions - positions)
        social = self.c2 * r2 * (self.global_best_position - positions)
        velocities[:] = self.w * velocities + cognitive + social

        positions += velocities
        clamp(positions, self.limits)

    def optimize_step(self) -> float:
        """
        One full iteration: evaluation and best tracking, then the move, then
        the stopping check. The run becomes CONVERGED once the global best
        value is below max_error, or EXHAUSTED once more than max_iterations
        passes have completed.

        Returns:
            float: The global best value after the step.
        """
        self._check_runnable()
        self.state = PSOState.ITERATING
        self.find_best_global_particle()
        self.update_particles()
        self.iteration += 1
        self.history.append(self.global_best_value)

        if self.log_progress:
            log_info(f"Iteration {self.iteration - 1} - cost: {self.global_best_value:.10f}", module_name)

        if self.global_best_value < self.max_error:
            self.state = PSOState.CONVERGED
            log_success(f"Converged after {self.iteration} iterations. "
                        f"Best value: {self.global_best_value:.10f}", module_name)
        elif self.iteration > self.max_iterations:
            self.state = PSOState.EXHAUSTED
            log_warning(f"Iteration budget exhausted after {self.iteration} iterations. "
                        f"Best value: {self.global_best_value:.10f}", module_name)
        return self.global_best_value

    def run(self, max_iterations: Optional[int] = None,
            callback: Optional[Callable[["PSO", int], None]] = None) -> PSOResult:
        """
        Iterates until the global best value drops below max_error or the
        iteration budget is spent. The body always runs at least once, and a
        budget of n allows n + 1 passes in total, counting any passes already
        made through optimize_step.

        Args:
            max_iterations (int): Overrides n_iterations as the budget. 0 is allowed.
            callback: Called as callback(pso, iteration) after every pass.

        Returns:
            PSOResult: Final global best and the terminal state reached.

        Raises:
            PSOStateError: if the run already finished or the swarm was released.
            CostFunctionError: if the cost function fails. The run ends in FAILED.
        """
        self._check_runnable()
        budget = self.n_iterations if max_iterations is None else max_iterations
        if isinstance(budget, bool) or not isinstance(budget, numbers.Integral) or budget < 0:
            log_error(f"max_iterations invalid: {max_iterations!r}", module_name)
            raise InvalidArgumentError(f"max_iterations must be a non-negative integer, got {max_iterations!r}")

        self.max_iterations = int(budget)

        log_header(f"Starting PSO optimization (budget: {budget}, max error: {self.max_error})", module_name)
        while True:
            self.optimize_step()
            if callback is not None:
                callback(self, self.iteration - 1)
            if self.finished:
                break

        return self.result()

    def result(self) -> PSOResult:
        self._check_valid()
        return PSOResult(
            position=self.global_best_position.copy(),
            value=float(self.global_best_value),
            state=self.state,
            iterations=self.iteration,
            history=list(self.history),
        )
