# File: PSO_ENGINE/PSO/SwarmStore.py
# Backing storage for the swarm. Positions, velocities and personal best
# positions of every particle live in a single (n_particles, 3, n_axis)
# array; the per-particle vectors are views into it and are released together.

from pathlib import Path
from typing import Tuple

import numpy as np

from PSO_ENGINE.Logs.logger import log_debug, log_error, log_warning
from PSO_ENGINE.PSO.Errors import OutOfMemoryError

module_name = Path(__file__).stem

# Role index inside the middle dimension of the block
POSITION = 0
VELOCITY = 1
BEST_POSITION = 2
N_ROLES = 3


class ArrayAllocator:
    """
    Hands out float64 arrays and counts how many are still alive.

    Every array obtained through allocate() must be given back through free().
    The counters make leaks visible to tests (live should be 0 after cleanup).
    Only arrays handed out by this allocator and not yet freed are counted
    by free(); anything else is logged and ignored.
    """

    def __init__(self):
        self._handed_out = {}  # id -> array, holding each array keeps its id unique
        self.total = 0

    @property
    def live(self) -> int:
        return len(self._handed_out)

    def allocate(self, shape, label: str = "array") -> np.ndarray:
        try:
            array = np.zeros(shape, dtype=np.float64)
        except (MemoryError, ValueError) as e:
            # numpy raises ValueError when the requested size overflows
            log_error(f"Not possible to allocate memory for {label} {shape}: {e}", module_name)
            raise OutOfMemoryError(f"Not possible to allocate memory for {label} {shape}") from e
        self._handed_out[id(array)] = array
        self.total += 1
        log_debug(f"Allocated {label} {shape} (live: {self.live})", module_name)
        return array

    def free(self, array: np.ndarray, label: str = "array"):
        if self._handed_out.get(id(array)) is not array:
            log_warning(f"Ignoring free of {label}: not allocated here or already freed", module_name)
            return
        del self._handed_out[id(array)]
        log_debug(f"Freed {label} (live: {self.live})", module_name)


class SwarmStore:
    """
    Single contiguous block indexed as [particle][role][axis].

    Attributes:
        n_particles (int): Number of particles the block is sized for.
        n_axis (int): Number of dimensions per vector.
    """

    def __init__(self, allocator: ArrayAllocator = None):
        self.allocator = allocator if allocator is not None else ArrayAllocator()
        self.n_particles = 0
        self.n_axis = 0
        self._block = None

    @property
    def allocated(self) -> bool:
        return self._block is not None

    @property
    def shape(self) -> Tuple[int, int, int]:
        return (self.n_particles, N_ROLES, self.n_axis)

    def allocate(self, n_particles: int, n_axis: int) -> np.ndarray:
        """
        Allocates storage for n_particles * 3 * n_axis scalars.

        Raises:
            OutOfMemoryError: if the allocator cannot provide the block.
        """
        self._block = self.allocator.allocate((n_particles, N_ROLES, n_axis), label="particle contents")
        self.n_particles = n_particles
        self.n_axis = n_axis
        return self._block

    def release(self):
        """Frees the whole block. Views handed out earlier must not be used afterwards."""
        if self._block is None:
            return
        self.allocator.free(self._block, label="particle contents")
        self._block = None

    # --- Role views, shape (n_particles, n_axis) ---

    @property
    def block(self) -> np.ndarray:
        return self._block

    @property
    def positions(self) -> np.ndarray:
        return self._block[:, POSITION, :]

    @property
    def velocities(self) -> np.ndarray:
        return self._block[:, VELOCITY, :]

    @property
    def best_positions(self) -> np.ndarray:
        return self._block[:, BEST_POSITION, :]

    def row(self, particle_index: int, role: int) -> np.ndarray:
        return self._block[particle_index, role, :]
