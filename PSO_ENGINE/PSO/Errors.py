# --- PSO Exception Hierarchy ---


class PSOError(Exception):
    """Base class for every error raised by the optimizer."""


class InvalidArgumentError(PSOError, ValueError):
    """Bad construction input: empty population/budget/axes, missing bounds, parameters or cost function."""


class OutOfMemoryError(PSOError, MemoryError):
    """An array for the swarm state could not be allocated."""


class CostFunctionError(PSOError, RuntimeError):
    """
    The cost function raised or returned something that is not a real number.

    The run that hit it is aborted; the original exception is kept as __cause__.
    """

    def __init__(self, message: str, particle_index: int = -1, iteration: int = -1):
        super().__init__(message)
        self.particle_index = particle_index
        self.iteration = iteration


class PSOStateError(PSOError, RuntimeError):
    """Operation not allowed in the current run state (finished run, released swarm)."""
