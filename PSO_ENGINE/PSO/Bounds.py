import numpy as np
from pathlib import Path
from typing import Sequence, Tuple

from PSO_ENGINE.Logs.logger import log_error
from PSO_ENGINE.PSO.Errors import InvalidArgumentError

module_name = Path(__file__).stem


def validate_limits(limits: Sequence[Sequence[float]]) -> int:
    """
    Checks that limits is a non-empty sequence of (value, value) pairs.

    The two values of a pair may come in any order; they are not reordered here.

    Returns:
        int: Number of axes.
    """
    if limits is None:
        log_error("Invalid argument limits: None", module_name)
        raise InvalidArgumentError("limits must be a sequence of (min, max) pairs, got None")

    try:
        array = np.asarray(limits, dtype=np.float64)
    except (TypeError, ValueError) as e:
        log_error(f"Invalid argument limits: {e}", module_name)
        raise InvalidArgumentError(f"limits must be a sequence of (min, max) pairs: {e}") from e

    if array.ndim != 2 or array.shape[0] == 0 or array.shape[1] != 2:
        log_error(f"n_axis or limits[n_axis][2] invalid (shape {array.shape})", module_name)
        raise InvalidArgumentError(f"limits must have shape (n_axis, 2) with n_axis > 0, got {array.shape}")

    if not np.all(np.isfinite(array)):
        log_error("limits contain non-finite values", module_name)
        raise InvalidArgumentError("limits must be finite")

    return array.shape[0]


def axis_low_high(limits: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Per-axis (low, high) derived from the stored pairs, whatever order they were given in."""
    return np.minimum(limits[:, 0], limits[:, 1]), np.maximum(limits[:, 0], limits[:, 1])


def clamp(position: np.ndarray, limits: np.ndarray) -> np.ndarray:
    """Truncates position into the domain in place and returns it."""
    low, high = axis_low_high(limits)
    np.clip(position, low, high, out=position)
    return position


def contains(position: np.ndarray, limits: np.ndarray) -> bool:
    low, high = axis_low_high(limits)
    return bool(np.all((position >= low) & (position <= high)))
