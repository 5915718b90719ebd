"""Validation helpers for 2D scalar fields."""
import numpy as np

from hornschunck.errors import (
    ConfigurationError, ShapeMismatchError, PartialArgumentError
)


def as_field(a, name='field'):
    """Return `a` as a 2D float64 array.

    Integer images are widened to float64; float64 input is returned
    without copying.
    """
    a = np.asarray(a, dtype=np.float64)
    if a.ndim != 2:
        raise ShapeMismatchError(
            f"`{name}' must be a 2D scalar field, got a {a.ndim}D array "
            f"with shape {a.shape}")
    return a


def check_shape(a, shape, name='field'):
    """Raise ShapeMismatchError unless `a.shape == shape`."""
    if a.shape != tuple(shape):
        raise ShapeMismatchError(
            f"`{name}' has shape {a.shape}, expected {tuple(shape)}")
    return a


def check_output(a, shape, name='output'):
    """Validate a caller-provided output buffer.

    Output buffers are written in place, so they must already be float64
    arrays of the right shape.
    """
    if not isinstance(a, np.ndarray) or a.dtype != np.float64:
        raise ShapeMismatchError(
            f"`{name}' must be a float64 numpy array to be written in place")
    return check_shape(a, shape, name)


def validate_shape(shape):
    """Normalize and validate a (height, width) tuple."""
    try:
        height, width = shape
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"shape must be a (height, width) pair, got {shape!r}") from None
    if not all(isinstance(s, (int, np.integer)) and s > 0
               for s in (height, width)):
        raise ConfigurationError(
            f"shape must hold two positive integers, got {shape!r}")
    return int(height), int(width)


def all_or_none(names, values):
    """Return True if all values are given, False if none are.

    Raises PartialArgumentError for a partial subset.
    """
    given = [v is not None for v in values]
    if all(given):
        return True
    if not any(given):
        return False
    missing = [n for n, g in zip(names, given) if not g]
    raise PartialArgumentError(
        f"either provide all of {', '.join(names)} or none "
        f"(missing: {', '.join(missing)})")
