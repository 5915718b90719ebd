"""Separable same-size convolution with mirrored borders.

Kernels are convolved, not correlated: they are mirrored before sliding
over the field, so a difference kernel given as ``[+1, 0, -1]`` yields
``out[i] = in[i+1] - in[i-1]``. Two-tap kernels ``[a, b]`` are anchored
forward, ``out[i] = b * in[i] + a * in[i+1]``.

Borders are extended by symmetric mirroring (``d c b a | a b c d``), which
is scipy's ``'reflect'`` mode. Zero padding is never used since it would
bias derivatives along the image border.
"""
import numpy as np
from scipy.ndimage import convolve1d

from hornschunck.errors import ConfigurationError
from hornschunck.utils.fields import check_output

BORDER_MODE = 'reflect'


def check_kernel(kernel, taps, name='kernel'):
    """Validate a 1D kernel and return a private float64 copy.

    Args:
        kernel: Array-like with `taps` numeric elements.
        taps: Required number of taps (3, or 2 for forward kernels).
        name: Name used in error messages.

    Returns:
        k: 1D float64 array, never sharing memory with `kernel`.
    """
    try:
        k = np.asarray(kernel)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"`{name}' kernel must hold floating-point values") from None
    if not np.issubdtype(k.dtype, np.number) \
            or np.issubdtype(k.dtype, np.complexfloating):
        raise ConfigurationError(
            f"`{name}' kernel must hold floating-point values, "
            f"got dtype {k.dtype}")
    k = np.array(k, dtype=np.float64)
    if k.ndim != 1 or k.shape[0] != taps:
        raise ConfigurationError(
            f"`{name}' kernel must be 1D with {taps} elements, "
            f"got shape {k.shape}")
    return k


def convolve_separable(field, kernel, axis, output=None):
    """Convolve a 2D field with a 1D kernel along one axis.

    Args:
        field: 2D float64 array.
        kernel: 1D kernel.
        axis: 0 to filter along y (rows), 1 along x (columns).
        output: Optional float64 array of the same shape to write into.

    Returns:
        out: The filtered field (`output` when given).
    """
    if output is None:
        output = np.empty_like(field, dtype=np.float64)
    else:
        check_output(output, field.shape, 'output')
    convolve1d(field, kernel, axis=axis, output=output, mode=BORDER_MODE)
    return output


def convolve_separable_2d(field, kernel_y, kernel_x, output=None):
    """Apply `kernel_x` along x, then `kernel_y` along y."""
    tmp = convolve_separable(field, kernel_x, axis=1)
    return convolve_separable(tmp, kernel_y, axis=0, output=output)
