"""Local flow averages for the Horn-Schunck smoothness term.

Both kernels are Laplacian approximations with the centre tap removed and
rescaled, so that filtering gives the neighbourhood mean u_bar directly.
Filtering with the Laplacian itself gives wrong results.
"""
import numpy as np
from scipy.ndimage import correlate

from hornschunck.errors import ConfigurationError
from hornschunck.utils.fields import check_output


LAPLACIAN_AVERAGE_KERNELS = {
    # From the OpenCV Laplacian [[0,-1,0],[-1,4,-1],[0,-1,0]]
    'opencv': np.array([[0, 1, 0],
                        [1, 0, 1],
                        [0, 1, 0]], dtype=np.float64) / 4.0,
    # From the Horn & Schunck paper, [[-1,-2,-1],[-2,12,-2],[-1,-2,-1]]
    'classic': np.array([[1.0 / 12, 1.0 / 6, 1.0 / 12],
                         [1.0 / 6, 0.0, 1.0 / 6],
                         [1.0 / 12, 1.0 / 6, 1.0 / 12]], dtype=np.float64),
}


def check_variant(variant):
    if variant not in LAPLACIAN_AVERAGE_KERNELS:
        raise ConfigurationError(
            f"Unknown Laplacian averaging variant: '{variant}' "
            f"(expected one of {sorted(LAPLACIAN_AVERAGE_KERNELS)})")
    return variant


def laplacian_average(field, variant='classic', output=None):
    """Weighted 3x3 neighbourhood average excluding the centre pixel.

    Args:
        field: 2D float64 array.
        variant: 'classic' (Horn & Schunck) or 'opencv' (4-neighbours).
        output: Optional float64 array of the same shape to write into.

    Returns:
        avg: Averaged field, mirrored borders.
    """
    kernel = LAPLACIAN_AVERAGE_KERNELS[check_variant(variant)]
    if output is None:
        output = np.empty_like(field, dtype=np.float64)
    else:
        check_output(output, field.shape, 'output')
    correlate(field, kernel, output=output, mode='reflect')
    return output


def laplacian_avg_hs_opencv(field):
    """4-neighbour average, the u_bar used with OpenCV's Laplacian."""
    return laplacian_average(np.asarray(field, dtype=np.float64), 'opencv')


def laplacian_avg_hs(field):
    """8-neighbour weighted average from the Horn & Schunck paper."""
    return laplacian_average(np.asarray(field, dtype=np.float64), 'classic')
