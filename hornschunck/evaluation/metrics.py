"""Optical flow evaluation metrics."""
import numpy as np
from scipy.ndimage import map_coordinates

from hornschunck.utils.fields import as_field, check_shape

UNKNOWN_FLOW_THRESH = 1e9


def flow_error(i1, i2, u, v):
    """Warping residual E = i2(x - u, y - v) - i1(x, y).

    Independent of any flow estimator, so it can compare flows from
    different methods. `i2` is sampled bilinearly; coordinates falling
    outside the image are clamped to the nearest border pixel.

    Args:
        i1, i2: First and second frame (H, W), integer or float.
        u, v: Horizontal and vertical flow (H, W).

    Returns:
        error: Per-pixel residual (H, W).
    """
    i1 = as_field(i1, 'i1')
    shape = i1.shape
    i2 = check_shape(as_field(i2, 'i2'), shape, 'i2')
    u = check_shape(as_field(u, 'u'), shape, 'u')
    v = check_shape(as_field(v, 'v'), shape, 'v')

    rows, cols = np.meshgrid(np.arange(shape[0], dtype=float),
                             np.arange(shape[1], dtype=float), indexing='ij')
    warped = map_coordinates(i2, [rows - v, cols - u], order=1, mode='nearest')
    return warped - i1


def flow_angular_error(tu, tv, u, v, border=0):
    """Compute angular error and endpoint error (Barron et al.).

    Args:
        tu, tv: Reference flow components (H, W). Values above 1e9 mark
            unknown flow and are skipped.
        u, v: Estimated flow components (H, W).
        border: Number of border pixels to ignore.

    Returns:
        aae: Average angular error in degrees.
        std_ae: Standard deviation of angular error.
        aepe: Average endpoint error.
    """
    tu = as_field(tu, 'tu')
    shape = tu.shape
    tv, u, v = (check_shape(as_field(a, name), shape, name)
                for a, name in ((tv, 'tv'), (u, 'u'), (v, 'v')))

    if border > 0:
        crop = (slice(border, -border), slice(border, -border))
        tu, tv, u, v = tu[crop], tv[crop], u[crop], v[crop]

    known = (np.abs(tu) < UNKNOWN_FLOW_THRESH) & (np.abs(tv) < UNKNOWN_FLOW_THRESH)
    tu, tv, u, v = tu[known], tv[known], u[known], v[known]

    # angle between the space-time vectors (u, v, 1) and (tu, tv, 1)
    cos_angle = (u * tu + v * tv + 1.0) / (
        np.sqrt(u ** 2 + v ** 2 + 1.0) * np.sqrt(tu ** 2 + tv ** 2 + 1.0))
    ae = np.degrees(np.arccos(np.clip(cos_angle, -1.0, 1.0)))

    epe = np.hypot(tu - u, tv - v)
    return np.mean(ae), np.std(ae), np.mean(epe)
