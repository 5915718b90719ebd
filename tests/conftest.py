"""Shared fixtures for Horn-Schunck tests."""
import numpy as np
import pytest


def textured_frame(H, W, dx=0.0, dy=0.0):
    """Smooth multi-orientation sinusoid pattern translated by (dx, dy)."""
    y, x = np.mgrid[0:H, 0:W].astype(float)
    x = x - dx
    y = y - dy
    return 40.0 * (np.sin(0.4 * x) + np.sin(0.35 * y)
                   + np.sin(0.3 * (x + y))) + 128.0


@pytest.fixture
def random_frames():
    """Three independent random frames."""
    rng = np.random.RandomState(42)
    H, W = 12, 17
    return [rng.rand(H, W) * 255 for _ in range(3)]


@pytest.fixture
def translated_triplet():
    """Frames at t = -1, 0, +1 of a pattern moving by (0.3, -0.2) per frame."""
    H, W = 32, 32
    dx, dy = 0.3, -0.2
    frames = [textured_frame(H, W, t * dx, t * dy) for t in (-1, 0, 1)]
    return frames, (dx, dy)


@pytest.fixture
def translated_pair():
    """Frames at t = 0, 1 of a pattern moving by (0.3, -0.2) per frame."""
    H, W = 32, 32
    dx, dy = 0.3, -0.2
    frames = [textured_frame(H, W, t * dx, t * dy) for t in (0, 1)]
    return frames, (dx, dy)
