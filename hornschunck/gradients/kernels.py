"""Difference/averaging kernel presets for spatio-temporal gradients."""
from enum import Enum

import numpy as np


class GradientPreset(Enum):
    """Named kernel configurations.

    Each value is ``(taps, difference, average)``. A preset with no fixed
    kernels (``None``) takes them from the caller and lets them be replaced
    later; the others are constants.
    """
    CENTRAL = ('central', 3, None, None)
    SOBEL = ('sobel', 3, (1.0, 0.0, -1.0), (1.0, 2.0, 1.0))
    PREWITT = ('prewitt', 3, (1.0, 0.0, -1.0), (1.0, 1.0, 1.0))
    ISOTROPIC = ('isotropic', 3, (1.0, 0.0, -1.0), (1.0, np.sqrt(2.0), 1.0))
    FORWARD = ('forward', 2, None, None)
    HORN_SCHUNCK = ('horn-schunck', 2, (1.0, -1.0), (1.0, 1.0))

    def __init__(self, label, taps, difference, average):
        self.label = label
        self.taps = taps
        self.fixed_difference = difference
        self.fixed_average = average

    @property
    def mutable(self):
        return self.fixed_difference is None

    @property
    def n_frames(self):
        """Length of the temporal window, equal to the kernel length."""
        return self.taps

    @classmethod
    def from_name(cls, name):
        """Look a preset up by label ('sobel', 'horn-schunck', ...)."""
        if isinstance(name, cls):
            return name
        for preset in cls:
            if preset.label == name:
                return preset
        raise KeyError(name)


GRADIENT_PRESETS = tuple(p.label for p in GradientPreset)
