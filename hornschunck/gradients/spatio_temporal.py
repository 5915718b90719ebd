"""Spatio-temporal gradients from a short window of frames.

With h' the difference kernel and h the averaging kernel, the three
derivative fields are the separable 3D convolutions

    Ex = h'(x) h(y) h(t)
    Ey = h(x) h'(y) h(t)
    Et = h(x) h(y) h'(t)

where the t axis runs over the frame window (a triplet for 3-tap kernels,
a pair for the 2-tap forward kernels). The temporal axis uses the same
mirrored-kernel convention as the spatial ones, so the result equals a
direct 3D convolution of the stacked frames at the centre of the window.
"""
from enum import Enum

import numpy as np

from hornschunck.errors import ConfigurationError
from hornschunck.gradients.kernels import GradientPreset, GRADIENT_PRESETS
from hornschunck.utils.convolution import (
    check_kernel, convolve_separable, convolve_separable_2d
)
from hornschunck.utils.fields import (
    as_field, check_shape, check_output, validate_shape, all_or_none
)


class OutputMode(Enum):
    """Where evaluate() writes its results."""
    ALLOCATE = 'allocate'
    USE_PROVIDED = 'use-provided'

    @classmethod
    def resolve(cls, ex, ey, et):
        if all_or_none(('ex', 'ey', 'et'), (ex, ey, et)):
            return cls.USE_PROVIDED
        return cls.ALLOCATE


class SpatioTemporalGradient:
    """Gradient estimator parameterized by a kernel preset.

    Fixed presets ('sobel', 'prewitt', 'isotropic', 'horn-schunck') carry
    their own kernels, which cannot be replaced. The 'central' (3-tap) and
    'forward' (2-tap) presets take user kernels that may be reassigned
    through the `difference` and `average` properties.

    Args:
        shape: (height, width) of the frames to process.
        preset: Preset name or GradientPreset.
        difference: Difference kernel, for 'central'/'forward' only.
            ``[+1, 0, -1]`` gives a ``[-1, 0, +1]`` sliding difference.
        average: Averaging kernel, for 'central'/'forward' only.
    """

    def __init__(self, shape, preset='central', difference=None, average=None):
        try:
            self._preset = GradientPreset.from_name(preset)
        except KeyError:
            raise ConfigurationError(
                f"Unknown gradient preset: '{preset}' "
                f"(expected one of {list(GRADIENT_PRESETS)})") from None

        taps = self._preset.taps
        if self._preset.mutable:
            if difference is None or average is None:
                raise ConfigurationError(
                    f"the '{self._preset.label}' gradient needs both a "
                    f"difference and an average kernel")
            self._difference = check_kernel(difference, taps, 'difference')
            self._average = check_kernel(average, taps, 'average')
        else:
            if difference is not None or average is not None:
                raise ConfigurationError(
                    f"the '{self._preset.label}' gradient has fixed kernels")
            self._difference = np.array(self._preset.fixed_difference)
            self._average = np.array(self._preset.fixed_average)

        self._shape = validate_shape(shape)
        self._allocate_buffers()

    def _allocate_buffers(self):
        self._avg_x = np.empty(self._shape)
        self._buffer = np.empty(self._shape)

    @property
    def preset(self):
        return self._preset

    @property
    def n_frames(self):
        return self._preset.n_frames

    @property
    def shape(self):
        """The (height, width) this estimator accepts."""
        return self._shape

    @shape.setter
    def shape(self, shape):
        self._shape = validate_shape(shape)
        self._allocate_buffers()

    @property
    def difference(self):
        return self._difference.copy()

    @difference.setter
    def difference(self, kernel):
        self._check_mutable('difference')
        self._difference = check_kernel(kernel, self._preset.taps, 'difference')

    @property
    def average(self):
        return self._average.copy()

    @average.setter
    def average(self, kernel):
        self._check_mutable('average')
        self._average = check_kernel(kernel, self._preset.taps, 'average')

    def _check_mutable(self, name):
        if not self._preset.mutable:
            raise ConfigurationError(
                f"cannot reset `{name}' kernel: the "
                f"'{self._preset.label}' gradient has fixed kernels")

    def evaluate(self, *frames, ex=None, ey=None, et=None):
        """Evaluate Ex, Ey and Et over a window of frames.

        Args:
            *frames: `n_frames` 2D images (previous, [centre,] next) of the
                configured shape. Integer images are widened to float64.
            ex, ey, et: Optional float64 outputs of the configured shape.
                Give all three or none.

        Returns:
            ex, ey, et: Horizontal, vertical and temporal derivatives.
        """
        if len(frames) != self.n_frames:
            raise ConfigurationError(
                f"the '{self._preset.label}' gradient takes {self.n_frames} "
                f"frames, got {len(frames)}")
        frames = [check_shape(as_field(f, f'image{i + 1}'), self._shape,
                              f'image{i + 1}')
                  for i, f in enumerate(frames)]

        if OutputMode.resolve(ex, ey, et) is OutputMode.USE_PROVIDED:
            for name, out in (('ex', ex), ('ey', ey), ('et', et)):
                check_output(out, self._shape, name)
        else:
            ex = np.empty(self._shape)
            ey = np.empty(self._shape)
            et = np.empty(self._shape)

        ex.fill(0.0)
        ey.fill(0.0)
        et.fill(0.0)

        h_diff, h_avg = self._difference, self._average
        n = len(frames)
        for k, frame in enumerate(frames):
            # mirrored temporal stencil: frame k meets tap n-1-k
            w_avg = h_avg[n - 1 - k]
            w_diff = h_diff[n - 1 - k]

            convolve_separable_2d(frame, h_avg, h_diff, output=self._buffer)
            ex += w_avg * self._buffer

            # shared x-averaged pass for Ey and Et
            convolve_separable(frame, h_avg, axis=1, output=self._avg_x)

            convolve_separable(self._avg_x, h_diff, axis=0, output=self._buffer)
            ey += w_avg * self._buffer

            convolve_separable(self._avg_x, h_avg, axis=0, output=self._buffer)
            et += w_diff * self._buffer

        return ex, ey, et

    def __call__(self, *frames, ex=None, ey=None, et=None):
        return self.evaluate(*frames, ex=ex, ey=ey, et=et)

    def __repr__(self):
        return (f"<{type(self).__name__}"
                f"('{self._preset.label}', {self._shape})>")

    def __str__(self):
        return (f"{type(self).__name__}('{self._preset.label}', {self._shape})"
                f"\n difference: {self._difference}"
                f"\n average: {self._average}")


def load_gradient(name, shape, difference=None, average=None):
    """Build a gradient estimator from a preset name.

    Available presets:
        - 'central': user 3-tap kernels over a frame triplet
        - 'sobel': [+1, 0, -1] / [1, 2, 1]
        - 'prewitt': [+1, 0, -1] / [1, 1, 1]
        - 'isotropic': [+1, 0, -1] / [1, sqrt(2), 1]
        - 'forward': user 2-tap kernels over a frame pair
        - 'horn-schunck': [+1, -1] / [1, 1] over a frame pair
    """
    return SpatioTemporalGradient(shape, name, difference, average)


def central_gradient(difference, average, shape):
    return load_gradient('central', shape, difference, average)


def sobel_gradient(shape):
    return load_gradient('sobel', shape)


def prewitt_gradient(shape):
    return load_gradient('prewitt', shape)


def isotropic_gradient(shape):
    return load_gradient('isotropic', shape)


def forward_gradient(difference, average, shape):
    return load_gradient('forward', shape, difference, average)


def horn_schunck_gradient(shape):
    return load_gradient('horn-schunck', shape)
