"""
Abstract base class for Horn-Schunck optical flow solvers.

B.K.P. Horn and B.G. Schunck. "Determining optical flow."
Artificial Intelligence, 17:185-203, 1981.
"""
import numbers

import numpy as np
from abc import ABC, abstractmethod

from hornschunck.errors import ConfigurationError
from hornschunck.gradients.kernels import GradientPreset
from hornschunck.gradients.spatio_temporal import SpatioTemporalGradient
from hornschunck.utils.fields import as_field, check_shape, all_or_none
from hornschunck.utils.laplacian import laplacian_average, check_variant


def check_alpha(alpha):
    if not isinstance(alpha, numbers.Real) or not alpha > 0:
        raise ConfigurationError(
            f"alpha must be a positive number, got {alpha!r}")
    return float(alpha)


def check_iterations(iterations):
    if isinstance(iterations, bool) \
            or not isinstance(iterations, numbers.Integral) or iterations < 0:
        raise ConfigurationError(
            f"iterations must be a non-negative integer, got {iterations!r}")
    return int(iterations)


class BaseHSOpticalFlow(ABC):
    """Base class for Horn-Schunck flow with Jacobi relaxation.

    Subclasses choose the gradient preset, the local averaging kernel and
    how the raw gradients are scaled.
    """

    def __init__(self):
        self.alpha = 1.0
        self.iterations = 100
        self.gradient = 'sobel'
        self.laplacian = 'opencv'
        self.display = False

        # Estimator reused across calls, resized when the frame shape changes
        self._estimator = None

    def parse_input_parameter(self, params):
        """Set parameters from a dictionary or list of key-value pairs.

        Args:
            params: dict or list of [key, value, key, value, ...].
        """
        if isinstance(params, dict):
            items = list(params.items())
        elif isinstance(params, (list, tuple)):
            if len(params) % 2:
                raise ConfigurationError(
                    f"key/value list has an odd number of entries: {params!r}")
            items = list(zip(params[0::2], params[1::2]))
        else:
            raise ConfigurationError(
                f"params must be a dict or a key/value list, got {params!r}")

        # All keys are checked before any is applied
        for key, _ in items:
            if not self._is_parameter(key):
                raise ConfigurationError(
                    f"Unknown parameter for {type(self).__name__}: {key!r}")
        for key, val in items:
            setattr(self, key, val)

    def _is_parameter(self, key):
        # plain attributes set in __init__; no properties or methods
        return isinstance(key, str) and not key.startswith('_') \
            and key in vars(self)

    @property
    def n_frames(self):
        """Number of frames consumed per call (2 or 3)."""
        return self._gradient_preset().n_frames

    def _gradient_preset(self):
        try:
            preset = GradientPreset.from_name(self.gradient)
        except KeyError:
            raise ConfigurationError(
                f"Unknown gradient preset: '{self.gradient}'") from None
        if preset.mutable:
            raise ConfigurationError(
                f"solvers need a fixed-kernel gradient preset, "
                f"got '{preset.label}'")
        return preset

    def _get_estimator(self, shape):
        preset = self._gradient_preset()
        if self._estimator is None or self._estimator.preset is not preset:
            self._estimator = SpatioTemporalGradient(shape, preset)
        elif self._estimator.shape != shape:
            self._estimator.shape = shape
        return self._estimator

    def _prepare_frames(self, frames):
        """Widen frames to float64 and check they share one shape."""
        n = self.n_frames
        if len(frames) != n:
            raise ConfigurationError(
                f"{type(self).__name__} takes {n} frames, got {len(frames)}")
        frames = [as_field(f, f'image{i + 1}') for i, f in enumerate(frames)]
        shape = frames[0].shape
        for i, f in enumerate(frames[1:], start=2):
            check_shape(f, shape, f'image{i}')
        return frames, shape

    def _prepare_flow(self, u, v, shape):
        u = check_shape(as_field(u, 'u'), shape, 'u')
        v = check_shape(as_field(v, 'v'), shape, 'v')
        return u, v

    @abstractmethod
    def compute_gradients(self, frames):
        """Return Ex, Ey, Et for validated float64 frames."""
        pass

    def evaluate_gradients(self, frames):
        """Public wrapper: validate `frames` and return Ex, Ey, Et."""
        frames, _ = self._prepare_frames(frames)
        return self.compute_gradients(frames)

    def compute_flow(self, frames, alpha=None, iterations=None, u=None, v=None):
        """Estimate the flow field by Jacobi relaxation.

        Args:
            frames: Sequence of `n_frames` 2D images of one shape.
            alpha: Smoothness weight (> 0). Default: self.alpha.
            iterations: Exact number of sweeps (>= 0). Default:
                self.iterations.
            u, v: Optional seed flow (both or neither). When given as
                float64 arrays the result is also written back into them.

        Returns:
            u, v: Horizontal and vertical flow (H, W).
        """
        alpha = check_alpha(self.alpha if alpha is None else alpha)
        iterations = check_iterations(
            self.iterations if iterations is None else iterations)
        variant = check_variant(self.laplacian)
        frames, shape = self._prepare_frames(frames)

        seeded = all_or_none(('u', 'v'), (u, v))
        if seeded and isinstance(u, np.ndarray) and isinstance(v, np.ndarray) \
                and np.shares_memory(u, v):
            raise ConfigurationError("u and v must not share memory")
        if seeded:
            u_cur, v_cur = (f.copy() for f in self._prepare_flow(u, v, shape))
        else:
            u_cur, v_cur = np.zeros(shape), np.zeros(shape)

        ex, ey, et = self.compute_gradients(frames)
        denom = alpha ** 2 + ex ** 2 + ey ** 2

        # Second buffer pair; swapped with (u_cur, v_cur) after every sweep
        u_avg = np.empty(shape)
        v_avg = np.empty(shape)

        for i in range(iterations):
            laplacian_average(u_cur, variant, output=u_avg)
            laplacian_average(v_cur, variant, output=v_avg)

            common = (ex * u_avg + ey * v_avg + et) / denom
            u_avg -= ex * common
            v_avg -= ey * common

            u_cur, u_avg = u_avg, u_cur
            v_cur, v_avg = v_avg, v_cur

            if self.display:
                energy = self._energy(ex, ey, et, u_cur, v_cur, alpha, variant)
                print(f"  Iteration: {i + 1}  (energy: {energy:.6f})")

        if seeded and _writable(u, shape) and _writable(v, shape):
            u[...] = u_cur
            v[...] = v_cur
            return u, v

        return u_cur, v_cur

    def __call__(self, alpha, iterations, *frames, u=None, v=None):
        return self.compute_flow(frames, alpha, iterations, u, v)

    def eval_ec2(self, u, v):
        """Squared smoothness error (u_bar - u)^2 + (v_bar - v)^2.

        Uses the same averaging kernel as the solver.
        """
        variant = check_variant(self.laplacian)
        u = as_field(u, 'u')
        v = check_shape(as_field(v, 'v'), u.shape, 'v')
        return _ec2(u, v, variant)

    def eval_eb(self, frames, u, v):
        """Brightness constancy error Ex*u + Ey*v + Et."""
        frames, shape = self._prepare_frames(frames)
        u, v = self._prepare_flow(u, v, shape)
        ex, ey, et = self.compute_gradients(frames)
        return ex * u + ey * v + et

    def eval_energy(self, frames, u, v, alpha=None):
        """Total energy sum(Eb^2) + alpha^2 * sum(Ec^2)."""
        alpha = check_alpha(self.alpha if alpha is None else alpha)
        variant = check_variant(self.laplacian)
        frames, shape = self._prepare_frames(frames)
        u, v = self._prepare_flow(u, v, shape)
        ex, ey, et = self.compute_gradients(frames)
        return self._energy(ex, ey, et, u, v, alpha, variant)

    @staticmethod
    def _energy(ex, ey, et, u, v, alpha, variant):
        eb = ex * u + ey * v + et
        return float(np.sum(eb ** 2) + alpha ** 2 * np.sum(_ec2(u, v, variant)))


def _ec2(u, v, variant):
    u_bar = laplacian_average(u, variant)
    v_bar = laplacian_average(v, variant)
    return (u_bar - u) ** 2 + (v_bar - v) ** 2


def _writable(a, shape):
    return isinstance(a, np.ndarray) and a.dtype == np.float64 \
        and a.shape == shape and a.flags.writeable
