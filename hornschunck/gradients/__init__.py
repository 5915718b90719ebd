"""Spatio-temporal gradient estimators."""
from hornschunck.gradients.kernels import GradientPreset, GRADIENT_PRESETS
from hornschunck.gradients.spatio_temporal import (
    SpatioTemporalGradient, OutputMode, load_gradient,
    central_gradient, sobel_gradient, prewitt_gradient, isotropic_gradient,
    forward_gradient, horn_schunck_gradient,
)

__all__ = [
    'GradientPreset',
    'GRADIENT_PRESETS',
    'SpatioTemporalGradient',
    'OutputMode',
    'load_gradient',
    'central_gradient',
    'sobel_gradient',
    'prewitt_gradient',
    'isotropic_gradient',
    'forward_gradient',
    'horn_schunck_gradient',
]
