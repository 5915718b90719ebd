"""
Horn-Schunck Optical Flow Package

Dense optical flow by the iterative method of Horn & Schunck (1981), with
interchangeable spatio-temporal gradient estimators (central, Sobel,
Prewitt, isotropic and forward differences).
"""

from hornschunck.interface import estimate_flow
from hornschunck.errors import (
    HornSchunckError, ConfigurationError, ShapeMismatchError,
    PartialArgumentError,
)
from hornschunck.gradients import SpatioTemporalGradient, load_gradient
from hornschunck.methods import (
    HSOpticalFlow, VanillaHSOpticalFlow, load_of_method
)
from hornschunck.utils.laplacian import (
    laplacian_average, laplacian_avg_hs, laplacian_avg_hs_opencv
)
from hornschunck.evaluation.metrics import flow_error, flow_angular_error

__all__ = [
    'estimate_flow',
    'HornSchunckError',
    'ConfigurationError',
    'ShapeMismatchError',
    'PartialArgumentError',
    'SpatioTemporalGradient',
    'load_gradient',
    'HSOpticalFlow',
    'VanillaHSOpticalFlow',
    'load_of_method',
    'laplacian_average',
    'laplacian_avg_hs',
    'laplacian_avg_hs_opencv',
    'flow_error',
    'flow_angular_error',
]
