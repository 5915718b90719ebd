"""
Horn-Schunck optical flow over a frame triplet with Sobel gradients.

A variant of the original method: derivatives come from a 3D Sobel
operator centred on the middle frame, and the local flow average uses
the 4-neighbour kernel derived from OpenCV's Laplacian.
"""
from hornschunck.methods.base import BaseHSOpticalFlow


class HSOpticalFlow(BaseHSOpticalFlow):
    """Horn-Schunck flow from three frames (previous, current, next).

    The flow is estimated for the middle frame. `gradient` may be set to
    'prewitt' or 'isotropic' to swap the averaging kernel.
    """

    def __init__(self):
        super().__init__()
        self.alpha = 1.0
        self.iterations = 100
        self.gradient = 'sobel'
        self.laplacian = 'opencv'

    def compute_gradients(self, frames):
        estimator = self._get_estimator(frames[0].shape)
        return estimator.evaluate(*frames)
