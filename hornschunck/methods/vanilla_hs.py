"""
Horn-Schunck optical flow as described in the original paper.

B.K.P. Horn and B.G. Schunck. "Determining optical flow."
Artificial Intelligence, 17:185-203, 1981.

Ex, Ey and Et are each the mean of four first differences taken over the
2x2x2 cube spanned by two adjacent pixels in both frames, and the local
flow average uses the paper's 8-neighbour kernel.
"""
from hornschunck.methods.base import BaseHSOpticalFlow


class VanillaHSOpticalFlow(BaseHSOpticalFlow):
    """Horn-Schunck flow between two frames (start, end)."""

    def __init__(self):
        super().__init__()
        self.alpha = 1.0
        self.iterations = 100
        self.gradient = 'horn-schunck'
        self.laplacian = 'classic'

    def compute_gradients(self, frames):
        estimator = self._get_estimator(frames[0].shape)
        ex, ey, et = estimator.evaluate(*frames)
        # [1, -1] x [1, 1] x [1, 1] sums four differences; the paper averages
        ex *= 0.25
        ey *= 0.25
        et *= 0.25
        return ex, ey, et
