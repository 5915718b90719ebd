"""
High-level interface for optical flow estimation.
"""
from hornschunck.methods.config import load_of_method


def estimate_flow(frames, method='hs', params=None, u=None, v=None):
    """Estimate optical flow over a short sequence of frames.

    Args:
        frames: Sequence of 2D grayscale images, float or uint8. Two frames
            for 'hs-vanilla', three (previous, current, next) otherwise.
        method: Method name string. See load_of_method for options.
        params: Optional dict of parameter overrides, e.g.
            ``{'alpha': 5.0, 'iterations': 200}``.
        u, v: Optional initial flow (both or neither).

    Returns:
        u, v: Estimated horizontal and vertical flow (H, W).
    """
    ope = load_of_method(method)

    if params is not None:
        ope.parse_input_parameter(params)

    return ope.compute_flow(list(frames), u=u, v=v)
