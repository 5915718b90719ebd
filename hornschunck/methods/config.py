"""
Method configuration factory.

Maps method name strings to configured Horn-Schunck solver objects.
"""
from hornschunck.errors import ConfigurationError


def load_of_method(method):
    """Load a pre-configured optical flow method by name.

    Available methods:
        - 'hs', 'hs-sobel': three frames, Sobel gradient, 4-neighbour average
        - 'hs-prewitt': as 'hs' with the Prewitt gradient
        - 'hs-isotropic': as 'hs' with the isotropic gradient
        - 'hs-vanilla': two frames, forward differences and the
          8-neighbour average from the original paper

    Args:
        method: Method name string.

    Returns:
        ope: Configured optical flow object.
    """
    if method in ('hs', 'hs-sobel'):
        from hornschunck.methods.hs import HSOpticalFlow
        return HSOpticalFlow()

    elif method == 'hs-prewitt':
        ope = load_of_method('hs')
        ope.gradient = 'prewitt'
        return ope

    elif method == 'hs-isotropic':
        ope = load_of_method('hs')
        ope.gradient = 'isotropic'
        return ope

    elif method == 'hs-vanilla':
        from hornschunck.methods.vanilla_hs import VanillaHSOpticalFlow
        return VanillaHSOpticalFlow()

    else:
        raise ConfigurationError(f"Unknown optical flow method: '{method}'")
