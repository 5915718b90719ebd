"""Horn-Schunck optical flow solvers."""
from hornschunck.methods.base import BaseHSOpticalFlow
from hornschunck.methods.hs import HSOpticalFlow
from hornschunck.methods.vanilla_hs import VanillaHSOpticalFlow
from hornschunck.methods.config import load_of_method

__all__ = [
    'BaseHSOpticalFlow',
    'HSOpticalFlow',
    'VanillaHSOpticalFlow',
    'load_of_method',
]
