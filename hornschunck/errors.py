"""Exceptions raised by the Horn-Schunck optical flow package."""


class HornSchunckError(ValueError):
    """Base class for all errors raised by this package."""


class ConfigurationError(HornSchunckError):
    """Invalid kernel, shape, preset, alpha or iteration count."""


class ShapeMismatchError(HornSchunckError):
    """A scalar field does not have the expected (height, width) shape."""


class PartialArgumentError(HornSchunckError):
    """Only some of a group of optional output/seed fields were given."""
