class MeasurementError(ValueError):
    """Base class for a photo that cannot be measured."""


class FootNotFoundError(MeasurementError):
    """No skin-like closed contour was found in the photo."""


class CoinNotFoundError(MeasurementError):
    """The circle transform accepted no circle, so there is no scale reference."""


class InvalidScaleError(MeasurementError):
    """A radius of zero, below zero or not finite was used to compute the scale."""
