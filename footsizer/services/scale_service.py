import math

from ..models.errors import InvalidScaleError


class ScaleService:
    """Pixel to centimetre conversion from the reference coin."""

    @staticmethod
    def cm_per_pixel(known_radius_cm: float, pixel_radius: float) -> float:
        """
        Args:
            known_radius_cm (float): Physical coin radius.
            pixel_radius (float): Radius of the detected coin circle.

        Returns:
            (float): Centimetres represented by one pixel.
        """
        if not math.isfinite(pixel_radius) or pixel_radius <= 0:
            raise InvalidScaleError(f"Pixel radius must be positive, got {pixel_radius}")
        if not math.isfinite(known_radius_cm) or known_radius_cm <= 0:
            raise InvalidScaleError(f"Known radius must be positive, got {known_radius_cm}")
        return known_radius_cm / pixel_radius
