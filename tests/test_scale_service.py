"""Unit tests for ScaleService."""

import math

import pytest

from footsizer.models.errors import InvalidScaleError
from footsizer.services.scale_service import ScaleService


class TestCmPerPixel:

    def test_ratio(self):
        assert ScaleService.cm_per_pixel(1.325, 25) == pytest.approx(0.053)

    @pytest.mark.parametrize("pixel_radius", [1, 7.5, 25, 113.25])
    def test_scale_times_radius_gives_known_radius(self, pixel_radius):
        scale = ScaleService.cm_per_pixel(1.325, pixel_radius)
        assert scale * pixel_radius == pytest.approx(1.325, rel=1e-12)

    def test_zero_pixel_radius_is_rejected(self):
        """No coin found must not turn into a division by zero."""
        with pytest.raises(InvalidScaleError):
            ScaleService.cm_per_pixel(1.325, 0)

    @pytest.mark.parametrize("pixel_radius", [-3, math.inf, math.nan])
    def test_invalid_pixel_radius(self, pixel_radius):
        with pytest.raises(InvalidScaleError):
            ScaleService.cm_per_pixel(1.325, pixel_radius)

    def test_invalid_known_radius(self):
        with pytest.raises(InvalidScaleError):
            ScaleService.cm_per_pixel(0, 25)

