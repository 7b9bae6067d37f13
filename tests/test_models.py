"""Unit tests for the data objects."""

import numpy as np
import pytest

from footsizer.models.errors import (
    CoinNotFoundError, FootNotFoundError, InvalidScaleError, MeasurementError,
)
from footsizer.models.foot_measurement import FootMeasurement
from footsizer.models.geometry import BoundingRect, Circle
from footsizer.models.image import Image
from footsizer.models.reference_coin import COIN_PRESETS, DEFAULT_COIN, get_coin


class TestBoundingRect:

    def test_from_cv_tuple(self):
        rect = BoundingRect.from_cv((3, 4, 10, 20))
        assert rect == BoundingRect(3, 4, 10, 20)

    def test_area_and_corners(self):
        rect = BoundingRect(5, 7, 10, 20)
        assert rect.area == 200
        assert rect.top_left == (5, 7)
        assert rect.bottom_right == (15, 27)
        assert not rect.is_empty

    def test_zero_width_is_empty(self):
        assert BoundingRect(0, 0, 0, 50).is_empty


class TestCircle:

    def test_center_is_rounded_to_int(self):
        circle = Circle(10.6, 20.2, 5.0)
        assert circle.center == (11, 20)
        assert all(isinstance(v, int) for v in circle.center)


class TestReferenceCoin:

    def test_default_keeps_original_constant(self):
        assert get_coin(DEFAULT_COIN).radius_cm == pytest.approx(1.325)

    def test_lookup_is_case_insensitive(self):
        assert get_coin("TOONIE") is COIN_PRESETS["toonie"]

    def test_unknown_coin_raises(self):
        with pytest.raises(ValueError, match="Unknown reference coin"):
            get_coin("doubloon")

    def test_with_radius_keeps_name(self):
        coin = get_coin("euro_2").with_radius(1.3)
        assert coin.name == "euro_2"
        assert coin.radius_cm == 1.3


class TestFootMeasurement:

    @pytest.fixture
    def measurement(self):
        return FootMeasurement(
            foot_rect=BoundingRect(10, 20, 100, 250),
            coin_circle=Circle(300.0, 80.0, 25.0),
            coin=get_coin("loonie"),
            cm_per_pixel=0.053,
        )

    def test_length_is_rect_height(self, measurement):
        assert measurement.length_px == 250
        assert measurement.length_cm == pytest.approx(250 * 0.053)

    def test_width_is_rect_width(self, measurement):
        assert measurement.width_px == 100
        assert measurement.width_cm == pytest.approx(100 * 0.053)

    def test_to_dict(self, measurement):
        data = measurement.to_dict()
        assert data["coin"]["name"] == "loonie"
        assert data["coin"]["radius_px"] == 25.0
        assert data["coin"]["center"] == [300, 80]
        assert data["foot"]["length_px"] == 250
        assert data["foot"]["width_cm"] == pytest.approx(5.3)


class TestErrors:

    @pytest.mark.parametrize("exc", [FootNotFoundError, CoinNotFoundError, InvalidScaleError])
    def test_errors_share_base(self, exc):
        assert issubclass(exc, MeasurementError)
        assert issubclass(exc, ValueError)


class TestImage:

    def test_size_is_height_width(self):
        img = Image(pixels=np.zeros((30, 40, 3), np.uint8))
        assert img.size == (30, 40)
        assert img.path is None
        assert img.original_pixels is None
