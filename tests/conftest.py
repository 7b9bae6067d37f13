"""Shared pytest fixtures: synthetic sole photos drawn with OpenCV."""

import os
import sys

import cv2
import numpy as np
import pytest

# Add repository root to path so the package imports without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from footsizer.models.image import Image  # noqa: E402

# RGB colours chosen so the "skin" has the same blue-weighted gray as the
# background: it shows up in the saturation mask but not in the grayscale used
# for circles (0.299*110 + 0.587*184 + 0.114*220 = 166).
BACKGROUND_RGB = (166, 166, 166)
SKIN_RGB = (220, 184, 110)
COIN_RGB = (40, 40, 40)

PHOTO_SIZE = (400, 400)                 # (H, W)
FOOT_TOP_LEFT = (40, 60)                # (x, y)
FOOT_SIZE = (120, 260)                  # (W, H)
COIN_CENTER = (300, 100)
COIN_RADIUS = 25


def blank_photo(shape=PHOTO_SIZE, color=BACKGROUND_RGB) -> np.ndarray:
    pixels = np.zeros((shape[0], shape[1], 3), dtype=np.uint8)
    pixels[:] = color
    return pixels


def draw_foot(pixels, top_left=FOOT_TOP_LEFT, size=FOOT_SIZE, color=SKIN_RGB):
    x, y = top_left
    w, h = size
    cv2.rectangle(pixels, (x, y), (x + w - 1, y + h - 1), color, -1)
    return pixels


def draw_coin(pixels, center=COIN_CENTER, radius=COIN_RADIUS, color=COIN_RGB):
    cv2.circle(pixels, center, radius, color, -1, cv2.LINE_AA)
    return pixels


@pytest.fixture
def sole_photo():
    """One foot rectangle and one coin on a neutral background."""
    pixels = draw_coin(draw_foot(blank_photo()))
    return Image(pixels=pixels)


@pytest.fixture
def foot_only_photo():
    return Image(pixels=draw_foot(blank_photo()))


@pytest.fixture
def coin_only_photo():
    return Image(pixels=draw_coin(blank_photo()))


@pytest.fixture
def empty_photo():
    return Image(pixels=blank_photo())
