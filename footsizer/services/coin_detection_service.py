from __future__ import annotations
import logging
import os
from typing import Iterable, List

import cv2
import numpy as np
from dotenv import load_dotenv

from ..models.errors import CoinNotFoundError
from ..models.geometry import Circle
from ..models.image import Image
from .image_service import ImageService

logger = logging.getLogger(__name__)

# Hough thresholds are tuned on gray = 0.299*B + 0.587*G + 0.114*R of the RGB
# pixels, i.e. the channel-swapped conversion, not true luminance.
HOUGH_GRAY_CONVERSION = cv2.COLOR_BGR2GRAY

# Load environment variables
load_dotenv()


class CoinDetectionService:
    """
    Locates the reference coin with the Hough circle transform.

    The radius window and the minimum center distance are tuned so that round
    blobs on the sole (toes, heel) are not accepted; the largest remaining
    circle is taken as the coin.
    """
    def __init__(
        self,
        image_service: ImageService | None = None,
        *,
        dp: float | None = None,
        min_dist: float | None = None,
        param1: float | None = None,
        param2: float | None = None,
        min_radius: int | None = None,
        max_radius: int | None = None,
    ):
        self.image_service = image_service or ImageService()
        self.dp = dp if dp is not None else float(os.getenv("HOUGH_DP", "1.5"))
        self.min_dist = min_dist if min_dist is not None else float(os.getenv("HOUGH_MIN_DIST", "50"))
        self.param1 = param1 if param1 is not None else float(os.getenv("HOUGH_PARAM1", "150"))
        self.param2 = param2 if param2 is not None else float(os.getenv("HOUGH_PARAM2", "40"))
        self.min_radius = min_radius if min_radius is not None else int(os.getenv("HOUGH_MIN_RADIUS", "0"))
        self.max_radius = max_radius if max_radius is not None else int(os.getenv("HOUGH_MAX_RADIUS", "30"))

    def prepare(self, img: Image) -> np.ndarray:
        """
        Blur the colour pixels, convert to grayscale (blue weighted), blur again.

        Returns:
            np.ndarray: (H, W) uint8 input for the circle transform.
        """
        gray = self.image_service.to_grayscale(self.image_service.blur(img.pixels), HOUGH_GRAY_CONVERSION)
        return self.image_service.blur(gray)

    def detect_circles(self, gray: np.ndarray) -> List[Circle]:
        found = cv2.HoughCircles(
            gray, cv2.HOUGH_GRADIENT, self.dp, self.min_dist,
            param1=self.param1, param2=self.param2,
            minRadius=self.min_radius, maxRadius=self.max_radius,
        )
        if found is None:
            return []
        return [Circle(float(x), float(y), float(r)) for x, y, r in found[0]]

    @staticmethod
    def select_largest(circles: Iterable[Circle]) -> Circle | None:
        """Largest radius wins, regardless of position; first one on a tie."""
        best = None
        for circle in circles:
            if best is None or circle.radius > best.radius:
                best = circle
        return best

    def find_coin(self, img: Image) -> tuple[Circle, List[Circle]]:
        """
        Returns the coin circle together with every circle the transform accepted.
        """
        circles = self.detect_circles(self.prepare(img))
        coin = self.select_largest(circles)
        if coin is None:
            raise CoinNotFoundError("No circle found; is the reference coin in the photo?")
        logger.info(f"Coin radius {coin.radius:.2f} px at {coin.center} (largest of {len(circles)})")
        return coin, circles
