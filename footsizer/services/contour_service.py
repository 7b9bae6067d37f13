from __future__ import annotations
import logging
import os
from typing import Iterable, List, Sequence

import cv2
import numpy as np
from dotenv import load_dotenv

from ..models.errors import FootNotFoundError
from ..models.geometry import BoundingRect

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


class ContourService:
    """
    Finds the foot as the largest bounding rectangle of any closed contour
    in the edge map.
    *   Works on binary edge maps only, never on colour pixels.
    """
    def __init__(self, approx_epsilon: float | None = None):
        if approx_epsilon is None:
            approx_epsilon = float(os.getenv("POLY_APPROX_EPSILON", "3"))
        self.approx_epsilon = approx_epsilon

    @staticmethod
    def find_contours(edges: np.ndarray) -> Sequence[np.ndarray]:
        contours, _ = cv2.findContours(edges, cv2.RETR_TREE, cv2.CHAIN_APPROX_SIMPLE)
        return contours

    def approximate(self, contour: np.ndarray) -> np.ndarray:
        return cv2.approxPolyDP(contour, self.approx_epsilon, True)

    def bounding_rects(self, contours: Iterable[np.ndarray]) -> List[BoundingRect]:
        """
        Simplify every contour to a polygon and bound it.

        Args:
            contours: OpenCV contours, each of shape (N, 1, 2).

        Returns:
            List[BoundingRect]: One rectangle per contour, same order.
        """
        return [BoundingRect.from_cv(cv2.boundingRect(self.approximate(c))) for c in contours]

    @staticmethod
    def select_largest(rects: Iterable[BoundingRect]) -> BoundingRect | None:
        """
        Linear scan keeping the rectangle with the largest area.
        Strict comparison: on a tie the first rectangle wins. Zero-area
        rectangles are never selected.
        """
        best = None
        for rect in rects:
            if rect.is_empty:
                continue
            if best is None or rect.area > best.area:
                best = rect
        return best

    def find_foot(self, edges: np.ndarray) -> BoundingRect:
        contours = self.find_contours(edges)
        rects = self.bounding_rects(contours)
        foot = self.select_largest(rects)
        if foot is None:
            raise FootNotFoundError(f"No closed skin contour found ({len(contours)} contours)")
        logger.info(f"Foot rectangle {foot.width}x{foot.height} px at {foot.top_left} "
                    f"(largest of {len(rects)})")
        return foot
