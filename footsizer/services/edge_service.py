import logging
import os

import cv2
import numpy as np
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


class EdgeService:
    """Canny edge map over the skin mask. Thresholds are fixed, not adaptive."""

    def __init__(self, low_threshold: float | None = None, high_threshold: float | None = None):
        if low_threshold is None:
            low_threshold = float(os.getenv("CANNY_LOW_THRESHOLD", "150"))
        if high_threshold is None:
            high_threshold = float(os.getenv("CANNY_HIGH_THRESHOLD", "225"))
        self.low_threshold = low_threshold
        self.high_threshold = high_threshold

    def detect_edges(self, mask: np.ndarray) -> np.ndarray:
        edges = cv2.Canny(mask, self.low_threshold, self.high_threshold)
        logger.debug(f"Canny({self.low_threshold}, {self.high_threshold}): {int(np.count_nonzero(edges))} edge px")
        return edges
