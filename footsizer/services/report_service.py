from __future__ import annotations
import logging
import os
from typing import List, Sequence, Tuple

import cv2
import numpy as np
from dotenv import load_dotenv

from ..models.foot_measurement import FootMeasurement
from ..models.image import Image
from .image_service import ImageService

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

OUTLINE_COLOR = (0, 128, 0)     # same value in RGB and BGR
OUTLINE_THICKNESS = 2
MASK_TEXT_COLOR = (255, 255, 255)
IMAGE_TEXT_COLOR = (0, 0, 0)


class ReportService:
    """
    Renders the result: outlines on the photo, the three timed windows and the
    console report.
    """
    def __init__(self, window_name: str | None = None, hold_ms: Sequence[int] | None = None,
                 image_service: ImageService | None = None):
        self.window_name = window_name or os.getenv("WINDOW_NAME", "ImageOutput")
        if hold_ms is None:
            hold_ms = [int(v) for v in os.getenv("DISPLAY_HOLD_MS", "6000,4000,4000").split(",") if v.strip()]
        self.hold_ms = list(hold_ms)
        self.image_service = image_service or ImageService()

    # ------------------------- drawing -------------------------
    def annotate(self, img: Image, measurement: FootMeasurement) -> Image:
        """
        Draw every accepted circle and the foot rectangle onto img.pixels.
        The unannotated pixels stay available in img.original_pixels.
        """
        self.image_service.preserve_original_state(img)
        canvas = img.pixels.copy()
        for circle in measurement.circles or [measurement.coin_circle]:
            cv2.circle(canvas, circle.center, int(round(circle.radius)), OUTLINE_COLOR,
                       OUTLINE_THICKNESS, cv2.LINE_AA)
        rect = measurement.foot_rect
        cv2.rectangle(canvas, rect.top_left, rect.bottom_right, OUTLINE_COLOR, OUTLINE_THICKNESS)
        self.image_service.update_pixels(img, canvas)
        return img

    @staticmethod
    def label(raster: np.ndarray, text: str, color) -> np.ndarray:
        """Caption in the top-left corner, one tenth of the way down."""
        out = raster.copy()
        cv2.putText(out, text, (10, out.shape[0] // 10), cv2.FONT_HERSHEY_COMPLEX_SMALL, 1,
                    color, 2)
        return out

    def build_stages(self, mask: np.ndarray, edges: np.ndarray, annotated: Image) -> List[Tuple[str, np.ndarray]]:
        bgr = cv2.cvtColor(annotated.pixels, cv2.COLOR_RGB2BGR)
        return [
            ("HSV-Filtered Image", self.label(mask, "HSV-Filtered Image", MASK_TEXT_COLOR)),
            ("Canny Edge Detection", self.label(edges, "Canny Edge Detection", MASK_TEXT_COLOR)),
            ("Detected Foot + Coin Contours",
             self.label(bgr, "Detected Foot + Coin Contours", IMAGE_TEXT_COLOR)),
        ]

    # ------------------------- display -------------------------
    def display(self, stages: Sequence[Tuple[str, np.ndarray]]) -> None:
        """
        Show each stage in the same window for its hold time. Blocks the whole
        process; the last frame stays up until wait_for_key().
        """
        for i, (title, frame) in enumerate(stages):
            # waitKey(0) would block forever, so missing holds become 1 ms
            hold = self.hold_ms[i] if i < len(self.hold_ms) else 1
            logger.debug(f"Showing '{title}' for {hold} ms")
            cv2.imshow(self.window_name, frame)
            cv2.waitKey(max(hold, 1))

    def wait_for_key(self) -> None:
        cv2.waitKey(0)
        cv2.destroyWindow(self.window_name)

    # ------------------------- text report -------------------------
    @staticmethod
    def format_report(measurement: FootMeasurement) -> str:
        coin = measurement.coin
        lines = [
            f"{coin.name.upper()} MEASUREMENT OUTPUTS",
            "*" * 34,
            f"Radius in image (pixels) - {measurement.coin_circle.radius:.2f}",
            f"Radius in real-life (known constant, cm) - {coin.radius_cm}",
            f"Centimetres-Per-Pixel - {measurement.cm_per_pixel:.6f}",
            "",
            "FOOT MEASUREMENT OUTPUTS",
            "*" * 34,
            f"Foot Length (pixels) - {measurement.length_px}",
            f"Foot Length (cm) - {measurement.length_cm:.2f}",
            f"Foot Width (pixels) - {measurement.width_px}",
            f"Foot Width (cm) - {measurement.width_cm:.2f}",
        ]
        return "\n".join(lines)

    def print_report(self, measurement: FootMeasurement) -> None:
        print(self.format_report(measurement))
