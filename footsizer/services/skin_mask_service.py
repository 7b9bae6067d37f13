# services/skin_mask_service.py
import logging
import os

import cv2
import numpy as np
from dotenv import load_dotenv

from ..models.image import Image
from .image_service import ImageService

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()


class SkinMaskService:
    """
    Separates skin from background on saturation alone.

    • Blur the RGB pixels, convert to HSV.
    • Keep the S channel; skin is more saturated than a plain floor or sheet.
    • Zero everything below the threshold, keep the rest untouched (THRESH_TOZERO).
    """

    def __init__(self, saturation_threshold: int | None = None,
                 image_service: ImageService | None = None) -> None:
        if saturation_threshold is None:
            saturation_threshold = int(os.getenv("SKIN_SATURATION_THRESHOLD", "45"))
        self.saturation_threshold = saturation_threshold
        self.image_service = image_service or ImageService()

    def saturation_channel(self, rgb: np.ndarray) -> np.ndarray:
        hsv = self.image_service.to_hsv(self.image_service.blur(rgb))
        return hsv[:, :, 1].copy()

    def compute_mask(self, img: Image) -> np.ndarray:
        """
        Returns uint8 mask (H, W); 0 where the pixel is not skin-like,
        the original saturation value otherwise.
        """
        saturation = self.saturation_channel(img.pixels)
        _, mask = cv2.threshold(saturation, self.saturation_threshold, 255, cv2.THRESH_TOZERO)
        logger.debug(f"Skin mask: {int(np.count_nonzero(mask))} px above saturation {self.saturation_threshold}")
        return mask
