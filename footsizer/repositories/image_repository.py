from pathlib import Path
from typing import Union
import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv
import os
import signal
from ..models.image import Image

# Load environment variables
load_dotenv()


class ImageRepository:
    """
    Handles file I/O and pixel updates for Image entities.
    """
    def __init__(self, timeout: int | None = None):
        if timeout is None:
            timeout = int(os.getenv("IMAGE_LOAD_TIMEOUT", "5"))
        self.timeout = timeout

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    def load(self, path: Union[str, Path], rgb: bool = True) -> Image:
        path = Path(path)
        timeout = self.timeout

        # ─── timeout wrapper ──────────────────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        signal.signal(signal.SIGALRM, _handler)
        signal.alarm(timeout)
        try:
            arr_bgr = cv2.imread(str(path))
        finally:
            signal.alarm(0)  # always disarm
        # ──────────────────────────────────────────────────────────────────

        if arr_bgr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        arr = np.ascontiguousarray(arr_bgr[:, :, ::-1]) if rgb else arr_bgr
        return Image(pixels=arr, path=path)

    @staticmethod
    def save(image: Image, path: Union[str, Path, None] = None) -> Path:
        target = Path(path) if path is not None else image.path
        if target is None:
            raise ValueError("Image has no path to save to")
        target.parent.mkdir(parents=True, exist_ok=True)
        PILImage.fromarray(image.pixels).save(target)
        return target

    @staticmethod
    def set_pixels(image: Image, new_pixels: np.ndarray) -> None:
        image.pixels = new_pixels

    @staticmethod
    def save_original_pixels(image: Image) -> None:
        """Save current pixels as original before annotating"""
        if image.original_pixels is None:
            image.original_pixels = image.pixels.copy()
