from pathlib import Path
from typing import Union
import cv2
import os
import numpy as np
from ..models.image import Image
from ..repositories.image_repository import ImageRepository
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class ImageService:
    """I/O helpers plus the colour-space and blur primitives shared by the stages."""
    def __init__(self, blur_kernel_size: int | None = None):
        if blur_kernel_size is None:
            blur_kernel_size = int(os.getenv("BLUR_KERNEL_SIZE", "3"))
        if blur_kernel_size < 1 or blur_kernel_size % 2 == 0:
            raise ValueError(f"BLUR_KERNEL_SIZE must be a positive odd number, got {blur_kernel_size}")
        self.BLUR_KERNEL_SIZE = blur_kernel_size
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def blur(self, pixels: np.ndarray) -> np.ndarray:
        """
        Gaussian low-pass filter with a square kernel, sigma derived from the kernel size.

        Args:
            pixels (np.ndarray): Colour or single-channel pixels.

        Returns:
            (np.ndarray): Blurred copy with the same shape.
        """
        k = self.BLUR_KERNEL_SIZE
        return cv2.GaussianBlur(pixels, (k, k), 0, 0)

    @staticmethod
    def to_grayscale(img_pixels: np.ndarray, code: int = cv2.COLOR_RGB2GRAY) -> np.ndarray:
        return cv2.cvtColor(img_pixels, code)

    @staticmethod
    def to_hsv(img_pixels: np.ndarray) -> np.ndarray:
        return cv2.cvtColor(img_pixels, cv2.COLOR_RGB2HSV)

    def update_pixels(self, image: Image, new_pixels: np.ndarray) -> None:
        """
        Business-level method to replace the current image pixels.
        """
        self.image_repository.set_pixels(image, new_pixels)

    def preserve_original_state(self, image: Image) -> None:
        """
        Preserve the current image state before it gets annotated.
        """
        self.image_repository.save_original_pixels(image)

    def save(self, image: Image, path: Union[str, Path, None] = None) -> Path:
        """
        Business-level method to save the image, to its own path unless one is given.
        """
        return self.image_repository.save(image, path)
