from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple
import numpy as np


@dataclass
class Image:
    """
    Photo of the sole as RGB pixels, plus where it came from.
    `pixels` gets the outlines drawn on it; `original_pixels` keeps the
    untouched photo once annotation starts.
    """
    pixels: np.ndarray                          # (H, W, 3) uint8, RGB
    path: Path | None = None
    original_pixels: np.ndarray | None = None

    @property
    def size(self) -> Tuple[int, int]:
        """(height, width) in pixels."""
        return self.pixels.shape[0], self.pixels.shape[1]
