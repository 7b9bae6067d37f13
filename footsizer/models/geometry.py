from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BoundingRect:
    """Axis-aligned rectangle as returned by cv2.boundingRect."""
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_cv(cls, rect) -> "BoundingRect":
        x, y, w, h = rect
        return cls(x=int(x), y=int(y), width=int(w), height=int(h))

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.area == 0

    @property
    def top_left(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def bottom_right(self) -> Tuple[int, int]:
        return self.x + self.width, self.y + self.height


@dataclass(frozen=True)
class Circle:
    center_x: float
    center_y: float
    radius: float       # pixels

    @property
    def center(self) -> Tuple[int, int]:
        """Integer center for OpenCV drawing calls."""
        return int(round(self.center_x)), int(round(self.center_y))
