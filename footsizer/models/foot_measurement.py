from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .geometry import BoundingRect, Circle
from .reference_coin import ReferenceCoin


@dataclass
class FootMeasurement:
    """
    Data object holding the outcome of one pipeline run.
    Length is the vertical side of the foot rectangle, width the horizontal one.
    """
    foot_rect: BoundingRect
    coin_circle: Circle
    coin: ReferenceCoin
    cm_per_pixel: float
    circles: List[Circle] = field(default_factory=list)  # every circle the transform accepted

    @property
    def length_px(self) -> int:
        return self.foot_rect.height

    @property
    def width_px(self) -> int:
        return self.foot_rect.width

    @property
    def length_cm(self) -> float:
        return self.length_px * self.cm_per_pixel

    @property
    def width_cm(self) -> float:
        return self.width_px * self.cm_per_pixel

    def to_dict(self) -> dict:
        return {
            "coin": {
                "name": self.coin.name,
                "radius_px": self.coin_circle.radius,
                "radius_cm": self.coin.radius_cm,
                "center": list(self.coin_circle.center),
            },
            "cm_per_pixel": self.cm_per_pixel,
            "foot": {
                "x": self.foot_rect.x,
                "y": self.foot_rect.y,
                "length_px": self.length_px,
                "width_px": self.width_px,
                "length_cm": self.length_cm,
                "width_cm": self.width_cm,
            },
        }
