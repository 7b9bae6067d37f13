from __future__ import annotations
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ReferenceCoin:
    """
    Value-object for the coin placed next to the foot.
    The radius is the physical one, in centimetres.
    """
    name: str
    radius_cm: float

    def with_radius(self, radius_cm: float) -> "ReferenceCoin":
        return ReferenceCoin(name=self.name, radius_cm=float(radius_cm))


COIN_PRESETS: Dict[str, ReferenceCoin] = {
    "loonie":  ReferenceCoin("loonie", 1.325),      # CAD $1, 26.5 mm
    "toonie":  ReferenceCoin("toonie", 1.4),        # CAD $2, 28 mm
    "quarter": ReferenceCoin("quarter", 1.213),     # USD 25c, 24.26 mm
    "euro_1":  ReferenceCoin("euro_1", 1.1625),     # 23.25 mm
    "euro_2":  ReferenceCoin("euro_2", 1.2875),     # 25.75 mm
}

DEFAULT_COIN = "loonie"


def get_coin(name: str) -> ReferenceCoin:
    try:
        return COIN_PRESETS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(COIN_PRESETS))
        raise ValueError(f"Unknown reference coin '{name}' (known: {known})") from None
