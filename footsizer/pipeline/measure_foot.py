"""
Foot Measurement Pipeline
Runs every stage once, in order: skin mask → edges → foot rectangle →
coin circle → scale. Display and printing are left to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from ..models.foot_measurement import FootMeasurement
from ..models.image import Image
from ..models.reference_coin import ReferenceCoin, get_coin, DEFAULT_COIN
from ..services.coin_detection_service import CoinDetectionService
from ..services.contour_service import ContourService
from ..services.edge_service import EdgeService
from ..services.scale_service import ScaleService
from ..services.skin_mask_service import SkinMaskService

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    measurement: FootMeasurement
    mask: np.ndarray    # thresholded saturation
    edges: np.ndarray   # Canny output


def measure_foot(
    img: Image,
    *,
    coin: ReferenceCoin | None = None,
    skin_mask_service: SkinMaskService | None = None,
    edge_service: EdgeService | None = None,
    contour_service: ContourService | None = None,
    coin_detection_service: CoinDetectionService | None = None,
    scale_service: ScaleService | None = None,
) -> PipelineResult:
    """
    Measure the foot in *img* against the reference coin.

    Args:
        img: Photo of the sole with the coin beside it (RGB).
        coin: Physical reference; defaults to the loonie preset.
        *_service: Stage implementations, built from the environment when omitted.

    Returns:
        PipelineResult: the measurement plus the intermediate rasters.

    Raises:
        FootNotFoundError, CoinNotFoundError, InvalidScaleError
    """
    coin = coin or get_coin(DEFAULT_COIN)
    skin_mask_service = skin_mask_service or SkinMaskService()
    edge_service = edge_service or EdgeService()
    contour_service = contour_service or ContourService()
    coin_detection_service = coin_detection_service or CoinDetectionService()
    scale_service = scale_service or ScaleService()

    height, width = img.size
    logger.info(f"Measuring {img.path or 'in-memory photo'} ({width}x{height} px)")

    # Step 1: skin mask
    mask = skin_mask_service.compute_mask(img)

    # Step 2: edges
    edges = edge_service.detect_edges(mask)

    # Step 3: foot rectangle
    foot_rect = contour_service.find_foot(edges)

    # Step 4: coin
    coin_circle, circles = coin_detection_service.find_coin(img)

    # Step 5: scale
    cm_per_pixel = scale_service.cm_per_pixel(coin.radius_cm, coin_circle.radius)
    logger.info(f"Scale: {cm_per_pixel:.6f} cm/px from {coin.name} ({coin.radius_cm} cm)")

    measurement = FootMeasurement(
        foot_rect=foot_rect,
        coin_circle=coin_circle,
        coin=coin,
        cm_per_pixel=cm_per_pixel,
        circles=circles,
    )
    logger.info(f"Foot {measurement.length_cm:.2f} cm long, {measurement.width_cm:.2f} cm wide")
    return PipelineResult(measurement=measurement, mask=mask, edges=edges)
