import os
import sys
import json
import logging
import argparse
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..models.errors import MeasurementError
from ..models.reference_coin import COIN_PRESETS, DEFAULT_COIN, get_coin
from ..pipeline.measure_foot import measure_foot
from ..services.image_service import ImageService
from ..services.report_service import ReportService

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_PATH = "soleTestWithReference.png"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="footsizer",
        description="Estimate foot length and width from a photo of the sole with a coin beside it.")
    ap.add_argument("image", nargs="?", default=os.getenv("IMAGE_PATH", DEFAULT_IMAGE_PATH),
                    help="photo of the sole with the reference coin")
    ap.add_argument("--coin", choices=sorted(COIN_PRESETS),
                    default=os.getenv("REFERENCE_COIN", DEFAULT_COIN),
                    help="reference coin in the photo")
    ap.add_argument("--radius-cm", type=float, default=None,
                    help="override the coin radius (cm)")
    ap.add_argument("--no-display", action="store_true",
                    help="skip the image windows")
    ap.add_argument("--save", default=None,
                    help="write the annotated photo to this path")
    ap.add_argument("--json", action="store_true",
                    help="print the measurement as JSON instead of the text report")
    ap.add_argument("--verbose", "-v", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        # coin and thresholds may come from .env, which argparse never validates
        coin = get_coin(args.coin)
        if args.radius_cm is not None:
            coin = coin.with_radius(args.radius_cm)
        image_service = ImageService()
        report_service = ReportService(image_service=image_service)
    except ValueError as err:
        logger.error(f"Invalid configuration: {err}")
        return 1

    try:
        img = image_service.load(args.image)
        result = measure_foot(img, coin=coin)
    except (FileNotFoundError, TimeoutError, MeasurementError) as err:
        logger.error(f"Cannot measure {args.image}: {err}")
        return 1

    measurement = result.measurement
    report_service.annotate(img, measurement)

    if args.save:
        try:
            saved = image_service.save(img, args.save)
        except (ValueError, OSError) as err:
            logger.error(f"Cannot save annotated photo to {args.save}: {err}")
            return 1
        logger.info(f"Annotated photo saved to {saved}")

    if not args.no_display:
        report_service.display(report_service.build_stages(result.mask, result.edges, img))

    if args.json:
        print(json.dumps(measurement.to_dict(), indent=2))
    else:
        report_service.print_report(measurement)

    if not args.no_display:
        report_service.wait_for_key()
    return 0


if __name__ == "__main__":
    sys.exit(main())
