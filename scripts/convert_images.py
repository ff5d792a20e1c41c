"""
Convert image files into a single PDF from the command line.

Each image becomes one page, in the order given:

    python scripts/convert_images.py a.jpg b.png --page-size Letter \
        --orientation landscape --scaling fill --output album.pdf
"""

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

# Add src to path if needed
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from image_pdf_toolkit.converter import ConversionError, convert, write_pdf
from image_pdf_toolkit.core import ImageCollection
from image_pdf_toolkit.core.models import (
    ConversionSettings, Orientation, PageSize, Quality, ScalingPolicy
)

logger = logging.getLogger("convert_images")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert images into a single PDF")
    parser.add_argument("images", nargs="+", type=Path, help="Image files, one page each")
    parser.add_argument(
        "--page-size", choices=[p.value for p in PageSize], default=PageSize.A4.value
    )
    parser.add_argument(
        "--orientation", choices=[o.value for o in Orientation], default=Orientation.PORTRAIT.value
    )
    parser.add_argument(
        "--scaling", choices=[s.value for s in ScalingPolicy], default=ScalingPolicy.FIT.value
    )
    parser.add_argument(
        "--quality", choices=[q.value for q in Quality], default=Quality.HIGH.value
    )
    parser.add_argument(
        "-o", "--output", type=Path,
        help="Output PDF path (default: converted-images-<timestamp>.pdf in the current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = ConversionSettings(
        page_size=args.page_size,
        orientation=args.orientation,
        scaling=args.scaling,
        quality=args.quality,
    )

    collection = ImageCollection()
    try:
        collection.add_paths(args.images)
    except OSError as e:
        logger.error(f"Could not read image: {e}")
        return 1

    if not collection:
        logger.error("None of the given files is a supported image")
        return 1

    try:
        result = convert(
            list(collection),
            settings,
            progress_callback=lambda p: logger.info(f"Progress: {p:.0f}%"),
        )
    except ConversionError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    output = args.output or Path.cwd() / result.filename
    try:
        written = write_pdf(result.pdf_bytes, output)
    except OSError as e:
        logger.error(f"Could not write {output}: {e}")
        return 1

    print(f"Wrote {result.page_count} page(s) to {written}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
