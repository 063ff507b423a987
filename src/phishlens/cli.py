import argparse
import json
import logging
import random
import sys
from pathlib import Path

from .config import setup_logging
from .errors import AnalysisError
from .schemas import AnalysisResponse
from .storage import MemStorage, initialize_websites
from .verdict import analyze_image

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Check a login page screenshot against the known websites"
    )
    parser.add_argument("image", type=Path, help="Screenshot to analyze")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the simulated analysis factors",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging()

    if not args.image.is_file():
        logger.error(f"Image not found: {args.image}")
        return 1

    storage = MemStorage()
    initialize_websites(storage)

    try:
        analysis = analyze_image(
            args.image.read_bytes(), storage, random.Random(args.seed)
        )
    except AnalysisError as e:
        logger.error(f"{args.image}: {e}")
        return 1

    result = AnalysisResponse.model_validate(analysis).model_dump(
        mode="json", by_alias=True
    )
    website = storage.get_website(analysis.identified_website_id or 0)
    result["identifiedWebsite"] = website.name if website else None
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
