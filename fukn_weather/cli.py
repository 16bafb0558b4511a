"""Fukn Weather - command line entry point"""
import argparse
import logging
from typing import List, Optional

from fukn_weather.config import LOG_LEVEL, WEATHER_DESCRIPTIONS_PATH
from fukn_weather.corpus import CorpusLoadError, missing_buckets
from fukn_weather.models import Rating
from fukn_weather.resolver import DescriptionResolver

logger = logging.getLogger(__name__)


def _rating_arg(value: str) -> Rating:
    try:
        return Rating.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="fukn-weather", description="Colorful, rating-gated weather descriptions")
    parser.add_argument(
        "--corpus",
        type=str,
        default=str(WEATHER_DESCRIPTIONS_PATH),
        help="Path to the weather descriptions JSON file.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    describe = sub.add_parser("describe", help="Describe a temperature in Fahrenheit.")
    describe.add_argument("temperature", type=float)
    describe.add_argument("--rating", type=_rating_arg, default=None, help="G, PG, PG-13, R, X or BLAND (default X).")
    describe.add_argument("--location", type=str, default=None, help="Location name to include in the report.")

    sub.add_parser("random", help="Random temperature described at every rating.")
    sub.add_parser("check", help="Validate the descriptions file and report coverage gaps.")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S"
    )
    args = parse_args(argv)

    try:
        resolver = DescriptionResolver.from_file(args.corpus)
    except CorpusLoadError as e:
        logger.critical(f"❌ {e}")
        return 1
    except ValueError as e:
        logger.critical(f"❌ Invalid configuration: {e}")
        return 1

    if args.command == "describe":
        report = resolver.describe(args.temperature, args.rating, args.location)
        print(report.model_dump_json(indent=2))
    elif args.command == "random":
        print(resolver.random_weather().model_dump_json(indent=2))
    elif args.command == "check":
        gaps = missing_buckets(resolver.corpus)
        for rating_key, buckets in resolver.corpus.items():
            print(f"{rating_key}: {len(buckets)} buckets")
        for rating_key, bucket in gaps:
            print(f"missing: {rating_key} {bucket}")
        if gaps:
            return 1
        print("✅ All ratings cover the full temperature range")

    return 0
