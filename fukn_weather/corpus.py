"""
Description corpus loading.
The corpus is read once at startup and frozen; a bad file is fatal.
"""
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from fukn_weather.config import BUCKET_WIDTH, MAX_TEMPERATURE, MIN_TEMPERATURE, WEATHER_DESCRIPTIONS_PATH
from fukn_weather.models import DescriptionData, Rating

logger = logging.getLogger(__name__)

# rating key -> bucket key -> descriptions
Corpus = Mapping[str, Mapping[str, Tuple[str, ...]]]


class CorpusLoadError(Exception):
    """Description corpus could not be loaded"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load weather descriptions from {self.path}: {reason}")


def build_corpus(data: Mapping[str, Mapping[str, Iterable[str]]]) -> Corpus:
    """Freeze a plain nested mapping into an immutable corpus"""
    return MappingProxyType({
        rating_key: MappingProxyType({
            bucket: tuple(descriptions)
            for bucket, descriptions in buckets.items()
        })
        for rating_key, buckets in data.items()
    })


def all_bucket_keys() -> List[str]:
    """Every bucket key in the supported temperature domain"""
    return [
        f"{start}_{start + BUCKET_WIDTH - 1}"
        for start in range(MIN_TEMPERATURE, MAX_TEMPERATURE + 1, BUCKET_WIDTH)
    ]


def missing_buckets(corpus: Corpus) -> List[Tuple[str, str]]:
    """(rating key, bucket key) pairs with no descriptions"""
    missing = []
    for rating in Rating:
        buckets = corpus.get(rating.key, {})
        for bucket in all_bucket_keys():
            if not buckets.get(bucket):
                missing.append((rating.key, bucket))
    return missing


def load_corpus(path: Optional[Union[str, Path]] = None) -> Corpus:
    """Load and validate the description file. Raises CorpusLoadError."""
    path = Path(path) if path is not None else WEATHER_DESCRIPTIONS_PATH

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CorpusLoadError(path, str(e)) from e

    try:
        data = DescriptionData.model_validate_json(raw)
    except ValidationError as e:
        raise CorpusLoadError(path, str(e)) from e

    corpus = build_corpus(data.root)

    total = sum(len(d) for buckets in corpus.values() for d in buckets.values())
    logger.info(f"📚 Loaded {total} descriptions for {len(corpus)} ratings from {path}")

    gaps = missing_buckets(corpus)
    if gaps:
        preview = ", ".join(f"{r}/{b}" for r, b in gaps[:5])
        logger.warning(f"⚠️ {len(gaps)} rating/bucket pairs have no descriptions (e.g. {preview})")

    return corpus
