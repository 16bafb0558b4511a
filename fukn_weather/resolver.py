"""
Description resolver - temperature + rating -> description.

Temperatures are rounded half-to-even (Python's round), clamped to the
corpus domain and bucketed into 5 degree ranges keyed '{start}_{start+4}'.
One description is picked at random from the rating's pool for that bucket.
"""
import logging
import math
from pathlib import Path
from typing import Optional, Union

from fukn_weather.config import BUCKET_WIDTH, DEFAULT_RATING, MAX_TEMPERATURE, MIN_TEMPERATURE, RANDOM_SEED
from fukn_weather.corpus import Corpus, load_corpus
from fukn_weather.models import RandomWeatherReport, Rating, WeatherReport
from fukn_weather.randomness import LockedRandom, RandomSource

logger = logging.getLogger(__name__)


def default_rating() -> Rating:
    """Rating used when none is given, from DEFAULT_RATING"""
    try:
        return Rating.parse(DEFAULT_RATING)
    except ValueError as e:
        raise ValueError(f"Invalid DEFAULT_RATING: {e}") from e


def default_random() -> LockedRandom:
    """Process random source, seeded from RANDOM_SEED when set"""
    if not RANDOM_SEED:
        return LockedRandom()
    try:
        seed = int(RANDOM_SEED)
    except ValueError as e:
        raise ValueError(f"RANDOM_SEED must be an integer, got '{RANDOM_SEED}'") from e
    return LockedRandom(seed)


def _bucket_start(temperature) -> Optional[int]:
    """Clamped bucket start, or None for NaN"""
    # ints may be too large for float, so only non-ints go through math.*
    if isinstance(temperature, int):
        clamped = max(MIN_TEMPERATURE, min(MAX_TEMPERATURE, temperature))
    elif math.isnan(temperature):
        return None
    elif math.isinf(temperature):
        clamped = MAX_TEMPERATURE if temperature > 0 else MIN_TEMPERATURE
    else:
        clamped = max(MIN_TEMPERATURE, min(MAX_TEMPERATURE, round(temperature)))
    # Floor division: -3 lands in -5_-1, not 0_4
    return clamped // BUCKET_WIDTH * BUCKET_WIDTH


def bucket_key(temperature) -> str:
    """Corpus bucket key for a temperature"""
    start = _bucket_start(temperature)
    if start is None:
        raise ValueError("Temperature is not a number")
    return f"{start}_{start + BUCKET_WIDTH - 1}"


class DescriptionResolver:
    """Picks rating-gated descriptions from an immutable corpus"""

    def __init__(self, corpus: Corpus, rng: Optional[RandomSource] = None):
        self.corpus = corpus
        # Settings are checked here so bad env fails at startup, not per call
        self.default_rating = default_rating()
        self.rng = rng if rng is not None else default_random()

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]] = None, rng: Optional[RandomSource] = None) -> "DescriptionResolver":
        """Load the corpus (fatal on failure) and build a resolver"""
        return cls(load_corpus(path), rng)

    def resolve(self, temperature, rating: Optional[Union[Rating, str]] = None) -> str:
        """Description for a Fahrenheit temperature; rating defaults to X"""
        rating = Rating.parse(rating) if rating is not None else self.default_rating

        start = _bucket_start(temperature)
        if start is not None:
            bucket = f"{start}_{start + BUCKET_WIDTH - 1}"
            descriptions = self.corpus.get(rating.key, {}).get(bucket)
            if descriptions:
                return descriptions[self.rng.randint(0, len(descriptions) - 1)]
            logger.debug(f"No descriptions for {rating.key}/{bucket}, using fallback")

        return f"Temperature: {temperature}°F"

    def describe(self, temperature, rating: Optional[Union[Rating, str]] = None, location: Optional[str] = None) -> WeatherReport:
        """Full report for a temperature already fetched by the caller"""
        rating = Rating.parse(rating) if rating is not None else self.default_rating
        return WeatherReport(
            temperature_fahrenheit=float(temperature),
            rating=rating,
            description=self.resolve(temperature, rating),
            location=location,
        )

    def random_weather(self) -> RandomWeatherReport:
        """Random temperature in the corpus domain, described at every rating"""
        temperature = self.rng.randint(MIN_TEMPERATURE, MAX_TEMPERATURE)
        return RandomWeatherReport(
            temperature_fahrenheit=temperature,
            descriptions_by_rating={
                rating.key: self.resolve(temperature, rating)
                for rating in Rating
            },
        )
