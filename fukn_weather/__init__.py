"""
Fukn Weather - rating-gated weather descriptions.

Maps a Fahrenheit temperature to a canned description picked at random
from a static corpus, one pool per content rating.
"""
from fukn_weather.models import Rating, WeatherReport, RandomWeatherReport
from fukn_weather.corpus import Corpus, CorpusLoadError, load_corpus
from fukn_weather.randomness import RandomSource, LockedRandom
from fukn_weather.resolver import DescriptionResolver, bucket_key

__all__ = [
    "Rating",
    "WeatherReport",
    "RandomWeatherReport",
    "Corpus",
    "CorpusLoadError",
    "load_corpus",
    "RandomSource",
    "LockedRandom",
    "DescriptionResolver",
    "bucket_key",
]

__version__ = "1.0.0"
