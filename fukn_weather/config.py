"""Fukn Weather Configuration"""
import os
from pathlib import Path

# Bundled description corpus, overridable for custom tables
DEFAULT_DESCRIPTIONS_PATH = Path(__file__).parent / "data" / "weather_descriptions.json"
WEATHER_DESCRIPTIONS_PATH = Path(os.getenv("WEATHER_DESCRIPTIONS_PATH", str(DEFAULT_DESCRIPTIONS_PATH)))

# Rating used when a caller doesn't ask for one
DEFAULT_RATING = os.getenv("DEFAULT_RATING", "X")

# Optional seed for reproducible picks (empty = system entropy)
RANDOM_SEED = os.getenv("RANDOM_SEED", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Temperature domain covered by the corpus (Fahrenheit)
MIN_TEMPERATURE = -50
MAX_TEMPERATURE = 140
BUCKET_WIDTH = 5
