"""
Data models for Fukn Weather.
Ratings, report payloads and the description file schema.
"""
import re
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, RootModel, model_validator

BUCKET_KEY_PATTERN = re.compile(r"^(-?\d+)_(-?\d+)$")


class Rating(Enum):
    """Content rating for weather descriptions (declaration order matters)"""
    G = "G"            # General audiences, family-friendly
    PG = "PG"          # Mild content
    PG13 = "PG-13"     # Moderate content
    R = "R"            # Strong content
    X = "X"            # Explicit, very strong language
    BLAND = "BLAND"    # Painfully bland, robotic

    @property
    def key(self) -> str:
        """Key used in the description corpus"""
        return self.value

    @classmethod
    def parse(cls, value) -> "Rating":
        """Parse a rating from its name or corpus key, case-insensitive"""
        if isinstance(value, cls):
            return value

        text = str(value).strip().upper()
        for rating in cls:
            if text in (rating.name, rating.value):
                return rating

        expected = ", ".join(r.value for r in cls)
        raise ValueError(f"Unknown rating '{value}'. Expected one of: {expected}")


def parse_bucket_key(key: str) -> int:
    """Return the bucket start for a '{start}_{start+4}' key, or raise ValueError"""
    match = BUCKET_KEY_PATTERN.match(key)
    if not match:
        raise ValueError(f"Malformed bucket key '{key}'")

    start, end = int(match.group(1)), int(match.group(2))
    if start % 5 != 0 or end != start + 4:
        raise ValueError(f"Bucket key '{key}' must look like '{{start}}_{{start+4}}' with start a multiple of 5")
    return start


# ============================================================================
# Corpus file schema
# ============================================================================

class DescriptionData(RootModel[Dict[str, Dict[str, List[str]]]]):
    """Rating key -> bucket key -> descriptions, as stored on disk"""

    @model_validator(mode="after")
    def check_keys(self):
        known = {r.key for r in Rating}
        for rating_key, buckets in self.root.items():
            if rating_key not in known:
                raise ValueError(f"Unknown rating '{rating_key}' in description data")
            for bucket in buckets:
                parse_bucket_key(bucket)
        return self


# ============================================================================
# Reports
# ============================================================================

class WeatherReport(BaseModel):
    temperature_fahrenheit: float
    rating: Rating
    description: str
    location: Optional[str] = None


class RandomWeatherReport(BaseModel):
    """Random temperature with one description per rating"""
    temperature_fahrenheit: int
    descriptions_by_rating: Dict[str, str]
