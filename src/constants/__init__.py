from constants.car_brands import CAR_BRANDS, LUXURY_BRANDS, MAINSTREAM_BRANDS
from constants.phonetics import (
    CONFUSION_LABELS,
    PHONETIC_SIMILARITY,
    PLOSIVES,
    VOWELS,
)

__all__ = [
    "CAR_BRANDS",
    "LUXURY_BRANDS",
    "MAINSTREAM_BRANDS",
    "PHONETIC_SIMILARITY",
    "VOWELS",
    "PLOSIVES",
    "CONFUSION_LABELS",
]
