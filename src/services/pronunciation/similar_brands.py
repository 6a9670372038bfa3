from typing import Iterable, List, Optional

from constants.car_brands import LUXURY_BRANDS, MAINSTREAM_BRANDS
from services.pronunciation.config import MAX_SUGGESTED_BRANDS
from services.pronunciation.models import Brand

SAME_COUNTRY_SCORE = 30
PHONEME_COUNT_SCORES = {0: 25, 1: 15, 2: 10}
SAME_FIRST_LETTER_SCORE = 20
SAME_ENDING_SCORE = 15
SAME_TIER_SCORE = 10


def brand_tier(brand: Brand) -> Optional[str]:
    name = brand.name.lower()
    if any(marker in name for marker in LUXURY_BRANDS):
        return "luxury"
    if any(marker in name for marker in MAINSTREAM_BRANDS):
        return "mainstream"
    return None


def similarity_score(current: Brand, other: Brand) -> int:
    score = 0
    if other.country == current.country:
        score += SAME_COUNTRY_SCORE
    score += PHONEME_COUNT_SCORES.get(abs(len(current.phonemes) - len(other.phonemes)), 0)
    if current.name[:1].lower() == other.name[:1].lower():
        score += SAME_FIRST_LETTER_SCORE
    if current.name[-2:].lower() == other.name[-2:].lower():
        score += SAME_ENDING_SCORE
    tier = brand_tier(current)
    if tier is not None and tier == brand_tier(other):
        score += SAME_TIER_SCORE
    return score


def get_similar_brands(
    brand: Brand,
    catalog: Iterable[Brand],
    limit: int = MAX_SUGGESTED_BRANDS,
) -> List[Brand]:
    """Brands to practise next, best first; catalog order breaks ties."""
    others = [b for b in catalog if b.id != brand.id and b.name.casefold() != brand.name.casefold()]
    ranked = sorted(others, key=lambda b: similarity_score(brand, b), reverse=True)
    return ranked[: max(0, limit)]
