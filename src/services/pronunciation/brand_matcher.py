import logging
from typing import Iterable, List, Optional

from services.pronunciation.config import (
    MATCH_ACCEPT_THRESHOLD,
    MAX_SUGGESTED_BRANDS,
    SUBSTRING_BOOST,
    SUGGESTION_SIMILARITY_FLOOR,
)
from services.pronunciation.models import Brand, MatchCandidate
from services.pronunciation.text_utils import normalize_text, similarity

logger = logging.getLogger(__name__)


def score_candidates(transcript: str, catalog: Iterable[Brand]) -> List[MatchCandidate]:
    """Score every brand against the transcript, keeping catalog order."""
    key = normalize_text(transcript)
    return [_score(key, brand) for brand in catalog]


def _score(key: str, brand: Brand) -> MatchCandidate:
    brand_key = normalize_text(brand.name)
    sim = similarity(key, brand_key)
    adjusted = sim + SUBSTRING_BOOST if _is_substring(key, brand_key) else sim
    return MatchCandidate(brand=brand, similarity=sim, adjusted_similarity=adjusted)


def _is_substring(key: str, brand_key: str) -> bool:
    return bool(key) and bool(brand_key) and (brand_key in key or key in brand_key)


def find_best_match(transcript: str, catalog: Iterable[Brand]) -> Optional[Brand]:
    """Return the best brand above the acceptance threshold, or None.

    Ties keep the brand seen first in catalog order.
    """
    if not normalize_text(transcript):
        return None

    best: Optional[MatchCandidate] = None
    for candidate in score_candidates(transcript, catalog):
        if candidate.adjusted_similarity <= MATCH_ACCEPT_THRESHOLD:
            continue
        if best is None or candidate.adjusted_similarity > best.adjusted_similarity:
            best = candidate

    if best is None:
        logger.debug(f"No brand matched transcript {transcript!r}")
        return None
    logger.debug(
        f"Matched {transcript!r} to {best.brand.name} "
        f"(similarity={best.similarity:.2f}, adjusted={best.adjusted_similarity:.2f})"
    )
    return best.brand


def closest_brands(
    transcript: str,
    catalog: Iterable[Brand],
    floor: float = SUGGESTION_SIMILARITY_FLOOR,
    limit: int = MAX_SUGGESTED_BRANDS,
) -> List[Brand]:
    """Brands loosely resembling the transcript, best first, for "did you mean"."""
    if not normalize_text(transcript):
        return []
    candidates = [c for c in score_candidates(transcript, catalog) if c.similarity > floor]
    ranked = sorted(candidates, key=lambda c: c.similarity, reverse=True)
    return [c.brand for c in ranked[: max(0, limit)]]
