import logging
from functools import lru_cache
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from constants.car_brands import CAR_BRANDS
from services.pronunciation.models import Brand

logger = logging.getLogger(__name__)


def parse_phonemes(phonemes: str) -> Tuple[str, ...]:
    return tuple(p.strip().lower() for p in (phonemes or "").split("-") if p.strip())


def brand_from_dict(data: dict) -> Brand:
    return Brand(
        id=data["id"],
        name=data["name"],
        phonemes=parse_phonemes(data.get("phonemes", "")),
        pronunciation=data.get("pronunciation", ""),
        description=data.get("description", ""),
        country=data.get("country", ""),
        founded=data.get("founded", ""),
    )


class BrandCatalog:
    """Read-only, ordered collection of brands.

    Iteration order is the insertion order and is the tie-break order used by
    matching and similar-brand selection.
    """

    def __init__(self, brands: Iterable[Brand]):
        self._brands: Tuple[Brand, ...] = tuple(brands)
        self._by_id: Dict[str, Brand] = {}
        self._by_name: Dict[str, Brand] = {}
        for brand in self._brands:
            _validate(brand, self._by_name)
            self._by_id[brand.id] = brand
            self._by_name[brand.name.casefold()] = brand

    def __iter__(self) -> Iterator[Brand]:
        return iter(self._brands)

    def __len__(self) -> int:
        return len(self._brands)

    @property
    def brands(self) -> Tuple[Brand, ...]:
        return self._brands

    def get(self, brand_id: str) -> Optional[Brand]:
        return self._by_id.get(brand_id)

    def first(self, count: int) -> List[Brand]:
        return list(self._brands[: max(0, count)])


def _validate(brand: Brand, seen: Dict[str, Brand]) -> None:
    if not brand.phonemes:
        raise ValueError(f"Brand '{brand.name}' has no phonemes")
    if brand.name.casefold() in seen:
        raise ValueError(f"Duplicate brand name in catalog: '{brand.name}'")


def load_catalog(entries: Iterable[dict]) -> BrandCatalog:
    return BrandCatalog(brand_from_dict(e) for e in entries)


@lru_cache(maxsize=1)
def get_catalog() -> BrandCatalog:
    catalog = load_catalog(CAR_BRANDS)
    logger.info(f"Loaded brand catalog with {len(catalog)} brands")
    return catalog
