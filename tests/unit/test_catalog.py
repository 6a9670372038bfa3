import pytest

from services.pronunciation.catalog import BrandCatalog, get_catalog, load_catalog, parse_phonemes
from services.pronunciation.models import Brand


def test_parse_phonemes_lowercases_and_drops_empty_parts():
    assert parse_phonemes("T-o-Y--o-t-a ") == ("t", "o", "y", "o", "t", "a")
    assert parse_phonemes("") == ()


def test_builtin_catalog_is_ordered_and_complete():
    catalog = get_catalog()

    assert len(catalog) == 59
    assert [b.id for b in catalog.first(3)] == ["perodua", "proton", "toyota"]
    assert all(brand.phonemes for brand in catalog)


def test_builtin_catalog_lookup():
    catalog = get_catalog()

    tesla = catalog.get("tesla")
    assert tesla is not None
    assert tesla.phonemes == ("t", "e", "s", "l", "a")
    assert catalog.get("trabant") is None


def test_catalog_rejects_empty_phonemes():
    with pytest.raises(ValueError, match="no phonemes"):
        BrandCatalog([Brand(id="x", name="X", phonemes=(), pronunciation="")])


def test_catalog_rejects_duplicate_names():
    entries = [
        {"id": "kia", "name": "Kia", "phonemes": "k-i-a"},
        {"id": "kia2", "name": "KIA", "phonemes": "k-i-a"},
    ]
    with pytest.raises(ValueError, match="Duplicate"):
        load_catalog(entries)


def test_first_clamps_negative_count(small_catalog):
    assert small_catalog.first(-1) == []
    assert len(small_catalog.first(10)) == len(small_catalog)
