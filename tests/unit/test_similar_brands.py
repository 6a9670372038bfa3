from services.pronunciation import get_catalog, load_catalog
from services.pronunciation.models import Brand
from services.pronunciation.similar_brands import brand_tier, get_similar_brands, similarity_score


def _brand(name, phonemes, country):
    return Brand(id=name.lower(), name=name, phonemes=tuple(phonemes), pronunciation="", country=country)


def test_brand_tier():
    assert brand_tier(_brand("Lexus", "lexus", "Japan")) == "luxury"
    assert brand_tier(_brand("Rolls Royce", "rolls", "UK")) == "luxury"
    assert brand_tier(_brand("Toyota", "toyota", "Japan")) == "mainstream"
    assert brand_tier(_brand("Tesla", "tesla", "USA")) is None


def test_similarity_score_components():
    toyota = _brand("Toyota", "toyota", "Japan")

    # country 30, same phoneme count 25, first letter 20, ending 15
    assert similarity_score(toyota, _brand("Tokota", "tokota", "Japan")) == 90
    # phoneme count difference of one
    assert similarity_score(toyota, _brand("Zzzzz", "zzzzz", "France")) == 15
    # mainstream tier on both sides
    assert similarity_score(toyota, _brand("Honda", "honda", "Japan")) == 30 + 15 + 10


def test_similar_brands_exclude_the_brand_itself(small_catalog):
    toyota = small_catalog.get("toyota")

    similar = get_similar_brands(toyota, small_catalog)

    assert len(similar) == 3
    assert toyota not in similar
    assert similar[0].name == "Honda"


def test_similar_brands_ties_keep_catalog_order():
    catalog = load_catalog([
        {"id": "a", "name": "Aaa", "phonemes": "a", "country": "X"},
        {"id": "b", "name": "Bqq", "phonemes": "b", "country": "Y"},
        {"id": "c", "name": "Cqq", "phonemes": "c", "country": "Y"},
        {"id": "d", "name": "Dqq", "phonemes": "d", "country": "Y"},
    ])

    similar = get_similar_brands(catalog.get("a"), catalog, limit=2)

    assert [b.id for b in similar] == ["b", "c"]


def test_similar_brands_on_builtin_catalog():
    catalog = get_catalog()
    ferrari = catalog.get("ferrari")

    similar = get_similar_brands(ferrari, catalog)

    assert len(similar) == 3
    assert all(b.id != "ferrari" for b in similar)
