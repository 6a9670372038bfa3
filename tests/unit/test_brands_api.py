"""Unit tests for brand catalog endpoints."""

from fastapi.testclient import TestClient


def test_list_brands(client: TestClient):
    response = client.get("/api/v1/brands")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 59
    assert data[0]["id"] == "perodua"
    assert data[0]["phonemes"] == ["p", "e", "r", "o", "d", "u", "a"]


def test_list_brands_pagination(client: TestClient):
    response = client.get("/api/v1/brands", params={"skip": 2, "limit": 2})

    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == ["toyota", "honda"]


def test_get_brand(client: TestClient):
    response = client.get("/api/v1/brands/tesla")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Tesla"
    assert data["country"]
    assert data["pronunciation"]


def test_get_brand_not_found(client: TestClient):
    response = client.get("/api/v1/brands/trabant")

    assert response.status_code == 404
    assert response.json()["detail"] == "Brand trabant not found"


def test_similar_brands(client: TestClient):
    response = client.get("/api/v1/brands/toyota/similar")

    assert response.status_code == 200
    ids = [b["id"] for b in response.json()]
    assert len(ids) == 3
    assert "toyota" not in ids


def test_similar_brands_not_found(client: TestClient):
    response = client.get("/api/v1/brands/trabant/similar")

    assert response.status_code == 404
