"""API router for the brand catalog."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from models.schemas import BrandResponse
from services.pronunciation import BrandCatalog, get_catalog, get_similar_brands

router = APIRouter()


@router.get("", response_model=List[BrandResponse])
async def list_brands(
    skip: int = 0,
    limit: int = 100,
    catalog: BrandCatalog = Depends(get_catalog),
) -> List[BrandResponse]:
    """
    List catalog brands.

    Args:
        skip: Number of brands to skip
        limit: Maximum number of brands to return
        catalog: Brand catalog

    Returns:
        List of brands in catalog order
    """
    brands = catalog.brands[skip: skip + limit]
    return [BrandResponse.model_validate(b) for b in brands]


@router.get("/{brand_id}", response_model=BrandResponse)
async def get_brand(
    brand_id: str,
    catalog: BrandCatalog = Depends(get_catalog),
) -> BrandResponse:
    """
    Get a brand by ID.

    Raises:
        HTTPException: If brand not found
    """
    brand = catalog.get(brand_id)
    if not brand:
        raise HTTPException(status_code=404, detail=f"Brand {brand_id} not found")
    return BrandResponse.model_validate(brand)


@router.get("/{brand_id}/similar", response_model=List[BrandResponse])
async def similar_brands(
    brand_id: str,
    catalog: BrandCatalog = Depends(get_catalog),
) -> List[BrandResponse]:
    """Brands to practise after the given one."""
    brand = catalog.get(brand_id)
    if not brand:
        raise HTTPException(status_code=404, detail=f"Brand {brand_id} not found")
    return [BrandResponse.model_validate(b) for b in get_similar_brands(brand, catalog)]
