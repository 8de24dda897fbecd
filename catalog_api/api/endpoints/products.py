"""
Product endpoints - create, list (active), get.
"""

from fastapi import APIRouter, status

from catalog_api.core.dependencies import PageDep, ProductServiceDep
from catalog_api.schemas.product import ProductCreate, ProductResponse

router = APIRouter()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(svc: ProductServiceDep, data: ProductCreate):
    return await svc.create(data)


@router.get("", response_model=list[ProductResponse])
async def list_products(svc: ProductServiceDep, page: PageDep):
    return await svc.find_all(skip=page.skip, limit=page.limit)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(svc: ProductServiceDep, product_id: str):
    """404 when missing or inactive."""
    return await svc.find_one(product_id)
