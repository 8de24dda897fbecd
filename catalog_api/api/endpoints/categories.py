"""
Category endpoints - create, list (active, by name), get.
Design: Thin controller; service layer holds business logic and raises domain errors.
"""

from fastapi import APIRouter, status

from catalog_api.core.dependencies import CategoryServiceDep, PageDep
from catalog_api.schemas.category import CategoryCreate, CategoryResponse

router = APIRouter()


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(svc: CategoryServiceDep, data: CategoryCreate):
    """Create category. 409 on duplicate name."""
    return await svc.create(data)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(svc: CategoryServiceDep, page: PageDep):
    """Active categories sorted by name. REST: GET /categories?skip=0&limit=20."""
    return await svc.find_all(skip=page.skip, limit=page.limit)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(svc: CategoryServiceDep, category_id: str):
    """404 when missing or inactive."""
    return await svc.find_one(category_id)
