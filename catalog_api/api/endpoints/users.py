"""
User endpoints - registration and lookups (RESTful API).
Challenge: Validation, clear status codes (400/409/404), no password in responses.
"""

from fastapi import APIRouter, status

from catalog_api.core.dependencies import PageDep, UserServiceDep
from catalog_api.schemas.user import UserCreate, UserResponse

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(svc: UserServiceDep, data: UserCreate):
    """Create new user. 409 when email or username is taken."""
    return await svc.create(data)


@router.get("", response_model=list[UserResponse])
async def list_users(svc: UserServiceDep, page: PageDep):
    return await svc.find_all(skip=page.skip, limit=page.limit)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(svc: UserServiceDep, user_id: str):
    return await svc.find_one(user_id)
