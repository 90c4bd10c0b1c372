"""
usersvc/api/users.py

Purpose: User endpoints

- GET  /users  lists every stored user
- POST /users  stores the request body as a new user
- Repository errors are left to the application's exception handlers
"""

from fastapi import APIRouter, Depends
from typing import Any, Dict, List

from usersvc.api.deps import get_user_repository
from usersvc.repositories.user_repository import UserRepository
from usersvc.schemas.user import UserCreate

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_users(repository: UserRepository = Depends(get_user_repository)):
    """Returns all users."""
    return await repository.list_users()


@router.post("", response_model=Dict[str, Any])
async def create_user(
    user: UserCreate,
    repository: UserRepository = Depends(get_user_repository),
):
    """
    Creates a user from the request body.

    Declared attributes are type-checked; any other attribute is stored as
    sent. The response is the stored document including its `_id`.
    """
    return await repository.create_user(user.to_document())
