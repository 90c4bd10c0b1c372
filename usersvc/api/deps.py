from fastapi import Request

from usersvc.repositories.user_repository import UserRepository


def get_user_repository(request: Request) -> UserRepository:
    """Repository installed on the application at bootstrap."""
    return request.app.state.user_repository
