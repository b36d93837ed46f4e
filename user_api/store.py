from fastapi import Request

from user_api.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Get the user store owned by the running app"""
    return request.app.state.user_store
