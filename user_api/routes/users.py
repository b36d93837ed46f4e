"""
User API Routes (basic variant)
Plain request bodies passed straight to the store; store results returned as-is.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from user_api.models.user import User
from user_api.services.user_store import UserStore
from user_api.store import get_user_store

router = APIRouter()


class UserBody(BaseModel):
    name: str
    email: str


@router.post("/users", response_model=User, status_code=201)
def create_user(body: UserBody, store: UserStore = Depends(get_user_store)):
    """Create a user"""
    return store.create(body.name, body.email)


@router.get("/users", response_model=List[User])
def list_users(store: UserStore = Depends(get_user_store)):
    """List all users in insertion order"""
    return store.find_all()


@router.get("/users/{user_id}", response_model=Optional[User])
def get_user(user_id: int, store: UserStore = Depends(get_user_store)):
    """Get a user by ID, or null"""
    return store.find_one(user_id)


@router.put("/users/{user_id}", response_model=Optional[User])
def update_user(user_id: int, body: UserBody, store: UserStore = Depends(get_user_store)):
    """Replace a user's name and email, or return null if the ID is unknown"""
    return store.update(user_id, body.name, body.email)


@router.delete("/users/{user_id}", response_model=bool)
def delete_user(user_id: int, store: UserStore = Depends(get_user_store)):
    return store.remove(user_id)
