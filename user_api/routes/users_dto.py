"""
User API Routes (DTO variant)

Request bodies are validated by DTOs before anything reaches the store,
and every response is shaped through UserResponseDto so the wire format
stays decoupled from the stored record.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

from user_api.services.user_store import UserStore
from user_api.store import get_user_store

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class CreateUserDto(BaseModel):
    name: str
    email: EmailStr

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("name must not be empty")
        return v


class UpdateUserDto(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    email: Optional[EmailStr] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is not None and not v.strip():
            raise ValueError("name must not be empty")
        return v


class UserResponseDto(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


def _to_response(user) -> Optional[UserResponseDto]:
    if user is None:
        return None
    return UserResponseDto.model_validate(user)


# ============================================================================
# User CRUD Endpoints
# ============================================================================


@router.post("/users", response_model=UserResponseDto, status_code=201)
def create_user(user_data: CreateUserDto, store: UserStore = Depends(get_user_store)):
    """Create a user from a validated DTO"""
    return _to_response(store.create(user_data.name, str(user_data.email)))


@router.get("/users", response_model=List[UserResponseDto])
def list_users(store: UserStore = Depends(get_user_store)):
    """List all users in insertion order"""
    return [_to_response(user) for user in store.find_all()]


@router.get("/users/{user_id}", response_model=Optional[UserResponseDto])
def get_user(user_id: int, store: UserStore = Depends(get_user_store)):
    """Get a user by ID, or null"""
    return _to_response(store.find_one(user_id))


@router.put("/users/{user_id}", response_model=Optional[UserResponseDto])
def update_user(user_id: int, user_data: UpdateUserDto, store: UserStore = Depends(get_user_store)):
    """
    Partially update a user.

    Fields left out of the body keep their current value. Returns null
    if no user has the given ID.
    """
    update_data = user_data.model_dump(exclude_unset=True)
    email = update_data.get("email")
    updated = store.update(
        user_id,
        name=update_data.get("name"),
        email=str(email) if email is not None else None,
    )
    return _to_response(updated)


@router.delete("/users/{user_id}", response_model=bool)
def delete_user(user_id: int, store: UserStore = Depends(get_user_store)):
    """Delete a user; returns whether a user was removed"""
    return store.remove(user_id)
