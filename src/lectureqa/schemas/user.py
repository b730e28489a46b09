"""Pydantic schemas for user profile endpoints."""

from pydantic import BaseModel, Field

from lectureqa.models.user import UserRole


class ProfileUpdateRequest(BaseModel):
    """Request model for creating or updating the caller's profile."""

    faculty_id: int | None = Field(None, description="Faculty the user belongs to")
    display_name: str | None = Field(None, max_length=255)


class UserResponse(BaseModel):
    """Response model for a user profile."""

    id: str
    display_name: str | None = None
    faculty_id: int | None = None
    role: UserRole

    model_config = {"from_attributes": True}
