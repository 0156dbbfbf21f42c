"""User-related schemas"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class Role(str, Enum):
    """User roles; a user without a role is a student"""
    STUDENT = "student"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


class UserUpsert(BaseModel):
    """Profile fields written on sign-up / sign-in

    Role and sell_count are not accepted here: roles change only through the
    guarded promotion routes and sell_count only through checkout.
    """
    email: Optional[EmailStr] = Field(None, description="User email, defaults to the path email")
    name: Optional[str] = Field(None, description="Display name")
    photoURL: Optional[str] = Field(None, description="Profile photo URL")

    class Config:
        extra = "allow"

    def to_set_fields(self, email: str) -> dict:
        fields = self.model_dump(exclude_unset=True)
        fields.pop("role", None)
        fields.pop("sell_count", None)
        fields.pop("_id", None)
        fields["email"] = email
        return fields
