"""Class listing schemas"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class ClassCreate(BaseModel):
    """A class offered by an instructor"""
    name: str = Field(..., min_length=1, description="Class title")
    image: Optional[str] = Field(None, description="Cover image URL")
    instructor_name: Optional[str] = Field(None, description="Instructor display name")
    instructor_email: EmailStr = Field(..., description="Instructor email")
    Available_seats: int = Field(..., ge=0, description="Seats left for purchase")
    price: float = Field(..., ge=0, description="Price in dollars")

    class Config:
        extra = "allow"

    def to_document(self) -> dict:
        document = self.model_dump()
        document.pop("_id", None)
        document["sell_count"] = 0
        return document
