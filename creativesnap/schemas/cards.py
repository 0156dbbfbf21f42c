"""Cart ("card") schemas"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class CardCreate(BaseModel):
    """A class placed in a user's cart"""
    user_email: EmailStr = Field(..., description="Owner of the cart")
    classId: Optional[str] = Field(None, description="Id of the class in the cart")
    name: Optional[str] = Field(None, description="Class title")
    image: Optional[str] = Field(None, description="Class image URL")
    instructor_email: Optional[EmailStr] = Field(None, description="Instructor of the class")
    price: float = Field(..., ge=0, description="Price in dollars")

    class Config:
        extra = "allow"

    def to_document(self) -> dict:
        document = self.model_dump(exclude_unset=True)
        document.pop("_id", None)
        return document
