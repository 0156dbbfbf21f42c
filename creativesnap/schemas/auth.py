# creativesnap/schemas/auth.py

"""Authentication-related schemas"""

from pydantic import BaseModel, EmailStr, Field


class TokenRequest(BaseModel):
    """Identity payload to sign; any extra claims are carried into the token"""
    email: EmailStr = Field(..., description="User email")

    class Config:
        extra = "allow"


class TokenResponse(BaseModel):
    """Signed bearer token"""
    token: str = Field(..., description="JWT access token")
