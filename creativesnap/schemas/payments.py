# creativesnap/schemas/payments.py
"""Payment-related schemas"""

from pydantic import BaseModel, EmailStr, Field
from typing import Any, Dict, Optional
from datetime import datetime


# ==================== REQUEST SCHEMAS ====================

class PaymentCreate(BaseModel):
    """Checkout payload sent after the gateway confirmed the charge"""
    email: EmailStr = Field(..., description="Payer email")
    itemId: str = Field(..., description="Id of the cart item being paid for")
    classId: Optional[str] = Field(None, description="Id of the purchased class")
    instructor_email: Optional[EmailStr] = Field(None, description="Instructor credited with the sale")
    Available_seats: int = Field(..., description="Seats left as seen by the client at submit time")
    price: Optional[float] = Field(None, ge=0, description="Amount paid in dollars")
    transactionId: Optional[str] = Field(None, description="Gateway transaction id")
    date: Optional[datetime] = Field(None, description="Payment time, defaults to now")

    class Config:
        extra = "allow"


class PaymentIntentRequest(BaseModel):
    """Price to authorize, validated by the gateway adapter"""
    price: Any = Field(..., description="Price in dollars, number or numeric string")


# ==================== RESPONSE SCHEMAS ====================

class PaymentIntentResponse(BaseModel):
    clientSecret: str = Field(..., description="Secret the client completes payment with")


class CheckoutResponse(BaseModel):
    """Results of each store write made by checkout"""
    insertResult: Dict[str, Any]
    deleteResult: Dict[str, Any]
    classResult: Dict[str, Any]
    userResult: Dict[str, Any]
