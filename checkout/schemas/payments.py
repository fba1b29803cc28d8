from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class OrderCreateRequest(BaseModel):
    # left loose so a non-numeric amount reaches the core and is reported as 400
    amount: Any = None
    currency: Optional[str] = "INR"


class PaymentVerifyRequest(BaseModel):
    order_id: Optional[str] = Field(None, alias="orderId")
    payment_id: Optional[str] = Field(None, alias="paymentId")
    signature: Optional[str] = None
    amount: Any = None
    currency: Optional[str] = None

    class Config:
        populate_by_name = True


class PaymentVerifyResponse(BaseModel):
    verified: bool
    message: str


class PaymentOut(BaseModel):
    id: int
    order_id: str = Field(alias="orderId")
    payment_id: str = Field(alias="paymentId")
    signature: str
    amount: float
    currency: str
    status: str
    created_at: datetime = Field(alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class PaymentSummary(BaseModel):
    count: int
    total: float
    by_currency: Dict[str, float] = Field(default_factory=dict, alias="byCurrency")

    class Config:
        populate_by_name = True


class MockPaymentDetails(BaseModel):
    razorpay_order_id: str
    razorpay_payment_id: str
    razorpay_signature: str


class MockPaymentResponse(BaseModel):
    success: bool
    message: str
    order: Dict[str, Any]
    payment: MockPaymentDetails
    saved_payment: PaymentOut = Field(alias="savedPayment")

    class Config:
        populate_by_name = True


class ClearPaymentsResponse(BaseModel):
    success: bool
    message: str


class HealthResponse(BaseModel):
    message: str
    mode: str
