from typing import Optional
from pydantic import BaseModel
from agrihub.schemas.base import RequestSchema, TimestampSchema

class PaymentOrderCreate(RequestSchema):
    # Checked by the handler so a missing amount gets the same message as a bad one
    amount: Optional[float] = None
    currency: Optional[str] = None
    receipt: Optional[str] = None
    order_id: Optional[str] = None
    booking_id: Optional[str] = None

class GatewayOrder(BaseModel):
    id: str
    amount: int
    currency: str
    receipt: str
    status: str

class Payment(TimestampSchema):
    user_id: str
    order_id: Optional[str] = None
    booking_id: Optional[str] = None
    amount: float
    currency: str
    payment_method: Optional[str] = None
    payment_gateway: Optional[str] = None
    gateway_transaction_id: Optional[str] = None
    status: str
