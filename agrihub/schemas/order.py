from typing import List, Literal, Optional
from pydantic import Field
from agrihub.schemas.base import BaseSchema, RequestSchema, TimestampSchema

class OrderItemCreate(RequestSchema):
    type: Literal['produce', 'product']
    item_id: str = Field(min_length=1)
    quantity: int = Field(gt=0)
    seller_id: str = Field(min_length=1)

class OrderCreate(RequestSchema):
    items: List[OrderItemCreate]
    delivery_address: Optional[str] = None

class OrderItem(BaseSchema):
    id: str
    product_id: Optional[str] = None
    produce_id: Optional[str] = None
    quantity: int
    unit_price: float
    total_price: float

class Order(TimestampSchema):
    buyer_id: str
    seller_id: str
    total_amount: float
    status: str
    payment_status: str
    delivery_address: Optional[str] = None

class OrderWithItems(Order):
    items: List[OrderItem]
