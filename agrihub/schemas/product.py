from typing import List, Optional
from pydantic import Field
from agrihub.schemas.base import RequestSchema, TimestampSchema

class ProductCreate(RequestSchema):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    description: Optional[str] = None
    price_per_unit: float = Field(gt=0)
    unit: str = Field(min_length=1)
    stock_quantity: int = Field(default=0, ge=0)
    images: Optional[List[str]] = None

class Product(TimestampSchema):
    supplier_id: str
    name: str
    category: str
    description: Optional[str] = None
    price_per_unit: float
    unit: str
    stock_quantity: int
    images: Optional[List[str]] = None

class ProductListing(Product):
    supplier_name: str
    supplier_phone: str
    supplier_location: Optional[str] = None
