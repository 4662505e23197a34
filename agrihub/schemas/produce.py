from datetime import date
from typing import List, Optional
from pydantic import Field
from agrihub.schemas.base import RequestSchema, TimestampSchema

class ProduceCreate(RequestSchema):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    description: Optional[str] = None
    price_per_kg: float = Field(gt=0)
    stock_kg: int = Field(default=0, ge=0)
    harvest_date: Optional[date] = None
    expiry_date: Optional[date] = None
    organic: bool = False
    images: Optional[List[str]] = None

class Produce(TimestampSchema):
    farmer_id: str
    name: str
    category: str
    description: Optional[str] = None
    price_per_kg: float
    stock_kg: int
    harvest_date: Optional[date] = None
    expiry_date: Optional[date] = None
    organic: bool
    images: Optional[List[str]] = None

class ProduceListing(Produce):
    farmer_name: str
    farmer_phone: str
    farmer_location: Optional[str] = None
