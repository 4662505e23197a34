from datetime import date
from typing import Optional
from pydantic import Field
from agrihub.schemas.base import RequestSchema, TimestampSchema

class TransportRequestCreate(RequestSchema):
    pickup_location: str = Field(min_length=1)
    delivery_location: str = Field(min_length=1)
    cargo_type: str = Field(min_length=1)
    cargo_weight: Optional[float] = Field(default=None, gt=0)
    estimated_distance: Optional[float] = Field(default=None, ge=0)
    offered_price: Optional[float] = Field(default=None, ge=0)
    pickup_date: Optional[date] = None

class TransportRequest(TimestampSchema):
    requester_id: str
    provider_id: Optional[str] = None
    pickup_location: str
    delivery_location: str
    cargo_type: str
    cargo_weight: Optional[float] = None
    estimated_distance: Optional[float] = None
    offered_price: Optional[float] = None
    status: str
    pickup_date: Optional[date] = None

class TransportRequestListing(TransportRequest):
    requester_name: str
    requester_phone: str
