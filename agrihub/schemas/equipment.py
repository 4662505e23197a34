from datetime import date
from typing import Any, Dict, List, Optional
from pydantic import Field, model_validator
from agrihub.schemas.base import RequestSchema, TimestampSchema

class EquipmentCreate(RequestSchema):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    description: Optional[str] = None
    specifications: Optional[Dict[str, Any]] = None
    base_rate_per_day: float = Field(gt=0)
    location: Optional[str] = None
    images: Optional[List[str]] = None

class Equipment(TimestampSchema):
    owner_id: str
    name: str
    type: str
    description: Optional[str] = None
    specifications: Optional[Dict[str, Any]] = None
    base_rate_per_day: float
    location: Optional[str] = None
    availability_status: str
    images: Optional[List[str]] = None

class EquipmentListing(Equipment):
    owner_name: str
    owner_phone: str
    owner_location: Optional[str] = None

class BookingCreate(RequestSchema):
    equipment_id: str = Field(min_length=1)
    start_date: date
    end_date: date

    @model_validator(mode='after')
    def check_date_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end date must not precede start date")
        return self

class Booking(TimestampSchema):
    equipment_id: str
    renter_id: str
    start_date: date
    end_date: date
    total_amount: float
    status: str
    payment_status: str
