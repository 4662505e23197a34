from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class DashboardStats(BaseModel):
    # Role counters not relevant to the caller are left out of the response
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_produce: Optional[int] = None
    total_equipment: Optional[int] = None
    total_products: Optional[int] = None
    total_trips: Optional[int] = None
    open_requests: Optional[int] = None
    total_orders: Optional[int] = None
    total_bookings: Optional[int] = None
    active_bookings: Optional[int] = None
    total_revenue: float = 0
    active_listings: int = 0
