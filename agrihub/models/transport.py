from sqlalchemy import Column, String, Numeric, Date, ForeignKey
from sqlalchemy.orm import relationship
from agrihub.models.base import BaseModel

class TransportRequest(BaseModel):
    __tablename__ = "transport_requests"
    
    requester_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    provider_id = Column(String(36), ForeignKey('users.id', ondelete='SET NULL'))
    pickup_location = Column(String(255), nullable=False)
    delivery_location = Column(String(255), nullable=False)
    cargo_type = Column(String(100), nullable=False)
    cargo_weight = Column(Numeric(10, 2))
    estimated_distance = Column(Numeric(10, 2))
    offered_price = Column(Numeric(10, 2))
    status = Column(String(50), default='open', nullable=False)
    pickup_date = Column(Date)
    
    requester = relationship("User", foreign_keys=[requester_id])
    provider = relationship("User", foreign_keys=[provider_id])
