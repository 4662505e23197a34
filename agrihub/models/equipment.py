from sqlalchemy import Column, String, Text, Numeric, ForeignKey, JSON, Date
from sqlalchemy.orm import relationship
from agrihub.models.base import BaseModel


class Equipment(BaseModel):
    __tablename__ = "equipment"
    
    owner_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False)
    description = Column(Text)
    specifications = Column(JSON)
    base_rate_per_day = Column(Numeric(10, 2), nullable=False)
    location = Column(String(255))
    availability_status = Column(String(50), default='available', nullable=False)
    images = Column(JSON)
    
    owner = relationship("User")


class EquipmentBooking(BaseModel):
    __tablename__ = "equipment_bookings"
    
    equipment_id = Column(String(36), ForeignKey('equipment.id', ondelete='CASCADE'), nullable=False)
    renter_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False)
    status = Column(String(50), default='pending', nullable=False)
    payment_status = Column(String(50), default='pending', nullable=False)
    
    equipment = relationship("Equipment")
    renter = relationship("User")
