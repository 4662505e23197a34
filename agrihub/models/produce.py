from sqlalchemy import Column, String, Text, Numeric, Integer, Boolean, Date, ForeignKey, JSON
from sqlalchemy.orm import relationship
from agrihub.models.base import BaseModel

class Produce(BaseModel):
    __tablename__ = "produce"
    
    farmer_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)
    description = Column(Text)
    price_per_kg = Column(Numeric(10, 2), nullable=False)
    stock_kg = Column(Integer, default=0, nullable=False)
    harvest_date = Column(Date)
    expiry_date = Column(Date)
    organic = Column(Boolean, default=False, nullable=False)
    images = Column(JSON)
    
    farmer = relationship("User")
