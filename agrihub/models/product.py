from sqlalchemy import Column, String, Text, Integer, Numeric, ForeignKey, JSON
from sqlalchemy.orm import relationship
from agrihub.models.base import BaseModel

class Product(BaseModel):
    """Farm inputs sold by input suppliers (seeds, fertilizers, tools)."""
    __tablename__ = "products"
    
    supplier_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)
    description = Column(Text)
    price_per_unit = Column(Numeric(10, 2), nullable=False)
    unit = Column(String(50), nullable=False)
    stock_quantity = Column(Integer, default=0, nullable=False)
    images = Column(JSON)
    
    supplier = relationship("User")
