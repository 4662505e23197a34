from sqlalchemy import Column, String, Text, Integer, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from agrihub.models.base import BaseModel

class Order(BaseModel):
    __tablename__ = "orders"
    
    buyer_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    seller_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    total_amount = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String(50), default='pending', nullable=False)
    payment_status = Column(String(50), default='pending', nullable=False)
    delivery_address = Column(Text)
    
    buyer = relationship("User", foreign_keys=[buyer_id])
    seller = relationship("User", foreign_keys=[seller_id])
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan", passive_deletes=True)

class OrderItem(BaseModel):
    __tablename__ = "order_items"
    
    order_id = Column(String(36), ForeignKey('orders.id', ondelete='CASCADE'), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey('products.id', ondelete='SET NULL'))
    produce_id = Column(String(36), ForeignKey('produce.id', ondelete='SET NULL'))
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    
    order = relationship("Order", back_populates="items")
    product = relationship("Product")
    produce = relationship("Produce")
