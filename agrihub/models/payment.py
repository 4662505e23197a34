from sqlalchemy import Column, String, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from agrihub.models.base import BaseModel

class Payment(BaseModel):
    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint('amount > 0', name='ck_payments_amount_positive'),
    )
    
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    order_id = Column(String(36), ForeignKey('orders.id', ondelete='SET NULL'))
    booking_id = Column(String(36), ForeignKey('equipment_bookings.id', ondelete='SET NULL'))
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(10), default='INR', nullable=False)
    payment_method = Column(String(50))
    payment_gateway = Column(String(50))
    gateway_transaction_id = Column(String(255))
    status = Column(String(50), default='pending', nullable=False)
    
    user = relationship("User")
