import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from agrihub.auth.security import get_current_identity
from agrihub.core.config import settings
from agrihub.core.errors import ForbiddenError, NotFoundError, ValidationError
from agrihub.db.session import get_db
from agrihub.models.equipment import EquipmentBooking
from agrihub.models.order import Order
from agrihub.models.payment import Payment
from agrihub.schemas.payment import GatewayOrder, Payment as PaymentSchema, PaymentOrderCreate
from agrihub.schemas.user import TokenData
from agrihub.services.payment_gateway import MockRazorpayClient, get_payment_gateway

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/create-order", response_model=GatewayOrder)
def create_payment_order(
    payment: PaymentOrderCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_identity),
    gateway: MockRazorpayClient = Depends(get_payment_gateway),
):
    if payment.amount is None or payment.amount <= 0:
        raise ValidationError("Valid amount is required")

    # A payment settles an order or a booking, never both
    if payment.order_id and payment.booking_id:
        raise ValidationError("A payment can reference an order or a booking, not both")
    if payment.order_id:
        buyer_id = db.query(Order.buyer_id).filter(Order.id == payment.order_id).scalar()
        if buyer_id is None:
            raise NotFoundError("Order not found")
        if buyer_id != current_user.user_id:
            raise ForbiddenError("Not enough permissions")
    if payment.booking_id:
        renter_id = db.query(EquipmentBooking.renter_id).filter(
            EquipmentBooking.id == payment.booking_id
        ).scalar()
        if renter_id is None:
            raise NotFoundError("Booking not found")
        if renter_id != current_user.user_id:
            raise ForbiddenError("Not enough permissions")

    currency = payment.currency or settings.default_currency
    gateway_order = gateway.create_order(payment.amount, currency, payment.receipt)

    db_payment = Payment(
        user_id=current_user.user_id,
        order_id=payment.order_id,
        booking_id=payment.booking_id,
        amount=payment.amount,
        currency=currency,
        payment_gateway=gateway.name,
        gateway_transaction_id=gateway_order["id"],
        status="pending",
    )
    db.add(db_payment)
    db.commit()
    logger.info(f"Payment order {gateway_order['id']} created for user {current_user.user_id}")

    return gateway_order

@router.get("", response_model=List[PaymentSchema])
def read_payments(
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_identity),
):
    return (
        db.query(Payment)
        .filter(Payment.user_id == current_user.user_id)
        .order_by(Payment.created_at.desc())
        .all()
    )
