from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from agrihub.auth.security import get_current_identity
from agrihub.db.session import get_db
from agrihub.models.equipment import Equipment, EquipmentBooking
from agrihub.models.order import Order
from agrihub.models.produce import Produce
from agrihub.models.product import Product
from agrihub.models.transport import TransportRequest
from agrihub.models.user import UserRole
from agrihub.schemas.dashboard import DashboardStats
from agrihub.schemas.user import TokenData

router = APIRouter()


def _count(query) -> int:
    return query.scalar() or 0


@router.get("/stats", response_model=DashboardStats, response_model_exclude_none=True)
def get_dashboard_stats(
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_identity),
):
    user_id = current_user.user_id
    role = current_user.role

    if role == UserRole.farmer:
        produce_count = _count(db.query(func.count(Produce.id)).filter(Produce.farmer_id == user_id))
        active_bookings = _count(
            db.query(func.count(EquipmentBooking.id)).filter(
                EquipmentBooking.renter_id == user_id,
                EquipmentBooking.status == "active",
            )
        )
        return DashboardStats(
            total_produce=produce_count,
            active_bookings=active_bookings,
            active_listings=produce_count,
        )

    if role == UserRole.equipment_provider:
        equipment_count = _count(db.query(func.count(Equipment.id)).filter(Equipment.owner_id == user_id))
        bookings = _count(
            db.query(func.count(EquipmentBooking.id))
            .join(Equipment, EquipmentBooking.equipment_id == Equipment.id)
            .filter(Equipment.owner_id == user_id)
        )
        return DashboardStats(
            total_equipment=equipment_count,
            total_bookings=bookings,
            active_listings=equipment_count,
        )

    if role == UserRole.input_supplier:
        product_count = _count(db.query(func.count(Product.id)).filter(Product.supplier_id == user_id))
        orders = _count(db.query(func.count(Order.id)).filter(Order.seller_id == user_id))
        return DashboardStats(
            total_products=product_count,
            total_orders=orders,
            active_listings=product_count,
        )

    if role == UserRole.transport_provider:
        trips = _count(db.query(func.count(TransportRequest.id)).filter(TransportRequest.provider_id == user_id))
        open_requests = _count(db.query(func.count(TransportRequest.id)).filter(TransportRequest.status == "open"))
        return DashboardStats(total_trips=trips, open_requests=open_requests)

    if role == UserRole.consumer:
        orders = _count(db.query(func.count(Order.id)).filter(Order.buyer_id == user_id))
        return DashboardStats(total_orders=orders, total_bookings=0)

    return DashboardStats(total_orders=0, total_bookings=0)
