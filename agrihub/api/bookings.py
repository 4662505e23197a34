from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from agrihub.auth.security import get_current_identity, is_farmer
from agrihub.core.errors import NotFoundError, ValidationError
from agrihub.db.session import get_db
from agrihub.models.equipment import Equipment, EquipmentBooking
from agrihub.models.user import UserRole
from agrihub.schemas.equipment import Booking, BookingCreate
from agrihub.schemas.user import TokenData

router = APIRouter()

@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(is_farmer),
):
    equipment = db.query(Equipment).filter(Equipment.id == booking.equipment_id).first()
    if equipment is None:
        raise NotFoundError("Equipment not found")
    if equipment.availability_status != "available":
        raise ValidationError(f"Equipment {equipment.name} is not available")

    # Both ends of the range are billed
    days = (booking.end_date - booking.start_date).days + 1
    total_amount = Decimal(str(equipment.base_rate_per_day)) * days

    db_booking = EquipmentBooking(
        equipment_id=equipment.id,
        renter_id=current_user.user_id,
        start_date=booking.start_date,
        end_date=booking.end_date,
        total_amount=total_amount,
    )
    db.add(db_booking)
    db.commit()
    db.refresh(db_booking)
    return db_booking

@router.get("", response_model=List[Booking])
def read_bookings(
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_identity),
):
    query = db.query(EquipmentBooking)
    if current_user.role == UserRole.equipment_provider:
        # Providers see the bookings made on their own equipment
        query = query.join(Equipment, EquipmentBooking.equipment_id == Equipment.id).filter(
            Equipment.owner_id == current_user.user_id
        )
    else:
        query = query.filter(EquipmentBooking.renter_id == current_user.user_id)

    return query.order_by(EquipmentBooking.created_at.desc()).all()
