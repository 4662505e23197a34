from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from agrihub.auth.security import is_equipment_provider
from agrihub.core.errors import NotFoundError
from agrihub.db.session import get_db
from agrihub.models.equipment import Equipment
from agrihub.models.user import User
from agrihub.schemas.equipment import (
    Equipment as EquipmentSchema,
    EquipmentCreate,
    EquipmentListing,
)
from agrihub.schemas.pagination import PaginatedResponse, Pagination
from agrihub.schemas.user import TokenData

router = APIRouter()

@router.get("", response_model=PaginatedResponse[EquipmentListing])
def read_equipment(
    page: int = Query(1, ge=1, description="Page number starting from 1"),
    limit: int = Query(10, ge=1, le=100, description="Items per page (1-100)"),
    type: Optional[str] = Query(None, description="Filter by equipment type"),
    location: Optional[str] = Query(None, description="Search in equipment location"),
    db: Session = Depends(get_db),
):
    """
    Available equipment with the owner's contact details.

    - **type**: exact equipment type (tractor, harvester, ...)
    - **location**: case-insensitive substring of the listing location
    """
    query = (
        db.query(Equipment, User)
        .join(User, Equipment.owner_id == User.id)
        .filter(Equipment.availability_status == "available")
    )

    if type:
        query = query.filter(Equipment.type == type)
    if location:
        query = query.filter(Equipment.location.ilike(f"%{location}%"))

    total_count = query.count()
    rows = (
        query.order_by(Equipment.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    items = [
        EquipmentListing(
            **EquipmentSchema.model_validate(equipment).model_dump(),
            owner_name=owner.name,
            owner_phone=owner.phone,
            owner_location=owner.location,
        )
        for equipment, owner in rows
    ]
    return PaginatedResponse[EquipmentListing](
        items=items,
        pagination=Pagination(page=page, limit=limit, total=total_count),
    )

@router.get("/{equipment_id}", response_model=EquipmentSchema)
def read_equipment_item(equipment_id: str, db: Session = Depends(get_db)):
    db_equipment = db.query(Equipment).filter(Equipment.id == equipment_id).first()
    if db_equipment is None:
        raise NotFoundError("Equipment not found")
    return db_equipment

@router.post("", response_model=EquipmentSchema, status_code=status.HTTP_201_CREATED)
def create_equipment(
    equipment: EquipmentCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(is_equipment_provider),
):
    db_equipment = Equipment(**equipment.model_dump(), owner_id=current_user.user_id)
    db.add(db_equipment)
    db.commit()
    db.refresh(db_equipment)
    return db_equipment
