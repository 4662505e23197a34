from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from agrihub.auth.security import is_farmer
from agrihub.core.errors import NotFoundError
from agrihub.db.session import get_db
from agrihub.models.produce import Produce
from agrihub.models.user import User
from agrihub.schemas.pagination import PaginatedResponse, Pagination
from agrihub.schemas.produce import Produce as ProduceSchema, ProduceCreate, ProduceListing
from agrihub.schemas.user import TokenData

router = APIRouter()

@router.post("", response_model=ProduceSchema, status_code=status.HTTP_201_CREATED)
def create_produce(
    produce: ProduceCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(is_farmer),
):
    db_produce = Produce(**produce.model_dump(), farmer_id=current_user.user_id)
    db.add(db_produce)
    db.commit()
    db.refresh(db_produce)
    return db_produce

@router.get("", response_model=PaginatedResponse[ProduceListing])
def read_produce(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    category: Optional[str] = None,
    organic: Optional[bool] = None,
    db: Session = Depends(get_db),
):
    # Sold-out produce is never listed
    query = (
        db.query(Produce, User)
        .join(User, Produce.farmer_id == User.id)
        .filter(Produce.stock_kg > 0)
    )

    if category:
        query = query.filter(Produce.category == category)
    if organic is not None:
        query = query.filter(Produce.organic == organic)

    total_count = query.count()
    rows = (
        query.order_by(Produce.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    items = [
        ProduceListing(
            **ProduceSchema.model_validate(produce).model_dump(),
            farmer_name=farmer.name,
            farmer_phone=farmer.phone,
            farmer_location=farmer.location,
        )
        for produce, farmer in rows
    ]
    return PaginatedResponse[ProduceListing](
        items=items,
        pagination=Pagination(page=page, limit=limit, total=total_count),
    )

@router.get("/{produce_id}", response_model=ProduceSchema)
def read_produce_item(produce_id: str, db: Session = Depends(get_db)):
    db_produce = db.query(Produce).filter(Produce.id == produce_id).first()
    if db_produce is None:
        raise NotFoundError("Produce not found")
    return db_produce
