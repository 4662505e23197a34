from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from agrihub.auth.security import get_current_identity, is_transport_provider
from agrihub.core.errors import NotFoundError, ValidationError
from agrihub.db.session import get_db
from agrihub.models.transport import TransportRequest
from agrihub.models.user import User
from agrihub.schemas.pagination import PaginatedResponse, Pagination
from agrihub.schemas.transport import (
    TransportRequest as TransportRequestSchema,
    TransportRequestCreate,
    TransportRequestListing,
)
from agrihub.schemas.user import TokenData

router = APIRouter()

@router.post("", response_model=TransportRequestSchema, status_code=status.HTTP_201_CREATED)
def create_transport_request(
    request: TransportRequestCreate,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(get_current_identity),
):
    db_request = TransportRequest(**request.model_dump(), requester_id=current_user.user_id)
    db.add(db_request)
    db.commit()
    db.refresh(db_request)
    return db_request

@router.get("", response_model=PaginatedResponse[TransportRequestListing])
def read_transport_requests(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    pickup_location: Optional[str] = None,
    delivery_location: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = (
        db.query(TransportRequest, User)
        .join(User, TransportRequest.requester_id == User.id)
        .filter(TransportRequest.status == "open")
    )

    if pickup_location:
        query = query.filter(TransportRequest.pickup_location.ilike(f"%{pickup_location}%"))
    if delivery_location:
        query = query.filter(TransportRequest.delivery_location.ilike(f"%{delivery_location}%"))

    total_count = query.count()
    rows = (
        query.order_by(TransportRequest.created_at.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    items = [
        TransportRequestListing(
            **TransportRequestSchema.model_validate(transport_request).model_dump(),
            requester_name=requester.name,
            requester_phone=requester.phone,
        )
        for transport_request, requester in rows
    ]
    return PaginatedResponse[TransportRequestListing](
        items=items,
        pagination=Pagination(page=page, limit=limit, total=total_count),
    )

@router.post("/{request_id}/accept", response_model=TransportRequestSchema)
def accept_transport_request(
    request_id: str,
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(is_transport_provider),
):
    db_request = db.query(TransportRequest).filter(TransportRequest.id == request_id).first()
    if db_request is None:
        raise NotFoundError("Transport request not found")
    if db_request.status != "open":
        raise ValidationError("Transport request is no longer open")

    db_request.provider_id = current_user.user_id
    db_request.status = "accepted"
    db.add(db_request)
    db.commit()
    db.refresh(db_request)
    return db_request
