from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from agrihub.auth.security import get_current_user, is_admin
from agrihub.db.session import get_db
from agrihub.models.user import User as UserModel
from agrihub.schemas.pagination import PaginatedResponse, Pagination
from agrihub.schemas.user import TokenData, User as UserSchema

router = APIRouter()

# --------------------------------------------------------------------
# Get current user (any logged in user) -> GET /users/me
# --------------------------------------------------------------------
@router.get("/me", response_model=UserSchema)
def read_user_me(current_user: UserModel = Depends(get_current_user)):
    return UserSchema.model_validate(current_user)

# --------------------------------------------------------------------
# Get all users (admin only) -> GET /users
# --------------------------------------------------------------------
@router.get("", response_model=PaginatedResponse[UserSchema])
def read_users(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: TokenData = Depends(is_admin)
):
    query = db.query(UserModel)
    total_count = query.count()
    users = query.order_by(UserModel.created_at.desc()).offset((page - 1) * limit).limit(limit).all()
    return PaginatedResponse[UserSchema](
        items=[UserSchema.model_validate(u) for u in users],
        pagination=Pagination(page=page, limit=limit, total=total_count),
    )
