from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from agrihub.core.config import settings
from agrihub.core.errors import ForbiddenError, NotFoundError, UnauthorizedError
from agrihub.db.session import get_db
from agrihub.models.user import User as UserModel, UserRole
from agrihub.schemas.user import TokenData

# Configuration
SECRET_KEY = settings.jwt_secret
ALGORITHM = settings.jwt_algorithm
ACCESS_TOKEN_EXPIRE_DAYS = settings.access_token_expire_days

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def create_user_token(user: UserModel) -> str:
    return create_access_token({"userId": user.id, "phone": user.phone, "role": user.role})


def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        return TokenData(
            user_id=payload.get("userId"),
            phone=payload.get("phone"),
            role=payload.get("role"),
        )
    except (JWTError, PydanticValidationError):
        raise ForbiddenError("Invalid or expired token")


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenData:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Access token required")
    return decode_access_token(credentials.credentials)


def require_roles(*roles: UserRole):
    allowed = set(roles)

    def check_role(identity: TokenData = Depends(get_current_identity)) -> TokenData:
        if identity.role not in allowed:
            raise ForbiddenError("Insufficient permissions")
        return identity

    return check_role


is_farmer = require_roles(UserRole.farmer)
is_equipment_provider = require_roles(UserRole.equipment_provider)
is_input_supplier = require_roles(UserRole.input_supplier)
is_transport_provider = require_roles(UserRole.transport_provider)
is_admin = require_roles(UserRole.admin)


def get_current_user(
    identity: TokenData = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> UserModel:
    user = db.query(UserModel).filter(UserModel.id == identity.user_id).first()
    if user is None:
        raise NotFoundError("User not found")
    if not user.is_active:
        raise ForbiddenError("Inactive user")
    return user
