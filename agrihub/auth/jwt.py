import logging

from fastapi import APIRouter, Depends
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from agrihub.auth.otp import OTPStore, get_otp_store
from agrihub.auth.security import create_user_token
from agrihub.core.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError
from agrihub.db.session import get_db
from agrihub.models.user import User
from agrihub.schemas.user import (
    OTPRequest,
    OTPSent,
    RegisterRequest,
    UserPublic,
    UserWithToken,
    VerifyOTPRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

# REGISTER: stage the new user behind an OTP challenge
@router.post("/register", response_model=OTPSent)
def register(
    user_data: RegisterRequest,
    db: Session = Depends(get_db),
    otp_store: OTPStore = Depends(get_otp_store),
):
    conditions = [User.phone == user_data.phone]
    if user_data.email:
        conditions.append(User.email == user_data.email)
    existing_user = db.query(User.id).filter(or_(*conditions)).first()
    if existing_user:
        raise ConflictError("User already exists with this phone or email")

    otp_store.issue(user_data.phone, pending_user=user_data.model_dump(mode="json"))
    logger.info(f"Registration OTP generated for mobile: {user_data.phone}")
    return OTPSent(phone=user_data.phone)

# LOGIN: OTP for an existing account, nothing is checked until verification
@router.post("/request-otp", response_model=OTPSent)
def request_otp(
    request: OTPRequest,
    otp_store: OTPStore = Depends(get_otp_store),
):
    otp_store.issue(request.phone)
    return OTPSent(phone=request.phone)

# VERIFY: consume the OTP, create the user if registering, return user + token
@router.post("/verify-otp", response_model=UserWithToken)
def verify_otp(
    request: VerifyOTPRequest,
    db: Session = Depends(get_db),
    otp_store: OTPStore = Depends(get_otp_store),
):
    record = otp_store.get(request.phone)
    if record is None:
        raise ValidationError("OTP expired or invalid")
    if not record.matches(request.otp):
        raise ValidationError("Invalid OTP")

    if record.pending_user is not None:
        pending = record.pending_user
        user = User(
            name=pending["name"],
            email=pending.get("email"),
            phone=request.phone,
            role=pending["role"],
            location=pending.get("location"),
            is_verified=True,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ConflictError("User already exists with this phone or email")
        db.refresh(user)
        logger.info(f"New user registered with mobile: {user.phone}")
    else:
        user = db.query(User).filter(User.phone == request.phone).first()
        if user is None:
            raise NotFoundError("User not found", status_code=400)
        if not user.is_active:
            raise ForbiddenError("Inactive user")

    token = create_user_token(user)
    otp_store.discard(request.phone)

    return UserWithToken(token=token, user=UserPublic.model_validate(user))
