from typing import Optional
from pydantic import BaseModel, EmailStr, Field
from agrihub.models.user import UserRole
from agrihub.schemas.base import BaseSchema, RequestSchema, TimestampSchema

class RegisterRequest(RequestSchema):
    name: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    role: UserRole
    email: Optional[EmailStr] = None
    location: Optional[str] = None

class OTPRequest(RequestSchema):
    phone: str = Field(min_length=1)

class VerifyOTPRequest(RequestSchema):
    phone: str = Field(min_length=1)
    otp: str = Field(min_length=1)

class OTPSent(BaseModel):
    message: str = "OTP sent successfully"
    phone: str

class UserPublic(BaseSchema):
    id: str
    name: str
    email: Optional[str] = None
    phone: str
    role: UserRole
    location: Optional[str] = None

class User(TimestampSchema, UserPublic):
    is_verified: bool
    is_active: bool

class UserWithToken(BaseModel):
    token: str
    user: UserPublic

class TokenData(BaseModel):
    user_id: str
    phone: str
    role: UserRole
