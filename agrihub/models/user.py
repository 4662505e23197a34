import enum

from sqlalchemy import Column, String, Boolean, Enum
from agrihub.models.base import BaseModel


class UserRole(str, enum.Enum):
    farmer = "farmer"
    equipment_provider = "equipment_provider"
    input_supplier = "input_supplier"
    transport_provider = "transport_provider"
    consumer = "consumer"
    admin = "admin"


class User(BaseModel):
    __tablename__ = "users"
    
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True)
    phone = Column(String(20), unique=True, index=True, nullable=False)
    password_hash = Column(String(255))
    role = Column(Enum(*[role.value for role in UserRole], name='user_roles'), nullable=False)
    location = Column(String(255))
    is_verified = Column(Boolean, default=False)
    is_active = Column(Boolean, default=True)
