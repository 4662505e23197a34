import uuid

from sqlalchemy import Column, String, TIMESTAMP
from sqlalchemy.sql import func
from agrihub.db.session import Base


def generate_id() -> str:
    return str(uuid.uuid4())


class BaseModel(Base):
    __abstract__ = True
    
    id = Column(String(36), primary_key=True, index=True, default=generate_id)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
