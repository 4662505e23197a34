from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime

class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

class RequestSchema(BaseModel):
    # Clients send camelCase; snake_case is accepted as well
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class TimestampSchema(BaseSchema):
    id: str
    created_at: datetime
    updated_at: datetime
