from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.models.ids import new_object_id, utcnow


class User(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=32)
    first_name: str
    last_name: str
    email: str = Field(index=True, unique=True)
    password: str
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    last_login: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
