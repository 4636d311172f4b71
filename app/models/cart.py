from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.models.ids import new_object_id, utcnow


class CartItem(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=32)
    user_id: str = Field(foreign_key="user.id", index=True)
    product_id: int = Field(foreign_key="product.id", index=True)
    quantity: int = 1
    added_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
