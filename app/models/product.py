from typing import Optional

from sqlalchemy import CheckConstraint
from sqlmodel import Field, SQLModel

from app.models.ids import new_object_id


class Product(SQLModel, table=True):
    __table_args__ = (
        CheckConstraint("available_inventory >= 0", name="ck_product_inventory_non_negative"),
    )

    # store-native identifier, exposed as "_id"
    object_id: str = Field(default_factory=new_object_id, primary_key=True, max_length=32)
    # legacy catalogue number, exposed as "id"
    id: int = Field(index=True, unique=True)

    title: str
    author: str
    genre: str
    price: float
    image: Optional[str] = None
    available_inventory: int = Field(default=0)
    description: Optional[str] = None
