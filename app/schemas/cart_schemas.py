from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models.ids import MAX_INTEGER, MIN_INTEGER


class CartAddRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[int] = Field(None, alias="productId")
    quantity: int = 1

    @model_validator(mode="after")
    def validate_fields(self):
        if self.product_id is None:
            raise ValueError("Product ID is required")
        if not MIN_INTEGER <= self.product_id <= MAX_INTEGER:
            raise ValueError("Product ID is out of range")
        if not 1 <= self.quantity <= MAX_INTEGER:
            raise ValueError("Quantity must be a positive integer")
        return self


class CartAddResponse(BaseModel):
    message: str
