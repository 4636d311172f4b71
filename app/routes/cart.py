from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.database import get_session
from app.schemas.cart_schemas import CartAddRequest, CartAddResponse
from app.services.cart_service import add_to_cart
from app.utils.token import TokenIdentity, get_current_user

router = APIRouter()


# Add to Cart

@router.post("/add", response_model=CartAddResponse)
def add(
    data: CartAddRequest,
    current_user: TokenIdentity = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    add_to_cart(session, current_user.id, data.product_id, data.quantity)
    return CartAddResponse(message="Product added to cart successfully")
