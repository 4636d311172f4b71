import logging

from sqlalchemy import update
from sqlmodel import Session

from app.exceptions import InsufficientInventory, NotFound
from app.models.cart import CartItem
from app.models.ids import utcnow
from app.models.product import Product
from app.services.catalog_service import find_by_legacy_id

logger = logging.getLogger(__name__)


def reserve_inventory(session: Session, product_id: int, quantity: int) -> bool:
    """Decrement stock only if enough is left. Returns False when it is not."""
    result = session.execute(
        update(Product)
        .where(Product.id == product_id, Product.available_inventory >= quantity)
        .values(available_inventory=Product.available_inventory - quantity)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def add_to_cart(session: Session, user_id: str, product_id: int, quantity: int = 1) -> CartItem:
    """Record a cart entry and take its quantity out of stock in one transaction."""
    product = find_by_legacy_id(session, product_id)
    if not product:
        raise NotFound("Product not found")

    try:
        if not reserve_inventory(session, product_id, quantity):
            logger.info(
                f"Insufficient inventory for product {product_id}: "
                f"requested {quantity}, available {product.available_inventory}"
            )
            raise InsufficientInventory()

        item = CartItem(
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            added_at=utcnow(),
        )
        session.add(item)
        session.commit()
    except Exception:
        session.rollback()
        raise

    session.refresh(item)
    logger.info(f"User {user_id} added {quantity} x product {product_id} to cart")
    return item
