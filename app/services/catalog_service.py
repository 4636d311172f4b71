from typing import List, Optional

from sqlmodel import Session, or_, select

from app.exceptions import InvalidInput, NotFound
from app.models.ids import MAX_INTEGER, MIN_INTEGER, parse_object_id
from app.models.product import Product

LIKE_ESCAPE = "\\"


def list_products(session: Session) -> List[Product]:
    return session.exec(select(Product).order_by(Product.id)).all()


def parse_legacy_id(identifier: str) -> Optional[int]:
    try:
        value = int(identifier.strip())
    except (ValueError, AttributeError):
        return None
    # outside the column range it cannot match a stored product
    if not MIN_INTEGER <= value <= MAX_INTEGER:
        return None
    return value


def find_by_legacy_id(session: Session, legacy_id: int) -> Optional[Product]:
    return session.exec(select(Product).where(Product.id == legacy_id)).first()


def get_product(session: Session, identifier: str) -> Product:
    """Look a product up by legacy number first, then by store identifier."""
    product = None

    legacy_id = parse_legacy_id(identifier)
    if legacy_id is not None:
        product = find_by_legacy_id(session, legacy_id)

    if product is None:
        object_id = parse_object_id(identifier)
        if object_id is not None:
            product = session.get(Product, object_id)

    if product is None:
        raise NotFound("Product not found")
    return product


def escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def search_products(session: Session, query: Optional[str]) -> List[Product]:
    if not query or not query.strip():
        raise InvalidInput("Search query is required")

    like = f"%{escape_like(query)}%"
    statement = (
        select(Product)
        .where(
            or_(
                Product.title.ilike(like, escape=LIKE_ESCAPE),
                Product.author.ilike(like, escape=LIKE_ESCAPE),
                Product.genre.ilike(like, escape=LIKE_ESCAPE),
                Product.description.ilike(like, escape=LIKE_ESCAPE),
            )
        )
        .order_by(Product.id)
    )
    return session.exec(statement).all()
