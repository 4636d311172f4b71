from sqlmodel import Session, func, select

from app.models.product import Product
from app.models.user import User

SERVER_STATUS = "Running"


def count_products(session: Session) -> int:
    return session.exec(select(func.count()).select_from(Product)).one()


def count_users(session: Session) -> int:
    return session.exec(select(func.count()).select_from(User)).one()


def get_stats(session: Session) -> dict:
    return {
        "users": count_users(session),
        "products": count_products(session),
        "serverStatus": SERVER_STATUS,
    }
