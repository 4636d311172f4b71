from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.database import get_session
from app.schemas.product_schemas import product_document
from app.services.catalog_service import get_product, list_products, search_products

router = APIRouter()


@router.get("", summary="List every product")
def all_products(session: Session = Depends(get_session)):
    return [product_document(p) for p in list_products(session)]


# declared before /{product_id} so "search" is not taken for an id
@router.get("/search", summary="Search products by title, author, genre or description")
def search(
    q: Optional[str] = Query(None, description="Search term"),
    session: Session = Depends(get_session),
):
    return [product_document(p) for p in search_products(session, q)]


@router.get("/{product_id}", summary="Fetch a product by legacy id or store id")
def product_detail(product_id: str, session: Session = Depends(get_session)):
    return product_document(get_product(session, product_id))
