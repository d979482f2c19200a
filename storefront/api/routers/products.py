# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.errors import StorefrontError
from storefront.domain.schemas import ProductOut
from storefront.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/products", tags=["products"])


def get_service(db: Session):
    return CatalogService(db)


@router.get("", response_model=List[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return get_service(db).list_products()


#must be registered before /{product_id}
@router.get("/search", response_model=List[ProductOut])
def search_products(
    q: str | None = Query(default=None),
    category: str | None = Query(default=None),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.search_products(q, category)
    except StorefrontError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    svc = get_service(db)
    try:
        return svc.get_product(product_id)
    except StorefrontError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/{product_id}/suggestions", response_model=List[ProductOut])
def suggest_products(product_id: int, db: Session = Depends(get_db)):
    """Up to 8 other products of the same category, random order."""
    svc = get_service(db)
    try:
        return svc.suggest_products(product_id)
    except StorefrontError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
