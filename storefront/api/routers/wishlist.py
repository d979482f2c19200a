# storefront/api/routers/wishlist.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.data.database import get_db
from storefront.domain.errors import StorefrontError
from storefront.domain.schemas import AddToWishlistIn, WishlistItemOut, CreatedOut, MessageOut
from storefront.services.wishlist_service import WishlistService

router = APIRouter(prefix="/api/wishlist", tags=["wishlist"])


@router.get("", response_model=List[WishlistItemOut])
def get_wishlist(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return WishlistService(db).get_wishlist(user_id)


@router.post("", response_model=CreatedOut, status_code=201)
def add_item(
    payload: AddToWishlistIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = WishlistService(db)
    try:
        item_id = svc.add_product(user_id, payload.product_id)
    except StorefrontError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Added to wishlist", "id": item_id}


@router.delete("/{item_id}", response_model=MessageOut)
def remove_item(
    item_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = WishlistService(db)
    try:
        svc.remove_product(user_id, item_id)
    except StorefrontError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Removed from wishlist"}
