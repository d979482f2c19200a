# storefront/api/routers/cart.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.data.database import get_db
from storefront.domain.errors import StorefrontError
from storefront.domain.schemas import AddToCartIn, UpdateQuantityIn, CartItemOut, CreatedOut, MessageOut
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=List[CartItemOut])
def get_cart(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return get_service(db).get_cart(user_id)


@router.post("", response_model=CreatedOut, status_code=201)
def add_item(
    payload: AddToCartIn,
    response: Response,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        item_id, created = svc.add_product(
            user_id=user_id,
            product_id=payload.product_id,
            quantity=payload.quantity,
        )
    except StorefrontError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    if not created:
        response.status_code = 200
        return {"message": "Cart updated", "id": item_id}
    return {"message": "Item added to cart", "id": item_id}


@router.patch("/{item_id}", response_model=MessageOut)
def update_item(
    item_id: int,
    payload: UpdateQuantityIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        removed = svc.update_quantity(user_id, item_id, payload.quantity)
    except StorefrontError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    if removed:
        return {"message": "Item removed from cart"}
    return {"message": "Cart updated"}


@router.delete("/{item_id}", response_model=MessageOut)
def remove_item(
    item_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        svc.remove_product(user_id, item_id)
    except StorefrontError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Item removed from cart"}
