# storefront/api/routers/reviews.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.data.database import get_db
from storefront.domain.errors import StorefrontError
from storefront.domain.schemas import ReviewIn, ReviewOut, CreatedOut
from storefront.services.review_service import ReviewService

router = APIRouter(prefix="/api/products", tags=["reviews"])


@router.get("/{product_id}/reviews", response_model=List[ReviewOut])
def list_reviews(product_id: int, db: Session = Depends(get_db)):
    return ReviewService(db).list_reviews(product_id)


@router.post("/{product_id}/reviews", response_model=CreatedOut, status_code=201)
def add_review(
    product_id: int,
    payload: ReviewIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = ReviewService(db)
    try:
        review_id = svc.add_review(
            user_id=user_id,
            product_id=product_id,
            rating=payload.rating,
            title=payload.title,
            comment=payload.comment,
        )
    except StorefrontError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {"message": "Review added successfully", "id": review_id}
