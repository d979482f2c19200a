# storefront/services/review_service.py
from sqlalchemy.orm import Session

from storefront.domain.errors import NotFoundError, ConflictError, InvalidRequestError
from storefront.repos.product_repo import ProductRepo
from storefront.repos.review_repo import ReviewRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5


class ReviewService:
    def __init__(self, db: Session):
        self.repo = ReviewRepo(db)
        self.products = ProductRepo(db)

    def list_reviews(self, product_id: int) -> list[dict]:
        """
        Reviews of a product, newest first.
        first_name/last_name come from the reviewer's profile and are None without one.
        """
        rows = self.repo.get_reviews(product_id)
        return [
            {
                "id": review.id,
                "user_id": review.user_id,
                "product_id": review.product_id,
                "rating": review.rating,
                "title": review.title,
                "comment": review.comment,
                "first_name": first_name,
                "last_name": last_name,
                "created_at": review.created_at,
                "updated_at": review.updated_at,
            }
            for review, first_name, last_name in rows
        ]

    def add_review(
        self,
        user_id: str,
        product_id: int,
        rating: int,
        title: str | None = None,
        comment: str | None = None,
    ) -> int:
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidRequestError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

        if not self.products.get_product(product_id):
            raise NotFoundError("Product not found")

        #empty strings are stored as NULL
        review_id = self.repo.insert_if_absent(user_id, product_id, rating, title or None, comment or None)
        self.repo.commit()

        if review_id is None:
            logger.warning(f"User {user_id} already reviewed product {product_id}")
            raise ConflictError("You have already reviewed this product")

        logger.info(f"Review {review_id} ({rating}/5) added by {user_id} for product {product_id}")
        return review_id
