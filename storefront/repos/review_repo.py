# storefront/repos/review_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.review import ReviewModel
from storefront.data.models.user_profile import UserProfileModel
from storefront.data.upsert import dialect_insert


class ReviewRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_reviews(self, product_id: int):
        """Reviews of a product, newest first, with the reviewer's name from the profile (LEFT JOIN)."""
        stmt = (
            select(ReviewModel, UserProfileModel.first_name, UserProfileModel.last_name)
            .outerjoin(UserProfileModel, UserProfileModel.user_id == ReviewModel.user_id)
            .where(ReviewModel.product_id == product_id)
            .order_by(ReviewModel.created_at.desc(), ReviewModel.id.desc())
        )
        return self.db.execute(stmt).all()

    def insert_if_absent(self, user_id: str, product_id: int, rating: int,
                         title: str | None, comment: str | None) -> int | None:
        stmt = (
            dialect_insert(self.db, ReviewModel)
            .values(
                user_id=user_id,
                product_id=product_id,
                rating=rating,
                title=title,
                comment=comment,
            )
            .on_conflict_do_nothing(index_elements=[ReviewModel.user_id, ReviewModel.product_id])
            .returning(ReviewModel.id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def commit(self):
        self.db.commit()
