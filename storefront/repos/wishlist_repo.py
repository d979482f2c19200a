# storefront/repos/wishlist_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from storefront.data.models.wishlist_item import WishlistItemModel
from storefront.data.upsert import dialect_insert


class WishlistRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_wishlist_items(self, user_id: str) -> list[WishlistItemModel]:
        stmt = (
            select(WishlistItemModel)
            .where(WishlistItemModel.user_id == user_id)
            .order_by(WishlistItemModel.created_at.desc(), WishlistItemModel.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def insert_if_absent(self, user_id: str, product_id: int) -> int | None:
        """Returns the new row id, None when (user, product) is already saved."""
        stmt = (
            dialect_insert(self.db, WishlistItemModel)
            .values(user_id=user_id, product_id=product_id)
            .on_conflict_do_nothing(
                index_elements=[WishlistItemModel.user_id, WishlistItemModel.product_id]
            )
            .returning(WishlistItemModel.id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def delete_wishlist_item(self, item_id: int, user_id: str) -> int:
        stmt = (
            delete(WishlistItemModel)
            .where(WishlistItemModel.id == item_id, WishlistItemModel.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        return self.db.execute(stmt).rowcount

    def commit(self):
        self.db.commit()
