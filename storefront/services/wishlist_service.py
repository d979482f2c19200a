# storefront/services/wishlist_service.py
from sqlalchemy.orm import Session

from storefront.data.models.wishlist_item import WishlistItemModel
from storefront.domain.errors import NotFoundError, ConflictError
from storefront.repos.product_repo import ProductRepo
from storefront.repos.wishlist_repo import WishlistRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class WishlistService:
    def __init__(self, db: Session):
        self.repo = WishlistRepo(db)
        self.products = ProductRepo(db)

    def get_wishlist(self, user_id: str) -> list[WishlistItemModel]:
        return self.repo.get_wishlist_items(user_id)

    def add_product(self, user_id: str, product_id: int) -> int:
        if not self.products.get_product(product_id):
            raise NotFoundError("Product not found")

        item_id = self.repo.insert_if_absent(user_id, product_id)
        self.repo.commit()

        #duplicates are rejected, never merged
        if item_id is None:
            logger.warning(f"Product {product_id} already in wishlist of {user_id}")
            raise ConflictError("Product already in wishlist")

        logger.info(f"Product {product_id} added to wishlist of {user_id} (item {item_id})")
        return item_id

    def remove_product(self, user_id: str, item_id: int) -> None:
        rowcount = self.repo.delete_wishlist_item(item_id, user_id)
        self.repo.commit()

        if rowcount == 0:
            raise NotFoundError("Wishlist item not found")

        logger.info(f"Wishlist item {item_id} removed for {user_id}")
