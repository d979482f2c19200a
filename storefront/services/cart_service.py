# storefront/services/cart_service.py
from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import NotFoundError, InsufficientStockError, InvalidRequestError
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use cases of the cart, one row per (user, product)
    commands (add, update, remove) modify state
    query (get) read only
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    #query
    def get_cart(self, user_id: str) -> list[CartItemModel]:
        #product is joined live, price/name are never frozen in the cart
        return self.repo.get_cart_items(user_id)

    #commands
    def add_product(self, user_id: str, product_id: int, quantity: int) -> tuple[int, bool]:
        """
        Adds product to the cart or merges into the existing row.

        Returns (cart_item_id, created).
        """
        if quantity < 1:
            raise InvalidRequestError("Quantity must be at least 1")

        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")

        if product.stock < quantity:
            logger.warning(
                f"Not enough stock for product {product_id}: requested {quantity}, stock {product.stock}"
            )
            raise InsufficientStockError("Not enough stock")

        try:
            row = self.repo.upsert_cart_item(user_id, product_id, quantity)
        except Exception as e:
            logger.error(f"Error while adding product {product_id} to cart of {user_id}: {e}")
            self.repo.rollback()
            raise

        if row is None:
            #row exists and existing + quantity > stock, nothing was written
            self.repo.rollback()
            logger.warning(
                f"Merge refused for user {user_id} product {product_id}: total would exceed stock {product.stock}"
            )
            raise InsufficientStockError("Not enough stock")

        self.repo.commit()

        #merged quantity is always > requested, so equal means a fresh insert
        created = row.quantity == quantity

        if created:
            logger.info(f"Added product {product_id} x{quantity} to cart of {user_id} (item {row.id})")
        else:
            logger.info(f"Product {product_id} already in cart of {user_id}, quantity now {row.quantity}")

        return row.id, created

    def update_quantity(self, user_id: str, item_id: int, quantity: int) -> bool:
        """
        Sets the quantity of a cart item, 0 removes it.

        Returns True when the item was removed.
        """
        if quantity < 0:
            raise InvalidRequestError("Quantity must not be negative")

        if quantity == 0:
            #idempotent, scoped to user so other users rows never match
            deleted = self.repo.delete_cart_item(item_id, user_id)
            self.repo.commit()
            logger.info(f"Cart item {item_id} of {user_id} set to 0, removed rows: {deleted}")
            return True

        item = self.repo.get_cart_item(item_id, user_id)
        if not item:
            raise NotFoundError("Cart item not found")

        rowcount = self.repo.update_quantity(item_id, user_id, item.product_id, quantity)

        if rowcount == 0:
            self.repo.rollback()
            logger.warning(f"Not enough stock to set cart item {item_id} to {quantity}")
            raise InsufficientStockError("Not enough stock")

        self.repo.commit()
        logger.info(f"Cart item {item_id} of {user_id} quantity set to {quantity}")
        return False

    def remove_product(self, user_id: str, item_id: int) -> None:
        rowcount = self.repo.delete_cart_item(item_id, user_id)

        if rowcount == 0:
            self.repo.rollback()
            raise NotFoundError("Cart item not found")

        self.repo.commit()
        logger.info(f"Cart item {item_id} removed from cart of {user_id}")
