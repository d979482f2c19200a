# storefront/services/catalog_service.py
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.errors import NotFoundError, InvalidRequestError
from storefront.repos.product_repo import ProductRepo
from storefront.utils.settings import SUGGESTIONS_LIMIT
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

#category value the client sends for "no category filter"
ALL_CATEGORIES = "All"


class CatalogService:
    """Read side of the catalog, products are written out of band."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self) -> list[ProductModel]:
        return self.repo.list_products()

    def get_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def search_products(self, query: str | None = None, category: str | None = None) -> list[ProductModel]:
        if not query and not category:
            raise InvalidRequestError("Search query or category required")

        if category == ALL_CATEGORIES:
            category = None

        logger.info(f"Search products q={query!r} category={category!r}")
        return self.repo.search(query, category)

    def suggest_products(self, product_id: int, limit: int = SUGGESTIONS_LIMIT) -> list[ProductModel]:
        """Random sample of other products from the same category."""
        product = self.get_product(product_id)
        return self.repo.random_in_category(product.category, product.id, limit)
