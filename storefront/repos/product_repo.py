# storefront/repos/product_repo.py
from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def _newest_first(self, stmt):
        return stmt.order_by(ProductModel.created_at.desc(), ProductModel.id.desc())

    def list_products(self) -> list[ProductModel]:
        stmt = self._newest_first(select(ProductModel))
        return list(self.db.execute(stmt).scalars().all())

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def search(self, query: str | None, category: str | None) -> list[ProductModel]:
        stmt = select(ProductModel)

        if query:
            stmt = stmt.where(
                or_(
                    ProductModel.name.icontains(query, autoescape=True),
                    ProductModel.description.icontains(query, autoescape=True),
                    ProductModel.category.icontains(query, autoescape=True),
                )
            )

        if category:
            stmt = stmt.where(ProductModel.category == category)

        return list(self.db.execute(self._newest_first(stmt)).scalars().all())

    def random_in_category(self, category: str, exclude_id: int, limit: int) -> list[ProductModel]:
        stmt = (
            select(ProductModel)
            .where(ProductModel.category == category, ProductModel.id != exclude_id)
            .order_by(func.random())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self.db.execute(select(func.count(ProductModel.id))).scalar_one()

    def add_all(self, products: list[ProductModel]) -> None:
        self.db.add_all(products)
        self.db.commit()
