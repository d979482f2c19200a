# storefront/repos/cart_repo.py
from sqlalchemy import select, update, delete, func
from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel
from storefront.data.upsert import dialect_insert


def _stock_of(product_id):
    return (
        select(ProductModel.stock)
        .where(ProductModel.id == product_id)
        .scalar_subquery()
    )


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_items(self, user_id: str) -> list[CartItemModel]:
        stmt = (
            select(CartItemModel)
            .where(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.created_at.desc(), CartItemModel.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_cart_item(self, item_id: int, user_id: str) -> CartItemModel | None:
        stmt = select(CartItemModel).where(
            CartItemModel.id == item_id,
            CartItemModel.user_id == user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def upsert_cart_item(self, user_id: str, product_id: int, quantity: int):
        """
        INSERT ... ON CONFLICT (user_id, product_id) DO UPDATE
        quantity = existing + requested, only while the total still fits in stock.
        Returns (id, quantity) of the written row or None when the merge was refused.
        """
        stmt = dialect_insert(self.db, CartItemModel).values(
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
        )
        merged = CartItemModel.quantity + stmt.excluded.quantity

        stmt = stmt.on_conflict_do_update(
            index_elements=[CartItemModel.user_id, CartItemModel.product_id],
            set_={"quantity": merged, "updated_at": func.now()},
            where=merged <= _stock_of(product_id),
        ).returning(CartItemModel.id, CartItemModel.quantity)

        return self.db.execute(stmt).first()

    def update_quantity(self, item_id: int, user_id: str, product_id: int, quantity: int) -> int:
        #stock condition lives in the same UPDATE
        stmt = (
            update(CartItemModel)
            .where(
                CartItemModel.id == item_id,
                CartItemModel.user_id == user_id,
                _stock_of(product_id) >= quantity,
            )
            .values(quantity=quantity, updated_at=func.now())
            .execution_options(synchronize_session=False)
        )
        return self.db.execute(stmt).rowcount

    def delete_cart_item(self, item_id: int, user_id: str) -> int:
        stmt = (
            delete(CartItemModel)
            .where(CartItemModel.id == item_id, CartItemModel.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        return self.db.execute(stmt).rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
