from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker

from storefront.data.database import Base
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel
from storefront.domain.errors import InsufficientStockError
from storefront.services.cart_service import CartService

THREADS = 20


@pytest.fixture
def file_sessions(tmp_path):
    #separate connections per thread, so a real file instead of StaticPool
    engine = create_engine(
        f"sqlite:///{tmp_path / 'cart.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    with factory() as db:
        db.add_all([
            ProductModel(id=1, name="Plenty", description="", price=Decimal("1.00"),
                         image="", category="Test", stock=1000),
            ProductModel(id=2, name="Scarce", description="", price=Decimal("1.00"),
                         image="", category="Test", stock=5),
        ])
        db.commit()

    yield factory
    engine.dispose()


def add_one(factory, user_id, product_id):
    db = factory()
    try:
        return CartService(db).add_product(user_id, product_id, 1)
    except InsufficientStockError:
        return None
    finally:
        db.close()


def run_concurrently(factory, product_id):
    with ThreadPoolExecutor(max_workers=THREADS) as pool:
        futures = [pool.submit(add_one, factory, "alice", product_id) for _ in range(THREADS)]
        return [f.result() for f in futures]


def cart_rows(factory):
    with factory() as db:
        rows = db.execute(select(CartItemModel).where(CartItemModel.user_id == "alice")).scalars().all()
        return [(r.product_id, r.quantity) for r in rows]


def test_concurrent_adds_merge_into_one_row(file_sessions):
    results = run_concurrently(file_sessions, 1)

    assert None not in results
    assert len({item_id for item_id, _ in results}) == 1
    assert sum(1 for _, created in results if created) == 1
    assert cart_rows(file_sessions) == [(1, THREADS)]


def test_concurrent_adds_never_exceed_stock(file_sessions):
    results = run_concurrently(file_sessions, 2)

    accepted = [r for r in results if r is not None]
    assert len(accepted) == 5
    assert cart_rows(file_sessions) == [(2, 5)]
