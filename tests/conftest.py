import os

#engine in storefront.data.database is built at import time, keep it off postgres
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import storefront.data.models  # noqa: F401
from storefront.api.deps import get_identity
from storefront.data.database import Base, get_db
from storefront.data.models.product import ProductModel
from storefront.main import create_app
from storefront.utils.settings import SESSION_COOKIE_NAME

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

CATALOG = [
    # id, name, description, price, category, stock
    (1, "Trail Runner", "Grippy running shoe", "10.00", "Shoes", 5),
    (2, "City Sneaker", "Everyday leather sneaker", "59.00", "Shoes", 12),
    (3, "Hiking Boot", "Waterproof boot", "120.00", "Shoes", 3),
    (4, "Wireless Mouse", "Bluetooth mouse", "25.50", "Electronics", 40),
    (5, "Shoe Dryer", "Dries wet shoes overnight", "35.00", "Home", 7),
    (6, "Plain Tee", "Organic cotton", "15.00", "Clothing", 0),
]


class FakeIdentity:
    """In-memory stand-in for the users service."""

    def __init__(self):
        self.sessions = {
            "token-alice": {"id": "alice", "email": "alice@example.com"},
            "token-bob": {"id": "bob", "email": "bob@example.com"},
        }
        self.revoked = []

    def get_redirect_url(self, provider="google"):
        return f"https://accounts.example.com/{provider}/authorize?state=xyz"

    def exchange_code(self, code):
        token = f"token-{code}"
        self.sessions[token] = {"id": code, "email": f"{code}@example.com"}
        return token

    def validate(self, session_token):
        return self.sessions.get(session_token)

    def revoke(self, session_token):
        self.revoked.append(session_token)
        self.sessions.pop(session_token, None)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog(db):
    products = {}
    for i, (pid, name, description, price, category, stock) in enumerate(CATALOG):
        created = BASE_TIME + timedelta(minutes=i)
        products[pid] = ProductModel(
            id=pid,
            name=name,
            description=description,
            price=Decimal(price),
            image=f"https://images.example.com/{pid}.jpg",
            category=category,
            stock=stock,
            created_at=created,
            updated_at=created,
        )
    db.add_all(products.values())
    db.commit()
    return products


@pytest.fixture
def identity():
    return FakeIdentity()


@pytest.fixture
def client(session_factory, identity):
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_identity] = lambda: identity
    return TestClient(app)


@pytest.fixture
def auth():
    """auth("alice") -> headers carrying alice's session cookie."""

    def headers(user):
        return {"Cookie": f"{SESSION_COOKIE_NAME}=token-{user}"}

    return headers
