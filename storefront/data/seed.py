# storefront/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from storefront.data.database import SessionLocal
from storefront.data.models.product import ProductModel
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PRODUCTS = [
    {"name": "Wireless Headphones", "description": "Over-ear, noise cancelling, 30h battery",
     "price": Decimal("129.99"), "category": "Electronics", "stock": 25,
     "image": "https://images.example.com/headphones.jpg"},
    {"name": "Mechanical Keyboard", "description": "Hot-swappable switches, RGB backlight",
     "price": Decimal("89.00"), "category": "Electronics", "stock": 40,
     "image": "https://images.example.com/keyboard.jpg"},
    {"name": "Smart Watch", "description": "Heart rate and sleep tracking",
     "price": Decimal("199.50"), "category": "Electronics", "stock": 15,
     "image": "https://images.example.com/watch.jpg"},
    {"name": "Running Shoes", "description": "Lightweight trail runners",
     "price": Decimal("74.95"), "category": "Shoes", "stock": 30,
     "image": "https://images.example.com/running-shoes.jpg"},
    {"name": "Leather Boots", "description": "Waterproof, hand stitched",
     "price": Decimal("149.00"), "category": "Shoes", "stock": 10,
     "image": "https://images.example.com/boots.jpg"},
    {"name": "Cotton T-Shirt", "description": "Organic cotton, regular fit",
     "price": Decimal("19.99"), "category": "Clothing", "stock": 100,
     "image": "https://images.example.com/tshirt.jpg"},
    {"name": "Denim Jacket", "description": "Classic blue denim",
     "price": Decimal("59.90"), "category": "Clothing", "stock": 20,
     "image": "https://images.example.com/jacket.jpg"},
    {"name": "Ceramic Mug", "description": "350ml, dishwasher safe",
     "price": Decimal("12.50"), "category": "Home", "stock": 60,
     "image": "https://images.example.com/mug.jpg"},
]


def seed(db: Session | None = None) -> int:
    """Insert the demo catalog when the products table is empty. Returns number of inserted rows."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        repo = ProductRepo(db)
        #not forcing: only seed if empty
        if repo.count():
            return 0
        repo.add_all([ProductModel(**data) for data in DEMO_PRODUCTS])
        logger.info(f"Seeded {len(DEMO_PRODUCTS)} products")
        return len(DEMO_PRODUCTS)
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    seed()
