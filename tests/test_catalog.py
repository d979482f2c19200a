import pytest

from storefront.domain.errors import NotFoundError, InvalidRequestError
from storefront.services.catalog_service import CatalogService


def ids(items):
    return [p["id"] for p in items]


def test_list_products_newest_first(client, catalog):
    resp = client.get("/api/products")

    assert resp.status_code == 200
    assert ids(resp.json()) == [6, 5, 4, 3, 2, 1]


def test_get_product_returns_stored_fields(client, catalog):
    resp = client.get("/api/products/1")

    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Trail Runner"
    assert body["price"] == 10.0
    assert body["stock"] == 5
    assert body["category"] == "Shoes"
    assert body["image"] == "https://images.example.com/1.jpg"
    assert "created_at" in body and "updated_at" in body


def test_get_product_is_stable_across_reads(client, catalog):
    first = client.get("/api/products/2").json()
    second = client.get("/api/products/2").json()
    assert first == second


def test_get_missing_product_is_404(client, catalog):
    resp = client.get("/api/products/999")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Product not found"}


def test_non_integer_product_id_is_400(client, catalog):
    resp = client.get("/api/products/abc")

    assert resp.status_code == 400
    assert "error" in resp.json()


def test_search_requires_query_or_category(client, catalog):
    resp = client.get("/api/products/search")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Search query or category required"}


def test_search_by_category_is_exact_match(client, catalog):
    resp = client.get("/api/products/search", params={"category": "Shoes"})

    assert resp.status_code == 200
    #"Shoe Dryer" mentions shoes but lives in Home
    assert ids(resp.json()) == [3, 2, 1]


def test_search_query_matches_name_description_and_category(client, catalog):
    resp = client.get("/api/products/search", params={"q": "shoe"})

    assert resp.status_code == 200
    assert set(ids(resp.json())) == {1, 2, 3, 5}


def test_search_query_and_category_are_combined(client, catalog):
    resp = client.get("/api/products/search", params={"q": "shoe", "category": "Home"})

    assert ids(resp.json()) == [5]


def test_search_all_category_does_not_filter(client, catalog):
    resp = client.get("/api/products/search", params={"q": "mouse", "category": "All"})

    assert ids(resp.json()) == [4]


def test_search_category_all_alone_returns_everything(client, catalog):
    resp = client.get("/api/products/search", params={"category": "All"})

    assert ids(resp.json()) == [6, 5, 4, 3, 2, 1]


def test_search_query_is_not_a_like_pattern(client, catalog):
    resp = client.get("/api/products/search", params={"q": "%"})

    assert resp.json() == []


def test_suggestions_same_category_without_self(client, catalog):
    resp = client.get("/api/products/1/suggestions")

    assert resp.status_code == 200
    suggested = resp.json()
    assert set(ids(suggested)) == {2, 3}
    assert all(p["category"] == "Shoes" for p in suggested)


def test_suggestions_for_missing_product_is_404(client, catalog):
    resp = client.get("/api/products/999/suggestions")

    assert resp.status_code == 404


def test_suggestions_are_capped(db, catalog):
    svc = CatalogService(db)

    suggested = svc.suggest_products(1, limit=1)

    assert len(suggested) == 1
    assert suggested[0].id in {2, 3}


def test_service_search_without_criteria_raises(db, catalog):
    with pytest.raises(InvalidRequestError):
        CatalogService(db).search_products(None, "")


def test_service_get_missing_product_raises(db, catalog):
    with pytest.raises(NotFoundError):
        CatalogService(db).get_product(42)


def test_deleting_product_cascades_to_user_rows(db, catalog):
    from sqlalchemy import delete, select, func
    from storefront.data.models import CartItemModel, WishlistItemModel, ReviewModel, ProductModel
    from storefront.services.cart_service import CartService
    from storefront.services.review_service import ReviewService
    from storefront.services.wishlist_service import WishlistService

    CartService(db).add_product("alice", 1, 1)
    WishlistService(db).add_product("alice", 1)
    ReviewService(db).add_review("alice", 1, 5)

    db.execute(delete(ProductModel).where(ProductModel.id == 1))
    db.commit()

    for model in (CartItemModel, WishlistItemModel, ReviewModel):
        assert db.execute(select(func.count(model.id))).scalar_one() == 0
