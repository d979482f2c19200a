#import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.product import ProductModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.wishlist_item import WishlistItemModel
from storefront.data.models.user_profile import UserProfileModel, PROFILE_FIELDS
from storefront.data.models.review import ReviewModel

__all__ = [
    "ProductModel",
    "CartItemModel",
    "WishlistItemModel",
    "UserProfileModel",
    "ReviewModel",
    "PROFILE_FIELDS",
]
