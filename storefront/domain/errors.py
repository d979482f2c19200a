# storefront/domain/errors.py


class StorefrontError(Exception):
    """Base for errors raised by the services, mapped to a status code by the routers."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StorefrontError):
    status_code = 404


class InvalidRequestError(StorefrontError):
    status_code = 400


class InsufficientStockError(StorefrontError):
    status_code = 400


class ConflictError(StorefrontError):
    #duplicate wishlist entry / review, the api reports it as 400
    status_code = 400


class UnauthorizedError(StorefrontError):
    status_code = 401


class IdentityServiceError(StorefrontError):
    status_code = 502
