"""Domain and request errors.

Raised by the service and request layers; the HTTP app translates each into a
response with the matching status code.
"""


class StorefrontError(Exception):
    """Base class for errors raised by the storefront."""

    status_code: int = 500


class ProductNotFoundError(StorefrontError):
    """The requested product does not exist."""

    status_code = 404

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class ParameterMissingError(StorefrontError):
    """A required parameter root is absent from the request."""

    status_code = 400

    def __init__(self, param: str) -> None:
        super().__init__(f"param is missing or the value is empty: {param}")
        self.param = param


class InvalidLocaleError(StorefrontError):
    """The request asked for a locale that is not available."""

    status_code = 400

    def __init__(self, locale: str) -> None:
        super().__init__(f"{locale!r} is not a valid locale")
        self.locale = locale


class CsrfTokenError(StorefrontError):
    """A state-changing request carried no valid authenticity token."""

    status_code = 403


class AuthenticationRequired(StorefrontError):
    """The operation needs an authenticated session."""

    status_code = 401

    def __init__(self, return_to: str = "/") -> None:
        super().__init__("Authentication required")
        self.return_to = return_to
