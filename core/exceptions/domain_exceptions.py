"""Application exceptions raised by the service layer."""


class ShopServiceError(Exception):
    """Base exception for shop service errors."""

    status_code = 500

    def __init__(self, message: str, detail: str | None = None):
        """Initialize shop service error.

        Args:
            message: Error message
            detail: Additional details about the error
        """
        self.detail = detail
        super().__init__(message)


class ResourceNotFoundError(ShopServiceError):
    """Requested resource does not exist (404)."""

    status_code = 404
    resource_name = "Resource"

    def __init__(self, resource_id: int | str):
        """Initialize not found error.

        Args:
            resource_id: ID of the resource that was not found
        """
        self.resource_id = resource_id
        super().__init__(f"{self.resource_name} with ID {resource_id} not found")


class UserNotFoundError(ResourceNotFoundError):
    """User not found (404)."""

    resource_name = "User"


class CategoryNotFoundError(ResourceNotFoundError):
    """Category not found (404)."""

    resource_name = "Category"


class ProductNotFoundError(ResourceNotFoundError):
    """Product not found (404)."""

    resource_name = "Product"


class OrderNotFoundError(ResourceNotFoundError):
    """Order not found (404)."""

    resource_name = "Order"


class ConflictError(ShopServiceError):
    """Conflict error for operations that clash with existing data (409)."""

    status_code = 409


class DuplicateReviewError(ConflictError):
    """The user already reviewed this product (409)."""

    def __init__(self, product_id: int, user_id: int):
        """Initialize duplicate review error.

        Args:
            product_id: ID of the reviewed product
            user_id: ID of the reviewer
        """
        self.product_id = product_id
        self.user_id = user_id
        super().__init__(
            "Product already reviewed",
            detail=f"User {user_id} already reviewed product {product_id}",
        )


class BusinessRuleError(ShopServiceError):
    """Request is well-formed but violates a business rule (400)."""

    status_code = 400

