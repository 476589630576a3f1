"""API views for core application."""

import json
from typing import Any

from django.conf import settings

import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.auth import IsAdmin, clear_token_cookie, issue_token, set_token_cookie
from core.constants import DEFAULT_PAGE_SIZE, UPLOAD_FIELD_NAME
from core.schemas.category import CategoryCreateRequest, CategoryUpdateRequest
from core.schemas.common import MessageResponse, PaypalConfigResponse
from core.schemas.order import OrderCreateRequest, PaymentResultRequest
from core.schemas.product import (
    ProductCreateRequest,
    ProductFilterRequest,
    ProductUpdateRequest,
)
from core.schemas.review import ReviewCreateRequest
from core.schemas.user import (
    AdminUserUpdateRequest,
    UserLoginRequest,
    UserProfileResponse,
    UserRegisterRequest,
    UserUpdateRequest,
)
from core.services import health_service
from core.services.category_service import category_service
from core.services.order_service import order_service
from core.services.product_service import product_service
from core.services.upload_service import upload_service
from core.services.user_service import user_service

logger = structlog.get_logger(__name__)

ADMIN_PERMISSIONS = (IsAuthenticated, IsAdmin)


def _request_data(request) -> dict[str, Any]:
    """Return the parsed body as a plain dict.

    Multipart and form bodies arrive as a QueryDict, which keeps every value
    in a list; flatten it to the last value per key like ``request.POST``.
    """
    data = request.data
    if hasattr(data, "dict"):
        return data.dict()
    return data if isinstance(data, dict) else {}


def _invalid_request(error: ValidationError, event: str) -> Response:
    """Build the 400 response for a request body that failed validation."""
    errors = json.loads(error.json(include_url=False))
    logger.warning(event, validation_errors=errors)
    return Response(
        {
            "error": "bad_request",
            "message": "Invalid request parameters",
            "errors": errors,
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def _int_query_param(request, name: str, default: int) -> int:
    """Read a positive integer query parameter, falling back to ``default``."""
    try:
        value = int(request.query_params.get(name, default))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def _dump_list(items) -> list[dict[str, Any]]:
    return [item.to_response() for item in items]


class LivenessCheckView(APIView):
    """Liveness probe endpoint.

    Returns 200 while the process is running. Never checks dependencies.
    Exempt from authentication so orchestrator probes need no token.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for liveness check.

        Args:
            _request: HTTP request object (unused).

        Returns:
            Response object with status "alive".
        """
        liveness = health_service.get_liveness_status()
        return Response(liveness.to_response(), status=status.HTTP_200_OK)


class ReadinessCheckView(APIView):
    """Readiness probe endpoint.

    Returns 200 when ready and also when degraded, so the API keeps serving
    while the database monitor reconnects in the background.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Handle GET request for readiness check.

        Args:
            _request: HTTP request object (unused).

        Returns:
            Response object with overall status and dependency health.
        """
        readiness = health_service.get_readiness_status()
        return Response(readiness.to_response(), status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class UserListCreateView(APIView):
    """Registration (public) and the admin user listing.

    POST: Register a new account and start a session
    GET: List all users (admin only)
    """

    def get_permissions(self):
        """Registration is public; listing requires an admin."""
        if self.request.method == "POST":
            return [AllowAny()]
        return [permission() for permission in ADMIN_PERMISSIONS]

    def post(self, request):
        """Register a user.

        Args:
            request: HTTP request with username, email and password

        Returns:
            201 Created with the new user's profile and the session cookie
            400 Bad Request if validation fails
            409 Conflict if the email or username is taken
        """
        try:
            payload = UserRegisterRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid registration request")

        user = user_service.register(payload)

        response = Response(
            UserProfileResponse.from_model(user).to_response(),
            status=status.HTTP_201_CREATED,
        )
        set_token_cookie(response, issue_token(user))
        return response

    def get(self, request):
        """List every user account."""
        users = user_service.list_users()
        logger.info("User list retrieved", admin_id=request.user.pk, count=len(users))
        return Response(_dump_list(users), status=status.HTTP_200_OK)


class UserLoginView(APIView):
    """Email/password login that starts a cookie session."""

    permission_classes = (AllowAny,)

    def post(self, request):
        """Log a user in.

        Returns:
            200 OK with the user's profile and the session cookie
            400 Bad Request if email or password is missing
            401 Unauthorized if the credentials do not match
        """
        try:
            payload = UserLoginRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid login request")

        user = user_service.authenticate(payload)
        if user is None:
            raise AuthenticationFailed("Invalid email or password")

        response = Response(
            UserProfileResponse.from_model(user).to_response(),
            status=status.HTTP_200_OK,
        )
        set_token_cookie(response, issue_token(user))
        return response


class UserLogoutView(APIView):
    """Ends the cookie session."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def post(self, _request):
        """Clear the session cookie."""
        response = Response(
            MessageResponse(message="Logged out successfully").to_response(),
            status=status.HTTP_200_OK,
        )
        clear_token_cookie(response)
        return response


class UserProfileView(APIView):
    """The caller's own account.

    GET: Current profile
    PUT: Partial update of username, email and password
    """

    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """Return the caller's profile."""
        return Response(
            UserProfileResponse.from_model(request.user).to_response(),
            status=status.HTTP_200_OK,
        )

    def put(self, request):
        """Update the caller's profile.

        Returns:
            200 OK with the updated profile
            400 Bad Request if validation fails
            409 Conflict if the new email or username is taken
        """
        try:
            payload = UserUpdateRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid profile update request")

        profile = user_service.update_profile(request.user, payload)
        return Response(profile.to_response(), status=status.HTTP_200_OK)


class UserDetailView(APIView):
    """Admin management of a single user account."""

    permission_classes = ADMIN_PERMISSIONS

    def get(self, _request, user_id: int):
        """Return one user or 404."""
        user = user_service.get_user(user_id)
        return Response(user.to_response(), status=status.HTTP_200_OK)

    def put(self, request, user_id: int):
        """Update a user, including the admin flag.

        Returns:
            200 OK with the updated user
            400 Bad Request if validation fails
            404 Not Found if the user does not exist
            409 Conflict if the new email or username is taken
        """
        try:
            payload = AdminUserUpdateRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid user update request")

        user = user_service.update_user(request.user, user_id, payload)
        return Response(user.to_response(), status=status.HTTP_200_OK)

    def delete(self, request, user_id: int):
        """Delete a regular user; administrators cannot be deleted (400)."""
        user_service.delete_user(request.user, user_id)
        return Response(
            MessageResponse(message="User removed").to_response(),
            status=status.HTTP_200_OK,
        )


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class CategoryListView(APIView):
    """Public list of all categories."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """List categories ordered by name."""
        categories = category_service.list_categories()
        return Response(_dump_list(categories), status=status.HTTP_200_OK)


class CategoryCreateView(APIView):
    """Category creation (admin only)."""

    permission_classes = ADMIN_PERMISSIONS

    def post(self, request):
        """Create a category.

        Returns:
            201 Created with the category
            400 Bad Request if the name is missing
            409 Conflict if the name is taken
        """
        try:
            payload = CategoryCreateRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid category create request")

        category = category_service.create_category(request.user, payload)
        return Response(category.to_response(), status=status.HTTP_201_CREATED)


class CategoryDetailView(APIView):
    """Read (public), update and delete (admin) a category."""

    def get_permissions(self):
        """Reads are public; writes require an admin."""
        if self.request.method == "GET":
            return [AllowAny()]
        return [permission() for permission in ADMIN_PERMISSIONS]

    def get(self, _request, category_id: int):
        """Return one category or 404."""
        category = category_service.get_category(category_id)
        return Response(category.to_response(), status=status.HTTP_200_OK)

    def put(self, request, category_id: int):
        """Rename or re-describe a category."""
        try:
            payload = CategoryUpdateRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid category update request")

        category = category_service.update_category(request.user, category_id, payload)
        return Response(category.to_response(), status=status.HTTP_200_OK)

    def delete(self, request, category_id: int):
        """Delete a category; its products lose their category."""
        removed = category_service.delete_category(request.user, category_id)
        return Response(removed.to_response(), status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


class ProductListCreateView(APIView):
    """Paged product search (public) and product creation (admin).

    GET query parameters:
    - keyword: case-insensitive name fragment
    - page: page number (default: 1)
    - pageSize: products per page (default: 10, max: 100)
    """

    def get_permissions(self):
        """Search is public; creation requires an admin."""
        if self.request.method == "GET":
            return [AllowAny()]
        return [permission() for permission in ADMIN_PERMISSIONS]

    def get(self, request):
        """Return one page of matching products."""
        result = product_service.search(
            keyword=request.query_params.get("keyword", "").strip() or None,
            page=_int_query_param(request, "page", 1),
            page_size=_int_query_param(request, "pageSize", DEFAULT_PAGE_SIZE),
        )
        return Response(result.to_response(), status=status.HTTP_200_OK)

    def post(self, request):
        """Create a product from a JSON or multipart body.

        Returns:
            201 Created with the product
            400 Bad Request if a required field is missing or invalid
            404 Not Found if the category does not exist
            409 Conflict if the name is taken
        """
        try:
            payload = ProductCreateRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid product create request")

        product = product_service.create_product(request.user, payload)
        return Response(product.to_response(), status=status.HTTP_201_CREATED)


class AllProductsView(APIView):
    """Every product, newest first."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """List all products."""
        return Response(
            _dump_list(product_service.list_all()), status=status.HTTP_200_OK
        )


class TopProductsView(APIView):
    """The best rated products."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """List the top rated products."""
        return Response(
            _dump_list(product_service.top_rated()), status=status.HTTP_200_OK
        )


class NewProductsView(APIView):
    """The most recently added products."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """List the newest products."""
        return Response(_dump_list(product_service.newest()), status=status.HTTP_200_OK)


class SortedProductsView(APIView):
    """Fixed-size listing sorted by name or price.

    The ordering is chosen per route through ``as_view(sort_key=...)``.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)
    sort_key = "name-asc"

    def get(self, _request):
        """List products in this view's sort order."""
        products = product_service.sorted_products(self.sort_key)
        return Response(_dump_list(products), status=status.HTTP_200_OK)


class ProductFilterView(APIView):
    """Filter products by category and price range."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def post(self, request):
        """Return products matching ``category``, ``minPrice`` and ``maxPrice``."""
        try:
            payload = ProductFilterRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid product filter request")

        products = product_service.filter_products(payload)
        return Response(_dump_list(products), status=status.HTTP_200_OK)


class ProductReviewView(APIView):
    """Review submission for a product."""

    permission_classes = (IsAuthenticated,)

    def post(self, request, product_id: int):
        """Add the caller's review.

        Returns:
            201 Created with a confirmation message
            400 Bad Request if the rating is missing or out of range
            404 Not Found if the product does not exist
            409 Conflict if the caller already reviewed the product
        """
        try:
            payload = ReviewCreateRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid review request")

        product_service.add_review(request.user, product_id, payload)
        return Response(
            MessageResponse(message="Review added").to_response(),
            status=status.HTTP_201_CREATED,
        )


class ProductDetailView(APIView):
    """Read (public), update and delete (admin) a product."""

    def get_permissions(self):
        """Reads are public; writes require an admin."""
        if self.request.method == "GET":
            return [AllowAny()]
        return [permission() for permission in ADMIN_PERMISSIONS]

    def get(self, _request, product_id: int):
        """Return one product with its category and reviews."""
        product = product_service.get_product(product_id)
        return Response(product.to_response(), status=status.HTTP_200_OK)

    def put(self, request, product_id: int):
        """Apply a partial update to a product."""
        try:
            payload = ProductUpdateRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid product update request")

        product = product_service.update_product(request.user, product_id, payload)
        return Response(product.to_response(), status=status.HTTP_200_OK)

    def delete(self, request, product_id: int):
        """Delete a product and its reviews."""
        removed = product_service.delete_product(request.user, product_id)
        return Response(removed.to_response(), status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Upload
# ---------------------------------------------------------------------------


class UploadImageView(APIView):
    """Product image upload (admin only)."""

    permission_classes = ADMIN_PERMISSIONS

    def post(self, request):
        """Store the multipart ``image`` field.

        Returns:
            200 OK with the public path of the stored image
            400 Bad Request if the file is missing or not a supported image
        """
        result = upload_service.store_image(
            request.user, request.FILES.get(UPLOAD_FIELD_NAME)
        )
        return Response(result.to_response(), status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class OrderListCreateView(APIView):
    """Order submission (any user) and the admin order listing."""

    def get_permissions(self):
        """Submitting needs a session; listing all orders needs an admin."""
        if self.request.method == "POST":
            return [IsAuthenticated()]
        return [permission() for permission in ADMIN_PERMISSIONS]

    def post(self, request):
        """Submit an order priced from the catalog.

        Returns:
            201 Created with the stored order and its totals
            400 Bad Request if there are no items or the body is invalid
            404 Not Found if an item references an unknown product
        """
        try:
            payload = OrderCreateRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid order request")

        order = order_service.create_order(request.user, payload)
        return Response(order.to_response(), status=status.HTTP_201_CREATED)

    def get(self, _request):
        """List every order with its buyer."""
        return Response(
            _dump_list(order_service.list_orders()), status=status.HTTP_200_OK
        )


class MyOrdersView(APIView):
    """The caller's own orders."""

    permission_classes = (IsAuthenticated,)

    def get(self, request):
        """List orders placed by the caller."""
        orders = order_service.list_user_orders(request.user)
        return Response(_dump_list(orders), status=status.HTTP_200_OK)


class TotalOrdersView(APIView):
    """Order count (admin only)."""

    permission_classes = ADMIN_PERMISSIONS

    def get(self, _request):
        """Return ``{totalOrders}``."""
        return Response(
            order_service.count_orders().to_response(), status=status.HTTP_200_OK
        )


class TotalSalesView(APIView):
    """Revenue over all orders (admin only)."""

    permission_classes = ADMIN_PERMISSIONS

    def get(self, _request):
        """Return ``{totalSales}``."""
        return Response(
            order_service.total_sales().to_response(), status=status.HTTP_200_OK
        )


class TotalSalesByDateView(APIView):
    """Paid revenue per day (admin only)."""

    permission_classes = ADMIN_PERMISSIONS

    def get(self, _request):
        """Return ``{totalSalesByDate: [{date, totalSales}]}``."""
        return Response(
            order_service.sales_by_date().to_response(), status=status.HTTP_200_OK
        )


class OrderDetailView(APIView):
    """A single order, visible to its owner and to admins."""

    permission_classes = (IsAuthenticated,)

    def get(self, request, order_id: int):
        """Return the order with its buyer's id, username and email."""
        order = order_service.get_order(request.user, order_id)
        return Response(order.to_response(), status=status.HTTP_200_OK)


class OrderPayView(APIView):
    """Payment confirmation for an order."""

    permission_classes = (IsAuthenticated,)

    def put(self, request, order_id: int):
        """Mark the order as paid with the provider's payment result.

        Returns:
            200 OK with the updated order
            400 Bad Request if the payment result is incomplete
            403 Forbidden if the caller neither owns the order nor is an admin
            404 Not Found if the order does not exist
        """
        try:
            payload = PaymentResultRequest.model_validate(_request_data(request))
        except ValidationError as e:
            return _invalid_request(e, "Invalid payment result")

        order = order_service.mark_paid(request.user, order_id, payload)
        return Response(order.to_response(), status=status.HTTP_200_OK)


class OrderDeliverView(APIView):
    """Delivery confirmation (admin only)."""

    permission_classes = ADMIN_PERMISSIONS

    def put(self, request, order_id: int):
        """Mark the order as delivered."""
        order = order_service.mark_delivered(request.user, order_id)
        return Response(order.to_response(), status=status.HTTP_200_OK)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class PaypalConfigView(APIView):
    """Public PayPal client id for the checkout page."""

    authentication_classes = ()
    permission_classes = (AllowAny,)

    def get(self, _request):
        """Return ``{clientId}``."""
        config = PaypalConfigResponse(client_id=settings.PAYPAL_CLIENT_ID)
        return Response(config.to_response(), status=status.HTTP_200_OK)
