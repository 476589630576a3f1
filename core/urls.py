"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    AllProductsView,
    CategoryCreateView,
    CategoryDetailView,
    CategoryListView,
    LivenessCheckView,
    MyOrdersView,
    NewProductsView,
    OrderDeliverView,
    OrderDetailView,
    OrderListCreateView,
    OrderPayView,
    PaypalConfigView,
    ProductDetailView,
    ProductFilterView,
    ProductListCreateView,
    ProductReviewView,
    ReadinessCheckView,
    SortedProductsView,
    TopProductsView,
    TotalOrdersView,
    TotalSalesByDateView,
    TotalSalesView,
    UploadImageView,
    UserDetailView,
    UserListCreateView,
    UserLoginView,
    UserLogoutView,
    UserProfileView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Users
    path("api/users", UserListCreateView.as_view(), name="user-list"),
    path("api/users/auth", UserLoginView.as_view(), name="user-login"),
    path("api/users/logout", UserLogoutView.as_view(), name="user-logout"),
    path("api/users/profile", UserProfileView.as_view(), name="user-profile"),
    path("api/users/<int:user_id>", UserDetailView.as_view(), name="user-detail"),
    # Categories
    path(
        "api/category/categories",
        CategoryListView.as_view(),
        name="category-list",
    ),
    path("api/category", CategoryCreateView.as_view(), name="category-create"),
    path(
        "api/category/<int:category_id>",
        CategoryDetailView.as_view(),
        name="category-detail",
    ),
    # Products
    path("api/products", ProductListCreateView.as_view(), name="product-list"),
    path("api/products/allproducts", AllProductsView.as_view(), name="product-all"),
    path("api/products/top", TopProductsView.as_view(), name="product-top"),
    path("api/products/new", NewProductsView.as_view(), name="product-new"),
    path(
        "api/products/name-asc",
        SortedProductsView.as_view(sort_key="name-asc"),
        name="product-name-asc",
    ),
    path(
        "api/products/name-desc",
        SortedProductsView.as_view(sort_key="name-desc"),
        name="product-name-desc",
    ),
    path(
        "api/products/price-asc",
        SortedProductsView.as_view(sort_key="price-asc"),
        name="product-price-asc",
    ),
    path(
        "api/products/price-desc",
        SortedProductsView.as_view(sort_key="price-desc"),
        name="product-price-desc",
    ),
    path(
        "api/products/filtered-products",
        ProductFilterView.as_view(),
        name="product-filter",
    ),
    path(
        "api/products/<int:product_id>/reviews",
        ProductReviewView.as_view(),
        name="product-reviews",
    ),
    path(
        "api/products/<int:product_id>",
        ProductDetailView.as_view(),
        name="product-detail",
    ),
    # Upload
    path("api/upload", UploadImageView.as_view(), name="upload-image"),
    # Orders
    path("api/orders", OrderListCreateView.as_view(), name="order-list"),
    path("api/orders/mine", MyOrdersView.as_view(), name="order-mine"),
    path(
        "api/orders/total-orders",
        TotalOrdersView.as_view(),
        name="order-total-orders",
    ),
    path(
        "api/orders/total-sales",
        TotalSalesView.as_view(),
        name="order-total-sales",
    ),
    path(
        "api/orders/total-sales-by-date",
        TotalSalesByDateView.as_view(),
        name="order-total-sales-by-date",
    ),
    path("api/orders/<int:order_id>", OrderDetailView.as_view(), name="order-detail"),
    path(
        "api/orders/<int:order_id>/pay",
        OrderPayView.as_view(),
        name="order-pay",
    ),
    path(
        "api/orders/<int:order_id>/deliver",
        OrderDeliverView.as_view(),
        name="order-deliver",
    ),
    # Config
    path("api/config/paypal", PaypalConfigView.as_view(), name="config-paypal"),
]
