"""Repository for product database queries."""

from decimal import Decimal

from django.db.models import Prefetch, QuerySet

from core.exceptions import ProductNotFoundError
from core.models import Product, Review


class ProductRepository:
    """Repository for encapsulating product database queries.

    Every read that feeds a response goes through ``with_details`` so that
    category and reviews are loaded with a fixed number of queries.
    """

    @staticmethod
    def with_details() -> QuerySet[Product]:
        """Base queryset with category joined and reviews prefetched."""
        return Product.objects.select_related("category").prefetch_related(
            Prefetch("reviews", queryset=Review.objects.order_by("created_at"))
        )

    @classmethod
    def get_by_id(cls, product_id: int) -> Product:
        """Fetch a product with its category and reviews.

        Args:
            product_id: Primary key of the product

        Returns:
            The matching Product

        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = cls.with_details().filter(pk=product_id).first()
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    @staticmethod
    def get_for_update(product_id: int) -> Product:
        """Fetch and row-lock a product inside the current transaction.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = Product.objects.select_for_update().filter(pk=product_id).first()
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    @staticmethod
    def get_many(product_ids: list[int]) -> dict[int, Product]:
        """Batch lookup of products keyed by id."""
        return Product.objects.in_bulk(product_ids)

    @classmethod
    def search(cls, keyword: str | None) -> QuerySet[Product]:
        """Products whose name contains ``keyword``, case-insensitively."""
        queryset = cls.with_details()
        if keyword:
            queryset = queryset.filter(name__icontains=keyword)
        return queryset.order_by("-created_at", "-id")

    @classmethod
    def top_rated(cls, limit: int) -> QuerySet[Product]:
        """Best rated products first."""
        return cls.with_details().order_by("-rating", "-num_reviews", "-id")[:limit]

    @classmethod
    def newest(cls, limit: int) -> QuerySet[Product]:
        """Most recently created products first."""
        return cls.with_details().order_by("-created_at", "-id")[:limit]

    @classmethod
    def sorted_by(cls, ordering: str, limit: int) -> QuerySet[Product]:
        """Products sorted by a model field expression such as ``-price``."""
        return cls.with_details().order_by(ordering, "id")[:limit]

    @classmethod
    def filtered(
        cls,
        category_id: int | None,
        min_price: Decimal | None,
        max_price: Decimal | None,
    ) -> QuerySet[Product]:
        """Products matching a category and an inclusive price range.

        Args:
            category_id: Category to restrict to, or None for all
            min_price: Lower price bound, or None
            max_price: Upper price bound, or None

        Returns:
            Matching products, newest first
        """
        queryset = cls.with_details()
        if category_id is not None:
            queryset = queryset.filter(category_id=category_id)
        if min_price is not None:
            queryset = queryset.filter(price__gte=min_price)
        if max_price is not None:
            queryset = queryset.filter(price__lte=max_price)
        return queryset.order_by("-created_at", "-id")

    @staticmethod
    def name_taken(name: str, exclude_id: int | None = None) -> bool:
        """Check whether another product already uses ``name``."""
        queryset = Product.objects.filter(name__iexact=name)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()
