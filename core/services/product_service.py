"""Catalog queries, product management and review submission."""

import math

from django.db import IntegrityError, transaction

import structlog

from core.constants import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    NEW_PRODUCTS_LIMIT,
    SORTED_PRODUCTS_LIMIT,
    TOP_PRODUCTS_LIMIT,
)
from core.exceptions import ConflictError, DuplicateReviewError
from core.models import Product, Review, User
from core.repositories import CategoryRepository, ProductRepository
from core.schemas.product import (
    ProductCreateRequest,
    ProductFilterRequest,
    ProductPageResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from core.schemas.review import ReviewCreateRequest, ReviewEntry, ReviewResponse
from core.services import review_aggregator

logger = structlog.get_logger(__name__)

# Route suffix -> ORM ordering for the fixed-size sorted listings
SORT_ORDERINGS = {
    "name-asc": "name",
    "name-desc": "-name",
    "price-asc": "price",
    "price-desc": "-price",
}


class ProductService:
    """Service for the product catalog."""

    def search(
        self,
        keyword: str | None = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> ProductPageResponse:
        """Return one page of products whose name contains ``keyword``.

        Args:
            keyword: Case-insensitive name fragment; empty means all products
            page: 1-based page number; values below 1 are treated as 1
            page_size: Products per page, clamped to ``[1, MAX_PAGE_SIZE]``

        Returns:
            ProductPageResponse; a page past the end has no products
        """
        page = max(page, 1)
        page_size = min(max(page_size, 1), MAX_PAGE_SIZE)

        queryset = ProductRepository.search(keyword)
        total = queryset.count()
        pages = math.ceil(total / page_size) if total else 0
        offset = (page - 1) * page_size
        products = queryset[offset : offset + page_size]

        return ProductPageResponse(
            products=[ProductResponse.from_model(p) for p in products],
            page=page,
            pages=pages,
            has_more=page < pages,
            total=total,
        )

    def list_all(self) -> list[ProductResponse]:
        """Return every product, newest first."""
        return self._project(ProductRepository.search(None))

    def top_rated(self) -> list[ProductResponse]:
        """Return the best rated products."""
        return self._project(ProductRepository.top_rated(TOP_PRODUCTS_LIMIT))

    def newest(self) -> list[ProductResponse]:
        """Return the most recently added products."""
        return self._project(ProductRepository.newest(NEW_PRODUCTS_LIMIT))

    def sorted_products(self, sort_key: str) -> list[ProductResponse]:
        """Return a fixed-size listing sorted by name or price.

        Args:
            sort_key: One of ``SORT_ORDERINGS``

        Raises:
            KeyError: If ``sort_key`` is unknown
        """
        ordering = SORT_ORDERINGS[sort_key]
        return self._project(
            ProductRepository.sorted_by(ordering, SORTED_PRODUCTS_LIMIT)
        )

    def filter_products(self, request: ProductFilterRequest) -> list[ProductResponse]:
        """Return products matching a category and a price range."""
        return self._project(
            ProductRepository.filtered(
                request.category, request.min_price, request.max_price
            )
        )

    def get_product(self, product_id: int) -> ProductResponse:
        """Fetch one product with category and reviews."""
        return ProductResponse.from_model(ProductRepository.get_by_id(product_id))

    def create_product(
        self, actor: User, request: ProductCreateRequest
    ) -> ProductResponse:
        """Add a product to the catalog.

        Args:
            actor: The administrator creating the product
            request: Validated product fields

        Returns:
            The created product

        Raises:
            CategoryNotFoundError: If the category does not exist
            ConflictError: If a product with the same name exists
        """
        category = CategoryRepository.get_by_id(request.category)
        if ProductRepository.name_taken(request.name):
            raise ConflictError("Product already exists", detail=request.name)

        product = Product(
            name=request.name,
            image=request.image,
            brand=request.brand,
            quantity=request.quantity,
            category=category,
            description=request.description,
            price=request.price,
            count_in_stock=request.count_in_stock,
        )
        self._save(product)
        logger.info("product_created", product_id=product.pk, admin_id=actor.pk)
        return self.get_product(product.pk)

    def update_product(
        self, actor: User, product_id: int, request: ProductUpdateRequest
    ) -> ProductResponse:
        """Apply a partial update to a product.

        Raises:
            ProductNotFoundError: If the product does not exist
            CategoryNotFoundError: If a new category does not exist
            ConflictError: If another product already has the new name
        """
        product = ProductRepository.get_by_id(product_id)
        changes = request.model_dump(exclude_none=True)

        if "name" in changes and ProductRepository.name_taken(
            changes["name"], exclude_id=product.pk
        ):
            raise ConflictError("Product already exists", detail=changes["name"])
        if "category" in changes:
            product.category = CategoryRepository.get_by_id(changes.pop("category"))

        for field, value in changes.items():
            setattr(product, field, value)
        self._save(product)

        logger.info(
            "product_updated",
            product_id=product.pk,
            admin_id=actor.pk,
            fields=sorted(request.model_fields_set),
        )
        return self.get_product(product.pk)

    def delete_product(self, actor: User, product_id: int) -> ProductResponse:
        """Remove a product and its reviews.

        Returns:
            The product as it was before deletion
        """
        product = ProductRepository.get_by_id(product_id)
        removed = ProductResponse.from_model(product)
        product.delete()
        logger.info("product_deleted", product_id=product_id, admin_id=actor.pk)
        return removed

    def add_review(
        self, actor: User, product_id: int, request: ReviewCreateRequest
    ) -> ReviewResponse:
        """Record the caller's review and refresh the product's rating.

        The product row is locked for the duration of the transaction so that
        concurrent reviews of the same product serialize; the unique
        constraint on (product, user) backs up the duplicate check.

        Args:
            actor: The reviewing user
            product_id: Product being reviewed
            request: Rating and comment

        Returns:
            The stored review

        Raises:
            ProductNotFoundError: If the product does not exist
            DuplicateReviewError: If the caller already reviewed the product
        """
        with transaction.atomic():
            product = ProductRepository.get_for_update(product_id)
            existing = [
                ReviewEntry(
                    user_id=review.user_id,
                    name=review.name,
                    rating=review.rating,
                    comment=review.comment,
                )
                for review in product.reviews.all()
            ]
            candidate = ReviewEntry(
                user_id=actor.pk,
                name=actor.username,
                rating=request.rating,
                comment=request.comment,
            )
            outcome = review_aggregator.add_review(
                existing, product.num_reviews, product.rating, candidate
            )
            if outcome.duplicate:
                logger.info(
                    "duplicate_review_rejected", product_id=product_id, user_id=actor.pk
                )
                raise DuplicateReviewError(product_id, actor.pk)

            try:
                with transaction.atomic():
                    review = Review.objects.create(
                        product=product,
                        user=actor,
                        name=candidate.name,
                        rating=candidate.rating,
                        comment=candidate.comment,
                    )
            except IntegrityError as e:
                raise DuplicateReviewError(product_id, actor.pk) from e

            product.num_reviews = outcome.num_reviews
            product.rating = outcome.rating
            product.save(update_fields=["num_reviews", "rating", "updated_at"])

        logger.info(
            "review_added",
            product_id=product_id,
            user_id=actor.pk,
            num_reviews=outcome.num_reviews,
            rating=outcome.rating,
        )
        return ReviewResponse.from_model(review)

    @staticmethod
    def _project(products) -> list[ProductResponse]:
        return [ProductResponse.from_model(p) for p in products]

    @staticmethod
    def _save(product: Product) -> None:
        try:
            with transaction.atomic():
                product.save()
        except IntegrityError as e:
            raise ConflictError("Product already exists", detail=str(e)) from e


# Global product service instance
product_service = ProductService()
