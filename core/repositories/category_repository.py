"""Repository for category database queries."""

from django.db.models import QuerySet

from core.exceptions import CategoryNotFoundError
from core.models import Category


class CategoryRepository:
    """Repository for encapsulating category database queries."""

    @staticmethod
    def get_by_id(category_id: int) -> Category:
        """Fetch a category by primary key.

        Raises:
            CategoryNotFoundError: If no category has this id
        """
        category = Category.objects.filter(pk=category_id).first()
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    @staticmethod
    def list_all() -> QuerySet[Category]:
        """Return every category ordered by name."""
        return Category.objects.order_by("name")

    @staticmethod
    def name_taken(name: str, exclude_id: int | None = None) -> bool:
        """Check whether another category already uses ``name``."""
        queryset = Category.objects.filter(name__iexact=name)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()
