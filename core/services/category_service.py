"""Category management."""

from django.db import IntegrityError, transaction

import structlog

from core.exceptions import ConflictError
from core.models import Category, User
from core.repositories import CategoryRepository
from core.schemas.category import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)

logger = structlog.get_logger(__name__)


class CategoryService:
    """Service for product categories."""

    def list_categories(self) -> list[CategoryResponse]:
        """Return all categories."""
        return [CategoryResponse.from_model(c) for c in CategoryRepository.list_all()]

    def get_category(self, category_id: int) -> CategoryResponse:
        """Fetch one category or raise CategoryNotFoundError."""
        return CategoryResponse.from_model(CategoryRepository.get_by_id(category_id))

    def create_category(
        self, actor: User, request: CategoryCreateRequest
    ) -> CategoryResponse:
        """Create a category with a unique name.

        Raises:
            ConflictError: If a category with this name exists
        """
        if CategoryRepository.name_taken(request.name):
            raise ConflictError("Category already exists", detail=request.name)

        category = Category(name=request.name, description=request.description)
        self._save(category)
        logger.info("category_created", category_id=category.pk, admin_id=actor.pk)
        return CategoryResponse.from_model(category)

    def update_category(
        self, actor: User, category_id: int, request: CategoryUpdateRequest
    ) -> CategoryResponse:
        """Rename or re-describe a category.

        Raises:
            CategoryNotFoundError: If the category does not exist
            ConflictError: If another category already has the new name
        """
        category = CategoryRepository.get_by_id(category_id)
        if request.name is not None:
            if CategoryRepository.name_taken(request.name, exclude_id=category.pk):
                raise ConflictError("Category already exists", detail=request.name)
            category.name = request.name
        if request.description is not None:
            category.description = request.description
        self._save(category)
        logger.info("category_updated", category_id=category.pk, admin_id=actor.pk)
        return CategoryResponse.from_model(category)

    def delete_category(self, actor: User, category_id: int) -> CategoryResponse:
        """Delete a category. Its products stay, without a category.

        Returns:
            The deleted category as it was before deletion
        """
        category = CategoryRepository.get_by_id(category_id)
        removed = CategoryResponse.from_model(category)
        category.delete()
        logger.info("category_deleted", category_id=category_id, admin_id=actor.pk)
        return removed

    @staticmethod
    def _save(category: Category) -> None:
        try:
            with transaction.atomic():
                category.save()
        except IntegrityError as e:
            raise ConflictError("Category already exists", detail=str(e)) from e


# Global category service instance
category_service = CategoryService()
