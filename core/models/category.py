"""Category model."""

from typing import ClassVar

from django.db import models


class Category(models.Model):
    """Product category."""

    name = models.CharField(max_length=32, unique=True)
    description = models.TextField(blank=True, default="")

    class Meta:
        """Django model metadata."""

        db_table = "categories"
        ordering: ClassVar[list[str]] = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        """Return string representation of category."""
        return self.name
