"""Base pydantic model for centralized configuration of schema definitions."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Money values leave the API as strings with exactly two fraction digits
Money = Annotated[
    Decimal,
    PlainSerializer(lambda value: f"{value:.2f}", return_type=str, when_used="json"),
]


class BaseSchemaModel(BaseModel):
    """Base pydantic model for centralized configuration of schema definitions.

    Field names are snake_case in Python and camelCase on the wire
    (``count_in_stock`` <-> ``countInStock``). Requests may use either form.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    def to_response(self) -> dict[str, Any]:
        """Dump the model as JSON-ready data keyed by the camelCase aliases."""
        return self.model_dump(mode="json", by_alias=True)
