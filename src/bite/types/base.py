"""Strict, immutable base model for bite values."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Instances never change after construction; derive new values with `copy`.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )

    def copy(self: Self, **kwargs: Any) -> Self:  # type: ignore[override]
        """Create a copy of the model with the updated fields that are validated."""
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        return self.__class__(**(fields | kwargs))
