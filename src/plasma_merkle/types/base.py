"""Base model for the JSON documents exchanged with checkpoint tooling."""

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self


class StrictDocument(BaseModel):
    """
    A strict, immutable pydantic model with a JSON document form.

    Documents are read from files that other tools produced, so unknown
    keys and implicit type coercion are rejected rather than ignored.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
    )

    def to_json(self) -> str:
        """Render the document as indented JSON."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """
        Parse and validate a JSON document.

        Raises:
            pydantic.ValidationError: If the document is malformed.
        """
        return cls.model_validate_json(data)
