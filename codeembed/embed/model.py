from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import Malformed


class EmbedRequest(BaseModel):
    """One instruction to resolve, filter, and label a source excerpt.

    Field aliases match the keys authors write in an embed block
    (``PATH``, ``LINES``, ``TITLE``).
    """

    location: str | None = Field(None, alias="PATH")
    lines: str | None = Field(None, alias="LINES")
    title: str | None = Field(None, alias="TITLE")
    language: str = "text"

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @field_validator("lines", "title", mode="before")
    @classmethod
    def _coerce_scalar(cls, value: Any) -> Any:
        # YAML reads ``LINES: 12`` as an int
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_metadata(cls, metadata: Any, *, language: str | None = None) -> "EmbedRequest":
        """Validate host-supplied block metadata into a request.

        Raises:
            Malformed: If ``metadata`` is not a mapping or a field has the
                wrong type.
        """
        if metadata is None:
            metadata = {}
        if not isinstance(metadata, Mapping):
            raise Malformed("metadata is not a mapping")

        data = dict(metadata)
        if language is not None:
            data["language"] = language

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) for error in exc.errors()
            )
            raise Malformed(f"invalid field {fields}") from exc


class EmbedResult(BaseModel):
    """Extracted text plus the title it should be displayed under."""

    text: str
    title: str
    language: str = "text"


__all__ = ["EmbedRequest", "EmbedResult"]
