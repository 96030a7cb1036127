"""Category model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Category(BaseModel):
    """A top-level content section with its own index document.

    Attributes:
        id: Directory name under the documents root; also the URL segment.
        display_name: Label shown in the menu.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Reject identifiers that are not a single directory name."""
        v = v.strip()
        if not v or v in {".", ".."} or "/" in v or "\\" in v:
            err = f"category id must be a single directory name, got {v!r}"
            raise ValueError(err)
        return v
