"""Base model class for content models."""

from datetime import date, datetime

from pydantic import BaseModel


class ContentModel(BaseModel):
    """Base model for all content models."""

    class Config:
        """Pydantic config."""

        populate_by_name = True
        arbitrary_types_allowed = True
        json_encoders = {
            datetime: lambda v: v.isoformat() if v else None,
            date: lambda v: v.isoformat() if v else None,
        }


def normalize_path(value: str) -> str:
    """Strip surrounding slashes and whitespace from a site path."""
    return value.strip().strip("/")
