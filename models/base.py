"""
Base schemas for all models.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Base for feed-derived schemas.

    Features:
        - Validate on attribute assignment
        - Allow ORM-style objects (from_attributes)

    Strings are kept verbatim: product names built from the feed must match
    catalog names exactly, trailing spaces included.
    """
    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True
    )


class ResponseSchema(BaseModel):
    """
    Base for decoded catalog API responses.

    Unknown fields are ignored so API additions don't break decoding;
    missing required fields fail validation.
    """
    model_config = ConfigDict(
        extra="ignore"
    )
