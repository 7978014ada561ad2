"""Pydantic schemas for API responses that are not reports."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """Body returned for rejected requests."""

    error: str


class HealthResponse(BaseModel):
    """Service status, including whether a places API key is configured."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str = "healthy"
    service: str
    version: str
    listing_lookup: bool
