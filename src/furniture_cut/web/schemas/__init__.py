"""Pydantic schemas for the REST API."""

from furniture_cut.web.schemas.requests import CutRequestSchema, FurnitureBodySchema
from furniture_cut.web.schemas.responses import (
    CuttingSheetSchema,
    ErrorResponseSchema,
    PackingFailureResponseSchema,
    PlacedElementSchema,
)

__all__ = [
    # Requests
    "CutRequestSchema",
    "FurnitureBodySchema",
    # Responses
    "CuttingSheetSchema",
    "ErrorResponseSchema",
    "PackingFailureResponseSchema",
    "PlacedElementSchema",
]
