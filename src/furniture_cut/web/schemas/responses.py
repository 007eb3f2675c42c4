"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, ConfigDict, Field


class PlacedElementSchema(BaseModel):
    """An element placed on the sheet."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(..., description="Placed element identifier")
    element_id: int = Field(..., alias="elementId", description="Requested element id")
    x: int = Field(..., description="Left edge")
    y: int = Field(..., description="Top edge")
    width: int = Field(..., description="Width")
    height: int = Field(..., description="Height")


class CuttingSheetSchema(BaseModel):
    """A cutting sheet with its placements, in packing order."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(..., description="Cutting sheet identifier")
    width: int = Field(..., description="Sheet width")
    height: int = Field(..., description="Sheet height")
    used_area: int = Field(..., alias="usedArea", description="Area covered by elements")
    waste_percentage: float = Field(
        ..., alias="wastePercentage", description="Uncovered share of the sheet"
    )
    placed_elements: list[PlacedElementSchema] = Field(
        default_factory=list, alias="placedElements", description="Placements"
    )


class ErrorResponseSchema(BaseModel):
    """Error body for 400, 404 and 503 responses."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Error description")


class PackingFailureResponseSchema(ErrorResponseSchema):
    """Error body for a request whose elements do not fit the sheet."""

    model_config = ConfigDict(populate_by_name=True)

    unplaced_element_ids: list[int] = Field(
        ..., alias="unplacedElementIds", description="Elements left over"
    )
