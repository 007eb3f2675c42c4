"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, ConfigDict, Field


class FurnitureBodySchema(BaseModel):
    """One furniture-body element to cut.

    Fields are optional here; required values and positive sizes are checked
    by the application layer so every violated rule is reported together.
    """

    id: int | None = Field(default=None, description="Element identifier")
    width: int | None = Field(default=None, description="Element width")
    height: int | None = Field(default=None, description="Element height")
    depth: int | None = Field(default=0, description="Element depth (not packed)")


class CutRequestSchema(BaseModel):
    """Request for laying out elements on one stock sheet."""

    model_config = ConfigDict(populate_by_name=True)

    sheet_width: int | None = Field(
        default=None, alias="sheetWidth", description="Sheet width"
    )
    sheet_height: int | None = Field(
        default=None, alias="sheetHeight", description="Sheet height"
    )
    elements: list[FurnitureBodySchema] | None = Field(
        default=None, description="Elements to place"
    )
