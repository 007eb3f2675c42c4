"""Sheet cutting endpoints."""

import asyncio
import contextvars
import functools

from fastapi import APIRouter

from furniture_cut.application.commands import CutSheetCommand
from furniture_cut.application.dtos import CutRequestInput, FurnitureBodyInput
from furniture_cut.domain import CuttingSheet, PackingResult
from furniture_cut.infrastructure.repository import CuttingSheetNotFoundError
from furniture_cut.web.dependencies import CutCommandDep, ServiceFactoryDep
from furniture_cut.web.exceptions import (
    PackingFailedError,
    PackingTimeoutError,
    RequestValidationFailedError,
)
from furniture_cut.web.schemas.requests import CutRequestSchema
from furniture_cut.web.schemas.responses import (
    CuttingSheetSchema,
    ErrorResponseSchema,
    PackingFailureResponseSchema,
    PlacedElementSchema,
)

router = APIRouter(prefix="/furniture/cut", tags=["cut"])


def _to_input(request: CutRequestSchema) -> CutRequestInput:
    elements = None
    if request.elements is not None:
        elements = [
            FurnitureBodyInput(
                id=element.id,
                width=element.width,
                height=element.height,
                depth=element.depth,
            )
            for element in request.elements
        ]
    return CutRequestInput(
        sheet_width=request.sheet_width,
        sheet_height=request.sheet_height,
        elements=elements,
    )


def _sheet_to_schema(sheet: CuttingSheet) -> CuttingSheetSchema:
    return CuttingSheetSchema(
        id=sheet.id,
        width=sheet.width,
        height=sheet.height,
        used_area=sheet.used_area,
        waste_percentage=sheet.waste_percentage,
        placed_elements=[
            PlacedElementSchema(
                id=element.id,
                element_id=element.furniture_body_id,
                x=element.x,
                y=element.y,
                width=element.width,
                height=element.height,
            )
            for element in sheet.placed_elements
        ],
    )


async def _pack_with_deadline(
    command: CutSheetCommand, cut_input: CutRequestInput, timeout: float | None
) -> PackingResult:
    """Run packing in the default executor, optionally under a deadline.

    Raises:
        PackingTimeoutError: If the deadline elapses first. The worker
            thread finishes on its own and its result is dropped.
    """
    # The copied context carries the request id into the worker thread
    context = contextvars.copy_context()
    work = asyncio.get_running_loop().run_in_executor(
        None, functools.partial(context.run, command.pack, cut_input)
    )
    if timeout is None:
        return await work
    try:
        return await asyncio.wait_for(work, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise PackingTimeoutError(timeout) from e


@router.post(
    "",
    response_model=CuttingSheetSchema,
    responses={
        400: {"model": ErrorResponseSchema},
        422: {"model": PackingFailureResponseSchema},
        503: {"model": ErrorResponseSchema},
    },
)
async def cut_sheet(
    request: CutRequestSchema,
    factory: ServiceFactoryDep,
) -> CuttingSheetSchema:
    """Lay out furniture elements on one stock sheet.

    Packing runs in a worker thread. When a packing deadline is configured
    and elapses, the request fails with 503 and nothing is stored.

    Raises:
        RequestValidationFailedError: If the request violates field rules.
        PackingFailedError: If some elements do not fit on the sheet.
        PackingTimeoutError: If the packing deadline elapses.
    """
    command = factory.create_cut_command()
    cut_input = _to_input(request)

    errors = command.validate(cut_input)
    if errors:
        raise RequestValidationFailedError(errors)

    result = await _pack_with_deadline(
        command, cut_input, factory.config.web.packing_timeout_seconds
    )
    output = command.complete(cut_input, result)
    if output.failure is not None:
        raise PackingFailedError(output.failure)

    assert output.cutting_sheet is not None
    return _sheet_to_schema(output.cutting_sheet)


@router.get("", response_model=list[CuttingSheetSchema])
async def list_cutting_sheets(command: CutCommandDep) -> list[CuttingSheetSchema]:
    """List every stored cutting sheet."""
    return [_sheet_to_schema(sheet) for sheet in command.list_sheets()]


@router.get(
    "/{sheet_id}",
    response_model=CuttingSheetSchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def get_cutting_sheet(sheet_id: int, command: CutCommandDep) -> CuttingSheetSchema:
    """Return a stored cutting sheet.

    Raises:
        CuttingSheetNotFoundError: If no sheet has this identifier.
    """
    return _sheet_to_schema(command.get_sheet(sheet_id))


@router.delete(
    "/{sheet_id}",
    status_code=204,
    responses={404: {"model": ErrorResponseSchema}},
)
async def delete_cutting_sheet(sheet_id: int, command: CutCommandDep) -> None:
    """Delete a stored cutting sheet.

    Raises:
        CuttingSheetNotFoundError: If no sheet has this identifier.
    """
    if not command.delete_sheet(sheet_id):
        raise CuttingSheetNotFoundError(sheet_id)
