"""Domain layer - packing engine and cutting results."""

from .entities import CuttingSheet, PlacedElement
from .packing import (
    FreeRectangleSet,
    MaxRectsPacker,
    PackingConfig,
    PackingFailure,
    PackingResult,
    PackingSuccess,
    pack,
    split_free_rectangle,
)
from .value_objects import (
    FreeRectangle,
    PackingPreconditionError,
    Piece,
    Placement,
    SplitRule,
)

__all__ = [
    "CuttingSheet",
    "FreeRectangle",
    "FreeRectangleSet",
    "MaxRectsPacker",
    "PackingConfig",
    "PackingFailure",
    "PackingPreconditionError",
    "PackingResult",
    "PackingSuccess",
    "Piece",
    "PlacedElement",
    "Placement",
    "SplitRule",
    "pack",
    "split_free_rectangle",
]
