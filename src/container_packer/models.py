from __future__ import annotations

from typing import Optional, Tuple, Union

from pydantic import BaseModel, Field

Identifier = Union[int, str]


class Container(BaseModel):
    """Container model with identifier and dimensions."""

    id: Identifier = Field(description="Unique identifier for the container")
    length: float = Field(gt=0, description="Length of the container")
    width: float = Field(gt=0, description="Width of the container")
    height: float = Field(gt=0, description="Height of the container")

    @property
    def volume(self) -> float:
        return float(self.length) * float(self.width) * float(self.height)


class Item(BaseModel):
    """Item line: one set of identical units sharing id and dimensions."""

    id: Identifier = Field(description="Identifier of the item")
    length: float = Field(gt=0, description="Length of one unit")
    width: float = Field(gt=0, description="Width of one unit")
    height: float = Field(gt=0, description="Height of one unit")
    quantity: int = Field(default=1, ge=0, description="Number of identical units")

    # Written by packing algorithms as they place units of this line
    packed_quantity: int = Field(default=0, ge=0, description="Units placed so far")

    @property
    def volume(self) -> float:
        """Volume of a single unit."""
        return float(self.length) * float(self.width) * float(self.height)

    @property
    def total_volume(self) -> float:
        return self.volume * self.quantity


class Placement(BaseModel):
    """Position of one packed unit and its oriented dimensions."""

    item_id: Identifier = Field(description="Identifier of the placed item")
    x: float = Field(ge=0, description="X coordinate of the unit position")
    y: float = Field(ge=0, description="Y coordinate of the unit position")
    z: float = Field(ge=0, description="Z coordinate of the unit position")

    # ACTUAL placed dimensions after rotation: (L, W, H)
    dims: Tuple[float, float, float] = Field(
        description="Oriented dimensions (L, W, H) of the placed unit"
    )


class PlacementOutcome(BaseModel):
    """What a packing algorithm returns for one container."""

    packed_items: list[Item] = Field(default_factory=list)
    unpacked_items: list[Item] = Field(default_factory=list)
    placements: list[Placement] = Field(default_factory=list)
    is_complete_pack: bool = False


class AlgorithmPackingResult(BaseModel):
    """Outcome of one algorithm run against one container, with metrics."""

    algorithm_id: int
    algorithm_name: str
    is_complete_pack: bool = False
    packed_items: list[Item] = Field(default_factory=list)
    unpacked_items: list[Item] = Field(default_factory=list)
    placements: list[Placement] = Field(default_factory=list)
    pack_time_ms: float = 0.0
    percent_container_volume_packed: float = 0.0
    percent_item_volume_packed: float = 0.0
    total_items_in_container: Optional[int] = Field(
        default=None,
        description="Maximum uniform quantity found by the capacity search",
    )


class AlgorithmFailure(BaseModel):
    """Slot recorded for an algorithm run that raised instead of returning."""

    algorithm_id: Identifier
    error_type: str
    message: str


class ContainerPackingResult(BaseModel):
    """All algorithm results for one container."""

    container_id: Identifier
    algorithm_packing_results: list[AlgorithmPackingResult] = Field(default_factory=list)
    failures: list[AlgorithmFailure] = Field(default_factory=list)
