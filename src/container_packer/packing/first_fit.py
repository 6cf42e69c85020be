# src/container_packer/packing/first_fit.py

from __future__ import annotations

import logging

from container_packer.geometry import can_place, candidate_points, rotations
from container_packer.models import Container, Item, Placement, PlacementOutcome
from container_packer.packing.base import AlgorithmType, PackingAlgorithm

logger = logging.getLogger(__name__)


def expand_units(items: list[Item]) -> list[tuple[Item, Item]]:
    """Split item lines into (line, unit) pairs, one unit per quantity."""
    units = []
    for line in items:
        for _ in range(line.quantity):
            units.append((line, line.model_copy(update={"quantity": 1, "packed_quantity": 0})))
    return units


def pack_units(container: Container, units: list[tuple[Item, Item]]) -> PlacementOutcome:
    """
    First-fit packer that accepts the FIRST feasible placement for each unit.
    - Explores candidate points + 6 rotations
    - Appends AT MOST ONE placement per unit
    - Deterministic (no randomness)
    - Increments packed_quantity on the unit's item line when it is placed
    """
    placements: list[Placement] = []
    packed: list[Item] = []
    unpacked: list[Item] = []

    for line, unit in units:
        placed = False

        for (x, y, z) in candidate_points(placements):
            for (l, w, h) in rotations(unit):
                candidate = Placement(
                    item_id=unit.id,
                    x=float(x),
                    y=float(y),
                    z=float(z),
                    dims=(l, w, h),
                )
                if can_place(candidate, container, placements):
                    placements.append(candidate)
                    placed = True
                    break
            if placed:
                break

        if placed:
            unit.packed_quantity = 1
            line.packed_quantity += 1
            packed.append(unit)
        else:
            unpacked.append(unit)

    logger.debug(
        f"Container {container.id}: placed {len(packed)} of {len(units)} units"
    )
    return PlacementOutcome(
        packed_items=packed,
        unpacked_items=unpacked,
        placements=placements,
        is_complete_pack=not unpacked,
    )


class FirstFitDecreasing(PackingAlgorithm):
    """Largest units first, each at the first feasible extreme point."""

    algorithm_type = AlgorithmType.FIRST_FIT_DECREASING
    name = "FirstFitDecreasing"

    def run(self, container: Container, items: list[Item]) -> PlacementOutcome:
        # Sort big units first (helps fill); sorted() is stable so equal volumes keep input order
        units = sorted(expand_units(items), key=lambda pair: pair[1].volume, reverse=True)
        return pack_units(container, units)


class FirstFit(PackingAlgorithm):
    """Units in input order, each at the first feasible extreme point."""

    algorithm_type = AlgorithmType.FIRST_FIT
    name = "FirstFit"

    def run(self, container: Container, items: list[Item]) -> PlacementOutcome:
        return pack_units(container, expand_units(items))
