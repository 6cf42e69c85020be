"""Packing algorithm contract."""

from __future__ import annotations

from enum import IntEnum

from container_packer.models import Container, Item, PlacementOutcome


class AlgorithmType(IntEnum):
    """Identifiers of the supported packing algorithms."""

    FIRST_FIT_DECREASING = 1
    FIRST_FIT = 2


class PackingAlgorithm:
    """Base class for packing algorithms."""

    algorithm_type: AlgorithmType
    name: str

    def run(self, container: Container, items: list[Item]) -> PlacementOutcome:
        """
        Pack items into the container.

        Args:
            container: Container to pack into
            items: Item lines to pack (may be marked as packed by the algorithm)

        Returns:
            PlacementOutcome with the packed and unpacked units
        """
        raise NotImplementedError
