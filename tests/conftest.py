"""Pytest fixtures for container packing tests."""

from __future__ import annotations

import pytest

from container_packer.models import Container, Item, PlacementOutcome
from container_packer.packing.base import AlgorithmType, PackingAlgorithm
from container_packer.packing.registry import PACKING_ALGORITHMS


def make_threshold_algorithm(threshold: int, name: str = "Threshold") -> type[PackingAlgorithm]:
    """Algorithm that packs a request completely iff no item line asks for more than `threshold` units."""

    class ThresholdAlgorithm(PackingAlgorithm):
        algorithm_type = AlgorithmType.FIRST_FIT_DECREASING

        def run(self, container: Container, items: list[Item]) -> PlacementOutcome:
            packed: list[Item] = []
            unpacked: list[Item] = []
            for line in items:
                for i in range(line.quantity):
                    unit = line.model_copy(update={"quantity": 1})
                    (packed if i < threshold else unpacked).append(unit)
            return PlacementOutcome(
                packed_items=packed,
                unpacked_items=unpacked,
                is_complete_pack=not unpacked,
            )

    ThresholdAlgorithm.name = name
    return ThresholdAlgorithm


@pytest.fixture
def use_algorithm(monkeypatch):
    """Swap the class registered for an AlgorithmType for the duration of a test."""

    def _use(algorithm_type: AlgorithmType, cls: type[PackingAlgorithm]) -> None:
        monkeypatch.setitem(PACKING_ALGORITHMS, algorithm_type, cls)

    return _use


@pytest.fixture
def unit_cube() -> Item:
    return Item(id="CUBE", length=1, width=1, height=1, quantity=1)
