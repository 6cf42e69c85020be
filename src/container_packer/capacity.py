"""Capacity search: the largest uniform quantity a container can fully accommodate."""

from __future__ import annotations

import logging
from typing import Optional

from container_packer.config import get_settings
from container_packer.errors import CapacitySearchError
from container_packer.models import AlgorithmPackingResult, Container, ContainerPackingResult, Item
from container_packer.packing.registry import get_packing_algorithm
from container_packer.service import clone_items, pack

logger = logging.getLogger(__name__)


def with_quantity(items: list[Item], quantity: int) -> list[Item]:
    """Same item lines with every quantity replaced by `quantity`."""
    return [i.model_copy(update={"quantity": quantity}) for i in clone_items(items)]


def _run(
    container: Container,
    items: list[Item],
    algorithm_id: int,
    quantity: int,
    max_workers: Optional[int],
) -> list[ContainerPackingResult]:
    results = pack([container], with_quantity(items, quantity), [algorithm_id], max_workers)
    failures = results[0].failures
    if failures:
        raise CapacitySearchError(
            f"Algorithm {algorithm_id} failed at quantity {quantity}: {failures[0].message}"
        )
    return results


def _is_complete(results: list[ContainerPackingResult]) -> bool:
    return results[0].algorithm_packing_results[0].is_complete_pack


def pack_total(
    containers: list[Container],
    items: list[Item],
    algorithm_ids: list[int],
    max_workers: Optional[int] = None,
    max_quantity: Optional[int] = None,
) -> list[ContainerPackingResult]:
    """
    Find the maximum quantity q such that q units of every item line still pack
    completely into the container.

    Phase 1 doubles the quantity (2, 4, 8, ...) until a pack is incomplete, which
    gives an upper bound. Phase 2 binary searches [0, bound]: a complete pack at
    mid with an incomplete pack at mid+1 makes mid the answer.

    Assumes packing is monotonic in quantity (complete at q implies complete at
    every q' < q). This is not checked; if the algorithm violates it the returned
    quantity may be wrong.

    Args:
        containers: Exactly one container
        items: Item lines; only their dimensions are used
        algorithm_ids: Exactly one algorithm identifier
        max_workers: Passed through to pack()
        max_quantity: Ceiling for the doubling phase (default: CP_CAPACITY_MAX_QUANTITY)

    Returns:
        The pack result at the discovered quantity, with total_items_in_container
        set on its algorithm result

    Raises:
        ValueError: if not exactly one container and one algorithm are given
        UnsupportedAlgorithmError: if the algorithm identifier is unknown
        CapacitySearchError: if the algorithm fails, or every quantity up to
            max_quantity packs completely
    """
    if len(containers) != 1:
        raise ValueError(f"Capacity search needs exactly one container, got {len(containers)}")
    if len(algorithm_ids) != 1:
        raise ValueError(f"Capacity search needs exactly one algorithm, got {len(algorithm_ids)}")

    container = containers[0]
    algorithm_id = algorithm_ids[0]
    # Resolve before any packing so an unknown id fails fast
    get_packing_algorithm(algorithm_id)

    if max_quantity is None:
        max_quantity = get_settings().capacity_max_quantity

    if not items:
        # Nothing to scale: every quantity packs
        result = _run(container, items, algorithm_id, 0, max_workers)
        result[0].algorithm_packing_results[0].total_items_in_container = 0
        return result

    logger.info(f"Capacity search on container {container.id} with algorithm {algorithm_id}")

    # Phase 1: bound discovery; stops at the first incomplete pack, even at 2
    upper = 2
    while _is_complete(_run(container, items, algorithm_id, upper, max_workers)):
        if upper >= max_quantity:
            raise CapacitySearchError(
                f"Every quantity up to {max_quantity} packs completely; no upper bound found"
            )
        upper = min(upper * 2, max_quantity)
    logger.debug(f"Capacity search upper bound: {upper}")

    # Phase 2: binary search for the largest complete quantity
    low, high = 0, upper
    items_count = 0
    result = None
    while low <= high:
        mid = (low + high) // 2
        result = _run(container, items, algorithm_id, mid, max_workers)
        if not _is_complete(result):
            high = mid - 1
            continue

        logger.debug(f"Quantity {mid} packs completely, probing {mid + 1}")
        if not _is_complete(_run(container, items, algorithm_id, mid + 1, max_workers)):
            items_count = mid
            break
        low = mid + 1
    else:
        # Only reachable when packing is not monotonic
        logger.warning(
            f"Capacity search on container {container.id} ended without a complete/incomplete "
            f"boundary; reporting {items_count}"
        )

    best: AlgorithmPackingResult = result[0].algorithm_packing_results[0]
    best.total_items_in_container = items_count
    logger.info(f"Container {container.id} holds {items_count} units of each item line")
    return result
