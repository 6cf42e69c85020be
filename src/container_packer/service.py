"""Runs packing algorithms against containers concurrently and collects the results."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from container_packer.config import get_settings
from container_packer.metrics import (
    percent_container_volume_packed,
    percent_item_volume_packed,
    units_volume,
)
from container_packer.models import (
    AlgorithmFailure,
    AlgorithmPackingResult,
    Container,
    ContainerPackingResult,
    Item,
)
from container_packer.packing.base import PackingAlgorithm
from container_packer.packing.registry import get_packing_algorithm

logger = logging.getLogger(__name__)


def clone_items(items: list[Item]) -> list[Item]:
    """
    Rebuild every item line from its id, dimensions and quantity.

    Algorithms mark the items they are given as packed, so each concurrent run
    gets its own copies.
    """
    return [
        Item(id=i.id, length=i.length, width=i.width, height=i.height, quantity=i.quantity)
        for i in items
    ]


def run_algorithm(
    algorithm_id: int,
    algorithm: PackingAlgorithm,
    container: Container,
    items: list[Item],
) -> AlgorithmPackingResult:
    """
    Run one algorithm against one container and compute utilization.

    Args:
        algorithm_id: Identifier the algorithm was resolved from
        algorithm: Resolved algorithm instance
        container: Container to pack
        items: Private copy of the item lines; the algorithm may mutate them

    Returns:
        AlgorithmPackingResult with the outcome, elapsed time and volume percentages
    """
    start = time.perf_counter()
    outcome = algorithm.run(container, items)
    pack_time_ms = (time.perf_counter() - start) * 1000

    packed_volume = units_volume(outcome.packed_items)
    unpacked_volume = units_volume(outcome.unpacked_items)

    return AlgorithmPackingResult(
        algorithm_id=int(algorithm_id),
        algorithm_name=algorithm.name,
        is_complete_pack=outcome.is_complete_pack,
        packed_items=outcome.packed_items,
        unpacked_items=outcome.unpacked_items,
        placements=outcome.placements,
        pack_time_ms=round(pack_time_ms, 3),
        percent_container_volume_packed=percent_container_volume_packed(container, packed_volume),
        percent_item_volume_packed=percent_item_volume_packed(packed_volume, unpacked_volume),
    )


def pack_container(
    container: Container,
    items: list[Item],
    algorithm_ids: list[int],
    max_workers: Optional[int] = None,
) -> ContainerPackingResult:
    """
    Run every requested algorithm against one container concurrently.

    Each algorithm fills exactly one slot: a result, or a failure if resolving
    or running it raised. Results are ordered by algorithm name.
    """
    result = ContainerPackingResult(container_id=container.id)
    if not algorithm_ids:
        return result

    lock = threading.Lock()

    def _run_one(algorithm_id: int) -> None:
        try:
            algorithm = get_packing_algorithm(algorithm_id)
            algorithm_result = run_algorithm(algorithm_id, algorithm, container, clone_items(items))
        except Exception as e:
            logger.error(
                f"Algorithm {algorithm_id} failed on container {container.id}: {e!r}",
                exc_info=True,
            )
            failure = AlgorithmFailure(
                # Unresolvable ids may be any type; keep ints and strings, repr the rest
                algorithm_id=algorithm_id if isinstance(algorithm_id, (int, str)) else repr(algorithm_id),
                error_type=type(e).__name__,
                message=str(e),
            )
            with lock:
                result.failures.append(failure)
            return

        logger.debug(
            f"Container {container.id}: {algorithm_result.algorithm_name} packed "
            f"{algorithm_result.percent_container_volume_packed}% in {algorithm_result.pack_time_ms}ms"
        )
        with lock:
            result.algorithm_packing_results.append(algorithm_result)

    with ThreadPoolExecutor(
        max_workers=max_workers or len(algorithm_ids),
        thread_name_prefix=f"pack-{container.id}",
    ) as executor:
        futures = [executor.submit(_run_one, algorithm_id) for algorithm_id in algorithm_ids]
        for future in futures:
            future.result()

    result.algorithm_packing_results.sort(key=lambda r: r.algorithm_name)
    # Integer ids first, then string ids
    result.failures.sort(key=lambda f: (isinstance(f.algorithm_id, str), f.algorithm_id))
    return result


def pack(
    containers: list[Container],
    items: list[Item],
    algorithm_ids: list[int],
    max_workers: Optional[int] = None,
) -> list[ContainerPackingResult]:
    """
    Pack every container with every requested algorithm.

    Containers are packed concurrently, and within each container the algorithms
    run concurrently. The returned list has one entry per container in no
    particular order; sort by container_id if a stable order is needed.

    Args:
        containers: Containers to pack
        items: Item lines to pack into each container (never mutated)
        algorithm_ids: AlgorithmType values to run against each container
        max_workers: Thread pool size per fan-out level (default: CP_MAX_WORKERS
            setting, else one thread per task)

    Returns:
        List of ContainerPackingResult, one per container
    """
    if max_workers is None:
        max_workers = get_settings().max_workers

    results: list[ContainerPackingResult] = []
    if not containers:
        return results

    logger.info(
        f"Packing {len(items)} item lines into {len(containers)} containers "
        f"with algorithms {list(algorithm_ids)}"
    )
    lock = threading.Lock()

    def _pack_one(container: Container) -> None:
        container_result = pack_container(container, items, algorithm_ids, max_workers)
        with lock:
            results.append(container_result)

    with ThreadPoolExecutor(
        max_workers=max_workers or len(containers),
        thread_name_prefix="pack-fleet",
    ) as executor:
        futures = [executor.submit(_pack_one, container) for container in containers]
        for future in futures:
            future.result()

    logger.info(f"Packed {len(results)} containers")
    return results
