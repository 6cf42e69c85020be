from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from container_packer.capacity import pack_total
from container_packer.config import get_settings
from container_packer.errors import PackingError
from container_packer.models import Container, ContainerPackingResult, Item
from container_packer.packing.base import AlgorithmType
from container_packer.service import pack

logger = logging.getLogger(__name__)


def load_input(path: Path) -> tuple[list[Container], list[Item], list[int]]:
    """
    Read a packing request JSON file.

    Expected keys: "containers" and "items" (lists of objects matching the
    Container and Item models), and optional "algorithms" (list of ints,
    default [1]).
    """
    data = json.loads(path.read_text(encoding="utf-8"))

    if "containers" not in data:
        raise ValueError("Input must include 'containers'")

    containers = [Container(**c) for c in data["containers"]]
    items = [Item(**i) for i in data.get("items", [])]
    algorithm_ids = [int(a) for a in data.get("algorithms", [int(AlgorithmType.FIRST_FIT_DECREASING)])]
    return containers, items, algorithm_ids


def write_result(result: dict, path: str) -> None:
    """
    Save the packing result (mode, per-container results and, for capacity
    runs, max_quantity) as pretty-printed JSON, replacing any earlier file.
    """
    output_path = Path(path).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(result, f, indent=2, sort_keys=True)
    logger.info(f"Wrote result to {output_path}")


def summarize(results: list[ContainerPackingResult]) -> list[str]:
    lines = []
    for container_result in sorted(results, key=lambda r: str(r.container_id)):
        for r in container_result.algorithm_packing_results:
            line = (
                f"{container_result.container_id} {r.algorithm_name}: "
                f"packed={len(r.packed_items)} unpacked={len(r.unpacked_items)} "
                f"container={r.percent_container_volume_packed:.2f}% "
                f"items={r.percent_item_volume_packed:.2f}%"
            )
            if r.total_items_in_container is not None:
                line += f" max_quantity={r.total_items_in_container}"
            lines.append(line)
        for failure in container_result.failures:
            lines.append(
                f"{container_result.container_id} algorithm {failure.algorithm_id}: "
                f"FAILED {failure.error_type}: {failure.message}"
            )
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Container packing CLI")
    parser.add_argument("--input", required=True, help="Input request JSON file")
    parser.add_argument("--output", required=True, help="Output result JSON file")
    parser.add_argument(
        "--mode",
        choices=["pack", "capacity"],
        default="pack",
        help="pack = run every algorithm on every container, capacity = find max uniform quantity",
    )
    parser.add_argument("--max-workers", type=int, default=None, help="Thread pool size per fan-out level")

    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as e:
        print(f"error: invalid CP_* setting: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        containers, items, algorithm_ids = load_input(Path(args.input))
        if args.mode == "capacity":
            results = pack_total(containers, items, algorithm_ids, max_workers=args.max_workers)
        else:
            results = pack(containers, items, algorithm_ids, max_workers=args.max_workers)
    except (ValueError, ValidationError, PackingError) as e:
        logger.error(f"Packing request failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 2

    output = {
        "mode": args.mode,
        "results": [r.model_dump(mode="json") for r in results],
    }
    if args.mode == "capacity":
        output["max_quantity"] = results[0].algorithm_packing_results[0].total_items_in_container

    write_result(output, args.output)
    for line in summarize(results):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
