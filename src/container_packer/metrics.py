from __future__ import annotations

from container_packer.models import Container, Item

PERCENT_DECIMALS = 2


def units_volume(items: list[Item]) -> float:
    """Total volume of a list of units (each counted once per quantity)."""
    return sum(item.volume * item.quantity for item in items)


def percent_container_volume_packed(container: Container, packed_volume: float) -> float:
    container_volume = container.volume
    if container_volume == 0:
        return 0.0
    return round(packed_volume / container_volume * 100, PERCENT_DECIMALS)


def percent_item_volume_packed(packed_volume: float, unpacked_volume: float) -> float:
    """
    Share of the requested item volume that was packed.

    With nothing requested there is nothing left unpacked, so the run counts
    as fully packed: 100.0.
    """
    requested_volume = packed_volume + unpacked_volume
    if requested_volume == 0:
        return 100.0
    return round(packed_volume / requested_volume * 100, PERCENT_DECIMALS)
