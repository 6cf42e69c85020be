"""Geometry utilities for placing units inside a container."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Container, Item, Placement

Bounds = tuple[float, float, float, float, float, float]


def boxes_overlap(a: Bounds, b: Bounds) -> bool:
    """
    True when two placed units share interior volume.

    Bounds are (x1, y1, z1, x2, y2, z2). Units that only touch along a face or
    edge (ax2 == bx1) may sit side by side and do not count.
    """
    ax1, ay1, az1, ax2, ay2, az2 = a
    bx1, by1, bz1, bx2, by2, bz2 = b

    return (ax1 < bx2 and ax2 > bx1) and (ay1 < by2 and ay2 > by1) and (az1 < bz2 and az2 > bz1)


def rotations(item: "Item") -> list[tuple[float, float, float]]:
    """
    The 6 axis-aligned orientations of a unit, duplicates removed
    (a cube has only one).
    """
    L, W, H = float(item.length), float(item.width), float(item.height)
    out: list[tuple[float, float, float]] = []
    for dims in ((L, W, H), (L, H, W), (W, L, H), (W, H, L), (H, L, W), (H, W, L)):
        if dims not in out:
            out.append(dims)
    return out


def placement_bounds(placement: "Placement") -> Bounds:
    L, W, H = placement.dims
    x, y, z = float(placement.x), float(placement.y), float(placement.z)
    return (x, y, z, x + L, y + W, z + H)


def can_place(candidate: "Placement", container: "Container", existing: list["Placement"]) -> bool:
    """
    Check if a unit can be placed at the candidate position:
    - inside container bounds
    - no overlap with existing placements
    """
    new_bounds = placement_bounds(candidate)

    _, _, _, new_x2, new_y2, new_z2 = new_bounds
    if new_x2 > float(container.length) or new_y2 > float(container.width) or new_z2 > float(container.height):
        return False

    for p in existing:
        if boxes_overlap(new_bounds, placement_bounds(p)):
            return False

    return True


def candidate_points(placements: list["Placement"]) -> list[tuple[float, float, float]]:
    """
    Extreme-points style candidates:
      start with origin,
      add (x+L, y, z), (x, y+W, z), (x, y, z+H) for each placed unit.
    """
    points: set[tuple[float, float, float]] = {(0.0, 0.0, 0.0)}

    for p in placements:
        L, W, H = p.dims
        x, y, z = float(p.x), float(p.y), float(p.z)

        points.add((x + L, y, z))
        points.add((x, y + W, z))
        points.add((x, y, z + H))

    # Sort by (y, z, x) to enforce floor-first placement: all y=0 candidates before y>0
    return sorted(points, key=lambda t: (t[1], t[2], t[0]))
