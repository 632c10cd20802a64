"""Geometry utilities for cartonization."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import BoxSize, Dimensions, PackableItem


def dims_volume(dims: "Dimensions") -> float:
    """Raw L * W * H product, no unit normalization."""
    return float(dims.length) * float(dims.width) * float(dims.height)


def item_volume(item: "PackableItem") -> float:
    return dims_volume(item.dimensions)


def box_volume(box: "BoxSize") -> float:
    return dims_volume(box.inner_dimensions)


def sorted_dims(dims: "Dimensions") -> tuple[float, float, float]:
    """Return the three dimensions ascending, independent of axis naming."""
    a, b, c = sorted((float(dims.length), float(dims.width), float(dims.height)))
    return a, b, c


def dims_fit(inner: "Dimensions", outer: "Dimensions") -> bool:
    """
    Orientation-agnostic containment test.

    Both triples are sorted ascending and compared component-wise, which
    accepts any axis-aligned rotation of the inner shape:
      12x3x3 vs 16x12x10 -> [3, 3, 12] <= [10, 12, 16] -> True
      12x3x3 vs 10x8x6   -> 12 > 10 on the last axis  -> False

    Matching dimensions are accepted (<=, not <).
    """
    return all(i <= o for i, o in zip(sorted_dims(inner), sorted_dims(outer)))


def fits_in_empty_box(item: "PackableItem", box: "BoxSize") -> bool:
    """Can a single unit of `item` go into an empty `box` (dimensions and weight)?"""
    if float(item.weight.value) > float(box.max_weight.value):
        return False
    return dims_fit(item.dimensions, box.inner_dimensions)
