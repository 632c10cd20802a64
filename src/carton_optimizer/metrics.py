from __future__ import annotations

from carton_optimizer.models import Measurement, PackedBox, PackingResult, UnpackedItem

# An empty result has no box to take a unit from.
DEFAULT_WEIGHT_UNIT = "lb"


def total_weight(boxes: list[PackedBox]) -> Measurement:
    value = sum(float(pb.total_weight.value) for pb in boxes)
    unit = boxes[0].total_weight.unit if boxes else DEFAULT_WEIGHT_UNIT
    return Measurement(value=value, unit=unit)


def total_box_cost(boxes: list[PackedBox]) -> int:
    return sum(int(pb.box.cost) for pb in boxes)


def summarize(boxes: list[PackedBox], unpacked: list[UnpackedItem]) -> PackingResult:
    """Build the final result from the opened boxes and the rejected units."""
    return PackingResult(
        boxes=boxes,
        total_boxes=len(boxes),
        total_weight=total_weight(boxes),
        total_box_cost=total_box_cost(boxes),
        unpacked=unpacked,
    )


def packed_quantity(result: PackingResult) -> int:
    """Number of units that ended up in a box."""
    return sum(entry.quantity for pb in result.boxes for entry in pb.items)
