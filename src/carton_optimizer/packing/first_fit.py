# src/carton_optimizer/packing/first_fit.py

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

from carton_optimizer.geometry import box_volume, fits_in_empty_box, item_volume
from carton_optimizer.metrics import summarize
from carton_optimizer.models import (
    BoxSize,
    Measurement,
    PackableItem,
    PackedBox,
    PackedItem,
    PackingResult,
    UnpackedItem,
)

logger = logging.getLogger(__name__)

# Items are not tessellated in real boxes; a box "100% full" by volume sum is overstuffed.
MAX_VOLUME_UTILIZATION = 0.9

NO_BOX_REASON = "No available box can fit this item"

ItemLike = Union[PackableItem, Mapping[str, Any]]
BoxLike = Union[BoxSize, Mapping[str, Any]]


def _as_item(item: ItemLike) -> PackableItem:
    return item if isinstance(item, PackableItem) else PackableItem.model_validate(item)


def _as_box(box: BoxLike) -> BoxSize:
    return box if isinstance(box, BoxSize) else BoxSize.model_validate(box)


def expand_items(items: Iterable[PackableItem]) -> list[PackableItem]:
    """One entry per physical unit, each with quantity=1."""
    expanded: list[PackableItem] = []
    for item in items:
        for _ in range(item.quantity):
            expanded.append(item.model_copy(update={"quantity": 1}))
    return expanded


def _utilization_after(packed: PackedBox, item: PackableItem) -> float:
    box_vol = box_volume(packed.box)
    if box_vol == 0.0:
        return 0.0
    used_vol = packed.volume_utilization * box_vol
    return (used_vol + item_volume(item)) / box_vol


def can_fit_in_box(item: PackableItem, packed: PackedBox) -> bool:
    """
    Can one more unit join an already opened box?

    Checks remaining weight capacity and the running volume fraction only;
    there is no geometric check against what is already inside.
    A zero-volume box never takes a second unit.
    """
    if box_volume(packed.box) == 0.0:
        return False
    new_weight = float(packed.total_weight.value) + float(item.weight.value)
    if new_weight > float(packed.box.max_weight.value):
        return False
    return _utilization_after(packed, item) <= MAX_VOLUME_UTILIZATION


def add_item_to_box(item: PackableItem, packed: PackedBox) -> None:
    """Place one unit into `packed`, grouping by item id."""
    for entry in packed.items:
        if entry.item_id == item.id:
            entry.quantity += 1
            break
    else:
        packed.items.append(PackedItem(item_id=item.id, quantity=1))

    packed.total_weight.value += float(item.weight.value)
    packed.volume_utilization = _utilization_after(packed, item)


def find_smallest_suitable_box(item: PackableItem, sorted_boxes: list[BoxSize]) -> BoxSize | None:
    """First box (catalog sorted ascending by volume) that holds the unit on its own."""
    for box in sorted_boxes:
        if fits_in_empty_box(item, box):
            return box
    return None


def pack(items: Iterable[ItemLike], available_boxes: Iterable[BoxLike]) -> PackingResult:
    """
    First-Fit-Decreasing cartonization.
    - Expands quantities into single units
    - Sorts units by volume descending, catalog by volume ascending
    - Tries every opened box in opening order before opening a new one
    - Opens the smallest catalog box that fits the unit in isolation
    - Units no catalog box can hold are reported in `unpacked`
    - Greedy: a placement is never revisited
    """
    item_list = [_as_item(i) for i in items]
    box_list = [_as_box(b) for b in available_boxes]

    if item_list and not box_list:
        logger.warning(
            f"Box catalog is empty; all {len(item_list)} item line(s) will be unpacked. "
            "Check the shipping box configuration."
        )

    units = sorted(expand_items(item_list), key=item_volume, reverse=True)
    sorted_boxes = sorted(box_list, key=box_volume)

    packed_boxes: list[PackedBox] = []
    unpacked: list[UnpackedItem] = []

    for unit in units:
        target = next((pb for pb in packed_boxes if can_fit_in_box(unit, pb)), None)

        if target is None:
            box = find_smallest_suitable_box(unit, sorted_boxes)
            if box is None:
                logger.debug(f"Item {unit.id} unpacked: no box fits")
                unpacked.append(UnpackedItem(item_id=unit.id, reason=NO_BOX_REASON))
                continue
            target = PackedBox(
                box=box,
                total_weight=Measurement(value=0.0, unit=unit.weight.unit),
            )
            packed_boxes.append(target)
            logger.debug(f"Opened box {box.id} (#{len(packed_boxes)}) for item {unit.id}")

        add_item_to_box(unit, target)

    result = summarize(packed_boxes, unpacked)

    logger.info(
        f"Packed {len(units)} item(s) into {result.total_boxes} box(es)"
        + (f", {len(unpacked)} item(s) unpacked" if unpacked else "")
    )
    return result
