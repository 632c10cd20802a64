from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Measurement(CamelModel):
    """A quantity with a unit (used for weight). Units are never converted."""

    value: float = Field(ge=0, description="Numeric amount")
    unit: str = Field(description="Unit label, e.g. 'lb' or 'kg'")


class Dimensions(CamelModel):
    """Length, width and height sharing one unit."""

    length: float = Field(ge=0, description="Length")
    width: float = Field(ge=0, description="Width")
    height: float = Field(ge=0, description="Height")
    unit: str = Field(description="Unit label, e.g. 'in' or 'cm'")


class PackableItem(CamelModel):
    """One cart/order line before it is expanded into single units."""

    id: str = Field(description="Item identifier")
    weight: Measurement = Field(description="Weight of a single unit")
    dimensions: Dimensions = Field(description="Dimensions of a single unit")
    quantity: int = Field(default=1, ge=1, description="Number of units")


class BoxSize(CamelModel):
    """A shipping box from the operator's catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Box identifier")
    name: str = Field(description="Display name")
    inner_dimensions: Dimensions = Field(description="Usable inner dimensions")
    max_weight: Measurement = Field(description="Maximum content weight")
    # minor currency units (e.g. cents)
    cost: int = Field(ge=0, description="Box material cost")


class PackedItem(CamelModel):
    item_id: str
    quantity: int = Field(ge=1)


class PackedBox(CamelModel):
    """A box opened by the packer together with what went into it."""

    box: BoxSize
    items: list[PackedItem] = Field(default_factory=list)
    total_weight: Measurement
    volume_utilization: float = Field(default=0.0, ge=0, description="Used fraction of inner volume")


class UnpackedItem(CamelModel):
    item_id: str
    reason: str


class PackingResult(CamelModel):
    """Standard result returned by the packer."""

    boxes: list[PackedBox] = Field(default_factory=list)
    total_boxes: int = 0
    total_weight: Measurement
    total_box_cost: int = 0
    unpacked: list[UnpackedItem] = Field(default_factory=list)
