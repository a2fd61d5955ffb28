"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for hardware catalog entries.

Every variant carries the shared identity/price fields from ProductFields
plus its own specification fields, and renders itself through describe().
Product is the closed union of the variants, discriminated on ``kind``.

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Dict, Literal, Mapping, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from hwinventory.core import exceptions


@runtime_checkable
class Describable(Protocol):
    """Anything that renders itself as a one-line, human-readable description."""

    def describe(self) -> str:
        ...


class ProductFields(BaseModel):
    """
    Field group shared by every catalog entry.

    Attributes:
        part_number: Lookup key (unique by convention, not enforced)
        name: Product display name
        price: Unit price
    """

    model_config = ConfigDict(frozen=True)

    part_number: str = Field(..., description="Catalog part number")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Unit price")

    def base_description(self) -> str:
        """Labeled shared fields, in declaration order."""
        return f"Part number: {self.part_number}, Name: {self.name}, Price: {self.price}"


class Motherboard(ProductFields):
    """Motherboard with socket, processor slots, memory type and bus speed."""

    kind: Literal["motherboard"] = "motherboard"

    socket_type: str
    processor_count: int
    ram_type: str
    # Free text such as "3200 MHz", never parsed
    bus_frequency: str

    def describe(self) -> str:
        return (
            f"{self.base_description()}, Socket: {self.socket_type}, "
            f"Processor count: {self.processor_count}, "
            f"RAM type: {self.ram_type}, Bus frequency: {self.bus_frequency}"
        )


class Processor(ProductFields):
    """Processor with socket, core count, clock speed (GHz) and process node."""

    kind: Literal["processor"] = "processor"

    socket_type: str
    core_count: int
    clock_speed: Decimal
    process_technology: str

    def describe(self) -> str:
        return (
            f"{self.base_description()}, Socket: {self.socket_type}, "
            f"Cores: {self.core_count}, Clock speed: {self.clock_speed} GHz, "
            f"Process technology: {self.process_technology}"
        )


class HardDrive(ProductFields):
    """Hard drive with capacity (GB), spindle speed (RPM) and interface."""

    kind: Literal["hard_drive"] = "hard_drive"

    capacity: int
    rotation_speed: int
    interface_type: str

    def describe(self) -> str:
        return (
            f"{self.base_description()}, Capacity: {self.capacity} GB, "
            f"Rotation speed: {self.rotation_speed} RPM, "
            f"Interface: {self.interface_type}"
        )


Product = Annotated[
    Union[Motherboard, Processor, HardDrive],
    Field(discriminator="kind"),
]

_product_adapter: TypeAdapter[Product] = TypeAdapter(Product)


def parse_product(data: Mapping[str, Any]) -> Product:
    """
    Build a product variant from raw field values.

    Args:
        data: Field values including the ``kind`` discriminator

    Returns:
        Motherboard, Processor or HardDrive instance

    Raises:
        CatalogError: INVALID_PRODUCT if the data does not fit any variant

    Example:
        >>> parse_product({"kind": "hard_drive", "part_number": "HDD001", ...})
        HardDrive(part_number='HDD001', ...)
    """
    try:
        return _product_adapter.validate_python(dict(data))
    except ValidationError as e:
        errors: list[Dict[str, Any]] = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors(include_url=False)
        ]
        raise exceptions.invalid_product(errors) from e
