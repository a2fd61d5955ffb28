"""
==============================================================================
Catalog Package - Hardware Components
==============================================================================

Product variants, their creators, and the inventory that stores them.

Classes:
--------
- Motherboard, Processor, HardDrive: Pydantic product models
- ProductCreator and one creator per variant
- Inventory: Append-only product store with listing and lookup

==============================================================================
"""

from .models import (
    Describable,
    HardDrive,
    Motherboard,
    Processor,
    Product,
    ProductFields,
    parse_product,
)
from .creators import (
    HardDriveCreator,
    MotherboardCreator,
    ProcessorCreator,
    ProductCreator,
    creator_for,
)
from .inventory import Inventory

__all__ = [
    "Describable",
    "HardDrive",
    "Motherboard",
    "Processor",
    "Product",
    "ProductFields",
    "parse_product",
    "HardDriveCreator",
    "MotherboardCreator",
    "ProcessorCreator",
    "ProductCreator",
    "creator_for",
    "Inventory",
]
