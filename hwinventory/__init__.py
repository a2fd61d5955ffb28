"""
Hardware component inventory.

A small catalog of motherboards, processors and hard drives kept in an
append-only, in-memory inventory.
"""

from hwinventory.catalog import (
    HardDrive,
    HardDriveCreator,
    Inventory,
    Motherboard,
    MotherboardCreator,
    Processor,
    ProcessorCreator,
    Product,
    ProductCreator,
)
from hwinventory.core import CatalogError

__version__ = "1.0.0"

__all__ = [
    "HardDrive",
    "HardDriveCreator",
    "Inventory",
    "Motherboard",
    "MotherboardCreator",
    "Processor",
    "ProcessorCreator",
    "Product",
    "ProductCreator",
    "CatalogError",
]
