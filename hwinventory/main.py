"""
==============================================================================
Hardware Component Inventory - Application Entry Point
==============================================================================

Builds a fresh inventory with three sample components, lists it, and shows
the details of one part.

Usage:
------
    hwinventory
    hwinventory HDD001
    python -m hwinventory

==============================================================================
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from hwinventory.catalog import (
    HardDriveCreator,
    Inventory,
    MotherboardCreator,
    ProcessorCreator,
    parse_product,
)
from hwinventory.config import get_settings


logger = logging.getLogger(__name__)


# ============================================================================
# SAMPLE DATA
# ============================================================================

SAMPLE_PRODUCTS = [
    {
        "kind": "motherboard",
        "part_number": "MB001",
        "name": "ASUS ROG Strix",
        "price": "150.00",
        "socket_type": "AM4",
        "processor_count": 1,
        "ram_type": "DDR4",
        "bus_frequency": "3200 MHz",
    },
    {
        "kind": "processor",
        "part_number": "CPU001",
        "name": "AMD Ryzen 5",
        "price": "200.00",
        "socket_type": "AM4",
        "core_count": 6,
        "clock_speed": "3.6",
        "process_technology": "7 nm",
    },
    {
        "kind": "hard_drive",
        "part_number": "HDD001",
        "name": "Seagate Barracuda",
        "price": "50.00",
        "capacity": 1000,
        "rotation_speed": 7200,
        "interface_type": "SATA",
    },
]


def build_inventory(inventory: Inventory) -> None:
    """Add the sample motherboard, processor and hard drive, in that order."""
    motherboard, processor, hard_drive = (parse_product(data) for data in SAMPLE_PRODUCTS)

    inventory.add_product(MotherboardCreator(motherboard))
    inventory.add_product(ProcessorCreator(processor))
    inventory.add_product(HardDriveCreator(hard_drive))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hwinventory",
        description="List a sample hardware inventory and show one part in detail.",
    )
    parser.add_argument(
        "part_number",
        nargs="?",
        default=None,
        help="part number to show details for (default: HWINV_LOOKUP_PART_NUMBER)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()

    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    logger.info(f"Starting {settings.app_name}")

    inventory = Inventory()
    build_inventory(inventory)

    # show_inventory() is lazy; exhaust it to print every line
    for _ in inventory.show_inventory():
        pass

    inventory.show_product_details(args.part_number or settings.lookup_part_number)

    logger.info(f"{len(inventory)} products in inventory")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
