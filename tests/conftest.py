"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides sample products and an inventory writing to an in-memory stream.

==============================================================================
"""

import io
from decimal import Decimal

import pytest

from hwinventory.catalog import HardDrive, Inventory, Motherboard, Processor
from hwinventory.config import get_settings


# ============================================================================
# EXPECTED DESCRIPTIONS
# ============================================================================

MOTHERBOARD_LINE = (
    "Part number: MB001, Name: ASUS ROG Strix, Price: 150.00, Socket: AM4, "
    "Processor count: 1, RAM type: DDR4, Bus frequency: 3200 MHz"
)
PROCESSOR_LINE = (
    "Part number: CPU001, Name: AMD Ryzen 5, Price: 200.00, Socket: AM4, "
    "Cores: 6, Clock speed: 3.6 GHz, Process technology: 7 nm"
)
HARD_DRIVE_LINE = (
    "Part number: HDD001, Name: Seagate Barracuda, Price: 50.00, "
    "Capacity: 1000 GB, Rotation speed: 7200 RPM, Interface: SATA"
)


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def motherboard() -> Motherboard:
    """Sample AM4 motherboard."""
    return Motherboard(
        part_number="MB001",
        name="ASUS ROG Strix",
        price=Decimal("150.00"),
        socket_type="AM4",
        processor_count=1,
        ram_type="DDR4",
        bus_frequency="3200 MHz",
    )


@pytest.fixture
def processor() -> Processor:
    """Sample six-core AM4 processor."""
    return Processor(
        part_number="CPU001",
        name="AMD Ryzen 5",
        price=Decimal("200.00"),
        socket_type="AM4",
        core_count=6,
        clock_speed=Decimal("3.6"),
        process_technology="7 nm",
    )


@pytest.fixture
def hard_drive() -> HardDrive:
    """Sample 1 TB SATA hard drive."""
    return HardDrive(
        part_number="HDD001",
        name="Seagate Barracuda",
        price=Decimal("50.00"),
        capacity=1000,
        rotation_speed=7200,
        interface_type="SATA",
    )


# ============================================================================
# INVENTORY FIXTURES
# ============================================================================

@pytest.fixture
def output() -> io.StringIO:
    """Stream that collects inventory output."""
    return io.StringIO()


@pytest.fixture
def inventory(output: io.StringIO) -> Inventory:
    """Empty inventory writing to the ``output`` stream."""
    return Inventory(output=output)


@pytest.fixture
def fresh_settings(monkeypatch):
    """Drop cached settings and HWINV_ overrides around a test."""
    for name in ("HWINV_DEBUG", "HWINV_APP_ENV", "HWINV_LOOKUP_PART_NUMBER"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
