"""
==============================================================================
Product Creators Module
==============================================================================

One creator per product variant. Each creator wraps a single, already
constructed product and hands back that same instance from create().

Inventory.add_product() only sees the ProductCreator interface.

==============================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Type

from hwinventory.core import exceptions

from .models import HardDrive, Motherboard, Processor, Product


class ProductCreator(ABC):
    """Uniform "produce a product" interface used by Inventory.add_product()."""

    @abstractmethod
    def create(self) -> Product:
        """Return the product this creator stands for."""


class MotherboardCreator(ProductCreator):
    def __init__(self, motherboard: Motherboard) -> None:
        self._motherboard = motherboard

    def create(self) -> Motherboard:
        return self._motherboard


class ProcessorCreator(ProductCreator):
    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def create(self) -> Processor:
        return self._processor


class HardDriveCreator(ProductCreator):
    def __init__(self, hard_drive: HardDrive) -> None:
        self._hard_drive = hard_drive

    def create(self) -> HardDrive:
        return self._hard_drive


# =============================================================================
# CREATOR REGISTRY
# =============================================================================

CREATORS: Dict[type, Type[ProductCreator]] = {
    Motherboard: MotherboardCreator,
    Processor: ProcessorCreator,
    HardDrive: HardDriveCreator,
}


def creator_for(product: Product) -> ProductCreator:
    """
    Wrap a product in the creator registered for its variant.

    Args:
        product: Motherboard, Processor or HardDrive instance

    Returns:
        Creator whose create() returns ``product`` itself

    Raises:
        CatalogError: UNSUPPORTED_PRODUCT for unregistered types
    """
    creator_cls = CREATORS.get(type(product))
    if creator_cls is None:
        raise exceptions.unsupported_product(type(product).__name__)
    return creator_cls(product)
