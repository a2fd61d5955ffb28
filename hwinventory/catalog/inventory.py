"""
==============================================================================
Inventory Module
==============================================================================

Append-only, in-memory store of catalog products.

Features:
---------
- Insertion through a ProductCreator (or directly with a product)
- Lazy, restartable listing in insertion order
- Linear lookup by part number, first match wins

Every product line is written to the inventory's output stream and echoed
to the module logger at DEBUG level.

==============================================================================
"""

from __future__ import annotations

import logging
import sys
from typing import Iterator, List, Optional, TextIO

from .creators import ProductCreator, creator_for
from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class Inventory:
    """
    Ordered collection of products added during the process lifetime.

    Products are never removed or replaced. Part numbers are expected to be
    unique but duplicates are accepted; lookups return the earliest one.

    Example:
        >>> inventory = Inventory()
        >>> inventory.add_product(ProcessorCreator(processor))
        >>> for line in inventory.show_inventory():
        ...     pass
        >>> inventory.show_product_details("CPU001")
    """

    INVENTORY_HEADER = "Full component inventory:"
    DETAILS_HEADER = "Product details:"
    ADDED_SUFFIX = "added to inventory."
    NOT_FOUND = "Product not found."

    def __init__(self, output: Optional[TextIO] = None) -> None:
        """
        Initialize an empty inventory.

        Args:
            output: Stream for product lines (stdout when None)
        """
        self._output = output
        self._products: List[Product] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products in insertion order."""
        return self._products.copy()

    def __len__(self) -> int:
        return len(self._products)

    # =========================================================================
    # INSERTION
    # =========================================================================

    def add_product(self, creator: ProductCreator) -> None:
        """
        Add the product produced by ``creator`` to the end of the inventory.

        Args:
            creator: Creator whose create() result is stored
        """
        product = creator.create()
        self._products.append(product)
        self._emit(f"{product.describe()} {self.ADDED_SUFFIX}")

    def add(self, product: Product) -> None:
        """Add a product directly, using the creator registered for its type."""
        self.add_product(creator_for(product))

    # =========================================================================
    # LISTING AND LOOKUP
    # =========================================================================

    def show_inventory(self) -> Iterator[str]:
        """
        Lazily list every product description in insertion order.

        The header and each line are written as iteration reaches them.
        Each call starts a fresh pass over the current contents.

        Yields:
            Product descriptions
        """
        self._emit(self.INVENTORY_HEADER)
        for product in self._products:
            line = product.describe()
            self._emit(line)
            yield line

    def find(self, part_number: str) -> Optional[Product]:
        """Return the first product whose part number matches exactly, or None."""
        for product in self._products:
            if product.part_number == part_number:
                return product
        return None

    def show_product_details(self, part_number: str) -> Optional[Product]:
        """
        Write the description of the product with ``part_number``.

        A miss is reported on the output stream, not raised.

        Args:
            part_number: Exact, case-sensitive part number

        Returns:
            The matching product, or None if there is none
        """
        product = self.find(part_number)
        if product is None:
            logger.debug(f"No product with part number {part_number!r}")
            self._emit(self.NOT_FOUND)
            return None

        self._emit(self.DETAILS_HEADER)
        self._emit(product.describe())
        return product

    def _emit(self, line: str) -> None:
        logger.debug(line)
        print(line, file=self._output or sys.stdout)
