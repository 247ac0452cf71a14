# smeease/screens/overview.py
"""Inventory overview: stock totals, best seller and restock alerts.

All figures are computed from the product list the screen holds; nothing
here is stored on the server.
"""
from typing import Iterable, List, Optional

from smeease.schemas.product import ProductOut
from smeease.screens.base import ModalKind
from smeease.screens.inventory import ProductListScreen


def needs_restock(product: ProductOut) -> bool:
    return product.stock == 0 or product.stock < product.min_stock


def total_stock(products: Iterable[ProductOut]) -> int:
    return sum(p.stock for p in products)


def most_popular(products: Iterable[ProductOut]) -> Optional[ProductOut]:
    """Product with the highest ``sold``; the first one wins a tie."""
    best = None
    for product in products:
        if best is None or product.sold > best.sold:
            best = product
    return best


def restock_list(products: Iterable[ProductOut]) -> List[ProductOut]:
    return [p for p in products if needs_restock(p)]


class InventoryOverviewScreen(ProductListScreen):
    """Dashboard over the product list.

    Products are only added here; the restock modal shows who to call for a
    low-stock product and makes no request.
    """

    @property
    def total_stock(self) -> int:
        return total_stock(self.items)

    @property
    def most_popular(self) -> Optional[ProductOut]:
        return most_popular(self.items)

    @property
    def restock(self) -> List[ProductOut]:
        return restock_list(self.items)

    def open_restock(self, product: ProductOut):
        self.open_detail(product)

    @property
    def restock_product(self) -> Optional[ProductOut]:
        if self.modal.kind is ModalKind.DETAIL:
            return self.modal.target
        return None
