import pytest

from smeease.schemas.product import ProductOut
from smeease.screens.base import ModalKind
from smeease.screens.overview import (
    InventoryOverviewScreen,
    most_popular,
    needs_restock,
    restock_list,
    total_stock,
)


def product(upc, stock, sold, min_stock):
    return ProductOut(upc=upc, name=f"Product {upc}", stock=stock, sold=sold, min_stock=min_stock, supplier_id=1)


PRODUCTS = [
    product("A", stock=40, sold=10, min_stock=5),
    product("B", stock=0, sold=30, min_stock=0),
    product("C", stock=3, sold=30, min_stock=4),
    product("D", stock=4, sold=2, min_stock=4),
]


@pytest.mark.parametrize(
    "stock, min_stock, expected",
    [(0, 0, True), (0, 5, True), (4, 5, True), (5, 5, False), (6, 5, False)],
)
def test_needs_restock(stock, min_stock, expected):
    assert needs_restock(product("X", stock, 0, min_stock)) is expected


def test_totals():
    assert total_stock(PRODUCTS) == 47
    assert total_stock([]) == 0


def test_most_popular_first_wins_ties():
    assert most_popular(PRODUCTS).upc == "B"
    assert most_popular([]) is None


def test_restock_list_keeps_order():
    assert [p.upc for p in restock_list(PRODUCTS)] == ["B", "C"]


async def test_screen_exposes_derived_views(fake, fake_api):
    fake.set("GET", "/products", 200, [p.model_dump() for p in PRODUCTS])
    screen = InventoryOverviewScreen(fake_api.products, fake_api.suppliers)
    await screen.mount()

    assert screen.total_stock == 47
    assert screen.most_popular.upc == "B"
    assert [p.upc for p in screen.restock] == ["B", "C"]


async def test_restock_modal_is_presentational(fake, fake_api):
    fake.set("GET", "/products", 200, [p.model_dump() for p in PRODUCTS])
    screen = InventoryOverviewScreen(fake_api.products, fake_api.suppliers)
    await screen.mount()
    fake.calls.clear()

    assert screen.restock_product is None
    screen.open_restock(screen.restock[0])

    assert screen.modal.kind is ModalKind.DETAIL
    assert screen.restock_product.upc == "B"
    assert fake.calls == []


async def test_overview_only_adds(fake, fake_api):
    fake.set("GET", "/products", 200, [p.model_dump() for p in PRODUCTS])
    screen = InventoryOverviewScreen(fake_api.products, fake_api.suppliers)
    await screen.mount()
    fake.calls.clear()

    assert not hasattr(screen, "open_edit")
    assert not hasattr(screen, "confirm_delete")

    # A detail modal is not a form; nothing is saved from it
    screen.open_restock(screen.restock[0])
    assert not await screen.submit()
    assert fake.calls == []
