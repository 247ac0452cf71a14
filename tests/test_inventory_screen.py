import pytest

from smeease.screens.base import ModalKind
from smeease.screens.inventory import InventoryScreen, ProductForm
from smeease.screens.orchestrator import StepStatus

MILK = {
    "upc": "123456",
    "name": "Whole Milk 1L",
    "stock": 40,
    "sold": 310,
    "min_stock": 25,
    "supplier_id": 7,
    "supplier": {"supplier_id": 7, "name": "Fresh Farms", "contact": "+1 555 0100", "email": "orders@farms.example"},
}

NEW_SUPPLIER = {"supplier_id": 9, "name": "Metro Wholesale", "contact": "+1 555 0142", "email": "sales@metro.example"}


def product_form(**overrides):
    values = dict(
        upc="000111",
        name="Paper Towels",
        stock="5",
        sold="0",
        min_stock="10",
        supplier_name="Metro Wholesale",
        supplier_contact="+1 555 0142",
        supplier_email="sales@metro.example",
    )
    values.update(overrides)
    return ProductForm(**values)


@pytest.fixture
async def screen(fake, fake_api):
    fake.set("GET", "/products", 200, [MILK])
    screen = InventoryScreen(fake_api.products, fake_api.suppliers)
    await screen.mount()
    fake.calls.clear()
    return screen


async def test_duplicate_upc_is_rejected_without_requests(fake, screen):
    screen.open_add()
    screen.form = product_form(upc="123456")

    assert not await screen.submit()

    assert screen.form_error == "UPC must be unique."
    assert fake.calls == []


async def test_create_writes_supplier_then_product(fake, screen):
    fake.set("POST", "/suppliers", 201, NEW_SUPPLIER)
    fake.set("POST", "/products", 201, {})
    screen.open_add()
    screen.form = product_form()

    assert await screen.submit()

    assert [(r.method, r.url.path) for r in fake.calls] == [
        ("POST", "/api/suppliers"),
        ("POST", "/api/products"),
        ("GET", "/api/products"),
    ]
    assert fake.body(fake.calls[0]) == {
        "name": "Metro Wholesale",
        "contact": "+1 555 0142",
        "email": "sales@metro.example",
    }
    assert fake.body(fake.calls[1]) == {
        "upc": "000111",
        "name": "Paper Towels",
        "stock": 5,
        "sold": 0,
        "min_stock": 10,
        "supplier_id": 9,
    }
    assert screen.modal.kind is ModalKind.CLOSED
    assert screen.pending_write is None


async def test_supplier_failure_skips_product(fake, screen):
    fake.set("POST", "/suppliers", 400, {"error": "email: String should have at least 1 character"})
    screen.open_add()
    screen.form = product_form()

    assert not await screen.submit()

    assert screen.form_error == "email: String should have at least 1 character"
    assert fake.requests_to("POST", "/products") == []
    assert screen.pending_write is None
    assert screen.modal.kind is ModalKind.ADD


async def test_product_failure_after_supplier_is_partial_and_resumable(fake, screen):
    fake.set("POST", "/suppliers", 201, NEW_SUPPLIER)
    fake.set("POST", "/products", 409, {"error": "UPC must be unique."})
    screen.open_add()
    screen.form = product_form()

    assert not await screen.submit()

    assert screen.form_error == "UPC must be unique."
    log = screen.pending_write
    assert log.partial
    assert log.supplier_id == 9
    assert [(s.name, s.status) for s in log.steps] == [
        ("supplier", StepStatus.DONE),
        ("product", StepStatus.FAILED),
    ]

    # Retry with another UPC: the supplier from the first attempt is reused
    fake.calls.clear()
    fake.set("POST", "/products", 201, {})
    screen.set_field("upc", "000222")
    assert await screen.submit()

    assert fake.requests_to("POST", "/suppliers") == []
    assert fake.body(fake.requests_to("POST", "/products")[0])["supplier_id"] == 9
    assert screen.pending_write is None


async def test_changed_supplier_fields_start_over(fake, screen):
    fake.set("POST", "/suppliers", 201, NEW_SUPPLIER)
    fake.set("POST", "/products", 500, {"error": "Database unavailable"})
    screen.open_add()
    screen.form = product_form()
    await screen.submit()
    assert screen.pending_write.partial

    fake.calls.clear()
    fake.set("POST", "/products", 201, {})
    screen.set_field("supplier_name", "Metro Wholesale Inc")
    assert await screen.submit()

    assert len(fake.requests_to("POST", "/suppliers")) == 1


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"stock": "five"}, "Stock must be a whole number."),
        ({"sold": "1.5"}, "Sold must be a whole number."),
        ({"min_stock": "10abc"}, "Min stock must be a whole number."),
        ({"stock": "-1"}, "Stock must be at least 0."),
        ({"supplier_email": ""}, "All fields are required."),
    ],
)
async def test_invalid_product_form_sends_nothing(fake, screen, overrides, message):
    screen.open_add()
    screen.form = product_form(**overrides)

    assert not await screen.submit()

    assert screen.form_error == message
    assert fake.calls == []


async def test_edit_form_is_built_from_product_and_supplier(screen):
    screen.open_edit(screen.items[0])

    assert screen.form == ProductForm(
        upc="123456",
        name="Whole Milk 1L",
        stock="40",
        sold="310",
        min_stock="25",
        supplier_name="Fresh Farms",
        supplier_contact="+1 555 0100",
        supplier_email="orders@farms.example",
    )


async def test_edit_updates_supplier_then_product(fake, screen):
    fake.set("PUT", "/suppliers/7", 200, MILK["supplier"])
    fake.set("PUT", "/products/123456", 200, MILK)
    screen.open_edit(screen.items[0])
    screen.set_field("stock", "38")
    screen.set_field("supplier_contact", "+1 555 0199")

    assert await screen.submit()

    assert [(r.method, r.url.path) for r in fake.calls] == [
        ("PUT", "/api/suppliers/7"),
        ("PUT", "/api/products/123456"),
        ("GET", "/api/products"),
    ]
    assert fake.body(fake.calls[0])["contact"] == "+1 555 0199"
    # The UPC is the address, never part of the body
    assert fake.body(fake.calls[1]) == {"name": "Whole Milk 1L", "stock": 38, "sold": 310, "min_stock": 25}


async def test_failed_supplier_update_leaves_product_untouched(fake, screen):
    fake.set("PUT", "/suppliers/7", 400, {"error": "Supplier 7 is locked for editing"})
    screen.open_edit(screen.items[0])
    screen.set_field("stock", "0")

    assert not await screen.submit()

    assert screen.form_error == "Supplier 7 is locked for editing"
    assert fake.requests_to("PUT", "/products/123456") == []
    assert screen.items[0].stock == 40
    assert screen.modal.kind is ModalKind.EDIT


async def test_failed_product_update_after_supplier_is_partial(fake, screen):
    fake.set("PUT", "/suppliers/7", 200, MILK["supplier"])
    fake.set("PUT", "/products/123456", 400, {"error": "stock: Input should be greater than or equal to 0"})
    screen.open_edit(screen.items[0])

    assert not await screen.submit()

    assert screen.pending_write.action == "update"
    assert screen.pending_write.partial

    # Resubmitting the same form only repeats the product step
    fake.calls.clear()
    fake.set("PUT", "/products/123456", 200, MILK)
    assert await screen.submit()
    assert fake.requests_to("PUT", "/suppliers/7") == []


async def test_delete_product(fake, screen):
    fake.set("DELETE", "/products/123456", 200, {"message": "Product deleted"})
    screen.open_delete(screen.items[0])
    fake.set("GET", "/products", 200, [])

    assert await screen.confirm_delete()
    assert screen.items == []


@pytest.mark.parametrize(
    "query, expected",
    [("", 1), ("milk", 1), ("123", 1), ("fresh farms", 1), ("FARMS.EXAMPLE", 1), ("555 0100", 1), ("coffee", 0)],
)
async def test_search_filters_visible_items(screen, query, expected):
    screen.search = query
    assert len(screen.visible_items) == expected
