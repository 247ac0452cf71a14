# smeease/screens/inventory.py
from dataclasses import dataclass
from typing import List, Optional, Tuple

from smeease.schemas.product import ProductOut
from smeease.screens.base import CrudScreenController, ScreenController, parse_int, require_fields
from smeease.screens.orchestrator import ProductSupplierOrchestrator, WriteLog
from smeease.utils.api_client import ResourceClient
from smeease.utils.errors import PartialWriteError

PRODUCT_FORM_FIELDS = (
    "upc",
    "name",
    "stock",
    "sold",
    "min_stock",
    "supplier_name",
    "supplier_contact",
    "supplier_email",
)


# One form for the product and its supplier
@dataclass(frozen=True)
class ProductForm:
    upc: str = ""
    name: str = ""
    stock: str = ""
    sold: str = ""
    min_stock: str = ""
    supplier_name: str = ""
    supplier_contact: str = ""
    supplier_email: str = ""


def matches_search(product: ProductOut, query: str) -> bool:
    q = query.strip().lower()
    if not q:
        return True
    supplier = product.supplier
    haystack = [product.name, product.upc]
    if supplier is not None:
        haystack += [supplier.name, supplier.contact, supplier.email]
    return any(q in (value or "").lower() for value in haystack)


def split_product_form(form: ProductForm) -> Tuple[dict, dict]:
    """Validate the form and return ``(supplier_payload, product_payload)``."""
    require_fields(form, PRODUCT_FORM_FIELDS)
    supplier_payload = {
        "name": form.supplier_name.strip(),
        "contact": form.supplier_contact.strip(),
        "email": form.supplier_email.strip(),
    }
    product_payload = {
        "upc": form.upc.strip(),
        "name": form.name.strip(),
        "stock": parse_int(form.stock, "Stock", minimum=0),
        "sold": parse_int(form.sold, "Sold", minimum=0),
        "min_stock": parse_int(form.min_stock, "Min stock"),
    }
    return supplier_payload, product_payload


class ProductListScreen(ScreenController[ProductOut]):
    """Searchable product list; new products go through the product +
    supplier orchestrator."""

    resource_name = "products"
    schema = ProductOut

    def __init__(self, products: ResourceClient, suppliers: ResourceClient):
        super().__init__(products)
        self.orchestrator = ProductSupplierOrchestrator(suppliers, products)
        self.search = ""
        # Write log of the last save that stopped halfway, if any
        self.pending_write: Optional[WriteLog] = None

    @property
    def visible_items(self) -> List[ProductOut]:
        return [p for p in self.items if matches_search(p, self.search)]

    def empty_form(self) -> ProductForm:
        return ProductForm()

    async def _orchestrate(self, write):
        try:
            log = await write
        except PartialWriteError as e:
            self.pending_write = e.log
            raise
        self.pending_write = None
        return log

    async def create(self, form: ProductForm):
        supplier_payload, product_payload = split_product_form(form)
        return await self._orchestrate(
            self.orchestrator.create(
                supplier_payload,
                product_payload,
                known_products=self.items,
                resume=self.pending_write,
            )
        )


class InventoryScreen(ProductListScreen, CrudScreenController[ProductOut]):
    """Product list with add, edit and delete."""

    def form_from(self, item: ProductOut) -> ProductForm:
        supplier = item.supplier
        return ProductForm(
            upc=item.upc,
            name=item.name,
            stock=str(item.stock),
            sold=str(item.sold),
            min_stock=str(item.min_stock),
            supplier_name=supplier.name if supplier else "",
            supplier_contact=supplier.contact if supplier else "",
            supplier_email=supplier.email if supplier else "",
        )

    def item_id(self, item: ProductOut) -> str:
        return item.upc

    async def update(self, item: ProductOut, form: ProductForm):
        supplier_payload, product_payload = split_product_form(form)
        product_payload.pop("upc")
        return await self._orchestrate(
            self.orchestrator.update(item, supplier_payload, product_payload, resume=self.pending_write)
        )
