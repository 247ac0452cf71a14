# smeease/screens/orchestrator.py
"""Product + supplier writes.

The inventory form edits a product together with its supplier, but the API
stores them as two collections linked by ``supplier_id``. A save is therefore
two requests, supplier first:

* create: ``POST /suppliers`` then ``POST /products`` with the new id
* update: ``PUT /suppliers/{id}`` then ``PUT /products/{upc}``

Nothing is rolled back. If the product request fails after the supplier
request went through, the supplier change stays (a new supplier may be left
without a product) and :class:`PartialWriteError` is raised with the
:class:`WriteLog`. Passing that log back as ``resume`` on the next attempt
skips the supplier step, as long as the supplier fields are unchanged.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from smeease.schemas.product import ProductOut
from smeease.utils.api_client import ResourceClient
from smeease.utils.errors import ApiError, ClientError, PartialWriteError, ValidationError

logger = logging.getLogger(__name__)

SUPPLIER_STEP = "supplier"
PRODUCT_STEP = "product"


class StepStatus(str, enum.Enum):
    PENDING = "pending"
    DONE = "done"
    FAILED = "failed"


@dataclass
class WriteStep:
    name: str
    status: StepStatus = StepStatus.PENDING
    error: Optional[str] = None

    def succeed(self):
        self.status = StepStatus.DONE
        self.error = None

    def fail(self, error: ClientError):
        self.status = StepStatus.FAILED
        self.error = error.message


def _default_steps() -> List[WriteStep]:
    return [WriteStep(SUPPLIER_STEP), WriteStep(PRODUCT_STEP)]


@dataclass
class WriteLog:
    action: str
    upc: str
    supplier_payload: dict
    supplier_id: Optional[int] = None
    steps: List[WriteStep] = field(default_factory=_default_steps)

    def step(self, name: str) -> WriteStep:
        for step in self.steps:
            if step.name == name:
                return step
        raise KeyError(name)

    @property
    def completed(self) -> bool:
        return all(step.status is StepStatus.DONE for step in self.steps)

    @property
    def partial(self) -> bool:
        return (
            self.step(SUPPLIER_STEP).status is StepStatus.DONE
            and self.step(PRODUCT_STEP).status is not StepStatus.DONE
        )

    def can_resume(self, action: str, supplier_payload: dict, upc: Optional[str] = None) -> bool:
        if not self.partial or self.action != action:
            return False
        if upc is not None and self.upc != upc:
            return False
        return self.supplier_payload == supplier_payload


def check_unique_upc(upc: str, products: Iterable[ProductOut]):
    # Fast path only; the API rejects duplicates with the same message
    if any(p.upc == upc for p in products):
        raise ValidationError("UPC must be unique.")


class ProductSupplierOrchestrator:
    def __init__(self, suppliers: ResourceClient, products: ResourceClient):
        self.suppliers = suppliers
        self.products = products

    async def create(
        self,
        supplier_payload: dict,
        product_payload: dict,
        known_products: Iterable[ProductOut] = (),
        resume: Optional[WriteLog] = None,
    ) -> WriteLog:
        upc = product_payload["upc"]
        check_unique_upc(upc, known_products)

        if resume is not None and resume.can_resume("create", supplier_payload):
            log = resume
            log.upc = upc
            logger.info("Resuming product create for %s with supplier %s", upc, log.supplier_id)
        else:
            log = WriteLog("create", upc, dict(supplier_payload))

        supplier_step = log.step(SUPPLIER_STEP)
        if supplier_step.status is not StepStatus.DONE:
            try:
                supplier = await self.suppliers.create(supplier_payload)
                if not isinstance(supplier, dict) or supplier.get("supplier_id") is None:
                    raise ApiError(502, "Supplier was created but no supplier_id came back")
            except ClientError as e:
                supplier_step.fail(e)
                raise
            log.supplier_id = supplier["supplier_id"]
            supplier_step.succeed()

        product_step = log.step(PRODUCT_STEP)
        try:
            await self.products.create({**product_payload, "supplier_id": log.supplier_id})
        except ClientError as e:
            product_step.fail(e)
            logger.warning(
                "Product %s not created; supplier %s was created and is kept", upc, log.supplier_id
            )
            raise PartialWriteError(e, log) from e
        product_step.succeed()
        return log

    async def update(
        self,
        product: ProductOut,
        supplier_payload: dict,
        product_payload: dict,
        resume: Optional[WriteLog] = None,
    ) -> WriteLog:
        supplier_id = product.supplier.supplier_id if product.supplier else product.supplier_id

        if resume is not None and resume.can_resume("update", supplier_payload, upc=product.upc):
            log = resume
            logger.info("Resuming product update for %s", product.upc)
        else:
            log = WriteLog("update", product.upc, dict(supplier_payload), supplier_id=supplier_id)

        supplier_step = log.step(SUPPLIER_STEP)
        if supplier_step.status is not StepStatus.DONE:
            try:
                await self.suppliers.update(supplier_id, supplier_payload)
            except ClientError as e:
                supplier_step.fail(e)
                raise
            supplier_step.succeed()

        product_step = log.step(PRODUCT_STEP)
        try:
            await self.products.update(product.upc, product_payload)
        except ClientError as e:
            product_step.fail(e)
            logger.warning("Product %s not updated; supplier %s already changed", product.upc, supplier_id)
            raise PartialWriteError(e, log) from e
        product_step.succeed()
        return log
