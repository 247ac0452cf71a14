# smeease/screens/base.py
"""Screen controllers.

A screen controller is the view model behind one list screen. It holds the
list currently shown, the loading/error flags, the draft of the open form
and which modal is visible. A renderer only reads these attributes; user
actions are the async methods (``refresh``, ``submit`` and, on
:class:`CrudScreenController`, ``confirm_delete``).

The held list is never patched in place: every successful write is followed
by a full refetch.
"""
import dataclasses
import enum
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

import pydantic

from smeease.utils.api_client import ResourceClient
from smeease.utils.errors import ClientError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ModalKind(str, enum.Enum):
    CLOSED = "closed"
    ADD = "add"
    EDIT = "edit"
    DELETE_CONFIRM = "delete-confirm"
    DETAIL = "detail"


@dataclass(frozen=True)
class Modal(Generic[T]):
    kind: ModalKind = ModalKind.CLOSED
    target: Optional[T] = None

    @property
    def is_open(self) -> bool:
        return self.kind is not ModalKind.CLOSED


CLOSED = Modal()


def require_fields(form, names, message="All fields are required."):
    # Blank or whitespace-only counts as missing
    for name in names:
        if not str(getattr(form, name) or "").strip():
            raise ValidationError(message)


INT_RE = re.compile(r"[+-]?\d+")
NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_int(value: str, label: str, minimum: Optional[int] = None) -> int:
    """Parse a base-10 integer typed into a form."""
    text = str(value).strip()
    if not INT_RE.fullmatch(text):
        raise ValidationError(f"{label} must be a whole number.")
    number = int(text, 10)
    if minimum is not None and number < minimum:
        raise ValidationError(f"{label} must be at least {minimum}.")
    return number


def parse_number(value: str, label: str, minimum: Optional[float] = None) -> float:
    text = str(value).strip()
    if not NUMBER_RE.fullmatch(text):
        raise ValidationError(f"{label} must be a number.")
    number = float(text)
    if not math.isfinite(number):
        raise ValidationError(f"{label} must be a number.")
    if minimum is not None and number < minimum:
        raise ValidationError(f"{label} must be at least {minimum:g}.")
    return number


class ScreenController(Generic[T]):
    """List + modal + form state for one resource collection.

    The base screen lists records, shows one in a detail modal and adds new
    ones. Subclasses describe the entity: how to parse a record, the empty
    draft and how a draft becomes a payload.
    """

    #: label used in log lines, e.g. "employees"
    resource_name = "records"
    #: pydantic model every listed record is parsed into
    schema: Any = None
    #: modals whose form ``submit`` saves
    form_modals = (ModalKind.ADD,)

    def __init__(self, resource: ResourceClient):
        self.resource = resource

        self.items: List[T] = []
        self.loading = True
        self.error: Optional[str] = None

        self.modal: Modal[T] = CLOSED
        self.form = self.empty_form()
        self.form_error: Optional[str] = None
        self.action_loading = False

        # Monotonic request epoch; only the latest list response is applied
        self._epoch = 0

    # ---- entity hooks ----
    def empty_form(self):
        raise NotImplementedError

    def build_payload(self, form, creating: bool) -> dict:
        raise NotImplementedError

    def parse_item(self, raw: Any) -> T:
        return self.schema.model_validate(raw)

    # ---- list ----
    async def mount(self):
        await self.refresh()

    async def refresh(self):
        self._epoch += 1
        epoch = self._epoch
        self.loading = True
        try:
            raw_items = await self.resource.list_all()
            items = [self.parse_item(raw) for raw in raw_items or []]
        except (ClientError, pydantic.ValidationError) as e:
            if epoch != self._epoch:
                logger.debug("Discarding stale %s error (epoch %d)", self.resource_name, epoch)
                return
            self.error = e.message if isinstance(e, ClientError) else f"Invalid {self.resource_name} data received"
            self.loading = False
            logger.error("Error fetching %s: %s", self.resource_name, e)
            return

        if epoch != self._epoch:
            logger.debug("Discarding stale %s list (epoch %d)", self.resource_name, epoch)
            return
        self.items = items
        self.error = None
        self.loading = False

    # ---- modals ----
    def open_add(self):
        self.form_error = None
        self.form = self.empty_form()
        self.modal = Modal(ModalKind.ADD)

    def open_detail(self, item: T):
        self.modal = Modal(ModalKind.DETAIL, item)

    def close_modal(self):
        self.modal = CLOSED

    def set_field(self, name: str, value: str):
        if not any(f.name == name for f in dataclasses.fields(self.form)):
            raise AttributeError(f"{type(self.form).__name__} has no field {name!r}")
        self.form = dataclasses.replace(self.form, **{name: value})

    # ---- writes ----
    async def create(self, form) -> Any:
        return await self.resource.create(self.build_payload(form, creating=True))

    async def save_form(self) -> Any:
        return await self.create(self.form)

    async def submit(self) -> bool:
        """Save the open form. Returns True when the write went through."""
        if self.action_loading:
            return False
        if self.modal.kind not in self.form_modals:
            return False

        self.form_error = None
        self.action_loading = True
        try:
            await self.save_form()
        except ClientError as e:
            self.form_error = e.message
            logger.error("Error saving %s: %s", self.resource_name, e)
            return False
        finally:
            self.action_loading = False

        logger.info("Saved %s (%s)", self.resource_name, self.modal.kind.value)
        self.close_modal()
        self.form = self.empty_form()
        await self.refresh()
        return True


class CrudScreenController(ScreenController[T]):
    """Screen that also edits and deletes the listed records."""

    form_modals = (ModalKind.ADD, ModalKind.EDIT)

    # ---- entity hooks ----
    def form_from(self, item: T):
        raise NotImplementedError

    def item_id(self, item: T) -> Any:
        raise NotImplementedError

    # ---- modals ----
    def open_edit(self, item: T):
        self.form_error = None
        self.form = self.form_from(item)
        self.modal = Modal(ModalKind.EDIT, item)

    def open_delete(self, item: T):
        self.form_error = None
        self.modal = Modal(ModalKind.DELETE_CONFIRM, item)

    # ---- writes ----
    async def update(self, item: T, form) -> Any:
        return await self.resource.update(self.item_id(item), self.build_payload(form, creating=False))

    async def save_form(self) -> Any:
        if self.modal.kind is ModalKind.EDIT:
            return await self.update(self.modal.target, self.form)
        return await super().save_form()

    async def confirm_delete(self) -> bool:
        if self.action_loading:
            return False
        if self.modal.kind is not ModalKind.DELETE_CONFIRM or self.modal.target is None:
            return False

        target = self.modal.target
        self.form_error = None
        self.action_loading = True
        try:
            await self.resource.delete_by_id(self.item_id(target))
        except ClientError as e:
            self.form_error = e.message
            logger.error("Error deleting %s %s: %s", self.resource_name, self.item_id(target), e)
            return False
        finally:
            self.action_loading = False

        logger.info("Deleted %s %s", self.resource_name, self.item_id(target))
        self.close_modal()
        await self.refresh()
        return True
