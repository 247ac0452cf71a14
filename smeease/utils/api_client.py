# smeease/utils/api_client.py
"""Async REST client for the SMEease API.

Each backend collection gets a :class:`ResourceClient` with the same five
calls (``list_all``, ``get_by_id``, ``create``, ``update``, ``delete_by_id``).
:class:`ApiClient` groups them over one shared ``httpx.AsyncClient``::

    async with ApiClient() as api:
        products = await api.products.list_all()
"""
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from smeease.config import settings
from smeease.utils.errors import ApiError, NetworkError, NotFoundError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def handle_response(response: httpx.Response) -> Any:
    """Decode a response body or raise the matching :class:`ApiError`.

    On failure the message is taken from the ``error`` field of a JSON body.
    A body that is not JSON at all yields ``"Network error"``; a JSON body
    without a string ``error`` field yields ``"HTTP <status>: <reason>"``.
    """
    if not response.is_success:
        try:
            body = response.json()
        except ValueError:
            body = {"error": "Network error"}
        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, str):
            error = None
        message = error or f"HTTP {response.status_code}: {response.reason_phrase}"
        error_cls = NotFoundError if response.status_code == 404 else ApiError
        raise error_cls(response.status_code, message, reason=response.reason_phrase)

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise ApiError(response.status_code, f"Invalid JSON in response: {e}") from e


class ResourceClient:
    """CRUD calls for one collection, e.g. ``/employees``."""

    def __init__(self, http: httpx.AsyncClient, collection: str):
        self.http = http
        self.collection = collection

    def _path(self, resource_id: Any = None) -> str:
        if resource_id is None:
            return f"/{self.collection}"
        return f"/{self.collection}/{quote(str(resource_id), safe='')}"

    async def _send(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        kwargs = {}
        if payload is not None:
            kwargs = {"json": payload, "headers": JSON_HEADERS}
        try:
            response = await self.http.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise NetworkError(str(e) or "Network error") from e
        return handle_response(response)

    async def list_all(self) -> list:
        return await self._send("GET", self._path())

    async def get_by_id(self, resource_id: Any) -> dict:
        return await self._send("GET", self._path(resource_id))

    async def create(self, payload: dict) -> dict:
        return await self._send("POST", self._path(), payload)

    async def update(self, resource_id: Any, payload: dict) -> dict:
        return await self._send("PUT", self._path(resource_id), payload)

    async def delete_by_id(self, resource_id: Any) -> None:
        await self._send("DELETE", self._path(resource_id))

    def __repr__(self):
        return f"ResourceClient({self.collection!r})"


class PayrollResources:
    def __init__(self, http: httpx.AsyncClient):
        self.periods = ResourceClient(http, "payroll-periods")
        self.payslips = ResourceClient(http, "payslips")


class ApiClient:
    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        # Initialize the shared connection pool and the per-collection clients
        self.base_url = base_url or settings.api_base_url
        self.http = httpx.AsyncClient(base_url=self.base_url, transport=transport)

        self.employees = ResourceClient(self.http, "employees")
        self.suppliers = ResourceClient(self.http, "suppliers")
        self.products = ResourceClient(self.http, "products")
        self.sales = ResourceClient(self.http, "sales")
        self.payroll = PayrollResources(self.http)
        self.tax_documents = ResourceClient(self.http, "tax-documents")

    async def aclose(self):
        await self.http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
