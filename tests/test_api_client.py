import httpx
import pytest

from smeease.utils.api_client import ApiClient, handle_response
from smeease.utils.errors import ApiError, NetworkError, NotFoundError


def _response(status, **kwargs):
    return httpx.Response(status, request=httpx.Request("GET", "http://testserver/api/x"), **kwargs)


class TestHandleResponse:
    def test_success_decodes_json(self):
        assert handle_response(_response(200, json=[{"upc": "1"}])) == [{"upc": "1"}]

    def test_empty_success_body_is_none(self):
        assert handle_response(_response(204)) is None

    def test_error_field_is_used_verbatim(self):
        with pytest.raises(ApiError) as exc:
            handle_response(_response(400, json={"error": "Supplier email is invalid"}))
        assert exc.value.status == 400
        assert exc.value.message == "Supplier email is invalid"

    def test_unparseable_body_becomes_network_error_message(self):
        with pytest.raises(ApiError) as exc:
            handle_response(_response(502, content=b"<html>Bad gateway</html>"))
        assert exc.value.message == "Network error"
        assert exc.value.status == 502

    def test_json_without_error_field_falls_back_to_status_line(self):
        with pytest.raises(ApiError) as exc:
            handle_response(_response(500, json={"detail": "boom"}))
        assert exc.value.message == "HTTP 500: Internal Server Error"

    def test_empty_error_string_falls_back_to_status_line(self):
        with pytest.raises(ApiError) as exc:
            handle_response(_response(409, json={"error": ""}))
        assert exc.value.message == "HTTP 409: Conflict"

    def test_non_string_error_falls_back_to_status_line(self):
        with pytest.raises(ApiError) as exc:
            handle_response(_response(400, json={"error": {"field": "email"}}))
        assert exc.value.message == "HTTP 400: Bad Request"

    def test_404_is_not_found(self):
        with pytest.raises(NotFoundError) as exc:
            handle_response(_response(404, json={"error": "Employee not found"}))
        assert exc.value.is_not_found
        assert isinstance(exc.value, ApiError)


async def test_list_all_hits_collection_path(fake, fake_api):
    fake.set("GET", "/employees", 200, [{"employee_id": "EMP-1001"}])

    records = await fake_api.employees.list_all()

    assert records == [{"employee_id": "EMP-1001"}]
    assert str(fake.calls[0].url) == "http://testserver/api/employees"


async def test_create_sends_json_body(fake, fake_api):
    fake.set("POST", "/suppliers", 201, {"supplier_id": 3, "name": "Acme", "contact": "x", "email": "y"})

    created = await fake_api.suppliers.create({"name": "Acme", "contact": "x", "email": "y"})

    request = fake.calls[0]
    assert created["supplier_id"] == 3
    assert request.headers["content-type"] == "application/json"
    assert fake.body(request) == {"name": "Acme", "contact": "x", "email": "y"}


async def test_update_and_delete_address_the_record(fake, fake_api):
    fake.set("PUT", "/products/123456", 200, {"upc": "123456"})
    fake.set("DELETE", "/products/123456", 200, {"message": "Product deleted"})

    await fake_api.products.update("123456", {"name": "Milk"})
    assert await fake_api.products.delete_by_id("123456") is None

    assert [r.method for r in fake.calls] == ["PUT", "DELETE"]
    assert fake.calls[1].content == b""


async def test_ids_are_quoted_into_the_path(fake, fake_api):
    with pytest.raises(NotFoundError):
        await fake_api.products.get_by_id("A B/1")

    assert fake.calls[0].url.raw_path == b"/api/products/A%20B%2F1"


@pytest.mark.parametrize(
    "attr, path",
    [
        ("employees", "/api/employees"),
        ("suppliers", "/api/suppliers"),
        ("products", "/api/products"),
        ("sales", "/api/sales"),
        ("tax_documents", "/api/tax-documents"),
    ],
)
async def test_collections(fake, fake_api, attr, path):
    fake.routes[("GET", path)] = (200, [])

    assert await getattr(fake_api, attr).list_all() == []
    assert fake.calls[-1].url.path == path


async def test_payroll_collections(fake, fake_api):
    fake.set("GET", "/payroll-periods", 200, [])
    fake.set("GET", "/payslips", 200, [])

    await fake_api.payroll.periods.list_all()
    await fake_api.payroll.payslips.list_all()

    assert [r.url.path for r in fake.calls] == ["/api/payroll-periods", "/api/payslips"]


async def test_transport_failure_is_network_error():
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    async with ApiClient(base_url="http://testserver/api", transport=httpx.MockTransport(refuse)) as api:
        with pytest.raises(NetworkError) as exc:
            await api.employees.list_all()

    assert "Connection refused" in exc.value.message
    assert isinstance(exc.value.__cause__, httpx.ConnectError)
