import httpx
import pytest

from dessert_catalog.error_handler import ErrorHandler, error_kind
from dessert_catalog.integrations.contracts.errors import DecodeError, InvalidURL, NoData, NotFound, TransportError


def test_handle_exception_returns_payload():
    eh = ErrorHandler()
    out = eh.handle_exception(Exception("boom"), context={"k": "v"})
    assert out["fallback"] is True
    assert out["kind"] == "internal"
    assert "internal error" in out["message"].lower()
    assert "boom" in out["metadata"]["error"]
    assert out["metadata"]["context"] == {"k": "v"}


@pytest.mark.parametrize("exc, kind", [
    (InvalidURL("nope"), "invalid_url"),
    (TransportError(httpx.ConnectError("dns")), "transport"),
    (NoData("https://example.com"), "no_data"),
    (DecodeError("bad json"), "decode"),
    (NotFound("52893"), "not_found"),
])
def test_integration_errors_map_to_distinct_kinds(exc, kind):
    out = ErrorHandler().handle_exception(exc)

    assert error_kind(exc) == kind
    assert out["kind"] == kind
    assert out["metadata"]["context"] == {}


def test_not_found_and_decode_messages_differ():
    eh = ErrorHandler()

    assert eh.handle_exception(NotFound("1"))["message"] != eh.handle_exception(DecodeError("x"))["message"]
