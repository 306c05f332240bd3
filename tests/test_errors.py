"""Tests for classified failure types."""

from pointsdesk.integrations import (
    ClientError,
    LocalValidationError,
    ApiError,
    ConnectivityError,
    ResponseParseError,
)
from pointsdesk.integrations.errors import GENERIC_CONNECTIVITY_MESSAGE


class TestClientError:
    def test_message_only(self) -> None:
        err = ClientError("something went wrong")
        assert err.message == "something went wrong"
        assert err.cause is None
        assert str(err) == "something went wrong"

    def test_with_cause(self) -> None:
        cause = OSError("socket closed")
        err = ClientError("wrapper", cause)
        assert str(err) == "wrapper: socket closed"


class TestKinds:
    def test_validation_error(self) -> None:
        err = LocalValidationError("Name is required.")
        assert isinstance(err, ClientError)
        assert err.kind == "validation"

    def test_api_error_keeps_payload(self) -> None:
        err = ApiError("Customer not found", 404, {"detail": "Customer not found"})
        assert err.kind == "api"
        assert err.payload == {"detail": "Customer not found"}
        assert err.is_not_found()
        assert not err.is_bad_request()

    def test_connectivity_error_is_generic(self) -> None:
        err = ConnectivityError(cause=OSError("refused"))
        assert err.message == GENERIC_CONNECTIVITY_MESSAGE
        assert err.kind == "connectivity"

    def test_parse_error_is_connectivity(self) -> None:
        err = ResponseParseError("Server returned non-JSON response (Status 500).", 500)
        assert isinstance(err, ConnectivityError)
        assert err.status_code == 500
        assert err.kind == "connectivity"
