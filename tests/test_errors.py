import grpc
from google.ads.googleads.errors import GoogleAdsException
from google.api_core import exceptions as core_exceptions

from conftest import google_ads_error, google_ads_failure
from gads_extension_settings.errors import (
    ServiceError,
    ServiceFailure,
    TransportFailure,
    classify_remote_error,
    service_failure_from_exception,
)


def _google_ads_exception(request_id, *errors):
    return GoogleAdsException(None, None, google_ads_failure(*errors), request_id)


def test_service_failure_keeps_request_id_and_error_order():
    exc = _google_ads_exception(
        "abc-123",
        google_ads_error("INVALID_CUSTOMER_ID", "bad id"),
        google_ads_error(
            "RESOURCE_NAME_MALFORMED",
            "bad name",
            ["operations", "update", "extension_feed_items"],
        ),
    )
    failure = service_failure_from_exception(exc)
    assert failure == ServiceFailure(
        request_id="abc-123",
        errors=(
            ServiceError("INVALID_CUSTOMER_ID", "bad id"),
            ServiceError(
                "RESOURCE_NAME_MALFORMED",
                "bad name",
                ("operations", "update", "extension_feed_items"),
            ),
        ),
    )


def test_service_failure_with_no_errors():
    exc = GoogleAdsException(None, None, google_ads_failure(), "req-0")
    assert service_failure_from_exception(exc) == ServiceFailure(request_id="req-0")


def test_classify_google_ads_exception():
    exc = _google_ads_exception("req-1", google_ads_error("INVALID_CUSTOMER_ID", "bad id", ["operations"]))
    failure = classify_remote_error(exc)
    assert isinstance(failure, ServiceFailure)
    assert failure.errors == (ServiceError("INVALID_CUSTOMER_ID", "bad id", ("operations",)),)


def test_classify_api_core_error():
    failure = classify_remote_error(core_exceptions.ServiceUnavailable("backend down"))
    assert isinstance(failure, TransportFailure)
    assert "backend down" in failure.message


def test_classify_grpc_error_uses_details():
    class _RpcError(grpc.RpcError):
        def details(self):
            return "Deadline Exceeded"

    assert classify_remote_error(_RpcError()) == TransportFailure(message="Deadline Exceeded")


def test_classify_grpc_error_without_details():
    assert classify_remote_error(grpc.RpcError("socket closed")) == TransportFailure(
        message="socket closed"
    )
