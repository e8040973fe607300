"""Failure shapes for Google Ads mutate calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import grpc
from google.ads.googleads.errors import GoogleAdsException
from google.api_core.exceptions import GoogleAPIError

REMOTE_ERRORS = (GoogleAdsException, GoogleAPIError, grpc.RpcError)

HINT_CONFIG = (
    "Check google-ads.yaml or the GOOGLE_ADS_* environment variables "
    "(developer token, OAuth client and refresh token)."
)


class ConfigurationError(RuntimeError):
    def __init__(self, message: str, hint: str = HINT_CONFIG) -> None:
        super().__init__(message)
        self.hint = hint


@dataclass(frozen=True)
class ServiceError:
    code: str
    message: str
    field_path: tuple[str, ...] = ()


@dataclass(frozen=True)
class ServiceFailure:
    request_id: str | None
    errors: tuple[ServiceError, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TransportFailure:
    message: str


def _error_code_name(error: Any) -> str:
    # GoogleAdsErrorCode is a oneof across per-category enums.
    error_code = getattr(error, "error_code", None)
    if error_code is None:
        return "UNKNOWN"
    which = type(error_code).pb(error_code).WhichOneof("error_code")
    if not which:
        return "UNSPECIFIED"
    value = getattr(error_code, which)
    return getattr(value, "name", str(value))


def _field_path(error: Any) -> tuple[str, ...]:
    location = getattr(error, "location", None)
    if not location:
        return ()
    return tuple(
        element.field_name for element in getattr(location, "field_path_elements", [])
    )


def service_failure_from_exception(exc: GoogleAdsException) -> ServiceFailure:
    failure = getattr(exc, "failure", None)
    errors = tuple(
        ServiceError(
            code=_error_code_name(error),
            message=error.message,
            field_path=_field_path(error),
        )
        for error in getattr(failure, "errors", [])
    )
    return ServiceFailure(request_id=exc.request_id, errors=errors)


def classify_remote_error(exc: Exception) -> ServiceFailure | TransportFailure:
    """Map one of REMOTE_ERRORS onto the service or transport failure shape."""
    if isinstance(exc, GoogleAdsException):
        return service_failure_from_exception(exc)
    if isinstance(exc, grpc.RpcError):
        details = getattr(exc, "details", None)
        message = details() if callable(details) else None
        return TransportFailure(message=message or str(exc))
    return TransportFailure(message=str(exc))
