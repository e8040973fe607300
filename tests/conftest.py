from functools import lru_cache
from types import SimpleNamespace

import pytest
from google.ads.googleads.client import GoogleAdsClient
from google.oauth2.credentials import Credentials
from google.protobuf.field_mask_pb2 import FieldMask


class FakeService:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def mutate_campaign_extension_settings(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


class FakeGoogleAdsClient:
    """Stands in for GoogleAdsClient: message factory, service lookup, copy_from."""

    def __init__(self, service=None):
        self.service = service or FakeService()
        self.services_requested = []

    def get_type(self, name):
        if name == "CampaignExtensionSettingOperation":
            return SimpleNamespace(
                update=SimpleNamespace(resource_name="", extension_feed_items=[]),
                update_mask=FieldMask(),
            )
        if name == "MutateCampaignExtensionSettingsRequest":
            return SimpleNamespace(customer_id="", operations=[], validate_only=False)
        raise ValueError(f"Unknown type {name}")

    def get_service(self, name):
        self.services_requested.append(name)
        return self.service

    @staticmethod
    def copy_from(destination, origin):
        destination.CopyFrom(origin)


@lru_cache(maxsize=None)
def real_client(use_proto_plus=True):
    """A GoogleAdsClient with v14 message types; nothing here opens a connection."""
    return GoogleAdsClient(
        Credentials(token="token"),
        "dev-token",
        version="v14",
        use_proto_plus=use_proto_plus,
    )


def mutate_response(*resource_names):
    return SimpleNamespace(
        results=[SimpleNamespace(resource_name=name) for name in resource_names]
    )


def google_ads_error(code, message, field_names=()):
    client = real_client()
    error = client.get_type("GoogleAdsError")
    error.error_code.request_error = getattr(client.enums.RequestErrorEnum, code)
    error.message = message
    for name in field_names:
        element = type(error.location).FieldPathElement(field_name=name)
        error.location.field_path_elements.append(element)
    return error


def google_ads_failure(*errors):
    failure = real_client().get_type("GoogleAdsFailure")
    failure.errors.extend(errors)
    return failure


@pytest.fixture
def fake_client():
    return FakeGoogleAdsClient()
