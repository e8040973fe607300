"""Configuration helpers for the Google Ads extension settings CLI."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Iterable

logger = logging.getLogger("gads-extension-settings")

DEFAULT_API_VERSION = "v14"

# Used when no extension feed item resource names are given on the command line.
DEFAULT_FEED_ITEM_RESOURCE_NAMES = (
    "INSERT_EXTENSION_FEED_ITEM_RESOURCE_NAME1_HERE",
    "INSERT_EXTENSION_FEED_ITEM_RESOURCE_NAME2_HERE",
)


@dataclass(frozen=True)
class AppConfig:
    configuration_file_path: str | None
    api_version: str
    developer_token: str | None
    use_proto_plus: bool = True

    @property
    def from_env(self) -> bool:
        return bool(self.developer_token) and not self.configuration_file_path


@dataclass(frozen=True)
class SitelinkUpdate:
    customer_id: int
    campaign_id: int
    feed_item_resource_names: tuple[str, ...]

    @classmethod
    def from_arguments(
        cls,
        customer_id: int,
        campaign_id: int,
        feed_item_resource_names: Iterable[str] | None = None,
    ) -> "SitelinkUpdate":
        names = tuple(feed_item_resource_names or ())
        if not names:
            logger.warning(
                "No extension feed item resource names given; using placeholders %s",
                ", ".join(DEFAULT_FEED_ITEM_RESOURCE_NAMES),
            )
            names = DEFAULT_FEED_ITEM_RESOURCE_NAMES
        return cls(
            customer_id=int(customer_id),
            campaign_id=int(campaign_id),
            feed_item_resource_names=names,
        )


def normalize_customer_id(value: str | int) -> int:
    text = str(value).strip().replace("-", "")
    if not text.isdigit():
        raise ValueError(f"Invalid customer ID: {value!r}")
    return int(text)


def _normalize_api_version(value: str | None) -> str:
    if not value:
        return DEFAULT_API_VERSION
    normalized = value.strip().lower()
    if normalized.isdigit():
        return f"v{normalized}"
    if normalized.startswith("v") and normalized[1:].isdigit():
        return normalized
    logger.warning("Ignoring invalid GOOGLE_ADS_API_VERSION=%s", value)
    return DEFAULT_API_VERSION


def load_config() -> AppConfig:
    return AppConfig(
        configuration_file_path=os.getenv("GOOGLE_ADS_CONFIGURATION_FILE_PATH") or None,
        api_version=_normalize_api_version(os.getenv("GOOGLE_ADS_API_VERSION")),
        developer_token=os.getenv("GOOGLE_ADS_DEVELOPER_TOKEN") or None,
        use_proto_plus=os.getenv("GOOGLE_ADS_USE_PROTO_PLUS", "true").lower()
        in {"1", "true", "yes"},
    )
