"""Google Ads client construction."""

from __future__ import annotations

import logging

from google.ads.googleads import config as googleads_config
from google.ads.googleads.client import GoogleAdsClient

from .config import AppConfig
from .errors import ConfigurationError

logger = logging.getLogger("gads-extension-settings")


def build_client(config: AppConfig) -> GoogleAdsClient:
    """Build a GoogleAdsClient from a YAML file or GOOGLE_ADS_* environment variables.

    Without an explicit file path or developer token the library falls back to
    ``~/google-ads.yaml``. ``use_proto_plus`` comes from ``AppConfig`` unless the
    file or environment sets it.
    """
    try:
        if config.from_env:
            logger.debug("Loading Google Ads client from environment (api %s)", config.api_version)
            config_data = googleads_config.load_from_env()
        else:
            logger.debug(
                "Loading Google Ads client from %s (api %s)",
                config.configuration_file_path or "~/google-ads.yaml",
                config.api_version,
            )
            config_data = googleads_config.load_from_yaml_file(config.configuration_file_path)
        config_data.setdefault("use_proto_plus", config.use_proto_plus)
        return GoogleAdsClient.load_from_dict(config_data, version=config.api_version)
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Unable to build Google Ads client: {exc}") from exc
