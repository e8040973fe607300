"""Campaign sitelink extension setting update."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Sequence

from .config import SitelinkUpdate
from .errors import REMOTE_ERRORS, ServiceFailure, TransportFailure, classify_remote_error
from .field_masks import PartialResource, all_set_fields_of
from .resource_names import SITELINK, campaign_extension_setting_path

logger = logging.getLogger("gads-extension-settings")


@dataclass(frozen=True)
class Ok:
    response: Any
    validate_only: bool = False


Outcome = Ok | ServiceFailure | TransportFailure


def build_update_operation(
    client: Any,
    customer_id: int,
    campaign_id: int,
    feed_item_resource_names: Sequence[str],
) -> Any:
    """Build a CampaignExtensionSettingOperation replacing the sitelink feed items.

    Old feed items are detached from the campaign but not removed.
    """
    operation = client.get_type("CampaignExtensionSettingOperation")
    setting = PartialResource(operation.update)
    setting.assign(
        "resource_name",
        campaign_extension_setting_path(customer_id, campaign_id, SITELINK),
    )
    setting.assign("extension_feed_items", list(feed_item_resource_names))
    client.copy_from(operation.update_mask, all_set_fields_of(setting))
    return operation


def mutate_sitelink_setting(
    client: Any,
    update: SitelinkUpdate,
    *,
    validate_only: bool = False,
) -> Outcome:
    """Send one mutate request with one update operation and classify the result."""
    service = client.get_service("CampaignExtensionSettingService")
    operation = build_update_operation(
        client,
        update.customer_id,
        update.campaign_id,
        update.feed_item_resource_names,
    )

    request = client.get_type("MutateCampaignExtensionSettingsRequest")
    request.customer_id = str(update.customer_id)
    request.operations.append(operation)
    request.validate_only = validate_only

    logger.info(
        "Updating %s with %d feed item(s)%s",
        operation.update.resource_name,
        len(update.feed_item_resource_names),
        " (validate only)" if validate_only else "",
    )
    try:
        response = service.mutate_campaign_extension_settings(request=request)
    except REMOTE_ERRORS as exc:
        logger.debug("Mutate failed: %s", exc.__class__.__name__)
        return classify_remote_error(exc)
    return Ok(response, validate_only=validate_only)
