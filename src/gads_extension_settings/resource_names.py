"""Resource name helpers."""

SITELINK = "SITELINK"


def campaign_extension_setting_path(
    customer_id: int | str,
    campaign_id: int | str,
    extension_type: str = SITELINK,
) -> str:
    return (
        f"customers/{customer_id}/campaignExtensionSettings/"
        f"{campaign_id}~{extension_type}"
    )
