"""Google Ads campaign extension settings CLI."""

import logging

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

logger = logging.getLogger("gads-extension-settings")


def _customer_id_option(ctx: click.Context, param: click.Parameter, value: str) -> int:
    from .config import normalize_customer_id

    try:
        return normalize_customer_id(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to .env file",
)
def main(verbose: int, env_file: str | None) -> None:
    """Manage Google Ads campaign extension settings."""
    logging_level = logging.WARNING
    if verbose == 1:
        logging_level = logging.INFO
    elif verbose >= 2:
        logging_level = logging.DEBUG

    logging.basicConfig(
        level=logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if env_file:
        logger.debug("Loading environment from file: %s", env_file)
        load_dotenv(env_file)
    else:
        load_dotenv()


@main.command("update-sitelinks")
@click.option(
    "-c",
    "--customer-id",
    required=True,
    callback=_customer_id_option,
    help="The Google Ads customer ID (dashes allowed).",
)
@click.option("-i", "--campaign-id", type=int, required=True, help="The campaign ID.")
@click.option(
    "-f",
    "--extension-feed-item-resource-name",
    "feed_item_resource_names",
    multiple=True,
    help="Extension feed item resource name to attach (repeatable, order is kept).",
)
@click.option(
    "--validate-only",
    is_flag=True,
    default=False,
    help="Validate the request without applying it.",
)
def update_sitelinks_command(
    customer_id: int,
    campaign_id: int,
    feed_item_resource_names: tuple[str, ...],
    validate_only: bool,
) -> None:
    """Replace the extension feed items of a campaign's sitelink extension setting.

    Old extension feed items are detached from the campaign, not removed.
    """
    from .clients import build_client
    from .config import SitelinkUpdate, load_config
    from .errors import ConfigurationError
    from .operations import mutate_sitelink_setting
    from .reporting import report_outcome

    update = SitelinkUpdate.from_arguments(customer_id, campaign_id, feed_item_resource_names)
    try:
        client = build_client(load_config())
    except ConfigurationError as exc:
        raise click.ClickException(f"{exc}\n{exc.hint}") from exc

    outcome = mutate_sitelink_setting(client, update, validate_only=validate_only)
    raise SystemExit(report_outcome(outcome))


__all__ = ["__version__", "main"]

if __name__ == "__main__":
    main()
