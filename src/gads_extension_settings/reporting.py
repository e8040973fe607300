"""Operator-facing output for mutate outcomes."""

from __future__ import annotations

import click

from .errors import ServiceFailure, TransportFailure
from .operations import Ok, Outcome


def report_outcome(outcome: Outcome) -> int:
    """Print the outcome and return the process exit code."""
    if isinstance(outcome, Ok):
        if outcome.validate_only:
            click.echo("Request validated; no changes were applied.")
            return 0
        result = outcome.response.results[0]
        click.echo(
            "Updated a campaign extension setting with resource name: "
            f"'{result.resource_name}'."
        )
        return 0

    if isinstance(outcome, ServiceFailure):
        click.echo(f"Request with ID '{outcome.request_id}' has failed.")
        click.echo("Google Ads failure details:")
        for error in outcome.errors:
            click.echo(f"\t{error.code}: {error.message}")
            if error.field_path:
                click.echo(f"\t\tOn field: {'.'.join(error.field_path)}")
        return 1

    if isinstance(outcome, TransportFailure):
        click.echo(f"API call failed with message '{outcome.message}'.")
        return 1

    raise TypeError(f"Unexpected outcome: {outcome!r}")
