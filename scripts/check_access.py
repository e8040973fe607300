"""Check access to the Google Ads API.

Reads config from `.env` / environment via `load_config()` and verifies access
with a minimal `GoogleAdsService.search` query for one customer.

This script avoids printing any secrets. On failure it prints the request id
and error details reported by the API.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gads_extension_settings.clients import build_client  # noqa: E402
from gads_extension_settings.config import load_config, normalize_customer_id  # noqa: E402
from gads_extension_settings.errors import (  # noqa: E402
    REMOTE_ERRORS,
    ConfigurationError,
    classify_remote_error,
)
from gads_extension_settings.reporting import report_outcome  # noqa: E402

QUERY = "SELECT customer.id, customer.descriptive_name FROM customer LIMIT 1"


def main(customer_id: int) -> int:
    load_dotenv()
    config = load_config()

    try:
        client = build_client(config)
    except ConfigurationError as exc:
        print(f"{exc}\n{exc.hint}")
        return 1

    ga_service = client.get_service("GoogleAdsService")
    try:
        rows = list(ga_service.search(customer_id=str(customer_id), query=QUERY))
    except REMOTE_ERRORS as exc:
        return report_outcome(classify_remote_error(exc))

    name = rows[0].customer.descriptive_name if rows else ""
    print(f"Google Ads OK: customer {customer_id} '{name}' (api_version={config.api_version})")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Verify Google Ads API access.")
    parser.add_argument("-c", "--customer_id", type=str, required=True, help="The Google Ads customer ID.")
    args = parser.parse_args()
    raise SystemExit(main(normalize_customer_id(args.customer_id)))
