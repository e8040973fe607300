"""Validate Google Ads client configuration without making API calls."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gads_extension_settings.config import load_config  # noqa: E402

ENV_REQUIRED = (
    "GOOGLE_ADS_DEVELOPER_TOKEN",
    "GOOGLE_ADS_CLIENT_ID",
    "GOOGLE_ADS_CLIENT_SECRET",
    "GOOGLE_ADS_REFRESH_TOKEN",
)


def main() -> int:
    load_dotenv()
    config = load_config()
    errors: list[str] = []
    warnings: list[str] = []

    if config.from_env:
        missing = [name for name in ENV_REQUIRED if not os.getenv(name)]
        if missing and not os.getenv("GOOGLE_ADS_JSON_KEY_FILE_PATH"):
            errors.append("Missing " + ", ".join(missing))
    else:
        path = Path(config.configuration_file_path or Path.home() / "google-ads.yaml").expanduser()
        if not path.is_file():
            errors.append(f"Configuration file not found: {path}")

    if not os.getenv("GOOGLE_ADS_LOGIN_CUSTOMER_ID") and config.from_env:
        warnings.append("GOOGLE_ADS_LOGIN_CUSTOMER_ID is empty (required for manager accounts)")
    raw_version = os.getenv("GOOGLE_ADS_API_VERSION")
    if raw_version and raw_version.strip().lower().lstrip("v") != config.api_version[1:]:
        warnings.append(f"GOOGLE_ADS_API_VERSION is invalid; using {config.api_version}")

    if errors:
        print("Errors:")
        for item in errors:
            print(f"- {item}")

    if warnings:
        print("Warnings:")
        for item in warnings:
            print(f"- {item}")

    if errors:
        return 1

    print("OK: environment looks valid")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
