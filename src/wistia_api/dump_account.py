# Dumps an account, its stats and its projects. Key from --api-key, else
# WISTIA_SECRET_ARN / WISTIA_API_TOKEN (env or .env).
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any, List, Optional

from dotenv import load_dotenv

from wistia_api.account import Account
from wistia_api.common.dates import _today_utc
from wistia_api.common.secrets import load_api_key
from wistia_api.http import WistiaError
from wistia_api.settings import Settings

logger = logging.getLogger("wistia_api.dump")


def _section(title: str, obj: Any) -> None:
    print(title)
    print(json.dumps(obj, ensure_ascii=False, indent=2, default=str))
    print("-" * 40)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(override=False)

    ap = argparse.ArgumentParser(
        description="Dump a Wistia account, its stats and its projects."
    )
    ap.add_argument("--api-key", help="API password. Defaults to env/.env or secret.")
    ap.add_argument(
        "--recursive",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Load every project's medias (one request per project).",
    )
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        key = args.api_key or load_api_key()
    except RuntimeError as e:
        logger.error("%s", e)
        return 2

    settings = replace(Settings.from_env(), api_token=key)
    today = _today_utc()
    try:
        account = Account(key, settings=settings)
        _section("Account:", account.as_dict())
        _section("All-time stats:", account.get_stats().as_dict())
        _section("Stats for today:", account.get_daily_stats(today).as_dict())
        _section(
            "Stats for this month:",
            account.get_monthly_stats(today.month, today.year).as_dict(),
        )
        projects = account.get_projects(recursive=args.recursive)
        _section("Projects:", [p.as_dict() for p in projects])
    except WistiaError as e:
        logger.error("Wistia API call failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
