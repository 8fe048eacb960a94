#!/usr/bin/env python3
"""
CLI for the storefront search audit.

Usage: python run_table_audit.py [--search-term TERM] [--keyword WORD]
                                 [--scenario audit|cart|all] [--no-headless]
"""

import argparse
import asyncio
import json
import sys
from dataclasses import replace
from uuid import uuid4

from dotenv import load_dotenv

load_dotenv()

from shared.config import get_config
from shared.logging import bind_run_context, configure_logging
from storefront.browser import open_storefront
from storefront.scenarios import run_cart_scenario, run_keyword_audit_scenario
from storefront.search_page import SearchPage


async def main() -> None:
    """Main CLI entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(description="Audit storefront search results and cart")
    parser.add_argument("--url", default=config.base_url, help="Storefront home page")
    parser.add_argument("--search-term", default=config.search_term)
    parser.add_argument("--keyword", default=config.audit_keyword)
    parser.add_argument("--viewport", default=config.viewport, choices=["desktop", "mobile"])
    parser.add_argument("--scenario", default="all", choices=["audit", "cart", "all"])
    parser.add_argument(
        "--no-headless",
        action="store_true",
        help="Show the browser window. Use for local debugging.",
    )
    args = parser.parse_args()

    config = replace(
        config,
        base_url=args.url,
        search_term=args.search_term,
        audit_keyword=args.keyword,
        viewport=args.viewport,
        headless=config.headless and not args.no_headless,
    )

    configure_logging(config.log_level, log_file=config.log_file, log_stdout=config.log_stdout)
    bind_run_context(run_id=str(uuid4()))

    reports = []
    async with open_storefront(config) as driver:
        page = SearchPage(driver)
        if args.scenario in ("audit", "all"):
            reports.append(
                await run_keyword_audit_scenario(page, config.search_term, config.audit_keyword)
            )
        if args.scenario in ("cart", "all"):
            reports.append(await run_cart_scenario(page, config.search_term))

    print("\n" + "=" * 80)
    print("AUDIT RESULTS")
    print("=" * 80)
    for number, report in enumerate(reports, start=1):
        print(f"\nTest {number} -> {'PASSES' if report.passed else 'FAILS'}  {report.name}")
        for check in report.failures:
            print(f"  - {check.description}: expected {check.expected!r}, got {check.actual!r}")

    print("\n" + "=" * 80)
    print("JSON OUTPUT")
    print("=" * 80)
    print(json.dumps([report.to_dict() for report in reports], indent=2, default=str))

    if not all(report.passed for report in reports):
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
