"""Entry point for manual quotes."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from stay_quote.catalog import Catalog
from stay_quote.config.run_config import QuoteRequestConfig
from stay_quote.config.settings import Settings
from stay_quote.core.logging import configure_logging
from stay_quote.quotes import Quote, quote_package, quote_stay


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Price a stay or package and print the quote as JSON")
    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to a quote request TOML file",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Override the catalog snapshot path (defaults to Settings.catalog_path)",
    )
    parser.add_argument("--log-level", help="Override the log level (e.g. DEBUG)")
    return parser


def build_quote(request: QuoteRequestConfig, catalog: Catalog, settings: Settings) -> Quote:
    today = request.reference_date()
    amenities = request.amenity_selections()
    if request.stay is not None:
        selection = request.stay_selection()
        snapshot = catalog.property(request.stay.property_id)
        return quote_stay(
            selection,
            snapshot.rooms,
            amenities,
            today=today,
            payment_term=request.payment_term,
            pricing=settings.pricing_policy(),
            payments=settings.payment_policy(),
        )
    return quote_package(
        request.package_selection(catalog),
        amenities,
        today=today,
        payment_term=request.payment_term,
        pricing=settings.pricing_policy(),
        payments=settings.payment_policy(),
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings()

    config_path: Path = args.config
    if not config_path.exists():
        raise FileNotFoundError(f"Quote request not found: {config_path}")
    request = QuoteRequestConfig.load(config_path)
    request.apply_to(settings, base_dir=config_path.parent)
    if args.log_level:
        settings.log_level = args.log_level
    if args.catalog:
        settings.catalog_path = args.catalog

    configure_logging(settings.log_level, settings.log_dir)
    settings.ensure_directories()
    logger = logging.getLogger(__name__)
    if request.title:
        logger.info("Quoting '%s' from %s", request.title, config_path)

    catalog = Catalog.load(settings.catalog_path)
    quote = build_quote(request, catalog, settings)
    print(json.dumps(quote.to_dict(), indent=2))

    for warning in quote.warnings:
        logger.warning("%s", warning)
    if not quote.is_valid:
        for error in quote.errors:
            logger.error("%s", error.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
