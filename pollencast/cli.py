"""CLI entry point for the pollen report pipeline."""

import argparse
import asyncio
import logging
from typing import Any

from pydantic import BaseModel, TypeAdapter

from pollencast.cache.coordinator import PollenService
from pollencast.cache.store import CacheStore
from pollencast.config.loader import (
    config_hash,
    default_config,
    get_config_value,
    load_config,
)
from pollencast.config.schema import AppConfig
from pollencast.ingest.report_scraper import ReportScraper
from pollencast.reporting.formatters import format_pollen_json, format_pollen_text
from pollencast.transform.severity import SeverityScale

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_DEGRADED = 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pollencast",
        description="Austin cedar pollen report pipeline",
    )
    parser.add_argument(
        "--config", default=None, help="Config YAML path (defaults if omitted)"
    )

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch the live report (falls back to synthetic)")
    fetch_p.add_argument("--json", action="store_true", help="Print JSON")

    # mock
    mock_p = sub.add_parser("mock", help="Print the synthetic dataset")
    mock_p.add_argument("--json", action="store_true", help="Print JSON")

    # classify
    classify_p = sub.add_parser("classify", help="Classify a pollen count")
    classify_p.add_argument("count", type=int)

    # config show / get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config and its hash")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. cache.pollen_ttl_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_ERROR

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else default_config()

    if args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "mock":
        return _cmd_mock(config, args)
    elif args.command == "classify":
        return _cmd_classify(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return EXIT_ERROR


def build_service(config: AppConfig) -> PollenService:
    return PollenService(
        scraper=ReportScraper.from_config(config.source),
        store=CacheStore(),
        config=config,
    )


def _cmd_fetch(config: AppConfig, args) -> int:
    service = build_service(config)
    data = asyncio.run(service.get_pollen_data())
    print(format_pollen_json(data) if args.json else format_pollen_text(data))
    if data.is_synthetic:
        print("WARNING: live report unavailable, served synthetic data")
        return EXIT_DEGRADED
    return EXIT_OK


def _cmd_mock(config: AppConfig, args) -> int:
    data = build_service(config).get_mock_pollen_data()
    print(format_pollen_json(data) if args.json else format_pollen_text(data))
    return EXIT_OK


def _cmd_classify(config: AppConfig, args) -> int:
    scale = SeverityScale.from_config(config)
    try:
        level = scale.level(args.count)
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_ERROR
    print(f"{args.count}: {level} ({scale.color(level)}) - {scale.description(level)}")
    return EXIT_OK


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        print(f"Config hash: {config_hash(config)}")
        return EXIT_OK
    if args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return EXIT_ERROR
        if isinstance(value, (BaseModel, list)):
            print(TypeAdapter(Any).dump_json(value, indent=2).decode())
        else:
            print(value)
        return EXIT_OK
    print("Use: config show | config get KEY")
    return EXIT_ERROR
