"""CLI entry point for zutool."""

import argparse
import logging
import sys

import yaml

from zutool.config.loader import get_config_value, load_config, save_config, set_config_value
from zutool.ingest.errors import ZutoolError
from zutool.ingest.zutool_client import ZutoolClient
from zutool.models.common import OutputFormat
from zutool.pipeline.commands import (
    run_otenki,
    run_pain_status,
    run_weather_point,
    run_weather_status,
)

DEFAULT_CONFIG = "zutool.yaml"


def _day_offsets(text: str) -> list[int]:
    """Parse "-n 1" or a comma list such as "-n 0,1,2"."""
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid day offset list: {text!r}") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="zutool",
        description="Fetch pain and pressure forecasts from zutool.jp",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-j", "--json", action="store_true", help="Output JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # pain_status
    ps_p = sub.add_parser(
        "pain_status", aliases=["ps"], help="Pain forecast by prefecture"
    )
    ps_p.add_argument("area", help="Two-digit area code or prefecture name")
    ps_p.add_argument(
        "-s", "--set-weather-point", default=None,
        help="Point code (e.g. 13113) for an area-specific forecast",
    )

    # weather_point
    wp_p = sub.add_parser(
        "weather_point", aliases=["wp"], help="Search weather points"
    )
    wp_p.add_argument("keyword", help="Search keyword, e.g. a city name")
    wp_p.add_argument(
        "-k", "--kata", action="store_true", help="Include kana names"
    )

    # weather_status
    ws_p = sub.add_parser(
        "weather_status", aliases=["ws"], help="Hourly pressure forecast"
    )
    ws_p.add_argument("city_code", help="Five-digit city code")
    ws_p.add_argument(
        "-n", type=_day_offsets, action="extend", dest="days",
        help="Day offsets -1..2, repeatable or comma-separated (default 0)",
    )

    # otenki_asp
    oa_p = sub.add_parser(
        "otenki_asp", aliases=["oa"], help="7-day forecast from Otenki ASP"
    )
    oa_p.add_argument("city", help="Confirmed city code or name")
    oa_p.add_argument(
        "-n", type=_day_offsets, action="extend", dest="days",
        help="Day offsets 0..6, repeatable or comma-separated (default all)",
    )

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid config {args.config}: {e}", file=sys.stderr)
        return 1

    if args.command == "config":
        return _cmd_config(config, args)

    fmt = OutputFormat.JSON if args.json else config.display.output_format
    indent = config.display.json_indent
    client = ZutoolClient(config.api)

    try:
        if args.command in ("pain_status", "ps"):
            run_pain_status(
                client, args.area, args.set_weather_point, fmt, print, indent
            )
        elif args.command in ("weather_point", "wp"):
            run_weather_point(client, args.keyword, args.kata, fmt, print, indent)
        elif args.command in ("weather_status", "ws"):
            run_weather_status(
                client, args.city_code, args.days or [0], fmt, print, indent
            )
        elif args.command in ("otenki_asp", "oa"):
            days = args.days if args.days else list(range(7))
            run_otenki(client, args.city, days, fmt, print, indent)
        else:
            parser.print_help()
            return 1
    except ZutoolError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except Exception as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1
