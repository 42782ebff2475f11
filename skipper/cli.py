"""CLI entry point for the AI skipper."""

import argparse
import logging

from skipper.catalog import ConfigRouteCatalog
from skipper.config.loader import get_config_value, load_config, set_config_value
from skipper.errors import SkipperError
from skipper.models.analysis import AnalysisRequest
from skipper.models.common import MAX_EPOCH, to_epoch
from skipper.pipeline.analysis import AnalysisOrchestrator
from skipper.reporting.formatters import format_result_json, format_result_text

DEFAULT_CONFIG = "configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skipper",
        description="AI sailing-comfort advisor",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # analyze
    analyze_p = sub.add_parser("analyze", help="Assess one route and time slot")
    analyze_p.add_argument("--route", required=True, help="Route identifier")
    when = analyze_p.add_mutually_exclusive_group(required=True)
    when.add_argument("--at", help="ISO 8601 date/time (naive values are UTC)")
    when.add_argument("--ts", type=int, help="UTC epoch seconds")
    analyze_p.add_argument("--json", action="store_true", help="Print JSON payload")

    # routes
    sub.add_parser("routes", help="List known routes")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8777)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "analyze":
        return _cmd_analyze(config, args)
    elif args.command == "routes":
        return _cmd_routes(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_analyze(config, args) -> int:
    if args.ts is not None:
        target_ts = args.ts
    else:
        try:
            target_ts = to_epoch(args.at)
        except ValueError:
            print(f"Error: invalid date/time: {args.at}")
            return 1
    if not 0 <= target_ts <= MAX_EPOCH:
        print(f"Error: timestamp out of range: {target_ts}")
        return 1

    orchestrator = AnalysisOrchestrator.from_config(config)
    try:
        result = orchestrator.analyze(
            AnalysisRequest(route_id=args.route, target_timestamp=target_ts)
        )
    except SkipperError as e:
        print(f"Error: {e.message}")
        return 1

    if args.json:
        print(format_result_json(result))
    else:
        print(format_result_text(result))
    return 0


def _cmd_routes(config) -> int:
    for route in ConfigRouteCatalog(config).list_routes():
        if route.coordinates is None:
            where = "coordinates missing"
        else:
            where = f"{route.coordinates.latitude}, {route.coordinates.longitude}"
        print(f"  {route.route_id}: {route.name} ({where})")
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
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from skipper.api import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0
