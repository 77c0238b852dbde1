"""Command-line entry: plan a trip from a JSON request, or run one of the API servers."""

import argparse
import json
from pathlib import Path

from trip_planner import TripValidationError, plan_trip
from trip_planner.config import configure_logging, get_settings


def load_request(path: Path) -> dict:
    return json.loads(path.read_text())


def run_plan(args: argparse.Namespace) -> int:
    try:
        itinerary = plan_trip(load_request(args.request_file))
    except TripValidationError as exc:
        print(json.dumps(exc.body, indent=2, ensure_ascii=False))
        return 1
    result = json.dumps(itinerary, indent=2, ensure_ascii=False)

    if args.output:
        args.output.write_text(result)
        print(f"Itinerary saved to {args.output}")
    else:
        print(result)
    return 0


def run_server(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    if args.simple:
        target, port = "trip_planner.simple_api:app", settings.simple_port
    else:
        target, port = "trip_planner.api:app", settings.port
    uvicorn.run(target, host=args.host, port=args.port or port, reload=args.reload)
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate travel itineraries.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan_parser = subparsers.add_parser("plan", help="Plan a trip from a JSON request file")
    plan_parser.add_argument("request_file", type=Path, help="Path to a JSON file with the trip form fields")
    plan_parser.add_argument("--output", type=Path, help="Optional path to save the itinerary JSON")
    plan_parser.set_defaults(handler=run_plan)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--simple", action="store_true", help="Serve the scheduled-itinerary API instead")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, help="Override PORT / SIMPLE_PORT")
    serve_parser.add_argument("--reload", action="store_true")
    serve_parser.set_defaults(handler=run_server)

    args = parser.parse_args()
    configure_logging()
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
