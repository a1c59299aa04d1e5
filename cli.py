import argparse
import json
import sys
from pathlib import Path

import logging
from api.app import create_app
from config.settings import get_settings
from models.update_outcome import UpdateOutcome
from services.company_service import CompanyService
from services.errors import CompanyServiceError
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


def _parse_set_value(raw: str):
    # Accept JSON literals (numbers, lists, null); anything else stays a string
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def _parse_assignments(pairs):
    changes = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise SystemExit(f"Invalid --set value {pair!r}, expected KEY=VALUE")
        changes[key] = _parse_set_value(value)
    return changes


def cmd_check(args):
    service = CompanyService.from_path(args.data)
    print(f"Loaded {len(service.repo)} companies from {args.data}")


def cmd_search(args):
    service = CompanyService.from_path(args.data)
    companies = service.search_companies(args.query)
    out = [c.to_document() for c in companies]
    print(json.dumps(out, indent=2, ensure_ascii=False))


def cmd_update(args):
    if args.input:
        try:
            changes = json.loads(Path(args.input).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SystemExit(f"Cannot read --input {args.input}: {exc}")
        if not isinstance(changes, dict):
            raise SystemExit("--input must contain a JSON object")
    else:
        changes = _parse_assignments(args.set)
    service = CompanyService.from_path(args.data)
    outcome = service.update_company(args.id, changes)
    print(outcome.message)
    if outcome is UpdateOutcome.NOT_FOUND:
        sys.exit(1)


def cmd_serve(args):
    settings = get_settings()
    service = CompanyService.from_path(args.data)
    app = create_app(service=service, settings=settings)
    print(f"Serving {len(service.repo)} companies at http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port, debug=settings.http_debug, use_reloader=False)


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Company directory CLI")
    parser.add_argument("--data", default=settings.company_json_path, help="Path to companies JSON document (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="Load the document and report the record count")
    p_check.set_defaults(func=cmd_check)

    p_search = sub.add_parser("search", help="Whole-word search over company name and description")
    p_search.add_argument("--query", "-q", required=True, help="Word or phrase to match")
    p_search.set_defaults(func=cmd_search)

    p_upd = sub.add_parser("update", help="Overwrite fields of one company and save the document")
    p_upd.add_argument("--id", required=True, help="company_name_id of the company to update")
    src = p_upd.add_mutually_exclusive_group(required=True)
    src.add_argument("--set", action="append", metavar="KEY=VALUE", help="Field assignment (repeatable); VALUE is parsed as JSON when possible")
    src.add_argument("--input", help="Path to a JSON object of field changes")
    p_upd.set_defaults(func=cmd_update)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=settings.http_host)
    p_serve.add_argument("--port", type=int, default=settings.http_port)
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    try:
        args.func(args)
    except CompanyServiceError as exc:
        logger.error("%s", exc, extra={"op": args.cmd, "status": "error", "error": type(exc).__name__})
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
