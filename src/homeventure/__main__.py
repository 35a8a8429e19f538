from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from homeventure.errors import ConfigurationError
from homeventure.services.address_search import AddressSearchService
from homeventure.services.display import display_payload, list_display
from homeventure.services.enrich import EnrichmentService
from homeventure.services.status import get_all_statuses
from homeventure.settings import get_settings
from homeventure.store import open_record_store


def _statuses() -> dict:
    store = open_record_store(get_settings())
    try:
        return {str(pid): s.to_json_dict() for pid, s in get_all_statuses(store).items()}
    finally:
        store.close()


def _properties(include_hidden: bool) -> dict:
    store = open_record_store(get_settings())
    try:
        return display_payload(list_display(store, include_hidden=include_hidden))
    finally:
        store.close()


def _enrich(address: str) -> dict:
    return EnrichmentService.from_settings(get_settings()).enrich(address).to_dict()


def _suggest(query: str) -> dict:
    service = AddressSearchService.from_settings(get_settings())
    return {"suggestions": [s.to_json_dict() for s in service.suggest(query)]}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="homeventure", description="HomeVenture lead tracker")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, etc.); defaults to HOMEVENTURE_LOG_LEVEL",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)

    sub.add_parser("statuses", help="Print every stored status as JSON")

    p_props = sub.add_parser("properties", help="Print catalog and user properties with statuses")
    p_props.add_argument("--no-hidden", action="store_true", help="Drop properties marked hidden")

    p_enrich = sub.add_parser("enrich", help="Look up details for an address")
    p_enrich.add_argument("address")

    p_suggest = sub.add_parser("suggest", help="Suggest Florida addresses for a partial query")
    p_suggest.add_argument("query")

    args = parser.parse_args(argv)

    level = (args.log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "serve":
        import uvicorn

        uvicorn.run("homeventure.api.app:app", host=args.host, port=int(args.port))
        return 0

    try:
        if args.cmd == "statuses":
            payload = _statuses()
        elif args.cmd == "properties":
            payload = _properties(include_hidden=not args.no_hidden)
        elif args.cmd == "enrich":
            payload = _enrich(args.address)
        elif args.cmd == "suggest":
            payload = _suggest(args.query)
        else:
            return 2
    except ConfigurationError as exc:
        print(json.dumps({"error": str(exc)}))
        return 2

    print(json.dumps(payload))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
