"""Entry point for ``python -m listex``."""

from __future__ import annotations

import argparse
import sys

from listex.client import ListexClient
from listex.config import settings
from listex.endpoints import ENDPOINTS
from listex.exceptions import ListexError
from listex.logging_config import setup_logging


def _parse_params(pairs: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        params[key] = value
    return params


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Listex API client")
    parser.add_argument("endpoint", nargs="?", help="Catalog endpoint, e.g. get_brands")
    parser.add_argument(
        "--param",
        "-p",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Endpoint parameter (repeatable)",
    )
    parser.add_argument("--etag", help="Send If-None-Match with this tag")
    parser.add_argument("--xml", action="store_true", help="Request XML instead of JSON")
    parser.add_argument("--list", action="store_true", help="List catalog endpoints")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(settings.log_level, settings.log_format)

    if args.list or not args.endpoint:
        for ep in ENDPOINTS.values():
            params = ", ".join([*ep.required, *(f"[{p}]" for p in ep.optional)])
            print(f"{ep.name:<32} {ep.verb.value:<6} {ep.resource.value:<22} {params}")
        return 0

    try:
        params = _parse_params(args.param)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    try:
        with ListexClient.from_settings(settings) as client:
            if args.xml:
                client.set_format_xml()
            result = client.call(args.endpoint, etag=args.etag, **params)
    except ListexError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(result.body)
    if result.etag:
        print(f"ETag: {result.etag}", file=sys.stderr)
    if result.usage_limit is not None:
        print(f"Usage: {result.current_usage_count}/{result.usage_limit}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
