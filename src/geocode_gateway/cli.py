# Command line front-end: run one forward or reverse lookup and print the JSON body
from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from typing import Optional, Sequence

from colorama import Fore, Style

from .gateway import GeocodeGateway, GatewayResult
from .settings import GatewaySettings, settings


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="geocode-gateway", description="Forward or reverse geocode via Photon")
    parser.add_argument('query', nargs='*', help='place name for forward geocoding')
    parser.add_argument('--reverse', '-r', action='store_true')
    parser.add_argument('--point', '-p', type=str, help='"lat,lon" for reverse geocoding')
    parser.add_argument('--limit', '-l', type=int, default=None)
    parser.add_argument('--locale', type=str, default=None)
    parser.add_argument('--service-url', type=str, default=None)
    parser.add_argument('--timeout', type=float, default=None)
    parser.add_argument('--verbose', '-v', action='store_true')
    return parser


def _print_status(result: GatewayResult) -> None:
    if result.is_success():
        hits = len(result.response) if result.response is not None else 0
        print(f'{Fore.GREEN}OK{Style.RESET_ALL} {hits} hit(s)', file=sys.stderr)
    else:
        print(f'{Fore.RED}{result.error_kind} ({result.status_code}){Style.RESET_ALL}', file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    overrides = {}
    if args.service_url:
        overrides['service_url'] = args.service_url
    if args.timeout is not None:
        overrides['timeout'] = args.timeout
    config = GatewaySettings(**overrides) if overrides else settings

    gateway = GeocodeGateway.from_settings(config)
    result = gateway.geocode(
        q=' '.join(args.query) or None,
        reverse=args.reverse,
        point=args.point,
        limit=args.limit,
        locale=args.locale,
    )

    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    _print_status(result)
    return 0 if result.is_success() else 1


if __name__ == '__main__':
    sys.exit(main())
