"""CLI utilities for developer workflows."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from identity_abstractions.binding import bind_downstream_apis, get_section, load_configuration
from identity_abstractions.exceptions import IdentityAbstractionsError


DEFAULT_SECTION = "DownstreamApis"


def _describe(name: str, options) -> str:
    scopes = " ".join(options.scopes) if options.scopes else "-"
    return f"  - {name}: {options.http_method} {options.get_api_url()} [{options.protocol_scheme}] scopes={scopes}"


def _main() -> int:
    parser = argparse.ArgumentParser(
        description="Check that downstream API settings bind to valid options.",
    )
    parser.add_argument("--config", default=Path("appsettings.json"), type=Path)
    parser.add_argument("--section", default=DEFAULT_SECTION)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        configuration = load_configuration(args.config)
    except (OSError, IdentityAbstractionsError) as exc:
        print(f"Cannot read {args.config}: {exc}")
        return 1

    section = get_section(configuration, args.section)
    if section is None:
        print(f"Section '{args.section}' not found in {args.config}")
        return 1

    try:
        apis = bind_downstream_apis(section)
    except IdentityAbstractionsError as exc:
        print(str(exc))
        print("Configuration check failed")
        return 1

    print(f"Bound {len(apis)} downstream API(s):")
    for name, options in apis.items():
        print(_describe(name, options))

    print("Configuration check passed")
    return 0


def main() -> None:
    raise SystemExit(_main())
