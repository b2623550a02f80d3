"""``wren routes`` — list registered routes.

Resolves an import string to a wren App and prints its sitemap: every
route's method and address, sorted by address and verb precedence.
"""

import argparse
import json
import sys

from wren.cli._resolve import resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a wren app.

    Prints a METHOD / ADDRESS table, or the raw sitemap payload with
    ``--json``.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    sitemap = app.sitemap()

    if args.json:
        print(json.dumps(sitemap, indent=2))
        return

    if not sitemap:
        print("No routes registered.")
        return

    max_method = max(6, *(len(entry["method"]) for entry in sitemap))  # "METHOD" header
    fmt = f"{{:<{max_method}}}  {{}}"
    print(fmt.format("METHOD", "ADDRESS"))
    sep_len = max_method + 2 + max(len(entry["address"]) for entry in sitemap)
    print("-" * min(max(sep_len, 16), 80))
    for entry in sitemap:
        print(fmt.format(entry["method"], entry["address"]))
