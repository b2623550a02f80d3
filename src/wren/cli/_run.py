"""``wren run`` — development server command.

Resolves an import string to a wren App, configures logging, and starts
the pounce development server.
"""

import argparse
import logging
import sys

from wren.cli._resolve import resolve_app


def run_server(args: argparse.Namespace) -> None:
    """Start the wren dev server.

    ``--host``/``--port`` override the app config. Reload follows
    ``app.config.debug``; a module target is forwarded so pounce can
    reimport the app on change.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from wren.server.dev import run_dev_server

    # pounce reimports by module path; file targets are served as loaded
    app_path = None if args.app.partition(":")[0].endswith(".py") else args.app
    run_dev_server(app, host=args.host, port=args.port, app_path=app_path)
