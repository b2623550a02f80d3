"""Development server.

Serves a wren App with pounce in single-worker mode. Bind address and
reload behavior come from the app's ``AppConfig``; callers may override
the address only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wren.app import App

logger = logging.getLogger("wren.server")


def run_dev_server(
    app: App,
    *,
    host: str | None = None,
    port: int | None = None,
    app_path: str | None = None,
) -> None:
    """Serve *app* until interrupted.

    Reload is on when ``app.config.debug`` is set. With an *app_path*
    (the ``wren run`` target string) pounce reimports the app on each
    reload, so edited routes take effect; without one it keeps serving
    the live object.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = app.config
    host = host or config.host
    port = port or config.port

    server_config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=config.debug,
        reload_include=config.reload_include,
        reload_dirs=config.reload_dirs,
    )
    logger.info(
        "serving %d routes on http://%s:%d%s",
        len(app.router.routes),
        host,
        port,
        " (reload)" if config.debug else "",
    )
    Server(server_config, app, app_path=app_path).run()
