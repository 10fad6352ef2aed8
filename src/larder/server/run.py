"""Helper for running the Larder ASGI application."""

from __future__ import annotations

import os

import uvicorn


def main() -> None:
    """Serve ``larder.server.app:app`` using host/port from the environment."""

    host = os.environ.get("LARDER_SERVER_HOST", "127.0.0.1")
    port = int(os.environ.get("LARDER_SERVER_PORT", "8000"))
    reload_enabled = os.environ.get("RELOAD") == "1"

    uvicorn.run(
        "larder.server.app:app",
        host=host,
        port=port,
        reload=reload_enabled,
    )


if __name__ == "__main__":
    main()
