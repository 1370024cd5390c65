"""Web server entrypoint.

Runs the Starlette web application using uvicorn. For production,
use uvicorn directly with the application factory:

    uvicorn glof.server:create_app --factory --workers 2

Usage: python -m glof.server
"""

import uvicorn

from glof.lib.config import get_settings


def main() -> None:
    """Run the web server for local development."""
    server_cfg = get_settings().server
    uvicorn.run(
        "glof.server:create_app",
        factory=True,
        host=server_cfg.host,
        port=server_cfg.port,
        reload=True,
    )


if __name__ == "__main__":
    main()
