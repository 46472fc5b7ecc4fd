import logging
import os
import socket

from inventory_viewer.ui.dash_app import create_dash_app
from inventory_viewer.logging_config import configure_logging

configure_logging()
logger = logging.getLogger("inventory_viewer")

# Gunicorn entry point: `gunicorn app:server`
app = create_dash_app(os.getenv("INVENTORY_VIEWER_CONFIG_ROOT", "config"))
server = app.server


def find_free_port(start_port: int, host: str = "localhost", attempts: int = 100) -> int:
    """First port at or above start_port nobody is listening on; start_port if none is."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex((host, port)) != 0:
                return port
    return start_port


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    preferred_port = int(os.getenv("PORT", "8051"))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        logger.warning("Port taken, using next free one", extra={"preferred_port": preferred_port, "port": port})

    logger.info("Starting inventory viewer", extra={"host": host, "port": port, "debug": debug})
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
