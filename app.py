import logging
import os
import socket

from catalog_dash.logging_config import configure_logging
from catalog_dash.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger(__name__)

app = create_dash_app(os.getenv("CATALOG_DASH_CONFIG_ROOT", "config"))
server = app.server

PORT_SEARCH_SPAN = 100


def find_free_port(start_port: int, span: int = PORT_SEARCH_SPAN) -> int:
    """First port in [start_port, start_port + span) nothing is listening on."""
    for port in range(start_port, start_port + span):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    requested = int(os.getenv("PORT", "8050"))
    port = find_free_port(requested)
    if port != requested:
        logger.warning("Port busy, using the next free one", extra={"requested": requested, "port": port})

    app.run(host="0.0.0.0", port=port, debug=os.getenv("DEBUG", "0") == "1")


if __name__ == "__main__":
    main()
