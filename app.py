import logging
import os
import socket

from esa_browser.logging_config import configure_logging
from esa_browser.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("esa_browser.app")

CONFIG_ROOT = os.getenv("ESA_BROWSER_CONFIG_ROOT", "config")
PORT_SEARCH_SPAN = 100

app = create_dash_app(CONFIG_ROOT)
# WSGI entry point for gunicorn and friends
server = app.server


def port_is_free(port: int, host: str = "localhost") -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex((host, port)) != 0


def pick_port(preferred: int) -> int:
    """First free port in [preferred, preferred + 100), else preferred."""
    for port in range(preferred, preferred + PORT_SEARCH_SPAN):
        if port_is_free(port):
            return port
    return preferred


def main() -> None:
    preferred = int(os.getenv("PORT", "8051"))
    port = pick_port(preferred)
    if port != preferred:
        logger.warning("Port taken, using the next free one", extra={"preferred": preferred, "port": port})

    debug = os.getenv("DEBUG", "0") == "1"
    logger.info("Starting ESA Browser", extra={"port": port, "debug": debug, "config_root": CONFIG_ROOT})
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=port, debug=debug)


if __name__ == "__main__":
    main()
