import errno
import logging
import os
import socket
import sys

import uvicorn
from dotenv import load_dotenv

from core.logging_config import configure_logging

load_dotenv()

logger = logging.getLogger(__name__)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def check_port(host: str, port: int) -> str | None:
    """Return an error message when ``host:port`` cannot be bound, else None."""
    try:
        family, socktype, proto, _, address = socket.getaddrinfo(
            host, port, type=socket.SOCK_STREAM, flags=socket.AI_PASSIVE
        )[0]
    except socket.gaierror as e:
        return f"Error starting server: {e}"

    with socket.socket(family, socktype, proto) as sock:
        try:
            sock.bind(address)
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                return (
                    f"Port {port} is already in use. Please stop the other "
                    "process or use a different port."
                )
            if e.errno == errno.EACCES:
                return (
                    f"Permission denied to bind to port {port}. "
                    "Try using a port number above 1024."
                )
            return f"Error starting server: {e}"
    return None


def run() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "5000"))
    reload = _as_bool(os.getenv("RELOAD", "false"))
    log_level = os.getenv("LOG_LEVEL", "info")

    configure_logging(log_level)

    problem = check_port(host, port)
    if problem is not None:
        logger.error(problem)
        sys.exit(1)

    logger.info("Starting server at http://%s:%s (Reload: %s)", host, port, reload)

    uvicorn.run(
        "backend_fastapi.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    run()
