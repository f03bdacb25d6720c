"""Process runner: resolve the port, bind it, then serve the app with uvicorn.

A port that cannot be bound is fatal. The error goes to stderr and the
process exits non-zero so an external supervisor can restart it. SIGINT
and SIGTERM stop the server and the process exits 0.
"""
from __future__ import annotations
import contextlib
import logging
import signal
import socket
import sys
import threading
from typing import Iterator, Mapping, Optional

import uvicorn

from debug_lib.config.config import ConfigError, get_port
from debug_lib.logging_config import configure_logging
from debug_lib.main import Config, create_app

logger = logging.getLogger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class BindFailure(OSError):
    """The listening port could not be acquired."""

    def __init__(self, port: int, err: OSError):
        super().__init__(err.errno, err.strerror)
        self.port = port


class DebugServer(uvicorn.Server):
    """uvicorn server whose stop signals end the serve loop and nothing else.

    Stock uvicorn re-raises a captured signal once it has shut down, which
    kills the process with that signal instead of a clean exit.
    """

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        previous = {sig: signal.signal(sig, self.handle_exit) for sig in STOP_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on (host, port), raising BindFailure on error."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen()
    except OSError as e:
        sock.close()
        raise BindFailure(port, e) from e
    sock.set_inheritable(True)
    return sock


def run(config: Optional[Config] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Start the server and block until it shuts down. Returns the exit code."""
    config = config or Config()
    configure_logging(config.log_config_path)

    try:
        port = config.port if config.port is not None else get_port(environ)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    app = create_app(config)

    try:
        sock = bind_socket(config.host, port)
    except BindFailure as e:
        logger.debug("Bind failed for %s:%s", config.host, port, exc_info=True)
        print(f"Failed to bind port {e.port}: {e.strerror}", file=sys.stderr)
        return 1

    # Connections queue in the backlog from here on
    bound_port = sock.getsockname()[1]
    print(f"Debug server listening on port {bound_port}", flush=True)

    # log_config=None keeps uvicorn on the root logging configuration
    server = DebugServer(uvicorn.Config(app, log_config=None))
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
    logger.info("Debug server on port %s stopped", bound_port)
    return 0


def main() -> None:
    sys.exit(run())
