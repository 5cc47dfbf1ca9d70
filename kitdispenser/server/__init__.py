"""
Entry point for the dispenser server.
"""

import logging

import uvicorn

from kitdispenser.common.config import Config

from .core import DispenserServer


def start_server(config: Config | None = None) -> None:
    """Start the dispenser server."""
    if config is None:
        config = Config()
    logging.basicConfig(level=config.LOG_LEVEL)
    server = DispenserServer(config=config)
    uvicorn.run(server.app, host=server.server_host, port=server.server_port)
