# factom_rpc/config.py
"""
Endpoint defaults, presets and environment driven settings.

Settings can be supplied through the environment or a ``.env`` file:

    FACTOMD_HOST=https://api.factomd.net
    FACTOM_WALLETD_HOST=http://localhost:8089
    FACTOM_TIMEOUT=30
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

import structlog
from dotenv import load_dotenv

from factom_rpc.errors import ConfigurationError
from factom_rpc.rpc_library.transport import DEFAULT_TIMEOUT

DEFAULT_NODE_HOST = "http://localhost:8088"
DEFAULT_WALLET_HOST = "http://localhost:8089"
OPEN_NODE_HOST = "https://api.factomd.net"
TESTNET_HOST = "https://dev.factomd.net"

NODE_HOST_ENV = "FACTOMD_HOST"
WALLET_HOST_ENV = "FACTOM_WALLETD_HOST"
TIMEOUT_ENV = "FACTOM_TIMEOUT"
LOG_LEVEL_ENV = "FACTOM_LOG_LEVEL"


@dataclass
class FactomSettings:
    """Hosts and timeout used to build a ``Factom`` client."""
    node_host: str = DEFAULT_NODE_HOST
    wallet_host: str = DEFAULT_WALLET_HOST
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "FactomSettings":
        load_dotenv(env_file)
        raw_timeout = os.getenv(TIMEOUT_ENV)
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}", raw_timeout) from e
            if timeout <= 0:
                raise ConfigurationError(f"{TIMEOUT_ENV} must be positive, got {raw_timeout!r}", raw_timeout)

        return cls(
            node_host=os.getenv(NODE_HOST_ENV) or DEFAULT_NODE_HOST,
            wallet_host=os.getenv(WALLET_HOST_ENV) or DEFAULT_WALLET_HOST,
            timeout=timeout,
        )


def configure_logging(level: Optional[str] = None, json_output: bool = False) -> None:
    """Sets up structlog for applications embedding the client."""
    level_name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown log level {level_name!r}", level_name)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )
