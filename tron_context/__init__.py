"""TRON client context package.

This package provides a client context for the TRON network: endpoint
configuration for the full node, solidity node and event server, a default
signing key and address, a default block reference, and the validation and
connectivity checks around them.
"""

import logging
import os
from typing import Any, Dict, Optional

from tron_context.clients.tron_client import TronClient
from tron_context.config import (
    TronConfig,
    get_logging_config,
    get_tron_config
)
from tron_context.logging_config import configure_logging
from tron_context.providers.http_provider import HttpProvider
from tron_context.utils.error_handling import (
    ConfigurationError,
    InvalidAddress,
    InvalidBlockIdentifier,
    InvalidEventServerConfig,
    InvalidEventServerURL,
    InvalidPrivateKey,
    InvalidProviderConfig,
    InvalidProviderType,
    InvalidProviderURL,
    ProviderRequestError,
    TronClientError,
    ValidationError
)

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

__all__ = [
    "TronClient",
    "HttpProvider",
    "TronConfig",
    "get_tron_config",
    "create_client",
    "TronClientError",
    "ValidationError",
    "ConfigurationError",
    "ProviderRequestError",
    "InvalidProviderConfig",
    "InvalidEventServerConfig",
    "InvalidPrivateKey",
    "InvalidBlockIdentifier",
    "InvalidAddress",
    "InvalidProviderType",
    "InvalidProviderURL",
    "InvalidEventServerURL",
]


def create_client(config_overrides: Optional[Dict[str, Any]] = None) -> TronClient:
    """Configure logging and build a client from the environment.

    Args:
        config_overrides: Optional dictionary of environment values to
            override before the configuration is read

    Returns:
        TronClient built from the current configuration

    Raises:
        ConfigurationError: If there's an issue with the configuration
    """
    if config_overrides:
        for key, value in config_overrides.items():
            os.environ[key] = str(value)
        get_tron_config.cache_clear()
        get_logging_config.cache_clear()

    logging_config = get_logging_config()
    configure_logging(logging_config.log_level, logging_config.log_format)

    logger.info(f"Initializing tron-context v{__version__}")
    return TronClient.from_config(get_tron_config())
