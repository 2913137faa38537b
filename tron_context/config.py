"""Configuration module for the TRON client context."""

# Standard library imports
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, Optional

# Third-party library imports
from dotenv import load_dotenv

# Internal imports
from tron_context.crypto.keys import is_private_key
from tron_context.utils.error_handling import ConfigurationError
from tron_context.utils.validation import is_valid_url

# Load environment variables from .env file
load_dotenv()

DEFAULT_FULL_NODE_URL = "https://api.trongrid.io"
API_KEY_HEADER = "TRON-PRO-API-KEY"


def get_env_var(key: str, default: Any = None, required: bool = False,
                validator: Optional[Callable[[str], Any]] = None) -> Any:
    """Get and validate environment variable.

    Args:
        key: Environment variable name
        default: Default value if not present
        required: If True, raises ConfigurationError when not found
        validator: Optional validation function

    Returns:
        The environment variable value or default

    Raises:
        ConfigurationError: If required and not found, or fails validation
    """
    value = os.environ.get(key)

    if value is None or value == "":
        if required:
            raise ConfigurationError(
                f"Required environment variable '{key}' not found",
                details={"setting": key}
            )
        return default

    if validator:
        try:
            return validator(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for environment variable '{key}': {str(e)}",
                details={"setting": key}
            )

    return value


def float_validator(value: str) -> float:
    """Validate and convert string to a positive float."""
    try:
        result = float(value)
    except ValueError:
        raise ValueError(f"'{value}' is not a valid number")
    if result <= 0:
        raise ValueError(f"'{value}' must be positive")
    return result


def url_validator(value: str) -> str:
    """Validate URL format.

    Args:
        value: URL to validate

    Returns:
        The validated URL

    Raises:
        ValueError: If not a valid URL format
    """
    if not is_valid_url(value):
        raise ValueError(f"'{value}' is not a valid URL")
    return value


def private_key_validator(value: str) -> str:
    # Never echo the key itself into the error
    if not is_private_key(value):
        raise ValueError("not a 64 character hex private key")
    return value


def log_level_validator(value: str) -> str:
    """Validate log level.

    Args:
        value: Log level to validate

    Returns:
        The validated log level

    Raises:
        ValueError: If not a valid log level
    """
    valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    upper_value = value.upper()
    if upper_value not in valid_levels:
        raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
    return upper_value


@dataclass
class TronConfig:
    """Configuration for the TRON network endpoints and default account."""

    full_node_url: str = DEFAULT_FULL_NODE_URL
    solidity_node_url: Optional[str] = None
    event_server_url: Optional[str] = None
    private_key: Optional[str] = field(default=None, repr=False)
    timeout: float = 30.0  # seconds
    headers: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # The public TronGrid endpoints serve all three APIs from one host
        if self.solidity_node_url is None:
            self.solidity_node_url = self.full_node_url

    @property
    def has_event_server(self) -> bool:
        return bool(self.event_server_url)

    @property
    def has_private_key(self) -> bool:
        return bool(self.private_key)

    def validate(self) -> None:
        """Validate the configuration.

        Raises:
            ConfigurationError: If settings are invalid
        """
        for setting in ("full_node_url", "solidity_node_url"):
            value = getattr(self, setting)
            if not is_valid_url(value):
                raise ConfigurationError(
                    f"Invalid {setting.replace('_', ' ')}: {value}",
                    details={"setting": setting, "value": value}
                )

        if self.event_server_url and not is_valid_url(self.event_server_url):
            raise ConfigurationError(
                f"Invalid event server url: {self.event_server_url}",
                details={"setting": "event_server_url", "value": self.event_server_url}
            )

        if self.private_key and not is_private_key(self.private_key):
            raise ConfigurationError(
                "Invalid private key",
                details={"setting": "private_key"}
            )

        if self.timeout <= 0:
            raise ConfigurationError(
                "Request timeout must be positive",
                details={"setting": "timeout", "value": self.timeout}
            )


@lru_cache()
def get_tron_config() -> TronConfig:
    """Get TRON configuration from environment variables.

    Uses cached values for efficiency.

    Returns:
        TronConfig instance

    Raises:
        ConfigurationError: If environment variables fail validation
    """
    headers = {}
    api_key = get_env_var("TRON_API_KEY")
    if api_key:
        headers[API_KEY_HEADER] = api_key

    config = TronConfig(
        full_node_url=get_env_var("TRON_FULL_NODE_URL", DEFAULT_FULL_NODE_URL,
                                  validator=url_validator),
        solidity_node_url=get_env_var("TRON_SOLIDITY_NODE_URL", validator=url_validator),
        event_server_url=get_env_var("TRON_EVENT_SERVER_URL", validator=url_validator),
        private_key=get_env_var("TRON_PRIVATE_KEY", validator=private_key_validator),
        timeout=get_env_var("TRON_TIMEOUT", 30.0, validator=float_validator),
        headers=headers
    )
    config.validate()
    return config


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    log_level: str = "INFO"
    log_format: Optional[str] = None


@lru_cache()
def get_logging_config() -> LoggingConfig:
    """Get logging configuration from environment variables."""
    return LoggingConfig(
        log_level=get_env_var("LOG_LEVEL", "INFO", validator=log_level_validator),
        log_format=get_env_var("LOG_FORMAT")
    )
