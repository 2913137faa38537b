"""TRON client context.

This module provides the client object that holds a session's endpoints
(full node, solidity node and event server), its default signing key and
address, and its default block reference.
"""

# Standard library imports
import asyncio
from typing import Any, Dict, Optional, Union

# Third-party library imports
import httpx

# Internal imports
from tron_context.config import TronConfig, get_tron_config
from tron_context.crypto import address as address_codec
from tron_context.crypto import keys
from tron_context.crypto.address import TronAddress
from tron_context.logging_config import get_logger, log_with_context
from tron_context.providers.http_provider import DEFAULT_TIMEOUT, HttpProvider
from tron_context.utils import units
from tron_context.utils.error_handling import (
    InvalidAddress,
    InvalidBlockIdentifier,
    InvalidEventServerConfig,
    InvalidEventServerURL,
    InvalidProviderConfig,
    InvalidProviderType,
    ValidationError
)
from tron_context.utils.validation import has_properties, is_valid_url, parse_integer

# Get logger
logger = get_logger(__name__)

BLOCK_TAGS = ("earliest", "latest")

FULL_NODE_STATUS_PAGE = "wallet/getnowblock"
SOLIDITY_NODE_STATUS_PAGE = "walletsolidity/getnowblock"

BlockIdentifier = Union[int, str]
ProviderInput = Union[HttpProvider, str, Any]


class TronClient:
    """Client context for a TRON network session.

    The context validates everything assigned to it: setters raise before
    mutating any state, so a failed call leaves the client unchanged.
    """

    def __init__(
        self,
        full_node: ProviderInput,
        solidity_node: ProviderInput,
        event_server: Union[str, HttpProvider, None, bool] = None,
        private_key: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """Initialize the client.

        Args:
            full_node: Provider or URL of the full node
            solidity_node: Provider or URL of the solidity node
            event_server: Optional provider or URL of the event server
            private_key: Optional default private key (64 hex characters)
            timeout: Timeout in seconds for providers built from URLs and
                for the event server probe

        Raises:
            InvalidProviderConfig: If either node cannot be used as a provider
            InvalidEventServerConfig: If the event server is not a valid URL
            InvalidPrivateKey: If the private key is not valid
        """
        self.timeout = timeout

        resolved_nodes = {}
        for node, value in (("full node", full_node), ("solidity node", solidity_node)):
            try:
                resolved_nodes[node] = self._resolve_provider(value, node)
            except InvalidProviderType as e:
                raise InvalidProviderConfig(node, "expected a URL string or a provider") from e
            except ValidationError as e:
                raise InvalidProviderConfig(node, e.message) from e

        try:
            resolved_event_server = self._resolve_event_server(event_server)
        except InvalidEventServerURL as e:
            raise InvalidEventServerConfig(details=e.details) from e

        derived_address = None
        if private_key is not None and private_key is not False:
            derived_address = keys.address_from_private_key(private_key)

        self.full_node = resolved_nodes["full node"]
        self.solidity_node = resolved_nodes["solidity node"]
        self.event_server: Optional[str] = resolved_event_server

        self.default_private_key: Optional[str] = private_key if derived_address else None
        self.default_address: Optional[TronAddress] = derived_address
        self.default_block: Optional[BlockIdentifier] = None

        log_with_context(
            logger, "info", "TRON client initialized",
            full_node=self.full_node.host,
            solidity_node=self.solidity_node.host,
            event_server=self.event_server,
            address=self.default_address.base58 if self.default_address else None
        )

    @classmethod
    def from_config(cls, config: Optional[TronConfig] = None) -> "TronClient":
        """Build a client from a TronConfig.

        Args:
            config: Configuration to use. Defaults to environment-based config.

        Returns:
            Configured TronClient
        """
        config = config or get_tron_config()
        full_node = HttpProvider(config.full_node_url, timeout=config.timeout,
                                 headers=config.headers)
        solidity_node = HttpProvider(config.solidity_node_url, timeout=config.timeout,
                                     headers=config.headers)
        return cls(
            full_node,
            solidity_node,
            event_server=config.event_server_url,
            private_key=config.private_key,
            timeout=config.timeout
        )

    # Provider resolution

    def _resolve_provider(self, value: ProviderInput, node: str) -> Any:
        if isinstance(value, str):
            return HttpProvider(value, timeout=self.timeout)
        if self.is_valid_provider(value):
            return value
        raise InvalidProviderType(f"Invalid {node} provided", details={"node": node})

    @classmethod
    def _resolve_event_server(cls, value: Any) -> Optional[str]:
        if value is None or value is False:
            return None
        if isinstance(value, str):
            if not is_valid_url(value):
                raise InvalidEventServerURL(details={"event_server": value})
            return value
        if cls.is_valid_provider(value) and is_valid_url(value.host):
            return value.host
        raise InvalidEventServerURL(details={"event_server": repr(value)})

    @staticmethod
    def is_valid_provider(candidate: Any) -> bool:
        """Check whether a value can be used as a node provider.

        A provider is any object exposing a non-empty ``host`` string.
        Reachability is not checked.
        """
        host = getattr(candidate, "host", None)
        return isinstance(host, str) and bool(host)

    # Setters

    def set_default_block(self, block_id: Any = None) -> None:
        """Set the block used when a call does not name one.

        Args:
            block_id: A block number, a numeric string, "earliest", "latest",
                or None/False to clear. Negative numbers are stored as their
                absolute value.

        Raises:
            InvalidBlockIdentifier: If the value is not a block reference
        """
        if block_id is None or block_id is False:
            self.default_block = None
            return

        if isinstance(block_id, str) and block_id in BLOCK_TAGS:
            self.default_block = block_id
            return

        number = parse_integer(block_id)
        if number is None:
            raise InvalidBlockIdentifier(details={"block_id": repr(block_id)})
        self.default_block = abs(number)

    def set_private_key(self, private_key: str) -> None:
        """Set the default private key and the address derived from it.

        Raises:
            InvalidPrivateKey: If the key is not valid
        """
        derived_address = keys.address_from_private_key(private_key)

        self.default_private_key = private_key
        self.default_address = derived_address
        logger.info(f"Default private key set for {derived_address.base58}")

    def set_address(self, address: str) -> None:
        """Set the default address from its hex or base58 form.

        A default private key that does not own the new address is cleared.

        Raises:
            InvalidAddress: If the address is not valid
        """
        if not address_codec.is_address(address):
            raise InvalidAddress(details={"address": repr(address)})
        new_address = TronAddress.from_value(address)

        if self.default_private_key is not None:
            key_address = keys.address_from_private_key(self.default_private_key)
            if key_address != new_address:
                logger.info("Default private key cleared: it does not match the new address")
                self.default_private_key = None

        self.default_address = new_address
        logger.info(f"Default address set to {new_address.base58}")

    def set_full_node(self, full_node: ProviderInput) -> None:
        """Replace the full node provider.

        Raises:
            InvalidProviderType: If the value is neither a URL nor a provider
            InvalidProviderURL: If a URL string is malformed
        """
        self.full_node = self._resolve_provider(full_node, "full node")
        logger.info(f"Full node set to {self.full_node.host}")

    def set_solidity_node(self, solidity_node: ProviderInput) -> None:
        """Replace the solidity node provider.

        Raises:
            InvalidProviderType: If the value is neither a URL nor a provider
            InvalidProviderURL: If a URL string is malformed
        """
        self.solidity_node = self._resolve_provider(solidity_node, "solidity node")
        logger.info(f"Solidity node set to {self.solidity_node.host}")

    def set_event_server(self, event_server: Union[str, HttpProvider, None, bool] = None) -> None:
        """Replace the event server, or clear it with None/False.

        Raises:
            InvalidEventServerURL: If the value is not a valid URL or provider
        """
        self.event_server = self._resolve_event_server(event_server)
        logger.info(f"Event server set to {self.event_server}")

    def set_header(self, headers: Dict[str, str]) -> None:
        """Add headers to every request made through the node providers."""
        for provider in (self.full_node, self.solidity_node):
            if isinstance(provider, HttpProvider):
                provider.set_headers(headers)

    # Introspection

    def current_providers(self) -> Dict[str, Any]:
        """Get a snapshot of the configured endpoints."""
        return {
            "full_node": self.full_node,
            "solidity_node": self.solidity_node,
            "event_server": self.event_server,
        }

    def current_provider(self) -> Dict[str, Any]:
        return self.current_providers()

    # Connectivity

    async def is_event_server_connected(self) -> bool:
        """Check whether the event server is reachable.

        Returns False without any request when no event server is set.
        Never raises; network errors, timeouts and unexpected responses are
        all reported as False.
        """
        if not self.event_server:
            return False

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.event_server)
            if not response.is_success:
                logger.debug(f"Event server answered HTTP {response.status_code}")
                return False
            return has_properties(response.json(), "_links")
        except (httpx.HTTPError, ValueError) as e:
            logger.debug(f"Event server {self.event_server} is not connected: {e}")
            return False
        except Exception as e:
            logger.warning(f"Unexpected error probing event server {self.event_server}: {e}")
            return False

    async def is_connected(self) -> Dict[str, bool]:
        """Check all three endpoints concurrently.

        Returns:
            Dictionary with a boolean per endpoint
        """
        full_node, solidity_node, event_server = await asyncio.gather(
            self._provider_connected(self.full_node, FULL_NODE_STATUS_PAGE),
            self._provider_connected(self.solidity_node, SOLIDITY_NODE_STATUS_PAGE),
            self.is_event_server_connected()
        )
        return {
            "full_node": full_node,
            "solidity_node": solidity_node,
            "event_server": event_server,
        }

    @staticmethod
    async def _provider_connected(provider: Any, status_page: str) -> bool:
        is_connected = getattr(provider, "is_connected", None)
        if is_connected is None:
            return False
        return await is_connected(status_page)

    async def close(self) -> None:
        """Close the HTTP clients held by the node providers."""
        for provider in (self.full_node, self.solidity_node):
            if isinstance(provider, HttpProvider):
                await provider.close()

    async def __aenter__(self) -> "TronClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # Stateless helpers

    is_address = staticmethod(address_codec.is_address)
    address_to_hex = staticmethod(address_codec.to_hex)
    address_from_hex = staticmethod(address_codec.from_hex)
    address_from_private_key = staticmethod(keys.address_from_private_key)
    create_account = staticmethod(keys.generate_account)
    sha3 = staticmethod(units.sha3)
    to_sun = staticmethod(units.to_sun)
    from_sun = staticmethod(units.from_sun)
    to_hex = staticmethod(units.to_hex)
    to_utf8 = staticmethod(units.to_utf8)
    from_utf8 = staticmethod(units.from_utf8)

    def __repr__(self) -> str:
        return (
            f"TronClient(full_node={self.full_node.host!r}, "
            f"solidity_node={self.solidity_node.host!r}, "
            f"event_server={self.event_server!r})"
        )
