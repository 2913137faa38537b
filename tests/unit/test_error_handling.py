"""Unit tests for the error hierarchy and logging helpers."""

import logging

from tron_context.logging_config import get_logger, log_with_context
from tron_context.utils.error_handling import (
    ErrorCode,
    InvalidBlockIdentifier,
    InvalidProviderConfig,
    ProviderRequestError,
    TronClientError,
    ValidationError
)


def test_error_message_format():
    error = TronClientError("Something broke", ErrorCode.UNKNOWN_ERROR, {"node": "full node"})

    assert str(error) == "[UNKNOWN_ERROR] Something broke - Details: {'node': 'full node'}"
    assert error.to_dict() == {
        "code": "UNKNOWN_ERROR",
        "message": "Something broke",
        "details": {"node": "full node"},
    }


def test_validation_errors_use_default_message():
    error = InvalidBlockIdentifier()

    assert isinstance(error, ValidationError)
    assert error.message == "Invalid block ID provided"
    assert error.error_code == ErrorCode.INVALID_BLOCK_IDENTIFIER
    assert str(error) == "[INVALID_BLOCK_IDENTIFIER] Invalid block ID provided"


def test_provider_config_error_names_the_node():
    error = InvalidProviderConfig("solidity node", "Invalid URL provided to HttpProvider")

    assert error.node == "solidity node"
    assert error.reason == "Invalid URL provided to HttpProvider"
    assert error.message == "Invalid solidity node provided: Invalid URL provided to HttpProvider"


def test_provider_request_error_details():
    error = ProviderRequestError("Node responded with HTTP 502", status_code=502,
                                 endpoint="https://api.trongrid.io/wallet/getnowblock")

    assert error.details == {
        "status_code": 502,
        "endpoint": "https://api.trongrid.io/wallet/getnowblock",
    }


def test_log_with_context(caplog):
    logger = get_logger("tron_context.tests")

    with caplog.at_level(logging.INFO, logger="tron_context.tests"):
        log_with_context(logger, "info", "Client ready", node="full node")
        log_with_context(logger, "warning", "No context")

    assert caplog.messages == ["Client ready (node='full node')", "No context"]
