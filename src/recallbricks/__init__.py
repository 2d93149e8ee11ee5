"""RecallBricks Python SDK."""

import logging

from .client import MAX_GRAPH_DEPTH, RecallBricks
from .config import AuthMode, ClientConfig
from .errors import (
    AuthConfigError,
    ConfigurationError,
    InvalidInputError,
    MissingUserIdError,
    RecallBricksError,
)
from .retry import RETRYABLE_STATUS_CODES, RetryPolicy

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AuthConfigError",
    "AuthMode",
    "ClientConfig",
    "ConfigurationError",
    "InvalidInputError",
    "MAX_GRAPH_DEPTH",
    "MissingUserIdError",
    "RETRYABLE_STATUS_CODES",
    "RecallBricks",
    "RecallBricksError",
    "RetryPolicy",
]
