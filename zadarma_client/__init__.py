"""
Zadarma API Client

A Python client library that builds signed requests for the Zadarma
telephony API.

Example usage:
    from zadarma_client import ZadarmaClient

    client = ZadarmaClient("your-key", "your-secret")
    response = client.get("/v1/info/balance/")
"""

import logging

from .client import ZadarmaClient
from .exceptions import (
    ZadarmaClientError,
    ConfigurationError,
    InvalidParameterError
)
from .request import SignedRequest
from .signer import (
    canonicalize,
    canonical_param_string,
    md5_hex,
    sign
)
from .constants import (
    API_URL,
    API_URL_SANDBOX,
    HEADER_AUTHORIZATION,
    DEFAULT_CONFIG,
    FORMAT_JSON,
    FORMAT_XML
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "ZadarmaClient",
    "SignedRequest",
    "ZadarmaClientError",
    "ConfigurationError",
    "InvalidParameterError",
    "canonicalize",
    "canonical_param_string",
    "md5_hex",
    "sign",
    "API_URL",
    "API_URL_SANDBOX",
    "HEADER_AUTHORIZATION",
    "DEFAULT_CONFIG",
    "FORMAT_JSON",
    "FORMAT_XML"
]
