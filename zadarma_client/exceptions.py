"""
Custom exceptions for the Zadarma API client.

Transport failures are not represented here: errors raised by requests or
httpx reach the caller unchanged.
"""


class ZadarmaClientError(Exception):
    """Base exception for Zadarma client errors."""
    pass


class ConfigurationError(ZadarmaClientError):
    """Raised when credentials or client configuration are invalid."""
    pass


class InvalidParameterError(ZadarmaClientError):
    """Raised when request parameters, format or verb cannot be used."""
    pass
