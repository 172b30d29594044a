"""
Zadarma API client.

Builds signed requests for the Zadarma telephony API and sends them with
requests (blocking calls) or httpx (awaitable calls).
"""

import logging
import os
from typing import Dict, Optional

import httpx
import requests

from .constants import (
    API_URL,
    API_URL_SANDBOX,
    DEFAULT_CONFIG,
    ENV_KEY,
    ENV_SANDBOX,
    ENV_SECRET,
    HEADER_AUTHORIZATION,
    HTTP_METHODS,
    QUERY_STRING_METHODS,
    RESPONSE_FORMATS,
)
from .exceptions import ConfigurationError, InvalidParameterError
from .request import SignedRequest
from .signer import ParameterSet, canonical_param_string, canonicalize, sign

logger = logging.getLogger(__name__)


class ZadarmaClient:
    """
    Client for the Zadarma API.

    Credentials and the sandbox choice are fixed for the lifetime of the
    client. Every call gets its own signature; nothing is cached.
    """

    def __init__(self, key: str, secret: str, sandbox: bool = False, **config):
        """
        Initialize Zadarma client.

        Args:
            key: API key from the personal account
            secret: API secret from the personal account
            sandbox: Use the sandbox API instead of production
            **config: Configuration options (timeout, format)
        """
        self._key = key
        self._secret = secret
        self._sandbox = bool(sandbox)
        self._base_url = API_URL_SANDBOX if self._sandbox else API_URL

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.session = requests.Session()

    @classmethod
    def from_env(cls, **config) -> 'ZadarmaClient':
        """
        Create a client from ZADARMA_KEY, ZADARMA_SECRET and ZADARMA_SANDBOX.

        Raises:
            ConfigurationError: If key or secret is not set
        """
        sandbox = os.getenv(ENV_SANDBOX, "").strip().lower() in ("1", "true", "yes")
        return cls(os.getenv(ENV_KEY, ""), os.getenv(ENV_SECRET, ""), sandbox=sandbox, **config)

    @property
    def key(self) -> str:
        return self._key

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def sandbox(self) -> bool:
        return self._sandbox

    @property
    def base_url(self) -> str:
        return self._base_url

    def _validate_config(self):
        """Validate credentials and client configuration."""
        if not self._key:
            raise ConfigurationError("key cannot be empty")

        if not self._secret:
            raise ConfigurationError("secret cannot be empty")

        timeout = self.config['timeout']
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError("timeout must be a positive number")

        if self.config['format'] not in RESPONSE_FORMATS:
            raise ConfigurationError(
                f"format must be one of {', '.join(RESPONSE_FORMATS)}"
            )

    def _resolve_format(self, format: Optional[str]) -> str:
        format = format or self.config['format']
        if format not in RESPONSE_FORMATS:
            raise InvalidParameterError(
                f"Unsupported response format {format!r}, expected one of {', '.join(RESPONSE_FORMATS)}"
            )
        return format

    @staticmethod
    def _resolve_method(request_type: Optional[str]) -> str:
        if request_type is not None and not isinstance(request_type, str):
            raise InvalidParameterError(f"Unsupported HTTP method {request_type!r}")
        method = (request_type or 'GET').upper()
        if method not in HTTP_METHODS:
            raise InvalidParameterError(f"Unsupported HTTP method {request_type!r}")
        return method

    def _signed_params(self, params: Optional[ParameterSet], format: Optional[str]) -> Dict[str, str]:
        """Copy caller parameters, add the response format and sort them."""
        merged = dict(params or {})
        merged['format'] = self._resolve_format(format)
        return dict(canonicalize(merged))

    def _headers(self, path: str, params: Dict[str, str], is_auth: bool) -> Dict[str, str]:
        if not is_auth:
            return {}
        return {HEADER_AUTHORIZATION: sign(path, params, self._secret, self._key)}

    def generate_request(self, path: str, params: Optional[ParameterSet] = None,
                         request_type: str = 'GET', format: Optional[str] = None,
                         is_auth: bool = True) -> SignedRequest:
        """
        Build a signed request.

        Args:
            path: API method path (e.g. "/v1/tariff/")
            params: Request parameters
            request_type: HTTP method (GET, POST, PUT, DELETE)
            format: Response format (json or xml), client default if omitted
            is_auth: Whether the Authorization header is required

        Returns:
            SignedRequest ready to be sent

        Raises:
            InvalidParameterError: If parameters, format or method are invalid
        """
        method = self._resolve_method(request_type)
        signed_params = self._signed_params(params, format)
        headers = self._headers(path, signed_params, is_auth)

        if method in QUERY_STRING_METHODS:
            url = f"{self._base_url}{path}?{canonical_param_string(signed_params)}"
            request = SignedRequest(method, url, headers)
        else:
            request = SignedRequest(method, f"{self._base_url}{path}", headers, data=signed_params)

        logger.debug("Generated %s request for %s", method, request.url)
        return request

    def generate_multipart_request(self, path: str, params: Optional[ParameterSet],
                                   content: bytes, content_type: str, field_name: str,
                                   filename: str = "", request_type: str = 'POST',
                                   format: Optional[str] = None,
                                   is_auth: bool = True) -> SignedRequest:
        """
        Build a signed multipart/form-data request carrying one binary part.

        The signature covers the scalar parameters only; the binary content
        is not part of it.

        Args:
            path: API method path (e.g. "/v1/pbx/ivr/sounds/upload/")
            params: Request parameters, sent as string form fields
            content: Binary content of the file part
            content_type: MIME type of the file part (e.g. "audio/wav")
            field_name: Form field name of the file part
            filename: File name reported for the file part
            request_type: HTTP method, POST by default
            format: Response format (json or xml), client default if omitted
            is_auth: Whether the Authorization header is required

        Returns:
            SignedRequest ready to be sent
        """
        method = self._resolve_method(request_type)
        signed_params = self._signed_params(params, format)
        headers = self._headers(path, signed_params, is_auth)

        request = SignedRequest(
            method,
            f"{self._base_url}{path}",
            headers,
            data=signed_params,
            files={field_name: (filename, bytes(content), content_type)},
        )

        logger.debug("Generated multipart %s request for %s (%d bytes)",
                     method, request.url, len(content))
        return request

    def send(self, request: SignedRequest) -> requests.Response:
        """
        Send a signed request and wait for the response.

        Transport errors from requests propagate unchanged.
        """
        logger.debug("Sending %s %s", request.method, request.url)
        return self.session.request(
            request.method,
            request.url,
            timeout=self.config['timeout'],
            **request.transport_kwargs()
        )

    async def send_async(self, request: SignedRequest) -> httpx.Response:
        """
        Send a signed request without blocking the event loop.

        Transport errors from httpx propagate unchanged.
        """
        logger.debug("Sending %s %s (async)", request.method, request.url)
        async with httpx.AsyncClient(timeout=self.config['timeout']) as client:
            return await client.request(
                request.method,
                request.url,
                **request.transport_kwargs()
            )

    def call(self, path: str, params: Optional[ParameterSet] = None,
             request_type: str = 'GET', format: Optional[str] = None,
             is_auth: bool = True) -> requests.Response:
        """Build, sign and send an API call."""
        return self.send(self.generate_request(path, params, request_type, format, is_auth))

    async def call_async(self, path: str, params: Optional[ParameterSet] = None,
                         request_type: str = 'GET', format: Optional[str] = None,
                         is_auth: bool = True) -> httpx.Response:
        """Build, sign and send an API call asynchronously."""
        request = self.generate_request(path, params, request_type, format, is_auth)
        return await self.send_async(request)

    def get(self, path: str, params: Optional[ParameterSet] = None, **kwargs) -> requests.Response:
        """Make authenticated GET request."""
        return self.call(path, params, 'GET', **kwargs)

    def post(self, path: str, params: Optional[ParameterSet] = None, **kwargs) -> requests.Response:
        """Make authenticated POST request."""
        return self.call(path, params, 'POST', **kwargs)

    def put(self, path: str, params: Optional[ParameterSet] = None, **kwargs) -> requests.Response:
        """Make authenticated PUT request."""
        return self.call(path, params, 'PUT', **kwargs)

    def delete(self, path: str, params: Optional[ParameterSet] = None, **kwargs) -> requests.Response:
        """Make authenticated DELETE request."""
        return self.call(path, params, 'DELETE', **kwargs)

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def __repr__(self):
        return f"ZadarmaClient(key={self._key!r}, sandbox={self._sandbox})"
