"""
Request signing for the Zadarma API.

The API authenticates a request with an ``Authorization`` header built from
the API method path and the sorted, form-urlencoded request parameters:

    key:base64(hex(HMAC-SHA1(secret, path + params + hex(MD5(params)))))

Note that the base64 step wraps the *hex text* of the HMAC, not the raw
digest bytes. The remote service expects exactly this form.
"""

import base64
import hashlib
import hmac
import logging
from typing import Mapping, Optional, Tuple, Union
from urllib.parse import quote_plus, urlencode

from .exceptions import ConfigurationError, InvalidParameterError

logger = logging.getLogger(__name__)

ParamValue = Union[str, int, float]
ParameterSet = Mapping[str, ParamValue]

# Characters the API leaves unescaped besides letters, digits and "-_."
SAFE_CHARS = "!*()"


def _quote(string, safe="", encoding=None, errors=None):
    """Form-encode one key or value; "~" is escaped, "!*()" are not."""
    return quote_plus(string, safe=SAFE_CHARS, encoding=encoding, errors=errors).replace("~", "%7E")


def canonicalize(parameters: Optional[ParameterSet]) -> Tuple[Tuple[str, str], ...]:
    """
    Copy a parameter mapping into a sorted tuple of string pairs.

    Keys are ordered by code point, never by locale. Numeric values are
    converted with ``str()``.

    Args:
        parameters: Parameter mapping (may be None or empty)

    Returns:
        Tuple of (key, value) pairs sorted by key

    Raises:
        InvalidParameterError: If a key is not a string or a value is not
            a string or number
    """
    if not parameters:
        return ()

    pairs = []
    for key, value in parameters.items():
        if not isinstance(key, str):
            raise InvalidParameterError(f"Parameter name must be a string, got {key!r}")
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise InvalidParameterError(
                f"Parameter {key!r} must be a string or number, got {type(value).__name__}"
            )
        pairs.append((key, str(value)))

    return tuple(sorted(pairs, key=lambda pair: pair[0]))


def canonical_param_string(parameters: Optional[ParameterSet]) -> str:
    """
    Build the canonical parameter string used for signing and query strings.

    Raises:
        InvalidParameterError: If the parameters cannot be encoded
    """
    pairs = canonicalize(parameters)
    try:
        return urlencode(pairs, quote_via=_quote)
    except UnicodeEncodeError as e:
        raise InvalidParameterError(f"Parameters cannot be URL-encoded: {e}") from e


def md5_hex(text: str) -> str:
    """Lowercase hex MD5 digest of the UTF-8 bytes of ``text``."""
    return hashlib.md5(text.encode('utf-8')).hexdigest()


def sign(path: str, parameters: Optional[ParameterSet], secret: str, key: str) -> str:
    """
    Generate the Authorization header value for an API call.

    Args:
        path: API method path, including version (e.g. "/v1/info/balance/")
        parameters: Request parameters, including the response format
        secret: API secret from the personal account
        key: API key from the personal account

    Returns:
        Header value in the form "key:signature"

    Raises:
        ConfigurationError: If key or secret is empty
        InvalidParameterError: If the parameters cannot be encoded
    """
    if not secret:
        raise ConfigurationError("secret cannot be empty")
    if not key:
        raise ConfigurationError("key cannot be empty")

    params_string = canonical_param_string(parameters)
    signing_input = f"{path}{params_string}{md5_hex(params_string)}"

    hmac_hex = hmac.new(
        secret.encode('utf-8'),
        signing_input.encode('utf-8'),
        hashlib.sha1
    ).hexdigest()
    signature = base64.b64encode(hmac_hex.encode('utf-8')).decode('ascii')

    logger.debug("Signed request for %s", path)
    return f"{key}:{signature}"
