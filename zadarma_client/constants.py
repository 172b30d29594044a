"""
Constants for the Zadarma API client.
"""

# API base addresses
API_URL = "https://api.zadarma.com"
API_URL_SANDBOX = "https://api-sandbox.zadarma.com"

# HTTP headers
HEADER_AUTHORIZATION = "Authorization"

# Response formats accepted by the API
FORMAT_JSON = "json"
FORMAT_XML = "xml"
RESPONSE_FORMATS = (FORMAT_JSON, FORMAT_XML)

# Verbs accepted by the API; GET carries its parameters in the query string
HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")
QUERY_STRING_METHODS = ("GET",)

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,          # HTTP timeout in seconds
    'format': FORMAT_JSON,  # response format when a call does not name one
}

# Environment variables read by ZadarmaClient.from_env()
ENV_KEY = "ZADARMA_KEY"
ENV_SECRET = "ZADARMA_SECRET"
ENV_SANDBOX = "ZADARMA_SANDBOX"
