"""
Signed request value passed from the request builder to the transports.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .constants import HEADER_AUTHORIZATION

# (filename, content, content_type), the tuple form both requests and httpx
# accept for a file part
FilePart = Tuple[str, bytes, str]


@dataclass(frozen=True)
class SignedRequest:
    """
    A fully built API request.

    Attributes:
        method: HTTP verb (upper case)
        url: Absolute URL, with the canonical query string for GET
        headers: Request headers; holds Authorization when the call is signed
        data: Form fields for body-carrying verbs, None for GET
        files: Multipart binary part keyed by field name, or None
    """
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    data: Optional[Dict[str, str]] = None
    files: Optional[Dict[str, FilePart]] = None

    @property
    def authorization(self) -> Optional[str]:
        """Authorization header value, or None for unsigned requests."""
        return self.headers.get(HEADER_AUTHORIZATION)

    def transport_kwargs(self) -> Dict[str, object]:
        """Keyword arguments shared by requests and httpx ``request()`` calls."""
        kwargs: Dict[str, object] = {'headers': dict(self.headers)}
        if self.data is not None:
            kwargs['data'] = dict(self.data)
        if self.files is not None:
            kwargs['files'] = dict(self.files)
        return kwargs
