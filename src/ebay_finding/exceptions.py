"""
Exceptions raised by the eBay Finding client
"""
from typing import Optional


class eBayFindingError(Exception):
    """Base class for all Finding API client errors"""
    pass


class MalformedEndpointError(eBayFindingError):
    """Raised when the Finding service endpoint cannot be parsed"""
    pass


class TransportError(eBayFindingError):
    """Raised when the HTTP request itself fails (network, connection)"""
    pass


class DecodeError(eBayFindingError):
    """Raised when a response body does not match the expected XML shape"""
    pass


class UpstreamError(eBayFindingError):
    """Raised when eBay answers with a non-200 status and a readable fault"""

    def __init__(self, message: str, status_code: Optional[int] = None, error=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error
