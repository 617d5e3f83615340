"""
eBay Finding API Client Package
"""
from .client import eBayFindingClient, ClientConfig
from .config import Config, ConfigurationError, get_config
from .exceptions import (
    eBayFindingError,
    MalformedEndpointError,
    TransportError,
    UpstreamError,
    DecodeError,
)
from .models import GlobalId, Item, ErrorInfo, FindItemsResponse, CompletedItemsResponse

__all__ = [
    'eBayFindingClient', 'ClientConfig', 'Config', 'ConfigurationError', 'get_config',
    'eBayFindingError', 'MalformedEndpointError', 'TransportError', 'UpstreamError',
    'DecodeError', 'GlobalId', 'Item', 'ErrorInfo', 'FindItemsResponse',
    'CompletedItemsResponse',
]
