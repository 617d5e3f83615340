"""
Finding API request URL construction
"""
from typing import Iterable, Union
from urllib.parse import urlencode, urlparse

from .config import FINDING_API_URL
from .exceptions import MalformedEndpointError
from .filters import ItemFilter
from .models import GlobalId

SERVICE_VERSION = "1.0.0"
RESPONSE_DATA_FORMAT = "XML"

FIND_ITEMS_BY_KEYWORDS = "findItemsByKeywords"
FIND_COMPLETED_ITEMS = "findCompletedItems"


def build_url(
    app_id: str,
    global_id: Union[GlobalId, str],
    keywords: str,
    operation_name: str,
    entries_per_page: int,
    filters: Iterable[ItemFilter] = (),
    endpoint: str = FINDING_API_URL,
) -> str:
    """
    Build a Finding API GET url.

    Args:
        app_id: Application id sent as SECURITY-APPNAME
        global_id: Marketplace to search, e.g. ``GlobalId.EBAY_US``
        keywords: Search keywords, passed through as-is
        operation_name: Finding API call, e.g. ``findItemsByKeywords``
        entries_per_page: Page size
        filters: Item filters, numbered in the order given
        endpoint: Service endpoint

    Raises:
        MalformedEndpointError: endpoint is not an absolute http(s) url
        ValueError: global_id is not a supported marketplace
    """
    parsed = urlparse(endpoint)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise MalformedEndpointError(f"Invalid Finding API endpoint: {endpoint!r}")

    params = [
        ('OPERATION-NAME', operation_name),
        ('SERVICE-VERSION', SERVICE_VERSION),
        ('SECURITY-APPNAME', app_id),
        ('GLOBAL-ID', GlobalId(global_id).value),
        ('RESPONSE-DATA-FORMAT', RESPONSE_DATA_FORMAT),
        ('REST-PAYLOAD', ''),
        ('keywords', keywords),
        ('paginationInput.entriesPerPage', str(int(entries_per_page))),
    ]
    for n, item_filter in enumerate(filters):
        params.append((f'itemFilter({n}).name', item_filter.name))
        for m, value in enumerate(item_filter.values):
            params.append((f'itemFilter({n}).value({m})', value))

    return parsed._replace(query=urlencode(params)).geturl()
