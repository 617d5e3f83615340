"""
eBay Finding API client (findItemsByKeywords / findCompletedItems, XML)
"""
import requests
import logging
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar, Union

from .config import get_config
from .decoder import parse_completed_items_response, parse_error_message, parse_find_items_response
from .exceptions import DecodeError, TransportError, UpstreamError
from .filters import completed_items_filters, keyword_search_filters
from .models import CompletedItemsResponse, FindItemsResponse, GlobalId
from .urls import FIND_COMPLETED_ITEMS, FIND_ITEMS_BY_KEYWORDS, build_url

logger = logging.getLogger(__name__)

# The Finding service turns away requests without a browser-like user agent
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_7_3) AppleWebKit/535.11 "
    "(KHTML, like Gecko) Chrome/17.0.963.56 Safari/535.11"
)

T = TypeVar('T', FindItemsResponse, CompletedItemsResponse)


@dataclass(frozen=True)
class ClientConfig:
    """Credential and transport used by a client for its whole lifetime"""
    app_id: str
    session: requests.Session
    timeout: Optional[float] = None  # handed to the transport untouched
    endpoint: Optional[str] = None


class eBayFindingClient:
    def __init__(
        self,
        app_id: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        suffix: str = "",
    ):
        config = get_config(suffix)
        if app_id is None:
            config.validate()
            app_id = config.ebay_app_id

        self._owns_session = session is None
        self.config = ClientConfig(
            app_id=app_id,
            session=session if session is not None else requests.Session(),
            timeout=timeout,
            endpoint=config.ebay_finding_api_url,
        )

    def close(self):
        if self._owns_session:
            self.config.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def find_items_by_keywords(
        self,
        global_id: Union[GlobalId, str],
        keywords: str,
        entries_per_page: int,
        bin_only: bool = False,
    ) -> FindItemsResponse:
        """
        Search active listings by keywords.

        Args:
            global_id: Marketplace to search
            keywords: Search keywords
            entries_per_page: Number of items to return
            bin_only: Only return listings with a Buy-It-Now option

        Raises:
            TransportError, UpstreamError, DecodeError
        """
        url = build_url(
            self.config.app_id, global_id, keywords, FIND_ITEMS_BY_KEYWORDS,
            entries_per_page, keyword_search_filters(bin_only), self.config.endpoint,
        )
        return self._find_items(FIND_ITEMS_BY_KEYWORDS, url, parse_find_items_response)

    def find_sold_items(
        self,
        global_id: Union[GlobalId, str],
        keywords: str,
        entries_per_page: int,
    ) -> CompletedItemsResponse:
        """Search completed listings that sold, in used or unspecified condition."""
        url = build_url(
            self.config.app_id, global_id, keywords, FIND_COMPLETED_ITEMS,
            entries_per_page, completed_items_filters(), self.config.endpoint,
        )
        return self._find_items(FIND_COMPLETED_ITEMS, url, parse_completed_items_response)

    def _find_items(self, operation: str, url: str, decode: Callable[[bytes], T]) -> T:
        logger.debug(f"GET {operation}")
        headers = {'User-Agent': USER_AGENT}

        try:
            response = self.config.session.get(url, headers=headers, timeout=self.config.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"{operation} request failed: {e}")
            raise TransportError(str(e)) from e

        if response.status_code != 200:
            logger.warning(f"{operation} returned HTTP {response.status_code}")
            try:
                error = parse_error_message(response.content)
            except DecodeError as e:
                raise DecodeError(
                    f"HTTP {response.status_code} with unreadable error payload: {e}"
                ) from e
            raise UpstreamError(error.message, status_code=response.status_code, error=error)

        result = decode(response.content)
        logger.info(f"{operation}: {len(result.items)} items")
        return result
