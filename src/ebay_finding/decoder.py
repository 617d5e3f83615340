"""
XML decoding of Finding API responses

Element paths are written without namespaces and matched in any namespace,
since the live service declares a default namespace on the root element.
"""
import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from .exceptions import DecodeError
from .models import CompletedItemsResponse, ErrorInfo, FindItemsResponse, Item

logger = logging.getLogger(__name__)

FIND_ITEMS_ROOT = 'findItemsByKeywordsResponse'
COMPLETED_ITEMS_ROOT = 'findCompletedItemsResponse'
ERROR_ROOT = 'errorMessage'

ITEMS_PATH = 'searchResult/item'
TIMESTAMP_PATH = 'timestamp'
ERROR_PATH = 'error'


def _ns(path: str) -> str:
    """Make every step of an element path match any namespace"""
    return '/'.join(f'{{*}}{step}' for step in path.split('/'))


def _local_name(tag: str) -> str:
    return tag.rsplit('}', 1)[-1]


def _text(element: ET.Element, path: str) -> str:
    return element.findtext(_ns(path)) or ''


def _decimal(element: ET.Element, path: str) -> Decimal:
    raw = _text(element, path).strip()
    if not raw:
        return Decimal('0')
    try:
        value = Decimal(raw)
    except InvalidOperation as e:
        raise DecodeError(f"Invalid number {raw!r} at {path}") from e
    if not value.is_finite():
        raise DecodeError(f"Invalid number {raw!r} at {path}")
    return value


def _datetime(element: ET.Element, path: str) -> Optional[datetime]:
    raw = _text(element, path).strip()
    if not raw:
        return None
    # eBay sends UTC as e.g. 2012-03-04T18:23:10.000Z
    if raw.endswith('Z'):
        raw = raw[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(raw)
    except ValueError as e:
        raise DecodeError(f"Invalid timestamp at {path}: {e}") from e


def _parse_root(body, expected_root: str) -> ET.Element:
    try:
        root = ET.fromstring(body)
    except ET.ParseError as e:
        logger.error(f"Malformed XML in {expected_root}: {e}")
        raise DecodeError(f"Malformed XML: {e}") from e

    if _local_name(root.tag) != expected_root:
        logger.error(f"Expected <{expected_root}>, got <{_local_name(root.tag)}>")
        raise DecodeError(
            f"Unexpected root element <{_local_name(root.tag)}>, expected <{expected_root}>"
        )
    return root


def parse_item(element: ET.Element) -> Item:
    """Map one <item> element to an Item"""
    return Item(
        item_id=_text(element, 'itemId'),
        title=_text(element, 'title'),
        location=_text(element, 'location'),
        current_price=_decimal(element, 'sellingStatus/currentPrice'),
        shipping_price=_decimal(element, 'shippingInfo/shippingServiceCost'),
        bin_price=_decimal(element, 'listingInfo/buyItNowPrice'),
        ships_to=tuple(
            loc.text or ''
            for loc in element.findall(_ns('shippingInfo/shipToLocations'))
        ),
        listing_url=_text(element, 'viewItemURL'),
        image_url=_text(element, 'galleryURL'),
        site=_text(element, 'globalId'),
        end_time=_datetime(element, 'listingInfo/endTime'),
    )


def parse_find_items_response(body) -> FindItemsResponse:
    """Decode a findItemsByKeywords success payload"""
    root = _parse_root(body, FIND_ITEMS_ROOT)
    return FindItemsResponse(
        items=tuple(parse_item(el) for el in root.findall(_ns(ITEMS_PATH))),
        timestamp=_text(root, TIMESTAMP_PATH),
    )


def parse_completed_items_response(body) -> CompletedItemsResponse:
    """Decode a findCompletedItems success payload"""
    root = _parse_root(body, COMPLETED_ITEMS_ROOT)
    return CompletedItemsResponse(
        items=tuple(parse_item(el) for el in root.findall(_ns(ITEMS_PATH))),
        timestamp=_text(root, TIMESTAMP_PATH),
    )


def parse_error_message(body) -> ErrorInfo:
    """Decode the <errorMessage> fault payload sent with non-200 responses"""
    root = _parse_root(body, ERROR_ROOT)
    error = root.find(_ns(ERROR_PATH))
    if error is None:
        raise DecodeError("Fault payload has no <error> element")
    return ErrorInfo(
        error_id=_text(error, 'errorId'),
        domain=_text(error, 'domain'),
        severity=_text(error, 'severity'),
        category=_text(error, 'category'),
        message=_text(error, 'message'),
        subdomain=_text(error, 'subdomain'),
    )
