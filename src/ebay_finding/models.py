"""
Data models for eBay Finding API responses
"""
import sys
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, TextIO, Tuple


class GlobalId(str, Enum):
    """Marketplace (site) identifiers accepted by the Finding API"""
    EBAY_US = 'EBAY-US'
    EBAY_FR = 'EBAY-FR'
    EBAY_DE = 'EBAY-DE'
    EBAY_IT = 'EBAY-IT'
    EBAY_ES = 'EBAY-ES'


@dataclass(frozen=True)
class Item:
    """One listing from a search result"""
    item_id: str
    title: str
    location: str  # Seller location
    current_price: Decimal
    shipping_price: Decimal
    bin_price: Decimal  # Buy-It-Now price, 0 when the listing has none
    ships_to: Tuple[str, ...]
    listing_url: str
    image_url: str
    site: str  # globalId of the listing's marketplace
    end_time: Optional[datetime] = None


@dataclass(frozen=True)
class ErrorInfo:
    """Fault payload returned by eBay on a non-200 response"""
    error_id: str
    domain: str
    severity: str
    category: str
    message: str
    subdomain: str


class _Envelope:
    """Shared behaviour of the search result envelopes"""

    def dump(self, out: Optional[TextIO] = None):
        """Print a readable summary of the result, for debugging"""
        out = out or sys.stdout
        print(type(self).__name__, file=out)
        print("--------------------------", file=out)
        print(f"Timestamp: {self.timestamp}", file=out)
        print("Items:", file=out)
        print("------", file=out)
        for item in self.items:
            print(f"Title: {item.title}", file=out)
            print("------", file=out)
            print(f"\tListing Url:     {item.listing_url}", file=out)
            print(f"\tBin Price:       {item.bin_price}", file=out)
            print(f"\tCurrent Price:   {item.current_price}", file=out)
            print(f"\tShipping Price:  {item.shipping_price}", file=out)
            print(f"\tShips To:        {', '.join(item.ships_to)}", file=out)
            print(f"\tSeller Location: {item.location}", file=out)
            print(file=out)


@dataclass(frozen=True)
class FindItemsResponse(_Envelope):
    """Decoded findItemsByKeywordsResponse"""
    items: Tuple[Item, ...]
    timestamp: str


@dataclass(frozen=True)
class CompletedItemsResponse(_Envelope):
    """Decoded findCompletedItemsResponse"""
    items: Tuple[Item, ...]
    timestamp: str
