"""
Item filter sets for the Finding API search operations

Each function returns the ``itemFilter`` entries for one operation. The URL
builder turns them into ``itemFilter(N).name`` / ``itemFilter(N).value(M)``
query parameters.
"""
from typing import NamedTuple, Tuple


class ItemFilter(NamedTuple):
    name: str
    values: Tuple[str, ...]


def keyword_search_filters(bin_only: bool = False) -> Tuple[ItemFilter, ...]:
    """Listing types for findItemsByKeywords.

    Auctions with a Buy-It-Now option are always included; plain fixed price
    and auction listings are added unless ``bin_only`` is set.
    """
    listing_types = ['AuctionWithBIN']
    if not bin_only:
        listing_types += ['FixedPrice', 'Auction']
    return (ItemFilter('ListingType', tuple(listing_types)),)


def completed_items_filters() -> Tuple[ItemFilter, ...]:
    """Used or unspecified condition, sold items only, for findCompletedItems"""
    return (
        ItemFilter('Condition', ('Used', 'Unspecified')),
        ItemFilter('SoldItemsOnly', ('true',)),
    )
