"""Sort engine - stable ordering of records by raw or derived values"""

from typing import Callable, Dict, List

from coconut_ledger.domain.models import Record, SortConfig, SortDirection

SORT_KEYS: Dict[str, Callable[[Record], float]] = {
    "date": lambda r: r.date.toordinal(),
    "quantity": lambda r: r.sold_quantity,
    "purchasePrice": lambda r: r.purchase_price,
    "sellPrice": lambda r: r.sell_price,
    "totalCost": lambda r: r.total_cost,
    "totalRevenue": lambda r: r.total_revenue,
    "profit": lambda r: r.profit,
}

KEY_ALIASES = {
    "qty": "quantity",
    "sold_quantity": "quantity",
    "soldQuantity": "quantity",
    "buyPrice": "purchasePrice",
    "purchase_price": "purchasePrice",
    "sell_price": "sellPrice",
    "total_cost": "totalCost",
    "total_revenue": "totalRevenue",
}


def canonical_sort_key(key: str) -> str:
    return KEY_ALIASES.get(key, key)


def sort_records(records: List[Record], key: str, direction: SortDirection) -> List[Record]:
    """
    Return a new list ordered by key.

    Equal values keep their input order in both directions. Unknown keys
    compare equal, which leaves the order untouched.
    """
    value_of = SORT_KEYS.get(canonical_sort_key(key))
    if value_of is None:
        return list(records)
    # sorted() is stable and keeps ties in input order even with reverse=True
    return sorted(records, key=value_of, reverse=SortDirection(direction) == SortDirection.DESC)


def toggle_sort(current: SortConfig, key: str) -> SortConfig:
    """Same key flips the direction; a new key starts descending"""
    if canonical_sort_key(current.key) != canonical_sort_key(key):
        return SortConfig(key=key, direction=SortDirection.DESC)
    flipped = SortDirection.DESC if current.direction == SortDirection.ASC else SortDirection.ASC
    return SortConfig(key=current.key, direction=flipped)
