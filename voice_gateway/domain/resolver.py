"""Entity resolution - match spoken names against the snapshot"""

from typing import AbstractSet, Callable, List, Optional, Sequence

from voice_gateway.domain.models import Customer, Product
from voice_gateway.domain.normalizer import normalize

# (normalized search, search words, normalized customer name) -> match?
MatchStrategy = Callable[[str, List[str], str], bool]


def _exact(search: str, words: List[str], name: str) -> bool:
    return name == search


def _contains(search: str, words: List[str], name: str) -> bool:
    return search in name or name in search


def _all_words(search: str, words: List[str], name: str) -> bool:
    return bool(words) and all(word in name for word in words)


def _any_word_overlap(search: str, words: List[str], name: str) -> bool:
    name_words = name.split()
    return any(sw in nw or nw in sw for sw in words for nw in name_words)


# Later strategies are looser; order decides which customer wins
CUSTOMER_MATCH_CASCADE: Sequence[MatchStrategy] = (_exact, _contains, _all_words, _any_word_overlap)


def find_customer(
    name: str,
    customers: Sequence[Customer],
    stop_words: AbstractSet[str] = frozenset(),
) -> Optional[Customer]:
    """
    Resolve a spoken name to a customer.

    Stages, each tried only when the previous one found nobody:
    1. exact match ignoring case and accents
    2. one name contains the other
    3. every search word appears in the customer name
    4. any search word overlaps any word of the customer name

    Returns the first customer (in snapshot order) of the earliest
    successful stage, or None.
    """
    if not name or not name.strip():
        return None

    search = normalize(name)
    if search in stop_words:
        return None

    words = [w for w in search.split() if len(w) > 1]
    normalized_names = [(customer, normalize(customer.name)) for customer in customers]

    for strategy in CUSTOMER_MATCH_CASCADE:
        for customer, customer_name in normalized_names:
            if strategy(search, words, customer_name):
                return customer

    return None


def find_product(term: str, products: Sequence[Product]) -> Optional[Product]:
    """First product whose name contains the term, ignoring case and accents"""
    search = normalize(term)
    if not search:
        return None
    return next((p for p in products if search in normalize(p.name)), None)
