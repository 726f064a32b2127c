"""Category and text-search predicate over products."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Product
from .selection import SelectionState
from .taxonomy import ALL_CATEGORY, FlatTaxonomy, HierarchicalTaxonomy, Taxonomy


def matches_search(product: Product, term: str) -> bool:
    """Case-insensitive substring match on the product name."""
    return term.casefold() in product.name.casefold()


def matches(product: Product, state: SelectionState, taxonomy: Taxonomy) -> bool:
    """Check whether a product is visible under the given selection.

    Args:
        product: Product to test.
        state: Current selection.
        taxonomy: Taxonomy of the product list.

    Returns:
        True if the product passes both the search and the category test.
    """
    if not matches_search(product, state.search_term):
        return False

    if state.active_top == ALL_CATEGORY:
        return True

    match taxonomy:
        case FlatTaxonomy():
            return product.group_name == state.active_top
        case HierarchicalTaxonomy():
            return product.top_group_name == state.active_top and (
                state.active_sub == "" or product.group_name == state.active_sub
            )


def filter_products(
    products: Iterable[Product], state: SelectionState, taxonomy: Taxonomy
) -> list[Product]:
    """Return the visible products, preserving source order."""
    return [p for p in products if matches(p, state, taxonomy)]
