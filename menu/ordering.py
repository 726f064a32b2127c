"""Ordering and header grouping for the aggregate "show everything" view.

Sort priority:
1. Position of the top group in the taxonomy (hierarchical menus only)
2. Position of the group in the unfiltered source list
3. Explicit `order` of the product, among products that define one

All sorts are stable, so anything left tied keeps its source order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import groupby

from .models import Product
from .taxonomy import FlatTaxonomy, HierarchicalTaxonomy, Taxonomy


@dataclass(frozen=True)
class MenuSection:
    """Contiguous block of products displayed under one header.

    Attributes:
        label: Header text, or None when the products are shown without a header.
        products: Products of the block in display order.
    """

    label: str | None
    products: tuple[Product, ...]


def _rank_table(names: Sequence[str]) -> dict[str, int]:
    return {name: index for index, name in enumerate(names)}


def _sort_key(taxonomy: Taxonomy) -> Callable[[Product], tuple[int, ...]]:
    """Build the category sort key.

    Ranks follow the order of `taxonomy.top_categories` and `taxonomy.groups`.
    Products whose top or group is not in those lists (orphans) sort after
    every known category rather than before them.
    """
    group_rank = _rank_table(taxonomy.groups)
    missing_group = len(group_rank)

    match taxonomy:
        case FlatTaxonomy():
            return lambda p: (group_rank.get(p.group_name, missing_group),)
        case HierarchicalTaxonomy():
            top_rank = _rank_table(taxonomy.top_categories)
            missing_top = len(top_rank)
            return lambda p: (
                top_rank.get(p.top_group_name or "", missing_top),
                group_rank.get(p.group_name, missing_group),
            )


def _apply_explicit_order(block: list[Product]) -> list[Product]:
    """Sort products with an explicit order among the slots they occupy.

    Products without `order` keep their position.
    """
    slots = [i for i, p in enumerate(block) if p.order is not None]
    if len(slots) < 2:
        return block

    ranked = sorted((block[i] for i in slots), key=lambda p: p.order)
    for slot, product in zip(slots, ranked):
        block[slot] = product
    return block


def order_products(products: Iterable[Product], taxonomy: Taxonomy) -> list[Product]:
    """Order products for the aggregate view.

    Args:
        products: Filtered products in source order.
        taxonomy: Taxonomy of the *unfiltered* list, so filtering never
            reshuffles category precedence.

    Returns:
        Products ordered by category, stable within ties.
    """
    key = _sort_key(taxonomy)
    ordered: list[Product] = []
    for _, block in groupby(sorted(products, key=key), key=key):
        ordered.extend(_apply_explicit_order(list(block)))
    return ordered


def section_label(product: Product, taxonomy: Taxonomy) -> str:
    """Header label of the category a product is displayed under."""
    match taxonomy:
        case FlatTaxonomy():
            return product.group_name
        case HierarchicalTaxonomy():
            parts = [part for part in (product.top_group_name, product.group_name) if part]
            return " - ".join(parts)


def group_products(products: Iterable[Product], taxonomy: Taxonomy) -> list[MenuSection]:
    """Split an ordered product sequence into header blocks.

    Grouping is strictly adjacency-based: a new block starts whenever the
    label differs from the previous product's, even if that label was seen
    earlier.
    """
    blocks = groupby(products, key=lambda p: section_label(p, taxonomy))
    return [MenuSection(label=label, products=tuple(block)) for label, block in blocks]
