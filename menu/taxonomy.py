"""Category taxonomy inferred from a flat product list.

The upstream never declares its category tree. It is derived per product
list: if any product carries a top group the whole menu is hierarchical
(top group -> group), otherwise every group is a top-level category.
Category order is always first-seen order in the source list.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

from shared.types import TaxonomyMode

from .models import Product

# Sentinel top category meaning "no category restriction"
ALL_CATEGORY = "Tümü"


@dataclass(frozen=True)
class FlatTaxonomy:
    """One-level taxonomy: groups are the top categories.

    Attributes:
        groups: Distinct group names in first-seen order.
    """

    groups: tuple[str, ...] = ()

    @property
    def mode(self) -> TaxonomyMode:
        return TaxonomyMode.flat

    @property
    def top_categories(self) -> tuple[str, ...]:
        return (ALL_CATEGORY, *self.groups)

    def sub_categories_of(self, top: str) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class HierarchicalTaxonomy:
    """Two-level taxonomy: top groups, each holding its own groups.

    Attributes:
        tops: Distinct non-empty top group names in first-seen order.
        subs: Distinct group names per top group, first-seen order.
        groups: Distinct group names over the whole list, orphans included.
    """

    tops: tuple[str, ...]
    subs: dict[str, tuple[str, ...]] = field(default_factory=dict)
    groups: tuple[str, ...] = ()

    @property
    def mode(self) -> TaxonomyMode:
        return TaxonomyMode.hierarchical

    @property
    def top_categories(self) -> tuple[str, ...]:
        return (ALL_CATEGORY, *self.tops)

    def sub_categories_of(self, top: str) -> tuple[str, ...]:
        return self.subs.get(top, ())


Taxonomy = Union[FlatTaxonomy, HierarchicalTaxonomy]


def extract_taxonomy(products: Iterable[Product]) -> Taxonomy:
    """Derive the taxonomy of a product list in a single pass.

    Args:
        products: Products in source order.

    Returns:
        HierarchicalTaxonomy if at least one product has a non-empty top
        group, FlatTaxonomy otherwise (including for an empty list).
    """
    # dicts keep insertion order, i.e. first-seen order
    groups: dict[str, None] = {}
    subs: dict[str, dict[str, None]] = {}

    for product in products:
        groups.setdefault(product.group_name, None)
        if product.top_group_name:
            subs.setdefault(product.top_group_name, {}).setdefault(product.group_name, None)

    if not subs:
        return FlatTaxonomy(groups=tuple(groups))

    return HierarchicalTaxonomy(
        tops=tuple(subs),
        subs={top: tuple(names) for top, names in subs.items()},
        groups=tuple(groups),
    )
