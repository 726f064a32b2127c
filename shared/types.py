"""Shared type definitions for the menu engine and API.

These enums inherit from both `str` and `Enum` to ensure JSON serializability.
This allows `json.dumps(TaxonomyMode.flat)` to work directly without custom encoders.
"""

from enum import Enum


class TaxonomyMode(str, Enum):
    """Shape of the category tree inferred from a product list.

    - flat: one level, every group is a selectable top category
    - hierarchical: top groups narrow first, then sub groups
    """

    flat = "flat"
    hierarchical = "hierarchical"


class EmptyState(str, Enum):
    """Why a rendered menu has no products (if it has none).

    - none: there is something to show
    - no_products: the product list itself is empty
    - no_matches: products exist but the selection or search matches none
    """

    none = "none"
    no_products = "no_products"
    no_matches = "no_matches"
