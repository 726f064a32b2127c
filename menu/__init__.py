"""Menu engine: taxonomy inference, selection, filtering, ordering and projection."""

from .client import MenuClient, turkish_upper
from .config import MenuConfig, load_config
from .filters import filter_products, matches, matches_search
from .models import Business, Product, parse_products
from .ordering import MenuSection, group_products, order_products, section_label
from .selection import SelectionState
from .session import MenuSession
from .taxonomy import (
    ALL_CATEGORY,
    FlatTaxonomy,
    HierarchicalTaxonomy,
    Taxonomy,
    extract_taxonomy,
)
from .view import (
    CategoryEntry,
    CategoryView,
    MenuView,
    build_menu_view,
    project_categories,
)

__all__ = [
    # Models
    "Product",
    "Business",
    "parse_products",
    # Taxonomy
    "ALL_CATEGORY",
    "Taxonomy",
    "FlatTaxonomy",
    "HierarchicalTaxonomy",
    "extract_taxonomy",
    # Selection
    "SelectionState",
    "MenuSession",
    # Filtering and ordering
    "matches",
    "matches_search",
    "filter_products",
    "order_products",
    "group_products",
    "section_label",
    "MenuSection",
    # Projection
    "CategoryEntry",
    "CategoryView",
    "MenuView",
    "build_menu_view",
    "project_categories",
    # Upstream
    "MenuClient",
    "turkish_upper",
    # Configuration
    "MenuConfig",
    "load_config",
]
