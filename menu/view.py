"""Display-ready projection of a product list and selection.

Every surface (sidebar, dropdown, pill bar, sub-category list) renders from
the same `MenuView`, so they cannot disagree with the selection. Nothing here
holds state: the view is recomputed from scratch on every change.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from shared.types import EmptyState, TaxonomyMode

from .filters import filter_products
from .models import Product
from .ordering import MenuSection, group_products, order_products
from .selection import SelectionState
from .taxonomy import FlatTaxonomy, HierarchicalTaxonomy, Taxonomy, extract_taxonomy


@dataclass(frozen=True)
class CategoryEntry:
    """A selectable category label and whether it is the active one."""

    label: str
    active: bool


@dataclass(frozen=True)
class CategoryView:
    """Category navigation shared by all display surfaces.

    Attributes:
        top_categories: Top categories in display order, "all" first.
        sub_categories: Groups of the active top (empty when not applicable).
        location_label: Compact "where am I" text, e.g. for a dropdown trigger.
    """

    top_categories: tuple[CategoryEntry, ...]
    sub_categories: tuple[CategoryEntry, ...]
    location_label: str


def project_categories(taxonomy: Taxonomy, state: SelectionState) -> CategoryView:
    """Project taxonomy and selection into navigation entries."""
    tops = tuple(
        CategoryEntry(label=top, active=top == state.active_top)
        for top in taxonomy.top_categories
    )

    match taxonomy:
        case HierarchicalTaxonomy() if not state.is_showing_all:
            subs = tuple(
                CategoryEntry(label=sub, active=sub == state.active_sub)
                for sub in taxonomy.sub_categories_of(state.active_top)
            )
            location = (
                f"{state.active_top} - {state.active_sub}"
                if state.active_sub
                else state.active_top
            )
        case FlatTaxonomy() | HierarchicalTaxonomy():
            subs = ()
            location = state.active_top

    return CategoryView(top_categories=tops, sub_categories=subs, location_label=location)


@dataclass(frozen=True)
class MenuView:
    """Everything a renderer needs for one selection.

    Attributes:
        taxonomy: Taxonomy derived from the product list.
        selection: Selection the view was computed for.
        categories: Navigation entries.
        sections: Product blocks; labeled only in the aggregate view.
        empty_state: Why there is nothing to show, if so.
    """

    taxonomy: Taxonomy
    selection: SelectionState
    categories: CategoryView
    sections: tuple[MenuSection, ...]
    empty_state: EmptyState

    @property
    def mode(self) -> TaxonomyMode:
        return self.taxonomy.mode

    @property
    def products(self) -> list[Product]:
        """Displayed products, flattened in display order."""
        return [p for section in self.sections for p in section.products]

    @property
    def is_empty(self) -> bool:
        return self.empty_state != EmptyState.none


def build_menu_view(
    products: Sequence[Product],
    selection: SelectionState | None = None,
    taxonomy: Taxonomy | None = None,
) -> MenuView:
    """Run the full pipeline: extract, select, filter, order, group, project.

    Args:
        products: Full product list in source order.
        selection: Selection built against this list's taxonomy. Defaults to
            the taxonomy's initial selection.
        taxonomy: Precomputed taxonomy of `products`, if the caller has one.

    Returns:
        MenuView for the selection.
    """
    if taxonomy is None:
        taxonomy = extract_taxonomy(products)
    if selection is None:
        selection = SelectionState.initial(taxonomy)

    visible = filter_products(products, selection, taxonomy)

    if selection.is_showing_all:
        sections = group_products(order_products(visible, taxonomy), taxonomy)
    elif visible:
        sections = [MenuSection(label=None, products=tuple(visible))]
    else:
        sections = []

    if not products:
        empty_state = EmptyState.no_products
    elif not visible:
        empty_state = EmptyState.no_matches
    else:
        empty_state = EmptyState.none

    return MenuView(
        taxonomy=taxonomy,
        selection=selection,
        categories=project_categories(taxonomy, selection),
        sections=tuple(sections),
        empty_state=empty_state,
    )
