"""Reactive browsing session over one product snapshot."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Product
from .selection import SelectionState
from .taxonomy import Taxonomy, extract_taxonomy
from .view import MenuView, build_menu_view


class MenuSession:
    """Holds the product snapshot, its taxonomy and the current selection.

    The taxonomy is recomputed only when the product list is replaced; the
    view is recomputed on every access from the current inputs.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: tuple[Product, ...] = ()
        self._taxonomy: Taxonomy = extract_taxonomy(())
        self._selection = SelectionState()
        self.load(products)

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def taxonomy(self) -> Taxonomy:
        return self._taxonomy

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def view(self) -> MenuView:
        return build_menu_view(self._products, self._selection, self._taxonomy)

    def load(self, products: Iterable[Product], keep_selection: bool = False) -> None:
        """Replace the product list.

        Args:
            products: New product list in source order.
            keep_selection: Repair the current selection against the new
                taxonomy instead of starting from the default one.
        """
        self._products = tuple(products)
        self._taxonomy = extract_taxonomy(self._products)
        if keep_selection:
            self._selection = self._selection.repair(self._taxonomy)
        else:
            self._selection = SelectionState.initial(self._taxonomy)

    def select_top(self, top: str) -> MenuView:
        self._selection = self._selection.select_top(top, self._taxonomy)
        return self.view

    def select_sub(self, sub: str) -> MenuView:
        self._selection = self._selection.select_sub(sub)
        return self.view

    def set_search(self, term: str) -> MenuView:
        self._selection = self._selection.set_search(term)
        return self.view
