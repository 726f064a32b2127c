"""Browsing selection and its transition rules."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .taxonomy import ALL_CATEGORY, FlatTaxonomy, HierarchicalTaxonomy, Taxonomy


@dataclass(frozen=True)
class SelectionState:
    """Current browsing selection.

    Immutable: every transition returns a new state. `active_sub` only has
    meaning in hierarchical mode with a specific top selected; an empty
    string means "no sub filter". `search_term` is stored raw and
    case-folded at comparison time.
    """

    active_top: str = ALL_CATEGORY
    active_sub: str = ""
    search_term: str = ""

    @classmethod
    def initial(cls, taxonomy: Taxonomy) -> SelectionState:
        """Default selection for a freshly derived taxonomy.

        Flat menus open on "all"; hierarchical menus open on their first top
        category and its first group.
        """
        match taxonomy:
            case HierarchicalTaxonomy(tops=(first_top, *_)):
                subs = taxonomy.sub_categories_of(first_top)
                return cls(active_top=first_top, active_sub=subs[0] if subs else "")
            case _:
                return cls()

    @property
    def is_showing_all(self) -> bool:
        return self.active_top == ALL_CATEGORY

    def select_top(self, top: str, taxonomy: Taxonomy) -> SelectionState:
        """Select a top category, repairing the sub selection if needed.

        Selecting the active top again is a no-op apart from the repair.
        """
        if top == ALL_CATEGORY:
            return replace(self, active_top=top, active_sub="")

        match taxonomy:
            case FlatTaxonomy():
                return replace(self, active_top=top, active_sub="")
            case HierarchicalTaxonomy():
                subs = taxonomy.sub_categories_of(top)
                if self.active_sub in subs:
                    return replace(self, active_top=top)
                return replace(self, active_top=top, active_sub=subs[0] if subs else "")

    def select_sub(self, sub: str) -> SelectionState:
        """Select a sub category of the active top.

        Not validated: a sub outside the active top simply matches nothing.
        """
        return replace(self, active_sub=sub)

    def set_search(self, term: str) -> SelectionState:
        return replace(self, search_term=term)

    def repair(self, taxonomy: Taxonomy) -> SelectionState:
        """Fit this selection to a recomputed taxonomy.

        Falls back to the default selection (keeping the search term) when the
        active top no longer exists.
        """
        if self.active_top not in taxonomy.top_categories:
            return replace(SelectionState.initial(taxonomy), search_term=self.search_term)
        return self.select_top(self.active_top, taxonomy)
