"""Tests for ordering and header grouping."""

from menu.filters import filter_products
from menu.models import Product
from menu.ordering import MenuSection, group_products, order_products, section_label
from menu.selection import SelectionState
from menu.taxonomy import extract_taxonomy


def _product(
    name: str, group: str, top: str | None = None, order: float | None = None
) -> Product:
    return Product(name=name, group_name=group, top_group_name=top, order=order)


def _names(products: list[Product]) -> list[str]:
    return [p.name for p in products]


class TestOrderProducts:
    """Tests for order_products."""

    def test_flat_groups_by_first_seen_order(self) -> None:
        """Interleaved groups are gathered, stable within a group."""
        products = [
            _product("a1", "A"),
            _product("b1", "B"),
            _product("a2", "A"),
            _product("c1", "C"),
            _product("b2", "B"),
        ]
        ordered = order_products(products, extract_taxonomy(products))
        assert _names(ordered) == ["a1", "a2", "b1", "b2", "c1"]

    def test_hierarchical_top_before_group(self) -> None:
        """Top group position wins over group position."""
        products = [
            _product("cola", "Cola", "Drinks"),
            _product("soup", "Soup", "Food"),
            _product("tea", "Tea", "Drinks"),
            _product("kebab", "Kebab", "Food"),
        ]
        ordered = order_products(products, extract_taxonomy(products))
        assert _names(ordered) == ["cola", "tea", "soup", "kebab"]

    def test_group_rank_from_unfiltered_list(self) -> None:
        """Filtering never changes category precedence."""
        products = [
            _product("x", "B"),
            _product("y", "A"),
            _product("z", "B"),
            _product("w", "A"),
        ]
        taxonomy = extract_taxonomy(products)
        visible = [p for p in products if p.name != "x"]
        # In the filtered list "A" is seen first, but "B" ranks first overall
        assert _names(order_products(visible, taxonomy)) == ["z", "y", "w"]

    def test_explicit_order_within_group(self) -> None:
        products = [
            _product("coffee", "Hot", "Drinks", order=2),
            _product("tea", "Hot", "Drinks", order=1),
            _product("salep", "Hot", "Drinks", order=3),
        ]
        ordered = order_products(products, extract_taxonomy(products))
        assert _names(ordered) == ["tea", "coffee", "salep"]

    def test_explicit_order_ties_are_stable(self) -> None:
        products = [
            _product("b", "G", order=1),
            _product("a", "G", order=1),
        ]
        assert _names(order_products(products, extract_taxonomy(products))) == ["b", "a"]

    def test_unordered_products_keep_their_slots(self) -> None:
        """Only products with an explicit order move, among their own slots."""
        products = [
            _product("o3", "G", order=3),
            _product("free", "G"),
            _product("o1", "G", order=1),
        ]
        ordered = order_products(products, extract_taxonomy(products))
        assert _names(ordered) == ["o1", "free", "o3"]

    def test_explicit_order_does_not_cross_groups(self) -> None:
        products = [
            _product("a", "A", order=9),
            _product("b", "B", order=1),
        ]
        assert _names(order_products(products, extract_taxonomy(products))) == ["a", "b"]

    def test_orphans_sort_last(self) -> None:
        products = [
            _product("orphan", "Misc"),
            _product("cola", "Cola", "Drinks"),
        ]
        ordered = order_products(products, extract_taxonomy(products))
        assert _names(ordered) == ["cola", "orphan"]

    def test_empty(self) -> None:
        assert order_products([], extract_taxonomy([])) == []


class TestSectionLabel:
    """Tests for display category labels."""

    def test_flat_label(self) -> None:
        product = _product("a", "Soup")
        assert section_label(product, extract_taxonomy([product])) == "Soup"

    def test_hierarchical_label(self) -> None:
        product = _product("a", "Soup", "Food")
        assert section_label(product, extract_taxonomy([product])) == "Food - Soup"

    def test_hierarchical_label_fallbacks(self) -> None:
        """Only the present part is used when one is missing."""
        taxonomy = extract_taxonomy([_product("x", "Cola", "Drinks")])
        assert section_label(_product("a", "Soup"), taxonomy) == "Soup"
        assert section_label(_product("b", "", "Food"), taxonomy) == "Food"


class TestGroupProducts:
    """Tests for group_products."""

    def test_hierarchical_scenario(self) -> None:
        """Two tops produce two headers in taxonomy order."""
        products = [_product("A", "Soup", "Food"), _product("B", "Cola", "Drinks")]
        taxonomy = extract_taxonomy(products)
        sections = group_products(order_products(products, taxonomy), taxonomy)
        assert sections == [
            MenuSection(label="Food - Soup", products=(products[0],)),
            MenuSection(label="Drinks - Cola", products=(products[1],)),
        ]

    def test_adjacency_not_buckets(self) -> None:
        """Repeated but non-contiguous labels form separate blocks."""
        products = [_product("a", "A"), _product("b", "B"), _product("c", "A")]
        sections = group_products(products, extract_taxonomy(products))
        assert [s.label for s in sections] == ["A", "B", "A"]

    def test_flatten_reproduces_order(self) -> None:
        """Grouping then flattening gives exactly the ordered sequence."""
        products = [
            _product("x", "Soup", "Food"),
            _product("y", "Cola", "Drinks"),
            _product("z", "Kebab", "Food"),
            _product("w", "Soup", "Food"),
            _product("v", "Misc"),
        ]
        taxonomy = extract_taxonomy(products)
        visible = filter_products(products, SelectionState(), taxonomy)
        ordered = order_products(visible, taxonomy)
        sections = group_products(ordered, taxonomy)
        assert [p for s in sections for p in s.products] == ordered

    def test_empty(self) -> None:
        assert group_products([], extract_taxonomy([])) == []
