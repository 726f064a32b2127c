#!/usr/bin/env python3
"""Example: preview a digital menu in the terminal.

Renders a menu the same way the API does: categories are inferred from the
product list, then the selection is applied step by step.

Usage:
    # Offline, from bundled sample data
    python main.py flat
    python main.py hierarchical --top Yemekler --sub Kebaplar
    python main.py flat --top Tümü --search çorba

    # Live, from the upstream service
    python main.py ilknur --live
"""

import argparse
import asyncio
import sys

from menu import MenuClient, MenuSession, MenuView, load_config, parse_products

from data import SAMPLE_MENUS


def print_view(view: MenuView, title: str) -> None:
    print("=" * 80)
    print(f"{title}  [{view.mode.value}]")
    print("=" * 80)

    tops = "  ".join(
        f"[{e.label}]" if e.active else e.label for e in view.categories.top_categories
    )
    print(f"Categories: {tops}")
    if view.categories.sub_categories:
        subs = "  ".join(
            f"[{e.label}]" if e.active else e.label for e in view.categories.sub_categories
        )
        print(f"  Sub: {subs}")
    print(f"Location: {view.categories.location_label}")
    print("-" * 80)

    if view.is_empty:
        print(f"No products ({view.empty_state.value})")
        return

    for section in view.sections:
        if section.label is not None:
            print(f"\n## {section.label}")
        for product in section.products:
            print(f"  • {product.name:<30} {product.price:>8.2f} ₺")


async def fetch_live(short_name: str) -> tuple[str, list]:
    async with MenuClient(load_config()) as client:
        business = await client.fetch_business(short_name)
        if business is None:
            print(f'No business registered under "{short_name}"')
            sys.exit(1)
        return business.name, await client.fetch_products(business.id)


def main() -> None:
    parser = argparse.ArgumentParser(description="Preview a digital menu")
    parser.add_argument("menu", help="Sample menu name, or business short name with --live")
    parser.add_argument("--live", action="store_true", help="Fetch from the upstream service")
    parser.add_argument("--top", help="Top category to select")
    parser.add_argument("--sub", help="Sub category to select")
    parser.add_argument("--search", default="", help="Search term")
    args = parser.parse_args()

    if args.live:
        title, products = asyncio.run(fetch_live(args.menu))
    else:
        title, products = args.menu, parse_products(SAMPLE_MENUS[args.menu])

    session = MenuSession(products)
    if args.top is not None:
        session.select_top(args.top)
    if args.sub is not None:
        session.select_sub(args.sub)
    if args.search:
        session.set_search(args.search)

    print_view(session.view, title)


if __name__ == "__main__":
    main()
