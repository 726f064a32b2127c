"""FastAPI route handlers for the menu API.

This module provides the /menu/{short_name} endpoint that renders one menu
page. The upstream is always asked for the full product list; the engine
derives categories and applies the selection on every request.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException

from menu import MenuClient, MenuConfig, SelectionState, build_menu_view, extract_taxonomy

from .dependencies import get_menu_client, get_menu_config
from .schemas import HealthResponse, MenuResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/menu/{short_name}", response_model=MenuResponse)
async def get_menu(
    short_name: str,
    top: str | None = None,
    sub: str | None = None,
    q: str = "",
    client: MenuClient = Depends(get_menu_client),
    config: MenuConfig = Depends(get_menu_config),
) -> MenuResponse:
    """Render the menu of a business for a selection.

    The selection is replayed from the default one the way a viewer would
    reach it: pick a top category, then a sub category, then type a search.

    Args:
        short_name: Business short name.
        top: Top category to select ("Tümü" for everything).
        sub: Sub category of the selected top (hierarchical menus).
        q: Free-text search on product names.
        client: Upstream client (injected).
        config: Menu configuration (injected).

    Returns:
        MenuResponse for the selection.

    Raises:
        HTTPException: 404 if the business is unknown.
    """
    business = await client.fetch_business(short_name)
    if business is None:
        raise HTTPException(
            status_code=404,
            detail=f'No business registered under "{short_name}"',
        )

    logo_task = asyncio.create_task(client.resolve_logo(business.logo))
    products = await client.fetch_products(business.id)

    taxonomy = extract_taxonomy(products)
    selection = SelectionState.initial(taxonomy)
    if top is not None:
        selection = selection.select_top(top, taxonomy)
    if sub is not None:
        selection = selection.select_sub(sub)
    if q:
        selection = selection.set_search(q)

    view = build_menu_view(products, selection, taxonomy)
    logger.debug(
        "Rendered %s: %d products in %d sections (%s)",
        short_name,
        len(view.products),
        len(view.sections),
        view.empty_state.value,
    )

    logo = await _wait_for_logo(logo_task, business.logo, config.logo_timeout)
    return MenuResponse.from_view(view, business, logo, config.placeholder_image)


async def _wait_for_logo(
    task: asyncio.Task[str | None], fallback: str | None, timeout: float
) -> str | None:
    """Wait up to `timeout` seconds for the logo, else use the raw reference."""
    try:
        return await asyncio.wait_for(task, timeout)
    except asyncio.TimeoutError:
        logger.warning("Logo %s not resolved within %.1fs", fallback, timeout)
        return fallback
