"""FastAPI application factory for the menu API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from menu import MenuClient, MenuConfig
from menu import load_config as load_menu_config
from shared.config import find_config_file

from .config import APIConfig, load_config
from .routes import router

logger = logging.getLogger(__name__)


def create_app(
    api_config: APIConfig | None = None,
    menu_config: MenuConfig | None = None,
) -> FastAPI:
    """Create the API application.

    Configs not passed explicitly are loaded from the environment and the
    nearest qrmenu.config.yaml, if any.

    Args:
        api_config: Server configuration.
        menu_config: Upstream and rendering configuration.

    Returns:
        Configured FastAPI app.
    """
    config_file = find_config_file() if api_config is None or menu_config is None else None
    api_config = api_config or load_config(config_file)
    menu_config = menu_config or load_menu_config(config_file)

    logging.basicConfig(
        level=logging.DEBUG if api_config.debug else api_config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.menu_client = MenuClient(menu_config)
        logger.info("Menu API started, upstream %s", menu_config.base_url)
        try:
            yield
        finally:
            await app.state.menu_client.aclose()
            logger.info("Menu API stopped")

    app = FastAPI(
        title="QR Menu API",
        description="Digital menu rendering with inferred categories",
        version="0.1.0",
        debug=api_config.debug,
        lifespan=lifespan,
    )
    app.state.api_config = api_config
    app.state.menu_config = menu_config
    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn using the loaded configuration."""
    import uvicorn

    config: APIConfig = app.state.api_config
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
