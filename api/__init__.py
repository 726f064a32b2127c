"""Menu API backend."""

from .config import APIConfig, load_config
from .dependencies import get_menu_client, get_menu_config
from .main import app, create_app
from .routes import router
from .schemas import (
    BusinessInfo,
    CategoryItem,
    HealthResponse,
    MenuResponse,
    ProductItem,
    SectionItem,
)

__all__ = [
    # Configuration
    "APIConfig",
    "load_config",
    # Dependencies
    "get_menu_client",
    "get_menu_config",
    # Application
    "app",
    "create_app",
    "router",
    # Schemas
    "BusinessInfo",
    "CategoryItem",
    "HealthResponse",
    "MenuResponse",
    "ProductItem",
    "SectionItem",
]
