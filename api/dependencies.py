"""FastAPI dependencies backed by objects created in the app lifespan."""

from __future__ import annotations

from fastapi import Request

from menu import MenuClient, MenuConfig


def get_menu_client(request: Request) -> MenuClient:
    """Shared upstream client created at startup."""
    return request.app.state.menu_client


def get_menu_config(request: Request) -> MenuConfig:
    return request.app.state.menu_config
