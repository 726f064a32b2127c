"""Async client for the upstream menu service."""

from __future__ import annotations

import base64
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .config import MenuConfig
from .models import Business, BusinessResponse, Product, ProductListResponse, parse_products

logger = logging.getLogger(__name__)


def turkish_upper(text: str) -> str:
    """Upper-case text using Turkish dotted/dotless i rules."""
    return text.replace("i", "İ").replace("ı", "I").upper()


class MenuClient:
    """Fetches businesses, product lists and logos with fail-open semantics.

    Upstream problems (network errors, HTTP errors, malformed bodies) are
    logged and turned into "nothing found" results; they never raise into
    the caller.
    """

    def __init__(
        self,
        config: MenuConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers={"Accept": "application/json"},
            timeout=config.http_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> MenuClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_business(self, short_name: str) -> Business | None:
        """Look up a business by its short name.

        Args:
            short_name: Short name from the menu URL.

        Returns:
            Business, or None if unknown or the lookup failed.
        """
        data = await self._request_json("GET", f"/isletmeler/{short_name}")
        if data is None:
            return None

        try:
            response = BusinessResponse.model_validate(data)
        except ValidationError as e:
            logger.warning("Malformed business response for %s: %s", short_name, e)
            return None

        if not response.success or not response.businesses:
            logger.debug(
                "Business %s not found: %s", short_name, response.error_message
            )
            return None

        record = response.businesses[0]
        name = record.name if record.name and record.name.strip() else turkish_upper(short_name)
        return Business(
            id=record.id,
            name=name,
            short_name=record.short_name or short_name,
            logo=record.logo,
        )

    async def fetch_products(self, business_id: int) -> list[Product]:
        """Fetch the full product list of a business.

        Args:
            business_id: Upstream business id.

        Returns:
            Products in upstream order, or an empty list on failure.
        """
        data = await self._request_json(
            "POST", "/urunler/getir", json={"IsletmeId": business_id}
        )
        if data is None:
            return []

        try:
            response = ProductListResponse.model_validate(data)
        except ValidationError as e:
            logger.warning("Malformed product list for business %d: %s", business_id, e)
            return []

        products = parse_products(response.products or [])
        logger.debug("Fetched %d products for business %d", len(products), business_id)
        return products

    async def resolve_logo(self, logo: str | None) -> str | None:
        """Turn an upstream logo reference into something an <img> can show.

        Args:
            logo: Data URI, local path, http(s) URL or raw base64 PNG.

        Returns:
            Displayable logo source, or None when there is no logo. A URL
            that cannot be fetched is returned unchanged.
        """
        if not logo or not logo.strip():
            return None

        if logo.startswith(("data:", "/")):
            return logo

        if logo.startswith("http"):
            try:
                response = await self._client.get(logo)
                response.raise_for_status()
            except httpx.RequestError as e:
                logger.warning("Network error fetching logo %s: %s", logo, e)
                return logo
            except httpx.HTTPStatusError as e:
                logger.warning(
                    "HTTP %d error fetching logo %s", e.response.status_code, logo
                )
                return logo
            except httpx.InvalidURL as e:
                logger.warning("Invalid logo URL %s: %s", logo, e)
                return logo

            content_type = response.headers.get("content-type", "image/png").split(";")[0]
            encoded = base64.b64encode(response.content).decode("ascii")
            return f"data:{content_type};base64,{encoded}"

        return f"data:image/png;base64,{logo}"

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any | None:
        """Send a request and decode its JSON body, or None on any failure."""
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.RequestError as e:
            logger.warning("Network error calling %s %s: %s", method, url, e)
        except httpx.HTTPStatusError as e:
            logger.warning(
                "HTTP %d error calling %s %s", e.response.status_code, method, url
            )
        except ValueError as e:
            logger.warning("Invalid JSON from %s %s: %s", method, url, e)
        return None
