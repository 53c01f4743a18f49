"""
Registry Gateway
Flow: Endpoint strategies → HTTP GET → Shape validation → Item models | absence

The registry layout changed between releases and both layouts are served at
the same time, so each lookup walks an ordered list of endpoints and keeps
the first structurally valid payload.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

import httpx
import structlog
from pydantic import ValidationError

from axions_registry.config.settings import Settings, get_settings
from axions_registry.core.exceptions import RegistryFetchError
from axions_registry.schemas.registry import RegistryCategory, RegistryItem, RegistryStyle

logger = structlog.get_logger()

T = TypeVar("T")


@dataclass(frozen=True)
class Endpoint:
    """One retrieval strategy: a named path template on the registry host."""
    name: str
    path_template: str

    def path(self, **params: str) -> str:
        return self.path_template.format(**params)


INDEX_ENDPOINTS = (Endpoint("index", "/r/index.json"),)
STYLE_ENDPOINTS = (Endpoint("styles", "/r/styles/index.json"),)
CATEGORY_ENDPOINTS = (
    Endpoint("category-index", "/r/{slug}/index.json"),
    Endpoint("legacy-category", "/r/registry-{slug}.json"),
)
ITEM_ENDPOINTS = (
    Endpoint("styled-item", "/r/styles/{style}/{name}.json"),
    Endpoint("legacy-item", "/r/{name}.json"),
)


class RegistryGateway:
    """
    Validated retrieval from the remote component registry.

    Retrieval Process:
    1. _first_valid() → Try each endpoint strategy in order
    2. _get_json() → Fetch one URL, non-success becomes RegistryFetchError
    3. parser → Validate the payload into registry models
    4. Absence (None / []) when no strategy produced a valid payload

    Transport and validation failures never reach the caller; they are
    logged and turned into absence values.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the gateway.

        Args:
            base_url: Registry host, defaults to AXIONS_REGISTRY_URL
            timeout: Per-request timeout in seconds
            client: Pre-built client; the caller keeps ownership
            transport: Transport for a gateway-owned client (tests use MockTransport)
            settings: Settings override
        """
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.AXIONS_REGISTRY_URL).rstrip("/")
        self.timeout = timeout or self.settings.REGISTRY_TIMEOUT_SECONDS
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
        )
        self.logger = logger.bind(module="registry_gateway", registry_url=self.base_url)

    async def __aenter__(self) -> "RegistryGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if the gateway created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch_index(self) -> Optional[List[RegistryItem]]:
        """
        Fetch the full registry index.

        Returns:
            Index items, or None when the index is not available
        """
        return await self._first_valid(INDEX_ENDPOINTS, self._parse_listing, label="index")

    async def fetch_styles(self) -> List[RegistryStyle]:
        """Fetch available style variants, empty on failure."""
        styles = await self._first_valid(STYLE_ENDPOINTS, self._parse_styles, label="styles")
        return styles or []

    async def fetch_by_category(self, category: RegistryCategory) -> List[RegistryItem]:
        """
        Fetch every item listed for one category.

        Args:
            category: Registry category to list

        Returns:
            Category items, empty when no endpoint served a valid listing
        """
        items = await self._first_valid(
            CATEGORY_ENDPOINTS,
            self._parse_listing,
            label=f"category:{category.value}",
            slug=category.slug,
        )
        return items or []

    async def fetch_item(self, name: str, style: Optional[str] = None) -> Optional[RegistryItem]:
        """
        Fetch a single item with file contents.

        Args:
            name: Item name
            style: Style variant, defaults to DEFAULT_STYLE

        Returns:
            The item, or None when not found or invalid
        """
        return await self._first_valid(
            ITEM_ENDPOINTS,
            RegistryItem.model_validate,
            label=f"item:{name}",
            name=name,
            style=style or self.settings.DEFAULT_STYLE,
        )

    async def fetch_all_categories(self) -> Dict[RegistryCategory, List[RegistryItem]]:
        """
        List every category concurrently.

        Categories are disjoint read-only listings, so the requests are issued
        together and joined before returning.
        """
        categories = list(RegistryCategory)
        listings = await asyncio.gather(*(self.fetch_by_category(c) for c in categories))
        result = dict(zip(categories, listings))
        self.logger.info(
            "Fetched all registry categories",
            counts={c.value: len(items) for c, items in result.items()},
        )
        return result

    async def _first_valid(
        self,
        endpoints: Sequence[Endpoint],
        parser: Callable[[Any], T],
        label: str,
        **params: str,
    ) -> Optional[T]:
        """Return the first endpoint payload that parses, or None."""
        for endpoint in endpoints:
            url = endpoint.path(**params)
            try:
                payload = await self._get_json(url)
                result = parser(payload)
            except (httpx.HTTPError, httpx.InvalidURL, RegistryFetchError) as e:
                self.logger.debug("Registry endpoint unavailable", endpoint=endpoint.name, url=url, error=str(e))
                continue
            except (ValidationError, ValueError) as e:
                self.logger.warning("Registry payload failed validation", endpoint=endpoint.name, url=url, error=str(e))
                continue
            self.logger.debug("Registry endpoint resolved", endpoint=endpoint.name, url=url)
            return result

        self.logger.debug("Registry lookup found nothing", lookup=label)
        return None

    async def _get_json(self, url: str) -> Any:
        response = await self._client.get(url)
        if not response.is_success:
            raise RegistryFetchError(
                f"Registry responded {response.status_code} for {url}",
                url=url,
                status=response.status_code,
            )
        return response.json()

    def _parse_listing(self, payload: Any) -> List[RegistryItem]:
        """
        Validate a listing payload item by item.

        Both a bare list and an object with an 'items' list are accepted.
        Items that fail validation are dropped; a payload of any other shape
        fails as a whole.
        """
        if isinstance(payload, dict) and isinstance(payload.get("items"), list):
            payload = payload["items"]
        if not isinstance(payload, list):
            raise ValueError(f"Expected a list of registry items, got {type(payload).__name__}")

        items = []
        for raw in payload:
            try:
                items.append(RegistryItem.model_validate(raw))
            except ValidationError as e:
                name = raw.get("name") if isinstance(raw, dict) else None
                self.logger.warning("Dropping invalid registry item", item=name, error=str(e))
        return items

    def _parse_styles(self, payload: Any) -> List[RegistryStyle]:
        if not isinstance(payload, list):
            raise ValueError(f"Expected a list of styles, got {type(payload).__name__}")
        return [RegistryStyle.model_validate(raw) for raw in payload]
