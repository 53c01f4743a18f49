"""
Shared fixtures: a fake component registry served through httpx.MockTransport
"""

import copy
from typing import Any, Dict, List, Optional

import httpx
import pytest

from axions_registry.config.settings import Settings
from axions_registry.services.registry_gateway import RegistryGateway
from axions_registry.services.registry_service import RegistryService

REGISTRY_URL = "http://registry.test"

BUTTON = {
    "name": "button",
    "type": "registry:ui",
    "description": "Clickable button",
    "dependencies": ["@radix-ui/react-slot"],
    "files": [
        {
            "path": "ui/button.tsx",
            "type": "registry:ui",
            "content": 'export function Button() {\n  return <button variant={"default"} disabled={false} />\n}\n',
        }
    ],
    "tags": ["form", "action"],
    "categories": ["forms"],
}

CARD = {
    "name": "card",
    "type": "registry:ui",
    "description": "Content container",
    "dependencies": ["clsx"],
    "devDependencies": ["@types/react"],
    "registryDependencies": ["button"],
    "files": [
        {
            "path": "ui/card.tsx",
            "type": "registry:ui",
            "content": "export function Card({ children }) {\n  return <div>{children}</div>\n}\n",
        }
    ],
}

TABLE = {
    "name": "table",
    "type": "registry:ui",
    "description": "Data table",
    "dependencies": ["@tanstack/react-table", "clsx"],
    "registryDependencies": ["card", "button"],
    "files": [
        {
            "path": "ui/table.tsx",
            "type": "registry:ui",
            "content": "export function Table() {\n  return <table />\n}\n",
        }
    ],
    "tags": ["data"],
}

OCEAN_THEME = {
    "name": "ocean",
    "type": "registry:theme",
    "label": "Ocean",
    "cssVars": {
        "light": {"primary": "#0af", "background": "#fff"},
        "dark": {"primary": "#024", "background": "#000"},
    },
}

DATA_GRID = {
    "name": "data-grid",
    "type": "registry:dynamic-component",
    "description": "Editable data grid",
    "dependencies": ["@tanstack/react-table"],
    "registryDependencies": ["table"],
    "files": [
        {"path": "dynamic/data-grid/index.tsx", "type": "registry:component"},
        {"path": "dynamic/data-grid/page.tsx", "type": "registry:page", "target": "app/grid/page.tsx"},
    ],
}


def listing_entry(name: str, item_type: str, description: Optional[str] = None) -> Dict[str, Any]:
    entry = {"name": name, "type": item_type}
    if description:
        entry["description"] = description
    return entry


def default_routes() -> Dict[str, Any]:
    """Registry layout used by most tests."""
    ui_listing = [
        # Also listed as a theme; classification must prefer the theme
        listing_entry("ocean", "registry:ui"),
        BUTTON,
        CARD,
        TABLE,
        listing_entry("stat-tile", "registry:ui", "Single metric"),
    ]
    blocks_listing = [
        listing_entry("hero-section", "registry:block"),
        listing_entry("hero-split", "registry:block"),
        listing_entry("hero-video", "registry:block"),
        listing_entry("hero-minimal", "registry:block"),
        listing_entry("pricing-table", "registry:block", "Plans and prices"),
    ]
    charts_listing = [
        listing_entry("bar-chart", "registry:chart"),
        listing_entry("line-chart", "registry:chart"),
        listing_entry("area-chart", "registry:chart"),
        listing_entry("pie-chart", "registry:chart"),
    ]
    routes = {
        "/r/index.json": [BUTTON, CARD, TABLE],
        "/r/styles/index.json": [
            {"name": "new-york", "label": "New York"},
            {"name": "default", "label": "Default"},
        ],
        "/r/themes/index.json": {"items": [OCEAN_THEME]},
        "/r/dynamic-components/index.json": [DATA_GRID],
        "/r/ui/index.json": ui_listing,
        # Hooks are only published under the legacy listing name
        "/r/registry-hooks.json": [listing_entry("use-toast", "registry:hook")],
        "/r/blocks/index.json": blocks_listing,
        "/r/charts/index.json": charts_listing,
        "/r/styles/new-york/button.json": BUTTON,
        "/r/styles/new-york/card.json": CARD,
        "/r/styles/new-york/table.json": TABLE,
        "/r/alpha.json": {"name": "alpha", "type": "registry:lib", "registryDependencies": ["beta"]},
        "/r/beta.json": {"name": "beta", "type": "registry:lib", "registryDependencies": ["alpha"]},
    }
    return copy.deepcopy(routes)


class FakeRegistry:
    """
    Path → payload routing table behind a MockTransport.

    A payload may be JSON data, a ready httpx.Response, or an httpx
    exception class to raise. Unknown paths answer 404.
    """

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = routes if routes is not None else default_routes()
        self.requests: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append(path)
        if path not in self.routes:
            return httpx.Response(404, json={"error": "Not found"})

        payload = self.routes[path]
        if isinstance(payload, httpx.Response):
            return payload
        if isinstance(payload, type) and issubclass(payload, httpx.HTTPError):
            raise payload("registry unreachable", request=request)
        return httpx.Response(200, json=payload)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def settings() -> Settings:
    return Settings(AXIONS_REGISTRY_URL=REGISTRY_URL, LOG_FORMAT="console")


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
async def gateway(registry, settings):
    gateway = RegistryGateway(settings=settings, transport=registry.transport())
    yield gateway
    await gateway.aclose()


@pytest.fixture
def service(gateway, settings) -> RegistryService:
    return RegistryService(gateway, settings)
