"""
Registry gateway tests: endpoint fallback, payload validation and absence
"""

import httpx

from axions_registry.schemas.registry import RegistryCategory, RegistryItemType
from axions_registry.services.registry_gateway import RegistryGateway


async def test_fetch_item_prefers_styled_endpoint(gateway, registry):
    """Styled item endpoint is used when it answers"""
    item = await gateway.fetch_item("button")

    assert item is not None
    assert item.name == "button"
    assert item.type is RegistryItemType.UI
    assert item.files[0].content.startswith("export function Button")
    assert registry.requests == ["/r/styles/new-york/button.json"]


async def test_fetch_item_falls_back_to_legacy_endpoint(gateway, registry):
    item = await gateway.fetch_item("alpha")

    assert item.name == "alpha"
    assert item.registry_dependencies == ["beta"]
    assert registry.requests == ["/r/styles/new-york/alpha.json", "/r/alpha.json"]


async def test_fetch_item_uses_requested_style(gateway, registry):
    registry.routes["/r/styles/default/button.json"] = {"name": "button", "type": "registry:ui"}

    item = await gateway.fetch_item("button", style="default")

    assert item.files == []
    assert registry.requests == ["/r/styles/default/button.json"]


async def test_invalid_primary_payload_falls_back(gateway, registry):
    """A structurally invalid payload counts as absent, not as an error"""
    registry.routes["/r/styles/new-york/widget.json"] = {"name": "widget"}
    registry.routes["/r/widget.json"] = {"name": "widget", "type": "registry:component"}

    item = await gateway.fetch_item("widget")

    assert item.type is RegistryItemType.COMPONENT
    assert registry.requests == ["/r/styles/new-york/widget.json", "/r/widget.json"]


async def test_fetch_item_absent_everywhere(gateway, registry):
    assert await gateway.fetch_item("ghost") is None
    assert registry.requests == ["/r/styles/new-york/ghost.json", "/r/ghost.json"]


async def test_file_of_targeted_type_without_target_is_invalid(gateway, registry):
    registry.routes["/r/styles/new-york/landing.json"] = {
        "name": "landing",
        "type": "registry:block",
        "files": [{"path": "app/page.tsx", "type": "registry:page"}],
    }

    assert await gateway.fetch_item("landing") is None


async def test_transport_error_is_absence(gateway, registry):
    registry.routes["/r/styles/new-york/button.json"] = httpx.ConnectError
    registry.routes["/r/button.json"] = httpx.ReadTimeout

    assert await gateway.fetch_item("button") is None


async def test_fetch_by_category_primary_listing(gateway):
    items = await gateway.fetch_by_category(RegistryCategory.CHART)
    assert [item.name for item in items] == ["bar-chart", "line-chart", "area-chart", "pie-chart"]


async def test_fetch_by_category_legacy_listing(gateway, registry):
    items = await gateway.fetch_by_category(RegistryCategory.HOOK)

    assert [item.name for item in items] == ["use-toast"]
    assert registry.requests == ["/r/hooks/index.json", "/r/registry-hooks.json"]


async def test_fetch_by_category_accepts_items_object(gateway):
    themes = await gateway.fetch_by_category(RegistryCategory.THEME)

    assert [theme.name for theme in themes] == ["ocean"]
    assert themes[0].css_vars.dark["primary"] == "#024"


async def test_fetch_by_category_missing_is_empty(gateway):
    assert await gateway.fetch_by_category(RegistryCategory.EMAIL) == []


async def test_listing_drops_invalid_items_individually(gateway, registry):
    registry.routes["/r/icons/index.json"] = [
        {"name": "arrow", "type": "registry:icon"},
        {"name": "", "type": "registry:icon"},
        {"name": "bolt", "type": "registry:unknown"},
        "not-an-item",
        {"name": "star", "type": "registry:icon", "dependencies": None},
    ]

    icons = await gateway.fetch_by_category(RegistryCategory.ICON)

    assert [icon.name for icon in icons] == ["arrow", "star"]
    assert icons[1].dependencies == []


async def test_listing_of_wrong_shape_falls_back(gateway, registry):
    registry.routes["/r/emails/index.json"] = {"welcome": {"name": "welcome"}}
    registry.routes["/r/registry-emails.json"] = [{"name": "welcome", "type": "registry:email"}]

    emails = await gateway.fetch_by_category(RegistryCategory.EMAIL)

    assert [email.name for email in emails] == ["welcome"]


async def test_fetch_index(gateway):
    index = await gateway.fetch_index()
    assert [item.name for item in index] == ["button", "card", "table"]


async def test_fetch_index_failure_is_none(gateway, registry):
    registry.routes["/r/index.json"] = httpx.Response(500, text="upstream down")
    assert await gateway.fetch_index() is None


async def test_fetch_styles(gateway, registry):
    styles = await gateway.fetch_styles()
    assert [(style.name, style.label) for style in styles] == [("new-york", "New York"), ("default", "Default")]

    registry.routes["/r/styles/index.json"] = {"styles": []}
    assert await gateway.fetch_styles() == []


async def test_fetch_all_categories_covers_every_category(gateway):
    listings = await gateway.fetch_all_categories()

    assert set(listings) == set(RegistryCategory)
    assert [item.name for item in listings[RegistryCategory.DYNAMIC_COMPONENT]] == ["data-grid"]
    assert listings[RegistryCategory.MIDDLEWARE] == []


async def test_gateway_owned_client_closes_on_exit(registry, settings):
    async with RegistryGateway(settings=settings, transport=registry.transport()) as gateway:
        assert await gateway.fetch_item("button") is not None
    assert gateway._client.is_closed


async def test_borrowed_client_left_open(registry, settings):
    client = httpx.AsyncClient(base_url="http://registry.test", transport=registry.transport())
    gateway = RegistryGateway(settings=settings, client=client)

    await gateway.aclose()

    assert not client.is_closed
    await client.aclose()


async def test_unencodable_name_is_absence(gateway):
    """Names that cannot form a URL are treated as missing"""
    assert await gateway.fetch_item("bad\x01name") is None
