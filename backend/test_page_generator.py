"""
Page generator tests: requested components, keyword fallback and caps
"""

import pytest

from axions_registry.schemas.registry import RegistryCategory, RegistryItem
from axions_registry.services.page_generator import PAGE_KEYWORDS


@pytest.fixture
def pages(service):
    return service.page_generator


def names_of(page):
    return [item.name for item in page.items]


async def test_page_from_requested_components(pages):
    page = await pages.generate_page("dashboard", ["button", "card"])

    assert names_of(page) == ["button", "card"]
    assert page.install_directives == ["npx axionjs add button", "npx axionjs add card"]
    assert 'import { Button } from "@/components/ui/button"' in page.page_code
    assert 'import { Card } from "@/components/ui/card"' in page.page_code
    assert "<Button />\n      <Card />" in page.page_code
    assert "export default function Dashboard()" in page.page_code
    assert page.description == "Generated dashboard page using AxionJS components: button, card"


async def test_unknown_requested_names_are_skipped(pages):
    page = await pages.generate_page("auth", ["ghost", "use-toast"])

    assert names_of(page) == ["use-toast"]
    assert 'import { UseToast } from "@/hooks/use-toast"' in page.page_code
    assert "export default function Auth()" in page.page_code


async def test_dashboard_keyword_fallback_is_capped(pages):
    page = await pages.generate_page("dashboard", [])

    assert names_of(page) == ["card", "stat-tile", "bar-chart", "line-chart", "area-chart"]
    assert len(page.install_directives) == 5
    assert 'import { BarChart } from "@/components/charts/bar-chart"' in page.page_code


async def test_fallback_when_no_requested_name_exists(pages):
    page = await pages.generate_page("landing", ["ghost"])

    assert names_of(page) == ["hero-section", "hero-split", "hero-video", "hero-minimal", "pricing-table"]
    assert "Welcome to AxionJS" in page.page_code


async def test_hero_page_takes_hero_blocks_first(pages):
    page = await pages.generate_page("hero", [])

    assert names_of(page) == ["hero-section", "hero-split", "hero-video", "hero-minimal"]
    assert 'import { HeroSection } from "@/components/blocks/hero-section"' in page.page_code
    assert "export default function Hero()" in page.page_code


async def test_unknown_page_type_uses_dashboard_layout(pages):
    page = await pages.generate_page("wizard", ["button"])

    assert page.page_type == "wizard"
    assert "export default function Dashboard()" in page.page_code
    assert page.description == "Generated wizard page using AxionJS components: button"


async def test_unknown_page_type_without_components_is_empty(pages):
    page = await pages.generate_page("wizard", [])

    assert page.items == []
    assert page.install_directives == []


async def test_generation_failure_returns_none(pages, monkeypatch):
    async def broken_classify(name):
        raise RuntimeError("listing exploded")

    monkeypatch.setattr(pages.classifier, "classify", broken_classify)

    assert await pages.generate_page("dashboard", ["button"]) is None


def test_select_components_deduplicates(pages):
    card = RegistryItem(name="stat-card", type="registry:ui")
    listings = {
        RegistryCategory.UI: [card, card],
        RegistryCategory.BLOCK: [RegistryItem(name="stat-card", type="registry:block")],
    }

    selected = pages.select_components("dashboard", listings)

    assert [entry.item.name for entry in selected] == ["stat-card"]
    assert selected[0].category is RegistryCategory.UI


def test_select_components_hero_limit(pages):
    heroes = [RegistryItem(name=f"hero-{i}", type="registry:block") for i in range(8)]

    selected = pages.select_components("hero", {RegistryCategory.BLOCK: heroes})

    assert len(selected) == 5
    assert [entry.item.name for entry in selected] == [f"hero-{i}" for i in range(5)]


def test_every_page_type_has_keywords():
    assert set(PAGE_KEYWORDS) == {"dashboard", "landing", "auth", "profile", "settings", "hero"}
