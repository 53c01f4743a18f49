"""
Dependency resolver tests: closure order, cycles, unknown names and directives
"""

from axions_registry.services.dependency_resolver import DependencyResolver


async def test_resolve_includes_transitive_dependencies(gateway, settings):
    tree = await DependencyResolver(gateway, settings=settings).resolve_tree(["card"])

    assert tree.resolved_names == ["card", "button"]
    assert tree.external_dependencies == ["@radix-ui/react-slot", "clsx"]
    assert tree.install_directive == "npx axionjs add card"


async def test_resolve_keeps_discovery_order(gateway, settings):
    tree = await DependencyResolver(gateway, settings=settings).resolve_tree(["table"])

    assert tree.resolved_names == ["table", "card", "button"]
    assert tree.external_dependencies == ["@radix-ui/react-slot", "@tanstack/react-table", "clsx"]


async def test_resolve_each_item_once(gateway, settings):
    tree = await DependencyResolver(gateway, settings=settings).resolve_tree(["button", "card", "button"])

    assert tree.resolved_names == ["button", "card"]
    assert tree.install_directive == "npx axionjs add button card button"


async def test_resolve_is_repeatable(gateway, settings):
    resolver = DependencyResolver(gateway, settings=settings)

    first = await resolver.resolve_tree(["table"])
    second = await resolver.resolve_tree(["table"])

    assert first == second


async def test_resolve_terminates_on_cycles(gateway, settings):
    tree = await DependencyResolver(gateway, settings=settings).resolve_tree(["alpha"])
    assert tree.resolved_names == ["alpha", "beta"]


async def test_dependency_union_independent_of_request_order(gateway, settings):
    resolver = DependencyResolver(gateway, settings=settings)

    forward = await resolver.resolve_tree(["table", "card"])
    backward = await resolver.resolve_tree(["card", "table"])

    assert forward.external_dependencies == backward.external_dependencies
    assert set(forward.resolved_names) == set(backward.resolved_names)


async def test_unknown_names_are_skipped_but_kept_in_directive(gateway, settings):
    tree = await DependencyResolver(gateway, settings=settings).resolve_tree(["ghost", "button"])

    assert tree.resolved_names == ["button"]
    assert tree.requested == ["ghost", "button"]
    assert tree.install_directive == "npx axionjs add ghost button"


async def test_resolve_nothing(gateway, settings):
    tree = await DependencyResolver(gateway, settings=settings).resolve_tree([])

    assert tree.resolved_items == []
    assert tree.external_dependencies == []
    assert tree.install_directive == "npx axionjs add"


async def test_dev_dependencies_only_on_request(gateway, settings):
    resolver = DependencyResolver(gateway, settings=settings)

    assert (await resolver.resolve_tree(["card"])).dev_dependencies == []
    tree = await resolver.resolve_tree(["card"], include_dev_dependencies=True)
    assert tree.dev_dependencies == ["@types/react"]


async def test_lookup_falls_back_to_category_listings(gateway, settings):
    """Items without a styled endpoint are found through the classifier"""
    tree = await DependencyResolver(gateway, settings=settings).resolve_tree(["hero-section"])
    assert tree.resolved_names == ["hero-section"]


async def test_component_metadata(gateway, settings):
    resolver = DependencyResolver(gateway, settings=settings)

    metadata = await resolver.get_component_metadata("table")
    assert metadata.registry_dependencies == ["card", "button"]
    assert metadata.dependencies == ["@tanstack/react-table", "clsx"]
    assert metadata.total_files == 1

    missing = await resolver.get_component_metadata("ghost")
    assert missing.item is None
    assert missing.total_files == 0


async def test_unencodable_name_resolves_to_nothing(gateway, settings):
    tree = await DependencyResolver(gateway, settings=settings).resolve_tree(["bad\x01name"])

    assert tree.resolved_items == []
    assert tree.external_dependencies == []
