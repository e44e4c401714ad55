"""Tests for component identity and import resolution."""

import pytest

from component_graph.models import ComponentRelation
from component_graph.analysis.identity import generate_component_id
from component_graph.analysis.lookup import (
    ComponentLookupService,
    extract_package_name,
    is_path_alias,
)


# ── Helpers ───────────────────────────────────────────────────

def _make_component(name, full_path=None, imports=None, directory=None):
    full_path = full_path or f"src/components/{name}.tsx"
    if directory is None:
        directory = full_path.rsplit("/", 1)[0] if "/" in full_path else ""
    return ComponentRelation(
        name=name,
        full_path=full_path,
        directory=directory,
        imports=tuple(imports or ()),
    )


# ── Identity ──────────────────────────────────────────────────

class TestComponentId:
    def test_deterministic(self):
        c = _make_component("Button")
        assert generate_component_id(c) == generate_component_id(_make_component("Button"))

    def test_same_stem_different_directories(self):
        a = _make_component("Button", "src/ui/Button/index.tsx")
        b = _make_component("Button", "src/forms/Button/index.tsx")
        assert generate_component_id(a) != generate_component_id(b)

    def test_same_file_different_components(self):
        a = _make_component("Input", "src/ui/Forms.tsx")
        b = _make_component("Select", "src/ui/Forms.tsx")
        assert generate_component_id(a) != generate_component_id(b)

    def test_same_name_different_extension(self):
        a = _make_component("Card", "src/Card.ts")
        b = _make_component("Card", "src/Card.tsx")
        assert generate_component_id(a) != generate_component_id(b)


# ── Package names ─────────────────────────────────────────────

class TestPackageNames:
    @pytest.mark.parametrize("specifier,expected", [
        ("react", "react"),
        ("lodash/get", "lodash"),
        ("@tanstack/react-query", "@tanstack/react-query"),
        ("@scope/pkg/sub/path", "@scope/pkg"),
        ("@scope", "@scope"),
        ("./local/file", None),
        ("../up", None),
        ("/absolute", None),
        ("", None),
    ])
    def test_extract_package_name(self, specifier, expected):
        assert extract_package_name(specifier) == expected

    def test_path_alias(self):
        assert is_path_alias("@/components/Button")
        assert is_path_alias("~/lib/api")
        assert is_path_alias("src/utils")
        assert not is_path_alias("lodash")
        assert not is_path_alias("@scope/pkg")


# ── Lookup service ────────────────────────────────────────────

class TestLookupService:
    def _service(self, *components):
        return ComponentLookupService(list(components))

    def test_external_package_resolves_to_nothing(self):
        svc = self._service(_make_component("Button"))
        assert svc.resolve_import_to_component_ids("react") == []
        assert svc.resolve_import_to_component_ids("@tanstack/react-query") == []

    def test_relative_import(self):
        button = _make_component("Button")
        svc = self._service(button)
        assert svc.resolve_import_to_component_ids("./Button") == [generate_component_id(button)]

    def test_relative_import_with_extension(self):
        button = _make_component("Button")
        svc = self._service(button)
        assert svc.resolve_import_to_component_ids("./Button.tsx") == [generate_component_id(button)]

    def test_alias_import(self):
        button = _make_component("Button")
        svc = self._service(button)
        assert generate_component_id(button) in svc.resolve_import_to_component_ids(
            "@/components/Button"
        )

    def test_parent_directory_import(self):
        fmt = _make_component("formatPrice", "lib/format.ts")
        svc = self._service(fmt)
        assert svc.resolve_import_to_component_ids("../lib/format") == [generate_component_id(fmt)]

    def test_barrel_file(self):
        card = _make_component("CardRoot", "src/components/Card/index.tsx")
        svc = self._service(card)
        assert svc.resolve_import_to_component_ids("../components/Card") == [
            generate_component_id(card)
        ]
        assert svc.resolve_import_to_component_ids("./Card/index") == [
            generate_component_id(card)
        ]

    def test_multiple_components_per_file(self):
        a = _make_component("Input", "src/ui/Forms.tsx")
        b = _make_component("Select", "src/ui/Forms.tsx")
        svc = self._service(a, b)
        ids = svc.resolve_import_to_component_ids("./Forms")
        assert set(ids) == {generate_component_id(a), generate_component_id(b)}

    def test_alias_below_src_picks_one_file(self):
        ui = _make_component("Button", "src/components/ui/Button.tsx")
        forms = _make_component("Button", "src/components/forms/Button.tsx")
        svc = self._service(ui, forms)
        assert svc.resolve_import_to_component_ids("@/components/ui/Button") == [
            generate_component_id(ui)
        ]
        assert svc.resolve_import_to_component_ids("../forms/Button") == [
            generate_component_id(forms)
        ]
        assert len(svc.resolve_import_to_component_ids("./Button")) == 2

    def test_unknown_relative_import(self):
        svc = self._service(_make_component("Button"))
        assert svc.resolve_import_to_component_ids("./Missing") == []

    @pytest.mark.parametrize("specifier", ["", "   ", "''", None, 42])
    def test_malformed_specifiers(self, specifier):
        svc = self._service(_make_component("Button"))
        assert svc.resolve_import_to_component_ids(specifier) == []

    def test_is_external_package(self):
        svc = self._service(_make_component("Button"))
        assert svc.is_external_package("react")
        assert svc.is_external_package("next/link")
        assert svc.is_external_package("@tanstack/react-query")
        assert not svc.is_external_package("./Button")
        assert not svc.is_external_package("../lib/api")
        assert not svc.is_external_package("@/lib/api")
        assert not svc.is_external_package("components/Button")
        assert not svc.is_external_package("./styles.module.css")
        assert not svc.is_external_package("globals.css")

    def test_bare_specifier_matching_project_file_is_internal(self):
        svc = self._service(_make_component("Button"))
        assert not svc.is_external_package("Button")
        assert svc.resolve_import_to_component_ids("Button") != []

    def test_lookups(self):
        button = _make_component("Button")
        other = _make_component("Button", "src/legacy/Button.tsx")
        svc = self._service(button, other)
        bid = generate_component_id(button)

        assert svc.get_component_by_id(bid) is button
        assert svc.get_component_by_id("nope#Nope") is None
        assert len(svc.get_components_by_name("Button")) == 2
        assert svc.get_component_by_path("src/legacy/Button.tsx") is other
        assert svc.get_components_by_directory("src/components") == [button]
        assert svc.has_component_by_id(bid)
        assert svc.has_component_by_name("Button")
        assert not svc.has_component_by_name("Card")
        assert svc.component_count == 2
        assert svc.get_all_component_ids() == [bid, generate_component_id(other)]

    def test_display_name_falls_back_to_raw_id(self):
        svc = self._service(_make_component("Button"))
        assert svc.display_name("ghost#Ghost") == "ghost#Ghost"
