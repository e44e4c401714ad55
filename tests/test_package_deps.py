"""Tests for the package dependency analyzer."""

import asyncio
import json
from pathlib import Path

import pytest

from component_graph.models import AnalyzerConfig, ComponentRelation
from component_graph.loader import load_components
from component_graph.analysis.constants import is_node_builtin
from component_graph.analysis.lookup import ComponentLookupService
from component_graph.analysis.package_deps import (
    analyze_dependencies,
    collect_component_dependencies,
    collect_config_dependencies,
    expand_braces,
    find_config_files,
    packages_referenced,
    read_declared_dependencies,
)

FIXTURES = Path(__file__).parent / "fixtures"


# ── Helpers ───────────────────────────────────────────────────

def _make_component(name, imports=None):
    return ComponentRelation(
        name=name,
        full_path=f"src/{name}.tsx",
        directory="src",
        imports=tuple(imports or ()),
    )


def _write_package_json(root, dependencies=None, dev_dependencies=None):
    data = {"name": "app", "dependencies": dependencies or {}}
    if dev_dependencies:
        data["devDependencies"] = dev_dependencies
    (root / "package.json").write_text(json.dumps(data), encoding="utf-8")


def _analyze(components, project_path, include_dev=False):
    config = AnalyzerConfig(project_path=project_path, include_dev_dependencies=include_dev)
    lookup = ComponentLookupService(components)
    return asyncio.run(analyze_dependencies(components, lookup, config))


# ── Helpers under test ────────────────────────────────────────

class TestHelpers:
    def test_expand_braces(self):
        assert expand_braces("vite.config.{js,ts}") == ["vite.config.js", "vite.config.ts"]
        assert expand_braces("tsconfig.json") == ["tsconfig.json"]
        assert expand_braces("{a,b}.{x,y}") == ["a.x", "a.y", "b.x", "b.y"]

    def test_packages_referenced(self):
        text = """
        const analyzer = require("@next/bundle-analyzer");
        import react from '@vitejs/plugin-react';
        import "./local-setup";
        const lazy = await import('lodash/debounce');
        """
        assert packages_referenced(text) == {
            "@next/bundle-analyzer", "@vitejs/plugin-react", "lodash",
        }

    def test_node_builtins(self):
        assert is_node_builtin("fs")
        assert is_node_builtin("node:path")
        assert not is_node_builtin("axios")

    def test_find_config_files_respects_ignore_dirs(self, tmp_path):
        (tmp_path / "next.config.js").write_text("module.exports = {}", encoding="utf-8")
        (tmp_path / ".storybook").mkdir()
        (tmp_path / ".storybook" / "main.js").write_text("", encoding="utf-8")

        found = find_config_files(tmp_path)
        assert tmp_path / "next.config.js" in found
        assert tmp_path / ".storybook" / "main.js" in found

        found = find_config_files(tmp_path, ignore_dirs=[".storybook"])
        assert tmp_path / ".storybook" / "main.js" not in found

    def test_component_dependencies(self):
        comps = [
            _make_component("A", imports=["react", "lodash/get", "./B", "@/lib/api"]),
            _make_component("B", imports=["@scope/pkg/sub", "styles.css"]),
        ]
        used = collect_component_dependencies(comps, ComponentLookupService(comps))
        assert used == {"react", "lodash", "@scope/pkg"}


# ── package.json handling ─────────────────────────────────────

class TestDeclaredDependencies:
    def test_dev_dependencies_opt_in(self, tmp_path):
        _write_package_json(tmp_path, {"react": "^18"}, {"vitest": "^1"})
        assert list(read_declared_dependencies(tmp_path)) == ["react"]
        assert list(read_declared_dependencies(tmp_path, include_dev=True)) == ["react", "vitest"]

    def test_missing_package_json_is_a_warning(self, tmp_path):
        warnings = []
        assert read_declared_dependencies(tmp_path, warnings=warnings) == {}
        assert len(warnings) == 1
        assert "package.json" in warnings[0]

    def test_invalid_package_json_is_a_warning(self, tmp_path):
        (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
        result = _analyze([_make_component("A", imports=["axios"])], tmp_path)
        assert result.unused_dependencies == []
        assert result.missing_dependencies == ["axios"]
        assert any("package.json" in w for w in result.warnings)


# ── Analyzer ──────────────────────────────────────────────────

class TestAnalyzeDependencies:
    def test_unused_and_missing(self, tmp_path):
        _write_package_json(tmp_path, {"react": "^18", "moment": "^2", "lodash": "^4"})
        comps = [_make_component("A", imports=["react", "lodash/get", "axios", "fs"])]
        result = _analyze(comps, tmp_path)
        assert result.unused_dependencies == ["moment"]
        assert result.missing_dependencies == ["axios"]
        assert result.warnings == []

    def test_unused_keeps_declaration_order(self, tmp_path):
        _write_package_json(tmp_path, {"zod": "^3", "moment": "^2", "axios": "^1"})
        result = _analyze([], tmp_path)
        assert result.unused_dependencies == ["zod", "moment", "axios"]

    def test_missing_is_sorted(self, tmp_path):
        _write_package_json(tmp_path)
        comps = [_make_component("A", imports=["zod", "axios", "node:fs", "path"])]
        result = _analyze(comps, tmp_path)
        assert result.missing_dependencies == ["axios", "zod"]

    def test_special_and_dev_tool_packages_never_unused(self, tmp_path):
        _write_package_json(
            tmp_path,
            {"sharp": "^0.33", "autoprefixer": "^10"},
            {"typescript": "^5", "eslint": "^8"},
        )
        result = _analyze([], tmp_path, include_dev=True)
        assert result.unused_dependencies == []

    def test_config_file_usage(self, tmp_path):
        _write_package_json(tmp_path, {"vite-plugin-pwa": "^0.17"})
        (tmp_path / "vite.config.ts").write_text(
            "import { VitePWA } from 'vite-plugin-pwa'\n", encoding="utf-8",
        )
        result = _analyze([], tmp_path)
        assert result.unused_dependencies == []

    def test_undecodable_config_file_is_a_warning(self, tmp_path):
        _write_package_json(tmp_path, {"moment": "^2"})
        (tmp_path / "vite.config.js").write_bytes(b"\xff\xfe\xfa")
        result = _analyze([], tmp_path)
        assert result.unused_dependencies == ["moment"]
        assert len(result.warnings) == 1
        assert "vite.config.js" in result.warnings[0]

    def test_collect_config_dependencies_without_configs(self, tmp_path):
        assert asyncio.run(collect_config_dependencies(tmp_path)) == set()

    @pytest.mark.parametrize("include_dev", [False, True])
    def test_fixture_project(self, include_dev):
        components = load_components(FIXTURES / "components.json")
        result = _analyze(components, FIXTURES / "project", include_dev=include_dev)
        assert result.unused_dependencies == ["moment"]
        assert result.missing_dependencies == ["axios"]
        assert result.warnings == []
