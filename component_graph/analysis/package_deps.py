"""Package dependency analyzer — unused and missing npm dependencies.

Declared packages come from ``package.json``. Used packages come from the
external imports of every component and from package references inside the
project's config files.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from pathlib import Path

from component_graph.models import AnalyzerConfig, ComponentRelation
from component_graph.analysis.constants import (
    CONFIG_FILES,
    is_dev_tool_package,
    is_node_builtin,
    is_special_package,
)
from component_graph.analysis.graph_models import DependencyAnalysisResult
from component_graph.analysis.lookup import (
    ComponentLookupService,
    extract_package_name,
    is_path_alias,
)

logger = logging.getLogger(__name__)

_BRACE_RE = re.compile(r"\{([^{}]*)\}")
_CONFIG_REFERENCE_RE = re.compile(
    r"""(?:require|import)\s*\(\s*['"]([^'"]+)['"]\s*\)"""
    r"""|(?:from|import)\s+['"]([^'"]+)['"]"""
)


def expand_braces(pattern: str) -> list[str]:
    """``"vite.config.{js,ts}"`` -> ``["vite.config.js", "vite.config.ts"]``."""
    m = _BRACE_RE.search(pattern)
    if not m:
        return [pattern]
    head, tail = pattern[:m.start()], pattern[m.end():]
    expanded: list[str] = []
    for option in m.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def find_config_files(project_path: Path, ignore_dirs: list[str] | None = None) -> list[Path]:
    ignored = set(ignore_dirs or ())
    found: dict[Path, None] = {}
    for pattern in CONFIG_FILES:
        for glob in expand_braces(pattern):
            for path in sorted(project_path.glob(glob)):
                rel_parts = path.relative_to(project_path).parts
                if path.is_file() and not ignored.intersection(rel_parts):
                    found[path] = None
    return list(found)


def packages_referenced(text: str) -> set[str]:
    """Package names referenced by require/import calls and import statements."""
    packages: set[str] = set()
    for m in _CONFIG_REFERENCE_RE.finditer(text):
        specifier = m.group(1) or m.group(2)
        name = extract_package_name(specifier)
        if name and not is_path_alias(name):
            packages.add(name)
    return packages


def read_declared_dependencies(
    project_path: Path,
    include_dev: bool = False,
    warnings: list[str] | None = None,
) -> dict[str, str]:
    """Read ``dependencies`` (and optionally ``devDependencies``) from package.json."""
    package_json = project_path / "package.json"
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        message = f"Could not read {package_json}: {e}"
        logger.warning(message)
        if warnings is not None:
            warnings.append(message)
        return {}

    if not isinstance(data, dict):
        return {}
    declared: dict[str, str] = dict(data.get("dependencies") or {})
    if include_dev:
        declared.update(data.get("devDependencies") or {})
    return declared


def collect_component_dependencies(
    components: list[ComponentRelation],
    lookup: ComponentLookupService,
) -> set[str]:
    used: set[str] = set()
    for component in components:
        for specifier in component.imports:
            if not lookup.is_external_package(specifier):
                continue
            name = extract_package_name(specifier)
            if name and not is_path_alias(name):
                used.add(name)
    return used


async def collect_config_dependencies(
    project_path: Path,
    ignore_dirs: list[str] | None = None,
    warnings: list[str] | None = None,
) -> set[str]:
    """Scan config files concurrently; unreadable files are logged and skipped."""
    config_files = await asyncio.to_thread(find_config_files, project_path, ignore_dirs)

    async def _read(path: Path) -> set[str]:
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            message = f"Error processing config file {path}: {e}"
            logger.warning(message)
            if warnings is not None:
                warnings.append(message)
            return set()
        return packages_referenced(text)

    used: set[str] = set()
    for packages in await asyncio.gather(*(_read(p) for p in config_files)):
        used.update(packages)
    return used


async def analyze_dependencies(
    components: list[ComponentRelation],
    lookup: ComponentLookupService,
    config: AnalyzerConfig,
) -> DependencyAnalysisResult:
    """Cross-reference declared packages against imported ones."""
    result = DependencyAnalysisResult()
    project_path = Path(config.project_path)

    declared = read_declared_dependencies(
        project_path, config.include_dev_dependencies, result.warnings,
    )
    used = collect_component_dependencies(components, lookup)
    used_in_configs = await collect_config_dependencies(
        project_path, config.ignore_dirs, result.warnings,
    )

    result.unused_dependencies = [
        dep for dep in declared
        if dep not in used
        and dep not in used_in_configs
        and not is_special_package(dep)
        and not is_dev_tool_package(dep)
    ]
    result.missing_dependencies = sorted(
        dep for dep in used
        if dep not in declared and not is_node_builtin(dep)
    )

    logger.debug(
        "Package dependencies: %d declared, %d used, %d unused, %d missing",
        len(declared), len(used), len(result.unused_dependencies),
        len(result.missing_dependencies),
    )
    return result
