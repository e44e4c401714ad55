"""Component lookup service — O(1) indexes and import-specifier resolution."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from component_graph.models import ComponentRelation
from component_graph.analysis.identity import file_stem, generate_component_id

_SOURCE_EXT_RE = re.compile(r"\.(js|jsx|ts|tsx|mjs|cjs)$")
_PACKAGE_SEGMENT_RE = re.compile(r"^[a-z0-9][a-z0-9\-_.]*$", re.IGNORECASE)

# Prefixes that always mean "inside this project"
_ALIAS_PREFIXES = ("@/", "~/", "#/")
_INTERNAL_PREFIXES = (
    "./", "../", "/", "@/", "~/", "#/",
    "app/", "pages/", "components/", "lib/", "utils/", "hooks/",
    "types/", "src/", "styles/",
)
_STYLE_SUFFIXES = (".css", ".scss", ".sass", ".less")


def _clean(specifier: str) -> str:
    return specifier.replace('"', "").replace("'", "").strip()


def is_path_alias(specifier: str) -> bool:
    """True for ``@/x``, ``~/x``, ``#/x``, ``src/x``, ``./x`` and ``../x``."""
    return specifier.startswith(_ALIAS_PREFIXES + ("src/", "./", "../"))


def extract_package_name(specifier: str) -> str | None:
    """Return the npm package name for an import specifier.

    ``"@scope/pkg/sub"`` -> ``"@scope/pkg"``, ``"lodash/get"`` -> ``"lodash"``,
    relative and absolute paths -> ``None``.
    """
    if not isinstance(specifier, str):
        return None
    spec = _clean(specifier)
    if not spec or spec.startswith((".", "/")):
        return None
    parts = spec.split("/")
    if parts[0].startswith("@") and len(parts) > 1 and parts[1]:
        return f"{parts[0]}/{parts[1]}"
    return parts[0]


def _looks_like_package(spec: str) -> bool:
    parts = spec.split("/")
    if spec.startswith("@"):
        return len(parts) >= 2 and len(parts[0]) > 1 and bool(parts[1])
    return bool(_PACKAGE_SEGMENT_RE.match(parts[0]))


def _strip_internal_prefix(spec: str) -> str:
    """Drop ``./``, ``../``, alias and leading-slash prefixes."""
    path = spec
    for alias in _ALIAS_PREFIXES:
        if path.startswith(alias):
            path = path[len(alias):]
            break
    while True:
        if path.startswith("./"):
            path = path[2:]
        elif path.startswith("../"):
            path = path[3:]
        elif path.startswith("/"):
            path = path[1:]
        else:
            return path


def _import_keys(spec: str) -> list[str]:
    """Lookup keys for a normalized specifier, most specific first."""
    path = _strip_internal_prefix(_SOURCE_EXT_RE.sub("", spec))
    keys = [path]
    if path.endswith("/index"):
        path = path[: -len("/index")]
        keys.append(path)
    last = PurePosixPath(path).name if path else ""
    if last and last != path:
        keys.append(last)
    return [k for k in keys if k]


class ComponentLookupService:
    """Pre-built hash indexes over one run's component records."""

    def __init__(self, components: list[ComponentRelation]):
        self._by_id: dict[str, ComponentRelation] = {}
        self._by_name: dict[str, list[ComponentRelation]] = {}
        self._by_path: dict[str, ComponentRelation] = {}
        self._by_directory: dict[str, list[ComponentRelation]] = {}
        self._by_import: dict[str, list[str]] = {}

        for component in components:
            component_id = generate_component_id(component)
            if component_id in self._by_id:
                continue
            self._by_id[component_id] = component
            self._by_name.setdefault(component.name, []).append(component)
            self._by_path[component.full_path] = component
            self._by_directory.setdefault(component.directory, []).append(component)
            for pattern in self._import_patterns(component):
                self._by_import.setdefault(pattern, []).append(component_id)

    # ── Lookups ────────────────────────────────────────────────

    def get_component_by_id(self, component_id: str) -> ComponentRelation | None:
        return self._by_id.get(component_id)

    def get_components_by_name(self, name: str) -> list[ComponentRelation]:
        return list(self._by_name.get(name, []))

    def get_component_by_path(self, full_path: str) -> ComponentRelation | None:
        return self._by_path.get(full_path)

    def get_components_by_directory(self, directory: str) -> list[ComponentRelation]:
        return list(self._by_directory.get(directory, []))

    def get_all_component_ids(self) -> list[str]:
        return list(self._by_id)

    def get_all_components(self) -> list[ComponentRelation]:
        return list(self._by_id.values())

    def has_component_by_id(self, component_id: str) -> bool:
        return component_id in self._by_id

    def has_component_by_name(self, name: str) -> bool:
        return name in self._by_name

    @property
    def component_count(self) -> int:
        return len(self._by_id)

    def display_name(self, component_id: str) -> str:
        """Component name for *component_id*, or the raw id if unknown."""
        component = self._by_id.get(component_id)
        return component.name if component else component_id

    # ── Import resolution ──────────────────────────────────────

    def is_external_package(self, specifier: str) -> bool:
        """True if *specifier* names an npm package rather than project code."""
        if not isinstance(specifier, str):
            return False
        spec = _clean(specifier)
        if not spec:
            return False
        if (
            spec.startswith(_INTERNAL_PREFIXES)
            or "\\" in spec
            or spec.endswith(_STYLE_SUFFIXES)
            or ".types" in spec
            or ".schema" in spec
        ):
            return False
        # A bare specifier that names a known project file is internal
        keys = _import_keys(spec)
        if keys and keys[0] in self._by_import:
            return False
        return _looks_like_package(spec)

    def extract_package_name(self, specifier: str) -> str | None:
        return extract_package_name(specifier)

    def resolve_import_to_component_ids(self, specifier: str) -> list[str]:
        """Return the internal component ids *specifier* may refer to.

        External packages resolve to nothing. Otherwise the most specific
        matching key wins; every component indexed under it is returned.
        """
        if not isinstance(specifier, str):
            return []
        spec = _clean(specifier)
        if not spec or self.is_external_package(spec):
            return []
        for key in _import_keys(spec):
            ids = self._by_import.get(key)
            if ids:
                return list(ids)
        return []

    @staticmethod
    def _import_patterns(component: ComponentRelation) -> list[str]:
        """All keys an import of *component*'s file might normalize to."""
        patterns: list[str] = [component.name]
        full_path = component.full_path.replace("\\", "/")
        stem = file_stem(full_path)
        patterns.append(stem)

        if full_path:
            without_ext = _SOURCE_EXT_RE.sub("", full_path)
            patterns.append(full_path)
            patterns.append(without_ext)
            stripped = _strip_internal_prefix(without_ext)
            patterns.append(stripped)
            # @/components/x usually maps to src/components/x
            if stripped.startswith("src/"):
                patterns.append(stripped[len("src/"):])
            parent_dir = PurePosixPath(stripped).parent
            if parent_dir.name:
                patterns.append(f"{parent_dir.name}/{stem}")
            if component.directory:
                patterns.append(
                    str(PurePosixPath(component.directory.replace("\\", "/")) / stem)
                )
            # Barrel file: components/Button/index.tsx is imported as ./Button
            if stem == "index":
                parent = PurePosixPath(without_ext).parent
                if parent.name:
                    patterns.append(parent.name)
                    barrel = _strip_internal_prefix(str(parent))
                    patterns.append(barrel)
                    if barrel.startswith("src/"):
                        patterns.append(barrel[len("src/"):])

        seen: set[str] = set()
        unique: list[str] = []
        for pattern in patterns:
            if pattern and pattern not in seen:
                seen.add(pattern)
                unique.append(pattern)
        return unique
