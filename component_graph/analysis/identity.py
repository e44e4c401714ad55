"""Component identity: the vertex key used by every graph in this package."""

from __future__ import annotations

from pathlib import PurePosixPath

from component_graph.models import ComponentRelation

ID_SEPARATOR = "#"


def generate_component_id(component: ComponentRelation) -> str:
    """Return the graph id for *component*.

    The id is the full file path plus the component name, so two files that
    share a stem (``ui/Button/index.tsx`` and ``forms/Button/index.tsx``)
    never merge into one vertex. Component names are identifiers and cannot
    contain the separator.
    """
    return f"{component.full_path}{ID_SEPARATOR}{component.name}"


def file_stem(full_path: str) -> str:
    """File name without its extension, ``"Button"`` for ``src/Button.tsx``."""
    return PurePosixPath(full_path.replace("\\", "/")).stem
