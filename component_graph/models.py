"""Data models for the component graph analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple


@dataclass(frozen=True)
class ComponentRelation:
    """One component record produced by the source parser."""
    name: str
    full_path: str
    directory: str = ""
    imports: tuple[str, ...] = ()
    exports: tuple[str, ...] = ()
    functions: tuple[str, ...] | None = None
    function_calls: dict[str, list[str]] | None = None
    content: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> ComponentRelation:
        """Build a record from the parser's camelCase JSON shape."""
        functions = data.get("functions")
        calls = data.get("functionCalls")
        return cls(
            name=data["name"],
            full_path=data["fullPath"],
            directory=data.get("directory") or "",
            imports=tuple(data.get("imports") or ()),
            exports=tuple(data.get("exports") or ()),
            functions=tuple(functions) if isinstance(functions, list) else None,
            function_calls=(
                {k: list(v or []) for k, v in calls.items()}
                if isinstance(calls, dict) else None
            ),
            content=data.get("content"),
        )

    def __hash__(self) -> int:
        return hash((self.full_path, self.name))


class FunctionNodeKey(NamedTuple):
    """Vertex key for a function inside a component."""
    component_id: str
    function: str

    @property
    def wire_id(self) -> str:
        return f"{self.component_id}.{self.function}"


@dataclass
class AnalyzerConfig:
    """Configuration for a component analysis run."""
    project_path: Path = field(default_factory=lambda: Path("."))
    circular_center: tuple[float, float] = (400, 300)
    circular_radius: float = 250
    cluster_spacing: float = 400
    include_dev_dependencies: bool = False
    ignore_dirs: list[str] = field(default_factory=lambda: [
        "node_modules", ".git", ".next", "dist", "build",
    ])
