"""Data models for diagram payloads and analysis results.

Everything here is a plain dataclass. ``to_dict()`` produces the camelCase
shape consumed by the diagram renderer and report writers.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

DIAGRAM_VERSION = "1.1.0"

# component id -> ids of the components it imports
DependencyGraph = dict[str, list[str]]


class NodeKind(enum.Enum):
    CIRCULAR = "circular"
    ZOMBIE = "zombie"
    FUNCTION = "function"
    CLUSTER = "cluster"


class EdgeKind(enum.Enum):
    IMPORT = "import"
    EXPORT = "export"
    DYNAMIC = "dynamic"


@dataclass
class Position:
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass
class NodeData:
    label: str
    full_path: str
    directory: str = ""
    file_type: str | None = None
    is_component: bool | None = None

    def to_dict(self) -> dict:
        data: dict = {
            "label": self.label,
            "fullPath": self.full_path,
            "directory": self.directory,
        }
        if self.file_type:
            data["fileType"] = self.file_type
        if self.is_component is not None:
            data["isComponent"] = self.is_component
        return data


@dataclass
class DiagramNode:
    id: str
    position: Position
    data: NodeData
    kind: NodeKind | None = None
    parent_node: str | None = None

    def to_dict(self) -> dict:
        node: dict = {
            "id": self.id,
            "position": self.position.to_dict(),
            "data": self.data.to_dict(),
        }
        if self.kind is not None:
            node["type"] = self.kind.value
        if self.parent_node:
            node["parentNode"] = self.parent_node
            node["extent"] = "parent"
        return node


@dataclass
class DiagramEdge:
    id: str
    source: str
    target: str
    kind: EdgeKind | None = None
    label: str | None = None
    animated: bool = False
    style: dict[str, str | int] | None = None
    marker_end: dict[str, str] | None = None

    def to_dict(self) -> dict:
        edge: dict = {"id": self.id, "source": self.source, "target": self.target}
        data: dict = {}
        if self.kind is not None:
            data["type"] = self.kind.value
        if self.label:
            data["label"] = self.label
        if data:
            edge["data"] = data
        if self.animated:
            edge["animated"] = True
        if self.style:
            edge["style"] = dict(self.style)
        if self.marker_end:
            edge["markerEnd"] = dict(self.marker_end)
        return edge


@dataclass
class DiagramData:
    nodes: list[DiagramNode] = field(default_factory=list)
    edges: list[DiagramEdge] = field(default_factory=list)
    version: str = DIAGRAM_VERSION

    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
            "version": self.version,
        }


# ── Circular dependencies ─────────────────────────────────────


@dataclass
class BreakSuggestion:
    component: str
    alternative_design: str

    def to_dict(self) -> dict:
        return {"component": self.component, "alternativeDesign": self.alternative_design}


@dataclass
class CircularGroupInfo:
    id: str
    components: list[str]
    path: list[str]
    member_ids: list[str]
    size: int
    is_critical: bool
    break_suggestions: list[BreakSuggestion] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "components": list(self.components),
            "path": list(self.path),
            "componentIds": list(self.member_ids),
            "size": self.size,
            "isCritical": self.is_critical,
            "breakSuggestions": [s.to_dict() for s in self.break_suggestions],
        }


@dataclass
class CircularStats:
    total_circular_groups: int = 0
    total_components_in_circular: int = 0
    max_circular_path_length: int = 0
    critical_circular_paths: int = 0
    components_by_circular_groups: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "totalCircularGroups": self.total_circular_groups,
            "totalComponentsInCircular": self.total_components_in_circular,
            "maxCircularPathLength": self.max_circular_path_length,
            "criticalCircularPaths": self.critical_circular_paths,
            "componentsByCircularGroups": {
                k: list(v) for k, v in self.components_by_circular_groups.items()
            },
        }


@dataclass
class CircularDependencyAnalysisResult:
    circular_dependency_graph: DiagramData = field(default_factory=DiagramData)
    circular_groups: list[CircularGroupInfo] = field(default_factory=list)
    nodes_in_circular: list[str] = field(default_factory=list)
    stats: CircularStats = field(default_factory=CircularStats)

    def to_dict(self) -> dict:
        return {
            "circularDependencyGraph": self.circular_dependency_graph.to_dict(),
            "circularGroups": [g.to_dict() for g in self.circular_groups],
            "stats": self.stats.to_dict(),
        }


# ── Zombie clusters ───────────────────────────────────────────


@dataclass
class ZombieClusterInfo:
    id: str
    components: list[str]
    entry_points: list[str]
    functions: dict[str, list[str]]
    size: int
    risk: str  # "high" | "medium" | "low"
    suggestion: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "components": list(self.components),
            "entryPoints": list(self.entry_points),
            "functions": {k: list(v) for k, v in self.functions.items()},
            "size": self.size,
            "risk": self.risk,
            "suggestion": self.suggestion,
        }


@dataclass
class ZombieStats:
    total_clusters: int = 0
    total_zombie_components: int = 0
    largest_cluster: int = 0
    entry_points_count: int = 0
    avg_components_per_cluster: float = 0

    def to_dict(self) -> dict:
        return {
            "totalClusters": self.total_clusters,
            "totalZombieComponents": self.total_zombie_components,
            "largestCluster": self.largest_cluster,
            "entryPointsCount": self.entry_points_count,
            "avgComponentsPerCluster": self.avg_components_per_cluster,
        }


@dataclass
class ZombieClusterAnalysisResult:
    zombie_cluster_graph: DiagramData = field(default_factory=DiagramData)
    clusters: list[ZombieClusterInfo] = field(default_factory=list)
    stats: ZombieStats = field(default_factory=ZombieStats)

    def to_dict(self) -> dict:
        return {
            "zombieClusterGraph": self.zombie_cluster_graph.to_dict(),
            "clusters": [c.to_dict() for c in self.clusters],
            "stats": self.stats.to_dict(),
        }


# ── Package dependencies ──────────────────────────────────────


@dataclass
class DependencyAnalysisResult:
    unused_dependencies: list[str] = field(default_factory=list)
    missing_dependencies: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "unusedDependencies": list(self.unused_dependencies),
            "missingDependencies": list(self.missing_dependencies),
            "warnings": list(self.warnings),
        }


@dataclass
class DependencyAnalysisDetailedResult:
    circular_dependencies: CircularDependencyAnalysisResult
    zombie_clusters: ZombieClusterAnalysisResult
    dependency_analysis: DependencyAnalysisResult

    def to_dict(self) -> dict:
        return {
            "circularDependencies": self.circular_dependencies.to_dict(),
            "zombieClusters": self.zombie_clusters.to_dict(),
            "dependencyAnalysis": self.dependency_analysis.to_dict(),
        }
