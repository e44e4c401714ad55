"""Graph construction, cycle detection and reachability analyses."""

from component_graph.analysis.circular import detect_circular_dependencies, find_cycles
from component_graph.analysis.dependency_graph import build_dependency_graph
from component_graph.analysis.identity import generate_component_id
from component_graph.analysis.lookup import (
    ComponentLookupService,
    extract_package_name,
    is_path_alias,
)
from component_graph.analysis.package_deps import analyze_dependencies
from component_graph.analysis.zombie_clusters import detect_zombie_component_clusters

__all__ = [
    "ComponentLookupService",
    "analyze_dependencies",
    "build_dependency_graph",
    "detect_circular_dependencies",
    "detect_zombie_component_clusters",
    "extract_package_name",
    "find_cycles",
    "generate_component_id",
    "is_path_alias",
]
