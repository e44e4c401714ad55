"""Layout and labelling helpers shared by the diagram builders."""

from __future__ import annotations

import math

from component_graph.analysis.graph_models import DependencyGraph, Position


def generate_edge_id(source: str, target: str) -> str:
    return f"{source}-{target}"


def generate_circular_layout(
    node_count: int,
    center_x: float = 0,
    center_y: float = 0,
    radius: float = 200,
) -> list[Position]:
    """Place *node_count* nodes evenly on a circle, node i at angle 2*pi*i/N."""
    if node_count <= 0:
        return []
    step = 2 * math.pi / node_count
    return [
        Position(
            x=center_x + radius * math.cos(i * step),
            y=center_y + radius * math.sin(i * step),
        )
        for i in range(node_count)
    ]


def generate_grid_layout(
    node_count: int,
    start_x: float = 0,
    start_y: float = 0,
    spacing: float = 150,
) -> list[Position]:
    """Place nodes row by row on a roughly square grid."""
    if node_count <= 0:
        return []
    cols = math.ceil(math.sqrt(node_count))
    return [
        Position(x=start_x + (i % cols) * spacing, y=start_y + (i // cols) * spacing)
        for i in range(node_count)
    ]


def file_type_from_path(full_path: str) -> str | None:
    if not full_path or "." not in full_path.rsplit("/", 1)[-1]:
        return None
    return full_path.rsplit(".", 1)[-1]


def determine_risk_level(size: int) -> str:
    if size > 5:
        return "high"
    if size > 2:
        return "medium"
    return "low"


def find_isolated_nodes(graph: DependencyGraph) -> set[str]:
    """Vertices with neither outgoing nor incoming edges."""
    connected: set[str] = set()
    for source, targets in graph.items():
        if targets:
            connected.add(source)
            connected.update(targets)
    return {node for node in graph if node not in connected}
