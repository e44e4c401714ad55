"""Circular dependency detector — DFS cycle extraction plus a ring-layout diagram."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from component_graph.models import AnalyzerConfig
from component_graph.analysis.graph_models import (
    BreakSuggestion,
    CircularDependencyAnalysisResult,
    CircularGroupInfo,
    CircularStats,
    DependencyGraph,
    DiagramData,
    DiagramEdge,
    DiagramNode,
    EdgeKind,
    NodeData,
    NodeKind,
)
from component_graph.analysis.layout import (
    file_type_from_path,
    generate_circular_layout,
    generate_edge_id,
)
from component_graph.analysis.lookup import ComponentLookupService

logger = logging.getLogger(__name__)

CRITICAL_CYCLE_SIZE = 3
_CYCLE_COLOR = "#ff6b6b"
_BREAK_ADVICE = "Consider extracting common functionality into a shared utility"


@dataclass
class _DfsState:
    """Traversal bookkeeping owned by one detection run."""
    visited: set[str] = field(default_factory=set)
    on_stack: set[str] = field(default_factory=set)
    path: list[str] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)


def find_cycles(graph: DependencyGraph) -> list[list[str]]:
    """Return every cycle closed by a back-edge during a DFS over *graph*.

    Vertices are visited in the graph's insertion order, neighbours in list
    order, so the result is deterministic for a given graph. Each cycle is the
    slice of the active path from the revisited vertex to the current one.
    Overlapping cycles are reported separately.
    """
    state = _DfsState()
    for root in graph:
        if root not in state.visited:
            _visit(graph, root, state)
    return state.cycles


def _visit(graph: DependencyGraph, root: str, state: _DfsState) -> None:
    # Explicit stack of (vertex, remaining neighbours); state.path mirrors it
    stack: list[tuple[str, Iterator[str]]] = []

    def enter(node: str) -> None:
        state.visited.add(node)
        state.on_stack.add(node)
        state.path.append(node)
        stack.append((node, iter(graph.get(node, ()))))

    enter(root)
    while stack:
        node, neighbours = stack[-1]
        neighbour = next(neighbours, None)
        if neighbour is None:
            state.on_stack.discard(node)
            state.path.pop()
            stack.pop()
        elif neighbour not in state.visited:
            enter(neighbour)
        elif neighbour in state.on_stack:
            start = state.path.index(neighbour)
            state.cycles.append(state.path[start:])


def detect_circular_dependencies(
    graph: DependencyGraph,
    lookup: ComponentLookupService,
    config: AnalyzerConfig | None = None,
) -> CircularDependencyAnalysisResult:
    """Find import cycles in *graph* and build the circular-dependency report."""
    config = config or AnalyzerConfig()
    cycles = find_cycles(graph)

    # Ordered set of every vertex touching a cycle, in discovery order
    nodes_in_cycles: dict[str, None] = {}
    edges: dict[str, DiagramEdge] = {}
    for cycle in cycles:
        for index, component_id in enumerate(cycle):
            nodes_in_cycles[component_id] = None
            next_id = cycle[(index + 1) % len(cycle)]
            edge_id = generate_edge_id(component_id, next_id)
            if edge_id not in edges:
                edges[edge_id] = _cycle_edge(edge_id, component_id, next_id)

    node_ids = list(nodes_in_cycles)
    center_x, center_y = config.circular_center
    positions = generate_circular_layout(
        len(node_ids), center_x, center_y, config.circular_radius,
    )
    nodes = [
        _cycle_node(node_id, position, lookup)
        for node_id, position in zip(node_ids, positions)
    ]

    groups: list[CircularGroupInfo] = []
    by_group: dict[str, list[str]] = {}
    for index, cycle in enumerate(cycles):
        names = [lookup.display_name(cid) for cid in cycle]
        group_id = f"circular-{index}"
        groups.append(CircularGroupInfo(
            id=group_id,
            components=names,
            path=list(names),
            member_ids=list(cycle),
            size=len(cycle),
            is_critical=len(cycle) > CRITICAL_CYCLE_SIZE,
            break_suggestions=[
                BreakSuggestion(component=names[0], alternative_design=_BREAK_ADVICE),
            ],
        ))
        by_group[group_id] = names

    stats = CircularStats(
        total_circular_groups=len(cycles),
        total_components_in_circular=len(node_ids),
        max_circular_path_length=max((len(c) for c in cycles), default=0),
        critical_circular_paths=sum(1 for c in cycles if len(c) > CRITICAL_CYCLE_SIZE),
        components_by_circular_groups=by_group,
    )

    logger.debug(
        "Circular dependencies: %d cycles over %d components",
        stats.total_circular_groups, stats.total_components_in_circular,
    )

    return CircularDependencyAnalysisResult(
        circular_dependency_graph=DiagramData(nodes=nodes, edges=list(edges.values())),
        circular_groups=groups,
        nodes_in_circular=node_ids,
        stats=stats,
    )


def _cycle_node(node_id: str, position, lookup: ComponentLookupService) -> DiagramNode:
    component = lookup.get_component_by_id(node_id)
    return DiagramNode(
        id=node_id,
        position=position,
        data=NodeData(
            label=component.name if component else node_id,
            full_path=component.full_path if component else node_id,
            directory=component.directory if component else "",
            file_type=file_type_from_path(component.full_path) if component else None,
            is_component=True,
        ),
        kind=NodeKind.CIRCULAR,
    )


def _cycle_edge(edge_id: str, source: str, target: str) -> DiagramEdge:
    return DiagramEdge(
        id=edge_id,
        source=source,
        target=target,
        kind=EdgeKind.IMPORT,
        label="circular",
        animated=True,
        style={"stroke": _CYCLE_COLOR, "strokeWidth": 2},
        marker_end={"type": "arrowclosed", "color": _CYCLE_COLOR},
    )
