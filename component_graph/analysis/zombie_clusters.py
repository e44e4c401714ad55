"""Zombie cluster detector — groups of components unreachable from any entry point.

The combined graph has two kinds of vertex: component ids (``str``) and
``FunctionNodeKey`` pairs for the functions a component declares. Component
vertices point at the components they import; function vertices point at the
functions they call inside the same component.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Union

from component_graph.models import AnalyzerConfig, ComponentRelation, FunctionNodeKey
from component_graph.analysis.graph_models import (
    DiagramData,
    DiagramEdge,
    DiagramNode,
    EdgeKind,
    NodeData,
    NodeKind,
    Position,
    ZombieClusterAnalysisResult,
    ZombieClusterInfo,
    ZombieStats,
)
from component_graph.analysis.identity import generate_component_id
from component_graph.analysis.layout import (
    determine_risk_level,
    generate_edge_id,
    generate_grid_layout,
)
from component_graph.analysis.lookup import ComponentLookupService

logger = logging.getLogger(__name__)

Vertex = Union[str, FunctionNodeKey]
CallGraph = dict[Vertex, list[Vertex]]

_SUGGESTIONS = {
    "high": (
        "Consider refactoring this large zombie cluster into smaller, reusable "
        "modules with clear entry points."
    ),
    "medium": (
        "These components should either be connected to the main application "
        "or removed if unused."
    ),
    "low": "This small zombie cluster may be unused code that can be safely removed.",
}

# Child positions are relative to their parent node
_COMPONENT_ORIGIN = (150, 50)
_COMPONENT_SPACING = 220
_FUNCTION_OFFSET = (50, 60)
_FUNCTION_STEP = 40


def suggestion_for_cluster(size: int) -> str:
    return _SUGGESTIONS[determine_risk_level(size)]


def build_call_graph(
    components: list[ComponentRelation],
    lookup: ComponentLookupService,
) -> tuple[list[Vertex], CallGraph]:
    """Build the combined component + function graph.

    Returns the vertex list (insertion ordered) and the adjacency map.
    Callees are assumed to live in the caller's own component.
    """
    vertices: dict[Vertex, None] = {}
    graph: CallGraph = {}

    for component in components:
        component_id = generate_component_id(component)
        vertices[component_id] = None

        targets: dict[Vertex, None] = dict.fromkeys(graph.get(component_id, ()))
        for specifier in component.imports:
            for target_id in lookup.resolve_import_to_component_ids(specifier):
                if target_id != component_id:
                    targets[target_id] = None
        graph[component_id] = list(targets)

        if component.functions is None or component.function_calls is None:
            continue
        for func in component.functions:
            key = FunctionNodeKey(component_id, func)
            vertices[key] = None
            callees: dict[Vertex, None] = {}
            for callee in component.function_calls.get(func) or ():
                callees[FunctionNodeKey(component_id, callee)] = None
            graph[key] = list(callees)

    return list(vertices), graph


def find_entry_points(vertices: list[Vertex], graph: CallGraph) -> list[Vertex]:
    """Vertices that no edge points to."""
    targets: set[Vertex] = set()
    for neighbours in graph.values():
        targets.update(neighbours)
    return [v for v in vertices if v not in targets]


def mark_reachable(entry_points: list[Vertex], graph: CallGraph) -> set[Vertex]:
    reached: set[Vertex] = set()
    stack = list(reversed(entry_points))
    while stack:
        vertex = stack.pop()
        if vertex in reached:
            continue
        reached.add(vertex)
        for neighbour in graph.get(vertex, ()):
            if neighbour not in reached:
                stack.append(neighbour)
    return reached


def collect_clusters(unreached: list[Vertex], graph: CallGraph) -> list[list[Vertex]]:
    """Split unreached vertices into forward-reachable groups.

    Each cluster is everything reachable by outgoing edges from the first
    still-unclustered vertex, restricted to vertices not yet clustered.
    """
    pool: dict[Vertex, None] = dict.fromkeys(unreached)
    clusters: list[list[Vertex]] = []

    while pool:
        seed = next(iter(pool))
        members: dict[Vertex, None] = {seed: None}
        queue = deque([seed])
        while queue:
            vertex = queue.popleft()
            for neighbour in graph.get(vertex, ()):
                if neighbour in pool and neighbour not in members:
                    members[neighbour] = None
                    queue.append(neighbour)
        for vertex in members:
            del pool[vertex]
        clusters.append(list(members))

    return clusters


def detect_zombie_component_clusters(
    components: list[ComponentRelation],
    lookup: ComponentLookupService,
    config: AnalyzerConfig | None = None,
) -> ZombieClusterAnalysisResult:
    """Find component clusters no entry point can reach."""
    config = config or AnalyzerConfig()

    vertices, graph = build_call_graph(components, lookup)
    entry_points = find_entry_points(vertices, graph)
    reached = mark_reachable(entry_points, graph)
    unreached = [v for v in vertices if v not in reached]

    diagram = DiagramData()
    infos: list[ZombieClusterInfo] = []

    for index, members in enumerate(collect_clusters(unreached, graph)):
        cluster_id = f"cluster-{index}"
        _draw_cluster(
            diagram, cluster_id, index, members,
            index * config.cluster_spacing, lookup,
        )
        infos.append(_cluster_info(cluster_id, members, graph, lookup))

    total = sum(len(c.components) for c in infos)
    stats = ZombieStats(
        total_clusters=len(infos),
        total_zombie_components=total,
        largest_cluster=max((len(c.components) for c in infos), default=0),
        entry_points_count=len(entry_points),
        avg_components_per_cluster=total / len(infos) if infos else 0,
    )

    logger.debug(
        "Zombie clusters: %d vertices, %d entry points, %d unreached, %d clusters",
        len(vertices), len(entry_points), len(unreached), len(infos),
    )

    return ZombieClusterAnalysisResult(
        zombie_cluster_graph=diagram,
        clusters=infos,
        stats=stats,
    )


def _cluster_info(
    cluster_id: str,
    members: list[Vertex],
    graph: CallGraph,
    lookup: ComponentLookupService,
) -> ZombieClusterInfo:
    member_set = set(members)
    component_ids = [v for v in members if isinstance(v, str)]

    pointed_at: set[Vertex] = set()
    for vertex in members:
        for neighbour in graph.get(vertex, ()):
            if neighbour in member_set and neighbour != vertex:
                pointed_at.add(neighbour)

    functions: dict[str, list[str]] = {}
    for vertex in members:
        if isinstance(vertex, FunctionNodeKey):
            name = lookup.display_name(vertex.component_id)
            functions.setdefault(name, []).append(vertex.function)

    names = [lookup.display_name(cid) for cid in component_ids]
    size = len(names)
    return ZombieClusterInfo(
        id=cluster_id,
        components=names,
        entry_points=[
            lookup.display_name(cid) for cid in component_ids if cid not in pointed_at
        ],
        functions=functions,
        size=size,
        risk=determine_risk_level(size),
        suggestion=suggestion_for_cluster(size),
    )


def _draw_cluster(
    diagram: DiagramData,
    cluster_id: str,
    index: int,
    members: list[Vertex],
    y: float,
    lookup: ComponentLookupService,
) -> None:
    """Append the cluster node, its component children and their function grandchildren.

    A function whose component is not a member of this cluster hangs off a
    placeholder component node local to the cluster, ``<cluster-id>/<component-id>``.
    """
    diagram.nodes.append(DiagramNode(
        id=cluster_id,
        position=Position(0, y),
        data=NodeData(label=f"Zombie Cluster {index + 1}", full_path=cluster_id),
        kind=NodeKind.CLUSTER,
    ))

    # component id -> id of the node drawn for it in this cluster
    parents: dict[str, str] = {v: v for v in members if isinstance(v, str)}
    for vertex in members:
        if isinstance(vertex, FunctionNodeKey) and vertex.component_id not in parents:
            parents[vertex.component_id] = f"{cluster_id}/{vertex.component_id}"

    positions = generate_grid_layout(
        len(parents), _COMPONENT_ORIGIN[0], _COMPONENT_ORIGIN[1], _COMPONENT_SPACING,
    )
    for (component_id, node_id), position in zip(parents.items(), positions):
        component = lookup.get_component_by_id(component_id)
        diagram.nodes.append(DiagramNode(
            id=node_id,
            position=position,
            data=NodeData(
                label=component.name if component else component_id,
                full_path=component.full_path if component else component_id,
                directory=component.directory if component else "",
                is_component=True,
            ),
            kind=NodeKind.ZOMBIE,
            parent_node=cluster_id,
        ))
        diagram.edges.append(DiagramEdge(
            id=generate_edge_id(cluster_id, node_id),
            source=cluster_id,
            target=node_id,
        ))

    slots: dict[str, int] = {}
    for vertex in members:
        if not isinstance(vertex, FunctionNodeKey):
            continue
        parent_id = parents[vertex.component_id]
        slot = slots.get(parent_id, 0)
        slots[parent_id] = slot + 1
        component = lookup.get_component_by_id(vertex.component_id)
        diagram.nodes.append(DiagramNode(
            id=vertex.wire_id,
            position=Position(_FUNCTION_OFFSET[0], _FUNCTION_OFFSET[1] + slot * _FUNCTION_STEP),
            data=NodeData(
                label=vertex.function,
                full_path=vertex.wire_id,
                directory=component.directory if component else "",
            ),
            kind=NodeKind.FUNCTION,
            parent_node=parent_id,
        ))
        diagram.edges.append(DiagramEdge(
            id=generate_edge_id(parent_id, vertex.wire_id),
            source=parent_id,
            target=vertex.wire_id,
            kind=EdgeKind.EXPORT,
        ))
