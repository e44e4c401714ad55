"""Build the component dependency graph from import specifiers."""

from __future__ import annotations

import logging

from component_graph.models import ComponentRelation
from component_graph.analysis.graph_models import DependencyGraph
from component_graph.analysis.identity import generate_component_id
from component_graph.analysis.lookup import ComponentLookupService

logger = logging.getLogger(__name__)


def build_dependency_graph(
    components: list[ComponentRelation],
    lookup: ComponentLookupService,
) -> DependencyGraph:
    """Build the component import graph.

    Every component gets an entry, even with no resolvable imports. Targets
    are deduplicated in first-seen order and never include the component
    itself.
    """
    graph: DependencyGraph = {}

    for component in components:
        component_id = generate_component_id(component)
        targets: dict[str, None] = dict.fromkeys(graph.get(component_id, ()))

        for specifier in component.imports:
            for target_id in lookup.resolve_import_to_component_ids(specifier):
                if target_id != component_id:
                    targets[target_id] = None

        graph[component_id] = list(targets)

    logger.debug(
        "Built dependency graph: %d nodes, %d edges",
        len(graph), sum(len(t) for t in graph.values()),
    )
    return graph
