"""Component analyzer — runs graph build, cycle, zombie and package analyses together."""

from __future__ import annotations

import logging

from component_graph.models import AnalyzerConfig, ComponentRelation
from component_graph.analysis.circular import detect_circular_dependencies
from component_graph.analysis.dependency_graph import build_dependency_graph
from component_graph.analysis.graph_models import DependencyAnalysisDetailedResult
from component_graph.analysis.lookup import ComponentLookupService
from component_graph.analysis.package_deps import analyze_dependencies
from component_graph.analysis.zombie_clusters import detect_zombie_component_clusters

logger = logging.getLogger(__name__)


class ComponentAnalyzer:
    """Analyze one run's components with a shared lookup service."""

    def __init__(
        self,
        components: list[ComponentRelation],
        config: AnalyzerConfig | None = None,
        lookup: ComponentLookupService | None = None,
    ):
        self.components = list(components)
        self.config = config or AnalyzerConfig()
        self.lookup = lookup or ComponentLookupService(self.components)

    async def analyze(self) -> DependencyAnalysisDetailedResult:
        logger.info("Analyzing %d components", len(self.components))

        graph = build_dependency_graph(self.components, self.lookup)
        dependency_analysis = await analyze_dependencies(
            self.components, self.lookup, self.config,
        )
        circular = detect_circular_dependencies(graph, self.lookup, self.config)
        zombies = detect_zombie_component_clusters(
            self.components, self.lookup, self.config,
        )

        return DependencyAnalysisDetailedResult(
            circular_dependencies=circular,
            zombie_clusters=zombies,
            dependency_analysis=dependency_analysis,
        )
