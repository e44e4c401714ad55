"""Analysis API — dependency graph, circular dependencies, zombie clusters, full report."""

from __future__ import annotations

import asyncio
from pathlib import Path

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from component_graph.models import AnalyzerConfig, ComponentRelation
from component_graph.analyzer import ComponentAnalyzer
from component_graph.analysis.circular import detect_circular_dependencies
from component_graph.analysis.dependency_graph import build_dependency_graph
from component_graph.analysis.layout import find_isolated_nodes
from component_graph.analysis.lookup import ComponentLookupService
from component_graph.analysis.zombie_clusters import detect_zombie_component_clusters

router = APIRouter(prefix="/api/analysis")


class ComponentIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    full_path: str = Field(alias="fullPath")
    directory: str = ""
    imports: list[str] = Field(default_factory=list)
    exports: list[str] = Field(default_factory=list)
    functions: list[str] | None = None
    function_calls: dict[str, list[str]] | None = Field(default=None, alias="functionCalls")
    content: str | None = None

    def to_relation(self) -> ComponentRelation:
        return ComponentRelation(
            name=self.name,
            full_path=self.full_path,
            directory=self.directory,
            imports=tuple(self.imports),
            exports=tuple(self.exports),
            functions=tuple(self.functions) if self.functions is not None else None,
            function_calls=self.function_calls,
            content=self.content,
        )


class ComponentsRequest(BaseModel):
    components: list[ComponentIn]


class AnalyzeRequest(ComponentsRequest):
    project_path: str | None = None
    include_dev_dependencies: bool = False


def _relations(req: ComponentsRequest) -> list[ComponentRelation]:
    return [c.to_relation() for c in req.components]


@router.post("/graph")
async def dependency_graph(req: ComponentsRequest):
    components = _relations(req)
    lookup = ComponentLookupService(components)
    graph = await asyncio.to_thread(build_dependency_graph, components, lookup)
    return {
        "graph": graph,
        "nodes": len(graph),
        "edges": sum(len(targets) for targets in graph.values()),
        "isolated": sorted(find_isolated_nodes(graph)),
    }


@router.post("/circular")
async def circular(req: ComponentsRequest):
    components = _relations(req)

    def _run():
        lookup = ComponentLookupService(components)
        graph = build_dependency_graph(components, lookup)
        return detect_circular_dependencies(graph, lookup)

    result = await asyncio.to_thread(_run)
    return result.to_dict()


@router.post("/zombies")
async def zombies(req: ComponentsRequest):
    components = _relations(req)

    def _run():
        return detect_zombie_component_clusters(components, ComponentLookupService(components))

    result = await asyncio.to_thread(_run)
    return result.to_dict()


@router.post("/dependencies")
async def dependencies(req: AnalyzeRequest):
    config = AnalyzerConfig(include_dev_dependencies=req.include_dev_dependencies)
    if req.project_path:
        project_path = Path(req.project_path).expanduser()
        if not project_path.is_dir():
            raise HTTPException(400, f"Project path is not a directory: {req.project_path}")
        config.project_path = project_path

    result = await ComponentAnalyzer(_relations(req), config).analyze()
    return result.to_dict()
