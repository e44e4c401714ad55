"""Click CLI with analyze, cycles, zombies, and serve subcommands."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import click

from component_graph.models import AnalyzerConfig
from component_graph.analyzer import ComponentAnalyzer
from component_graph.loader import load_components
from component_graph.analysis.circular import detect_circular_dependencies
from component_graph.analysis.dependency_graph import build_dependency_graph
from component_graph.analysis.lookup import ComponentLookupService
from component_graph.analysis.zombie_clusters import detect_zombie_component_clusters

_RISK_COLORS = {"high": "red", "medium": "yellow", "low": "green"}

_components_arg = click.argument(
    "components_file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
)


def _load(components_file: Path):
    try:
        return load_components(components_file)
    except (ValueError, OSError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """component-graph: Import cycles and zombie components in React/Next.js projects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@_components_arg
@click.option("--project", "-p", "project_path", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".", help="Project root containing package.json")
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Write the JSON report here instead of stdout")
@click.option("--include-dev", is_flag=True, help="Count devDependencies as declared")
def analyze(components_file: Path, project_path: Path, output: Path | None, include_dev: bool):
    """Run the full dependency analysis and emit a JSON report."""
    components = _load(components_file)
    config = AnalyzerConfig(project_path=project_path, include_dev_dependencies=include_dev)
    result = asyncio.run(ComponentAnalyzer(components, config).analyze())

    report = json.dumps(result.to_dict(), indent=2)
    if output:
        output.write_text(report, encoding="utf-8")
        click.echo(f"Wrote report for {len(components)} component(s) to {output}")
    else:
        click.echo(report)


@cli.command()
@_components_arg
def cycles(components_file: Path):
    """List circular import chains."""
    components = _load(components_file)
    lookup = ComponentLookupService(components)
    result = detect_circular_dependencies(build_dependency_graph(components, lookup), lookup)

    if not result.circular_groups:
        click.echo("No circular dependencies found.")
        return

    click.echo(f"\nFound {result.stats.total_circular_groups} circular dependency chain(s):\n")
    for group in result.circular_groups:
        marker = click.style("critical", fg="red") if group.is_critical else click.style("ok", dim=True)
        chain = " -> ".join(group.path + group.path[:1])
        click.echo(f"  {group.id:>12}  [{marker}]  {chain}")

    click.echo(
        f"\n{result.stats.total_components_in_circular} component(s) involved, "
        f"longest chain {result.stats.max_circular_path_length}, "
        f"{result.stats.critical_circular_paths} critical"
    )


@cli.command()
@_components_arg
def zombies(components_file: Path):
    """List component clusters unreachable from any entry point."""
    components = _load(components_file)
    lookup = ComponentLookupService(components)
    result = detect_zombie_component_clusters(components, lookup)

    if not result.clusters:
        click.echo("No zombie clusters found.")
        return

    click.echo(f"\nFound {result.stats.total_clusters} zombie cluster(s):\n")
    for cluster in result.clusters:
        risk = click.style(cluster.risk, fg=_RISK_COLORS[cluster.risk])
        click.echo(f"{click.style(cluster.id, fg='cyan')}  risk={risk}  size={cluster.size}")
        for name in cluster.components:
            funcs = cluster.functions.get(name, [])
            suffix = click.style(f"  ({', '.join(funcs)})", dim=True) if funcs else ""
            click.echo(f"  {name}{suffix}")
        click.echo(f"  {click.style(cluster.suggestion, dim=True)}\n")

    click.echo(
        f"Entry points: {result.stats.entry_points_count}, "
        f"zombie components: {result.stats.total_zombie_components}"
    )


@cli.command()
@click.option("--port", "-p", default=8430, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the analysis HTTP API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the web API. "
            "Install with: pip install 'component-graph[web]'"
        )

    from component_graph.web import create_app

    click.echo(f"Starting component-graph API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
