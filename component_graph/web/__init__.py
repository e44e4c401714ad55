"""HTTP API for the component graph analyses."""

from component_graph.web.app import create_app

__all__ = ["create_app"]
