"""Load component records written by the source parser."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from component_graph.models import ComponentRelation

logger = logging.getLogger(__name__)


def parse_components(data) -> list[ComponentRelation]:
    """Turn decoded JSON into component records.

    Accepts a list of records or an object with a ``components`` list.
    Records without ``name`` or ``fullPath`` are skipped.
    """
    if isinstance(data, dict):
        data = data.get("components")
    if not isinstance(data, list):
        raise ValueError("Expected a list of components or an object with a 'components' list")

    components: list[ComponentRelation] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict) or not record.get("name") or not record.get("fullPath"):
            logger.warning("Skipping component record %d: missing name or fullPath", index)
            continue
        components.append(ComponentRelation.from_dict(record))
    return components


def load_components(path: Path) -> list[ComponentRelation]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    return parse_components(data)
