"""YAML loader and schema validation for net documents.

A net document lists undirected ``links``, optional extra ``points`` and
optional one-way ``nodes`` adjacency::

    points: [E]
    links:
      - [A, B]
      - {source: B, target: C}
    nodes:
      D: [A, C]

Every point name is read as a string. Links register both directions;
``nodes`` entries register only the listed direction, so ``D: [A, C]`` alone
makes ``D`` reach ``A`` but not the reverse.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from netpaths.config import NetConfig
from netpaths.logging import get_logger
from netpaths.model.net import Net
from netpaths.model.node import NodeBuilder
from netpaths.model.point import SimplePoint
from netpaths.utils.yaml_utils import normalize_point_name, normalize_yaml_dict_keys

LOGGER = get_logger(__name__)

RECOGNIZED_KEYS = {"points", "links", "nodes"}


def _load_schema() -> Dict[str, Any]:
    try:
        with (
            resources.files("netpaths.schemas")
            .joinpath("net.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged net schema 'netpaths/schemas/net.json'."
        ) from exc


def load_net_dict(yaml_str: str) -> Dict[str, Any]:
    """Parse, normalize and validate a net document.

    Returns:
        The canonical dictionary form of the document.

    Raises:
        ValueError: If the document is not a mapping, has unknown top-level
            keys, or has an obviously malformed section.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    data = normalize_yaml_dict_keys(data)

    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in net: {', '.join(sorted(extra))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    # Early shape checks give clearer messages than the schema errors
    if "nodes" in data and data["nodes"] is not None:
        if not isinstance(data["nodes"], dict):
            raise ValueError("'nodes' must be a mapping")
        data["nodes"] = normalize_yaml_dict_keys(data["nodes"])
    if "links" in data and data["links"] is not None:
        if not isinstance(data["links"], list):
            raise ValueError("'links' must be a list")
        for entry in data["links"]:
            if isinstance(entry, dict) and (
                "source" not in entry or "target" not in entry
            ):
                raise ValueError(
                    "Each link definition must include 'source' and 'target'"
                )
    if "points" in data and data["points"] is not None:
        if not isinstance(data["points"], list):
            raise ValueError("'points' must be a list")

    data = {key: value for key, value in data.items() if value is not None}
    jsonschema.validate(data, _load_schema())
    return data


def parse_net_dict(
    data: Dict[str, Any], config: Optional[NetConfig] = None
) -> Net[SimplePoint]:
    """Build a net from a validated document dictionary.

    Points keep the order in which they first appear: ``points``, then
    ``links``, then ``nodes``.
    """
    adjacency: Dict[str, List[str]] = {}

    def connect(source: str, target: str) -> None:
        adjacency.setdefault(target, [])
        neighbors = adjacency.setdefault(source, [])
        if target not in neighbors:
            neighbors.append(target)

    for name in data.get("points", []):
        adjacency.setdefault(normalize_point_name(name), [])

    for entry in data.get("links", []):
        if isinstance(entry, dict):
            source, target = entry["source"], entry["target"]
        else:
            source, target = entry
        source = normalize_point_name(source)
        target = normalize_point_name(target)
        connect(source, target)
        connect(target, source)

    for name, neighbors in data.get("nodes", {}).items():
        source = normalize_point_name(name)
        adjacency.setdefault(source, [])
        for neighbor in neighbors or []:
            connect(source, normalize_point_name(neighbor))

    nodes = [
        NodeBuilder()
        .point(SimplePoint(name))
        .connected_points(SimplePoint(n) for n in neighbors)
        .build()
        for name, neighbors in adjacency.items()
    ]
    net = Net(nodes, config=config)
    LOGGER.debug("Loaded net with %d point(s)", len(net))
    return net


def load_net_yaml(
    yaml_str: str, config: Optional[NetConfig] = None
) -> Net[SimplePoint]:
    """Build a net of SimplePoints from a YAML document string."""
    return parse_net_dict(load_net_dict(yaml_str), config=config)


def load_net_file(
    path: Union[str, FilePath], config: Optional[NetConfig] = None
) -> Net[SimplePoint]:
    """Build a net of SimplePoints from a YAML file."""
    return load_net_yaml(FilePath(path).read_text(encoding="utf-8"), config=config)
