"""
Build noise graphs from plain descriptions.

A description is a dict (typically loaded from JSON) listing modules in
dependency order and naming the root::

    {
        "nodes": [
            {"id": "base", "type": "Perlin", "params": {"octave_count": 4, "seed": 3}},
            {"id": "curve", "type": "Exponent", "params": {"exponent": 2.0},
             "sources": ["base"]},
            {"id": "out", "type": "Clamp",
             "params": {"lower_bound": -0.5, "upper_bound": 0.5},
             "sources": ["curve"]}
        ],
        "root": "out"
    }

Sources may only refer to ids defined earlier in the list, so a description
can never produce a cyclic graph.

Author: B.G.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from .exceptions import InvalidParameterError
from .module import Billow, Clamp, Const, Exponent, Module, Perlin

logger = logging.getLogger(__name__)

REGISTRY: dict[str, type[Module]] = {}


def register(cls: type[Module]) -> type[Module]:
    """Make a Module subclass available to descriptions under its class name."""
    if not (isinstance(cls, type) and issubclass(cls, Module)):
        raise TypeError(f"only Module subclasses can be registered, got {cls!r}")
    REGISTRY[cls.__name__] = cls
    return cls


for _cls in (Const, Perlin, Billow, Clamp, Exponent):
    register(_cls)


def build_modules(description: Dict[str, Any]) -> dict[str, Module]:
    """
    Instantiate and wire every node of a description.

    Args:
        description: Mapping with a "nodes" list; each node has "id", "type",
            optional "params" (constructor keywords) and optional "sources"
            (ids of previously defined nodes, one per source slot)

    Returns:
        dict: node id -> Module, in description order

    Raises:
        InvalidParameterError: On unknown types, unknown or duplicate ids,
            a source count that does not match the module, or rejected params
    """
    if not isinstance(description, dict):
        raise InvalidParameterError("graph description must be a mapping")
    nodes = description.get("nodes")
    if not isinstance(nodes, list) or not nodes:
        raise InvalidParameterError("graph description needs a non-empty 'nodes' list")

    modules: dict[str, Module] = {}
    for node_def in nodes:
        if not isinstance(node_def, dict):
            raise InvalidParameterError(f"node definitions must be mappings, got {node_def!r}")
        nid = node_def.get("id")
        if not isinstance(nid, str) or not nid:
            raise InvalidParameterError(f"node without a valid 'id': {node_def!r}")
        if nid in modules:
            raise InvalidParameterError(f"duplicate node id '{nid}'")

        type_name = node_def.get("type")
        cls = REGISTRY.get(type_name) if isinstance(type_name, str) else None
        if cls is None:
            known = ", ".join(sorted(REGISTRY))
            raise InvalidParameterError(
                f"node '{nid}': unknown module type {type_name!r} (known: {known})"
            )

        params = node_def.get("params", {}) or {}
        if not isinstance(params, dict):
            raise InvalidParameterError(f"node '{nid}': 'params' must be a mapping")
        try:
            module = cls(**params)
        except TypeError as e:
            raise InvalidParameterError(f"node '{nid}': {e}") from e
        except InvalidParameterError as e:
            raise InvalidParameterError(f"node '{nid}': {e}") from e

        sources = node_def.get("sources", []) or []
        if not isinstance(sources, list):
            raise InvalidParameterError(f"node '{nid}': 'sources' must be a list of node ids")
        if len(sources) != module.get_source_module_count():
            raise InvalidParameterError(
                f"node '{nid}': {type_name} takes {module.get_source_module_count()} "
                f"source module(s), got {len(sources)}"
            )
        for index, ref in enumerate(sources):
            if not isinstance(ref, str) or ref not in modules:
                raise InvalidParameterError(
                    f"node '{nid}': source '{ref}' is not defined before it"
                )
            module.set_source_module(index, modules[ref])

        modules[nid] = module
        logger.debug("built node '%s': %r", nid, module)

    return modules


def build_graph(description: Dict[str, Any]) -> Module:
    """
    Build a description and return its root module.

    The root defaults to the last node when "root" is omitted.
    """
    modules = build_modules(description)
    root = description.get("root", next(reversed(modules)))
    if not isinstance(root, str) or root not in modules:
        raise InvalidParameterError(f"root '{root}' is not a node of the graph")
    return modules[root]


__all__ = ["REGISTRY", "register", "build_modules", "build_graph"]
