from __future__ import annotations

"""
Graph and Tree Renderer.

Turns the registry and usage mapping into the two output shapes of the
tool: a flat child -> parents document and a recursive tree anchored at a
root selector. Also produces the human-readable relationship summary.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Set, Tuple

from componentgraph.domain.errors import MissingRootError
from componentgraph.domain.graph_models import EdgeMap, Registry, TreeNode
from componentgraph.infra.fs import to_display_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_graph(registry: Registry, usages: EdgeMap) -> Dict[str, Any]:
    """
    Build the flat usage document.

    Every registered component is present. Root components and orphans both
    carry an empty parent list.

    Args:
        registry: Selector -> ComponentRecord mapping.
        usages: Child selector -> parent selectors mapping.

    Returns:
        Dict[str, Any]: ``{selector: {"name": ..., "parents": [...]}}``.
    """
    graph: Dict[str, Any] = {}
    for selector in registry:
        graph[selector] = {
            "name": registry[selector].name,
            "parents": list(usages.get(selector, [])),
        }

    return graph


def build_tree(
        root_selector: str,
        registry: Registry,
        usages: EdgeMap,
        source_root: str,
        separator: str = "\\",
) -> Tuple[TreeNode, List[List[str]]]:
    """
    Build the usage tree below a root selector.

    Children of a node are the components whose parent list contains the
    node's selector, in registry order. A child that is already on the
    current descent path closes a cycle: it is not descended into and the
    cycle is reported instead.

    Args:
        root_selector: Selector of the tree root.
        registry: Selector -> ComponentRecord mapping.
        usages: Child selector -> parent selectors mapping.
        source_root: Directory template paths are normalized against.
        separator: Separator used in normalized template paths.

    Returns:
        Tuple[TreeNode, List[List[str]]]: The root node and the detected
                                          cycles (each a selector path).

    Raises:
        MissingRootError: If the root selector is not registered.
    """
    if root_selector not in registry:
        raise MissingRootError(
            root_selector,
            {selector: record.name for selector, record in registry.items()},
        )

    cycles: List[List[str]] = []
    root = _build_node(
        root_selector, registry, usages, source_root, separator,
        path=[root_selector], on_path={root_selector}, cycles=cycles,
    )
    return root, cycles


def normalize_template_path(
        template_path: Optional[str],
        source_root: str,
        separator: str = "\\",
) -> Optional[str]:
    """
    Express a template path as ``.<sep><source dir><sep>...``.

    With the defaults, ``/project/src/app/app.component.html`` becomes
    ``.\\src\\app\\app.component.html``.
    """
    if not template_path:
        return None
    source_dir_name = os.path.basename(os.path.normpath(os.path.abspath(source_root)))
    relative = to_display_path(template_path, source_root, separator)
    return separator.join([".", source_dir_name, relative])


def render_usage_summary(usages: EdgeMap) -> List[str]:
    """Produce one human-readable line per component: who uses it."""
    lines: List[str] = []
    for selector, parents in usages.items():
        users = ", ".join(parents) if parents else "nobody (possibly the root component)"
        lines.append(f"- {selector} is used by: {users}")
    return lines

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_node(
        selector: str,
        registry: Registry,
        usages: EdgeMap,
        source_root: str,
        separator: str,
        path: List[str],
        on_path: Set[str],
        cycles: List[List[str]],
) -> TreeNode:
    """Recursive descent through the usage mapping (reverse lookup)."""
    record = registry[selector]
    children: List[TreeNode] = []

    for child_selector, parents in usages.items():
        if selector not in parents or child_selector not in registry:
            continue

        if child_selector in on_path:
            cycle = path + [child_selector]
            logger.warning(f"Usage cycle detected: {' -> '.join(cycle)}")
            cycles.append(cycle)
            continue

        on_path.add(child_selector)
        path.append(child_selector)
        try:
            children.append(_build_node(
                child_selector, registry, usages, source_root, separator,
                path=path, on_path=on_path, cycles=cycles,
            ))
        finally:
            path.pop()
            on_path.discard(child_selector)

    return TreeNode(
        name=record.name,
        selector=selector,
        path=normalize_template_path(record.template_path, source_root, separator),
        children=children,
    )
