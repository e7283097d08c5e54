from __future__ import annotations

"""
Component Graph Domain Data Models.

Defines the records produced by the static analysis subsystem (components,
usage edges, tree nodes) and the result object exchanged between the graph
engine and the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ComponentRecord:
    """
    A component discovered from one definition file.

    Attributes:
        selector: External-facing name used to reference the component from markup.
        name: Display name (relative directory plus base name).
        definition_path: Absolute path to the definition file.
        template_path: Absolute path to the paired template, or None.
    """
    selector: str
    name: str
    definition_path: str
    template_path: Optional[str] = None


@dataclass
class TreeNode:
    """
    A node of the rooted usage tree.

    Attributes:
        name: Display name of the component.
        selector: External-facing name of the component.
        path: Normalized template path, or None if the component has no template.
        children: Components embedded in this component's template.
    """
    name: str
    selector: str
    path: Optional[str]
    children: List["TreeNode"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the subtree into plain JSON-compatible dictionaries."""
        return {
            "name": self.name,
            "selector": self.selector,
            "path": self.path,
            "children": [child.to_dict() for child in self.children],
        }


# selector -> record, in scan order
Registry = Dict[str, ComponentRecord]

# child selector -> parent selectors, in discovery order
EdgeMap = Dict[str, List[str]]

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GraphResult:
    """
    Unified result object of a complete graph extraction run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Machine-readable failure category (empty on success).
        mode: Render mode used for the run (graph/tree/both).
        scan_root: Absolute directory that was scanned.
        component_count: Number of registered components.
        graph: Flat usage document, if rendered.
        tree: Rooted tree document, if rendered.
        graph_path: Destination of the flat document, if written.
        tree_path: Destination of the tree document, if written.
        usages: Child selector to parent selectors mapping.
        summary_lines: Human-readable relationship summary.
        warnings: Non-fatal issues collected during the run.
        cycles: Usage cycles detected while building the tree.
        available_selectors: Registered selectors (reported on missing root).
    """
    ok: bool
    error: str
    error_kind: str

    mode: str
    scan_root: str
    component_count: int = 0

    graph: Optional[Dict[str, Any]] = None
    tree: Optional[Dict[str, Any]] = None
    graph_path: str = ""
    tree_path: str = ""

    usages: EdgeMap = field(default_factory=dict)
    summary_lines: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    cycles: List[List[str]] = field(default_factory=list)
    available_selectors: Dict[str, str] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        cfg: Dict[str, Any],
        scan_root: str,
        component_count: int = 0,
        warnings: Optional[List[str]] = None,
        available_selectors: Optional[Dict[str, str]] = None,
) -> GraphResult:
    """
    Create a failed run result.

    Args:
        error: Detailed error description.
        error_kind: Failure category (structural_read, missing_root, ...).
        cfg: The configuration used during the failed run.
        scan_root: The target scan directory.
        component_count: Components registered before the failure.
        warnings: Non-fatal issues collected before the failure.
        available_selectors: Registered selector to display name mapping.

    Returns:
        GraphResult: An immutable error result object.
    """
    return GraphResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        mode=cfg.get("mode", ""),
        scan_root=scan_root,
        component_count=component_count,
        warnings=list(warnings or []),
        available_selectors=dict(available_selectors or {}),
    )


def create_success_result(
        cfg: Dict[str, Any],
        scan_root: str,
        registry: Registry,
        usages: EdgeMap,
        graph: Optional[Dict[str, Any]] = None,
        tree: Optional[Dict[str, Any]] = None,
        graph_path: str = "",
        tree_path: str = "",
        summary_lines: Optional[List[str]] = None,
        warnings: Optional[List[str]] = None,
        cycles: Optional[List[List[str]]] = None,
) -> GraphResult:
    """
    Create a successful run result.

    Returns:
        GraphResult: An immutable success result object.
    """
    return GraphResult(
        ok=True,
        error="",
        error_kind="",
        mode=cfg.get("mode", ""),
        scan_root=scan_root,
        component_count=len(registry),
        graph=graph,
        tree=tree,
        graph_path=graph_path,
        tree_path=tree_path,
        usages=usages,
        summary_lines=list(summary_lines or []),
        warnings=list(warnings or []),
        cycles=list(cycles or []),
    )
