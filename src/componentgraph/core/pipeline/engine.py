from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates one graph extraction run:
1. Validates configuration and paths.
2. Builds the component registry from the scan root.
3. Verifies the tree root (tree modes) before any output is produced.
4. Discovers usage edges over the complete registry.
5. Renders the flat graph and/or the rooted tree.
6. Persists the JSON artifacts.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from componentgraph.core.analysis.edges import discover_edges
from componentgraph.core.analysis.registry import build_registry
from componentgraph.core.analysis.renderer import (
    build_tree,
    render_graph,
    render_usage_summary,
)
from componentgraph.core.pipeline.validator import validate_config
from componentgraph.domain.errors import MissingRootError
from componentgraph.domain.graph_models import (
    GraphResult,
    create_error_result,
    create_success_result,
)
from componentgraph.infra.fs import is_within, normalize_path, write_json_document

logger = logging.getLogger(__name__)


def run_graph(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> GraphResult:
    """
    Execute a full graph extraction run.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: If True, render everything but write nothing to disk.

    Returns:
        GraphResult: Object containing status, documents and diagnostics.
    """
    logger.info("Graph extraction started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, config_warnings = validate_config(config, strict=False)
    for warning in config_warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cwd = os.getcwd()
    scan_root = normalize_path(cfg["scan_root"], cwd)
    source_root = normalize_path(cfg["source_root"], scan_root)
    if not is_within(scan_root, source_root):
        # Display names must not climb out of the source root
        logger.debug(f"Source root {source_root} does not contain the scan root. Using its parent.")
        source_root = os.path.dirname(scan_root)
    mode = cfg["mode"]
    separator = cfg["path_separator"]

    if not os.path.isdir(scan_root):
        msg = f"Invalid scan directory: {scan_root}"
        logger.error(msg)
        return create_error_result(msg, "invalid_input", cfg, scan_root)

    # -------------------------------------------------------------------------
    # 2) Registry
    # -------------------------------------------------------------------------
    try:
        registry, warnings = build_registry(
            scan_root,
            source_root=source_root,
            definition_suffix=cfg["definition_suffix"],
            template_extensions=cfg["template_extensions"],
            selector_field=cfg["selector_field"],
            path_separator=separator,
        )
    except OSError as e:
        msg = f"Failed to scan project tree: {e}"
        logger.critical(msg)
        return create_error_result(msg, "structural_read", cfg, scan_root)

    logger.info(f"{len(registry)} components found.")

    # -------------------------------------------------------------------------
    # 3) Root Verification (before edges and before any write)
    # -------------------------------------------------------------------------
    root_selector = cfg["root_selector"]
    render_tree = mode in ("tree", "both")
    render_flat = mode in ("graph", "both")

    if render_tree and root_selector not in registry:
        available = {selector: record.name for selector, record in registry.items()}
        err = MissingRootError(root_selector, available)
        logger.error(str(err))
        return create_error_result(
            str(err), "missing_root", cfg, scan_root,
            component_count=len(registry),
            warnings=warnings,
            available_selectors=available,
        )

    # -------------------------------------------------------------------------
    # 4) Usage Edges
    # -------------------------------------------------------------------------
    usages, edge_warnings = discover_edges(registry)
    warnings.extend(edge_warnings)

    # -------------------------------------------------------------------------
    # 5) Rendering
    # -------------------------------------------------------------------------
    graph_doc: Optional[Dict[str, Any]] = None
    tree_doc: Optional[Dict[str, Any]] = None
    cycles: List[List[str]] = []

    if render_flat:
        graph_doc = render_graph(registry, usages)

    if render_tree:
        root_node, cycles = build_tree(root_selector, registry, usages, source_root, separator)
        tree_doc = root_node.to_dict()
        for cycle in cycles:
            warnings.append(f"Usage cycle detected: {' -> '.join(cycle)}")

    # -------------------------------------------------------------------------
    # 6) Persistence
    # -------------------------------------------------------------------------
    graph_path = ""
    tree_path = ""

    if dry_run:
        logger.info("Dry run: no artifacts written.")
    else:
        try:
            if graph_doc is not None:
                graph_path = write_json_document(normalize_path(cfg["graph_output_path"], cwd), graph_doc)
                logger.info(f"Component graph written to {graph_path}")
            if tree_doc is not None:
                tree_path = write_json_document(normalize_path(cfg["tree_output_path"], cwd), tree_doc)
                logger.info(f"Component tree written to {tree_path}")
        except OSError as e:
            msg = f"Failed to write output artifact: {e}"
            logger.error(msg)
            return create_error_result(
                msg, "write_failed", cfg, scan_root,
                component_count=len(registry),
                warnings=warnings,
            )

    return create_success_result(
        cfg=cfg,
        scan_root=scan_root,
        registry=registry,
        usages=usages,
        graph=graph_doc,
        tree=tree_doc,
        graph_path=graph_path,
        tree_path=tree_path,
        summary_lines=render_usage_summary(usages),
        warnings=warnings,
        cycles=cycles,
    )
