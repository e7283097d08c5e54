from __future__ import annotations

"""
Usage-Edge Discovery.

Cross-references the completed registry: every component template is read
once and tested against the selector of every other registered component.
A match records the edge "child is used by parent".
"""

import logging
from typing import List, Tuple

from componentgraph.core.analysis.patterns import contains_tag_reference
from componentgraph.domain.graph_models import EdgeMap, Registry
from componentgraph.infra.fs import read_text

logger = logging.getLogger(__name__)


def discover_edges(registry: Registry) -> Tuple[EdgeMap, List[str]]:
    """
    Compute the child -> parents usage mapping for a registry.

    Every registered selector receives an entry, empty when nothing embeds
    it. Parents are listed in registry order. Components without a template
    contribute no edges. A template that cannot be read is reported as a
    warning and treated the same way; the scan continues.

    The scan is quadratic in the number of components, which is fine at the
    scale of a single front-end project.

    Args:
        registry: Complete selector -> ComponentRecord mapping.

    Returns:
        Tuple[EdgeMap, List[str]]: The usage mapping and the collected warnings.
    """
    usages: EdgeMap = {selector: [] for selector in registry}
    warnings: List[str] = []

    for parent_selector, parent in registry.items():
        if not parent.template_path:
            continue

        try:
            template = read_text(parent.template_path)
        except OSError as e:
            msg = f"Failed to read template for '{parent_selector}': {e}"
            logger.warning(msg)
            warnings.append(msg)
            continue

        for child_selector in registry:
            if child_selector == parent_selector:
                continue
            if contains_tag_reference(template, child_selector):
                usages[child_selector].append(parent_selector)

    edge_count = sum(len(parents) for parents in usages.values())
    logger.debug(f"Discovered {edge_count} usage edges across {len(registry)} components.")
    return usages, warnings
