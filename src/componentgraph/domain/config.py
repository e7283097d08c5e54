from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration of the graph engine and loads
optional JSON configuration files that override it.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_SOURCE_ROOT = "src"
DEFAULT_SCAN_ROOT = os.path.join("src", "app")
DEFAULT_ROOT_SELECTOR = "app-root"
DEFAULT_DEFINITION_SUFFIX = ".component.ts"
DEFAULT_TEMPLATE_EXTENSIONS: List[str] = [".html"]
DEFAULT_SELECTOR_FIELD = "selector"
DEFAULT_PATH_SEPARATOR = "\\"
DEFAULT_GRAPH_OUTPUT = "angular-component-graph.json"
DEFAULT_TREE_OUTPUT = "angular-component-tree.json"

RENDER_MODES: List[str] = ["graph", "tree", "both"]
DEFAULT_MODE = "graph"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the graph engine.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "source_root": DEFAULT_SOURCE_ROOT,
        "scan_root": DEFAULT_SCAN_ROOT,
        "graph_output_path": DEFAULT_GRAPH_OUTPUT,
        "tree_output_path": DEFAULT_TREE_OUTPUT,

        # Rendering
        "mode": DEFAULT_MODE,
        "root_selector": DEFAULT_ROOT_SELECTOR,
        "path_separator": DEFAULT_PATH_SEPARATOR,
        "print_summary": True,

        # Discovery
        "definition_suffix": DEFAULT_DEFINITION_SUFFIX,
        "template_extensions": list(DEFAULT_TEMPLATE_EXTENSIONS),
        "selector_field": DEFAULT_SELECTOR_FIELD,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file layered over the defaults.

    A missing or unreadable file is not fatal: the defaults are returned
    and the problem is logged.

    Args:
        config_path: Path to a JSON object with configuration keys.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    if not config_path:
        return config

    if not os.path.exists(config_path):
        logger.warning(f"Config file not found at '{config_path}'. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config file '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.error(f"Config file '{config_path}' must contain a JSON object. Using defaults.")
        return config

    unknown = [k for k in data if k not in config]
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

    for key, value in data.items():
        if key in config:
            config[key] = value

    logger.debug(f"Configuration loaded from {config_path}")
    return config
