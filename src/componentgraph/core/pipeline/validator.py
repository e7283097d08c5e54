from __future__ import annotations

"""
Configuration Validation Service.

Checks the configuration dictionary against the schema of this tool:
fills missing keys with defaults, rejects values of the wrong type and
normalizes the mode, the definition suffix and the template extensions.
"""

import logging
from typing import Any, Dict, List, Tuple

from componentgraph.domain.config import (
    DEFAULT_MODE,
    DEFAULT_TEMPLATE_EXTENSIONS,
    RENDER_MODES,
    get_default_config,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (CLI flags, JSON config files) into strictly
    typed parameters. Fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: A tuple containing the normalized
                                          configuration and a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # 2. Field Processing & Normalization
    for field in _TEXT_FIELDS:
        merged[field] = _text_field(merged, defaults, field, warnings, strict)

    merged["print_summary"] = _summary_flag(merged.get("print_summary"), warnings, strict)
    merged["mode"] = _normalize_mode(merged["mode"], warnings, strict)
    merged["definition_suffix"] = _normalize_suffix(merged["definition_suffix"], warnings, strict)
    merged["template_extensions"] = _normalize_extensions(
        merged.get("template_extensions"), warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

# Paths, selectors and separators: plain strings, blank means "use the default"
_TEXT_FIELDS = (
    "source_root", "scan_root", "graph_output_path", "tree_output_path",
    "mode", "root_selector", "path_separator",
    "definition_suffix", "selector_field",
)

_FLAG_WORDS = {"true": True, "yes": True, "on": True, "false": False, "no": False, "off": False}


def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using the default.")


def _text_field(
        merged: Dict[str, Any],
        defaults: Dict[str, Any],
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    value = merged.get(field)
    if isinstance(value, str) and value.strip():
        return value.strip()
    if value is not None and not isinstance(value, str):
        _reject(f"'{field}' must be text, got {type(value).__name__}.", warnings, strict)
    return defaults[field]


def _summary_flag(value: Any, warnings: List[str], strict: bool) -> bool:
    """print_summary comes from JSON files, where "no" or "off" are common."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _FLAG_WORDS:
        flag = _FLAG_WORDS[value.strip().lower()]
        warnings.append(f"'print_summary' read '{value}' as {flag}.")
        return flag
    _reject(f"'print_summary' must be true or false, got {value!r}.", warnings, strict)
    return True


def _normalize_mode(mode: str, warnings: List[str], strict: bool) -> str:
    """Restrict the render mode to the supported values."""
    m = mode.strip().lower()
    if m in RENDER_MODES:
        return m
    msg = f"Invalid mode '{mode}': expected one of {', '.join(RENDER_MODES)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{DEFAULT_MODE}'.")
    return DEFAULT_MODE


def _normalize_suffix(suffix: str, warnings: List[str], strict: bool) -> str:
    """Ensure the definition suffix starts with a dot."""
    if suffix.startswith("."):
        return suffix
    if strict:
        raise ValueError(f"Invalid definition suffix '{suffix}': must start with '.'.")
    warnings.append(f"Definition suffix '{suffix}' corrected to '.{suffix}'.")
    return "." + suffix


def _normalize_extensions(value: Any, warnings: List[str], strict: bool) -> List[str]:
    """
    Turn the template extension setting into a deduplicated, dotted list.

    Accepts a list or a comma separated string ("html, .htm"). Non-text list
    items are dropped with a warning; an empty result falls back to the
    defaults.
    """
    if value is None:
        return list(DEFAULT_TEMPLATE_EXTENSIONS)
    if isinstance(value, str):
        items: List[Any] = value.split(",")
    elif isinstance(value, list):
        items = value
    else:
        _reject(f"'template_extensions' must be a list, got {type(value).__name__}.", warnings, strict)
        return list(DEFAULT_TEMPLATE_EXTENSIONS)

    out: List[str] = []
    for i, item in enumerate(items):
        if not isinstance(item, str):
            _reject(f"'template_extensions[{i}]' is not text.", warnings, strict)
            continue
        ext = item.strip()
        if not ext:
            continue
        if not ext.startswith("."):
            if strict:
                raise ValueError(f"Invalid extension '{ext}': must start with '.'.")
            warnings.append(f"Extension '{ext}' corrected to '.{ext}'.")
            ext = "." + ext
        if ext not in out:
            out.append(ext)
    return out or list(DEFAULT_TEMPLATE_EXTENSIONS)
