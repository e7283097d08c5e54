from __future__ import annotations

"""
Graph Engine Exceptions.
"""

from typing import Dict


class ComponentGraphError(Exception):
    """Base class for failures raised by the graph engine."""


class MissingRootError(ComponentGraphError):
    """
    Raised when the requested tree root is not a registered selector.

    Attributes:
        selector: The requested root selector.
        available: Registered selector to display name mapping.
    """

    def __init__(self, selector: str, available: Dict[str, str]):
        self.selector = selector
        self.available = dict(available)
        super().__init__(
            f"Root component '{selector}' not found. "
            f"Check your code or specify another root selector."
        )
