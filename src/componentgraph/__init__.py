from __future__ import annotations

"""
Component Graph.

Static dependency-graph extraction for component-based front-end projects.
"""

__version__ = "0.1.0"
