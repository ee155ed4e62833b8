"""Syntax tree layer: node classes, navigation, and the TSX frontend.

Provides:
    parse_source(source, filename) -> Program
"""

from __future__ import annotations

from react_state_patterns.tree.tsx_frontend import ParseError, parse_source
from react_state_patterns.tree.walk import walk

__all__ = ["ParseError", "parse_source", "walk"]
