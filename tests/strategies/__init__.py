"""Hypothesis strategies for uilocalizer property-based testing.

Usage:
    from tests.strategies import display_texts, element_paths
"""

from .localization import (
    condition_clauses,
    display_texts,
    element_paths,
    path_segments,
    words,
)

__all__ = [
    "condition_clauses",
    "display_texts",
    "element_paths",
    "path_segments",
    "words",
]
