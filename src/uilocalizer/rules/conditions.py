"""Boolean path-matching expressions.

Grammar (one expression per configuration line)::

    expression := clause ( "&" clause )*
    clause     := [ "!" ] kind "(" payload ")"
    kind       := "Contains" | "EndsWith" | "StartsWith" | "Equals"

Clauses are AND-ed. The payload is everything between the opening and the
final closing parenthesis; parentheses inside it are not escaped. Clauses
that do not fit the grammar are dropped, so an expression made only of
malformed clauses parses to an empty tuple, which never matches.

Expressions are parsed once at load time into frozen PathCondition objects.

Example:
    >>> conditions = parse_conditions("Contains(GUI/HUD/) & EndsWith(/HUDLabel)")
    >>> evaluate("GUI/HUD/Day/HUDLabel", conditions)
    True
    >>> evaluate("GUI/HUD/Day/HUDValue", conditions)
    False

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from uilocalizer.enums import ConditionKind

__all__ = ["PathCondition", "evaluate", "parse_condition", "parse_conditions"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PathCondition:
    """Single predicate over a slash-delimited element path.

    Attributes:
        kind: Comparison performed against the path
        value: Literal payload
        negate: Invert the comparison result
    """

    kind: ConditionKind
    value: str
    negate: bool = False

    def evaluate(self, path: str) -> bool:
        """Evaluate the predicate for path, applying negation."""
        match self.kind:
            case ConditionKind.CONTAINS:
                result = self.value in path
            case ConditionKind.ENDS_WITH:
                result = path.endswith(self.value)
            case ConditionKind.STARTS_WITH:
                result = path.startswith(self.value)
            case ConditionKind.EQUALS:
                result = path == self.value
        return not result if self.negate else result

    def __str__(self) -> str:
        prefix = "!" if self.negate else ""
        return f"{prefix}{self.kind}({self.value})"


def parse_condition(clause: str) -> PathCondition | None:
    """Parse one clause of a condition expression.

    Args:
        clause: Text such as ``!Contains(/Row)``

    Returns:
        Parsed condition, or None if the clause does not fit the grammar
    """
    trimmed = clause.strip()
    if not trimmed:
        return None

    negate = trimmed.startswith("!")
    if negate:
        trimmed = trimmed[1:].strip()

    for kind in ConditionKind:
        opener = f"{kind}("
        if trimmed.startswith(opener) and trimmed.endswith(")") and len(trimmed) > len(opener):
            return PathCondition(kind, trimmed[len(opener) : -1], negate)

    logger.debug("Dropping unrecognized condition clause: %r", clause)
    return None


def parse_conditions(expression: str) -> tuple[PathCondition, ...]:
    """Parse an ``&``-joined condition expression.

    Args:
        expression: Full expression text

    Returns:
        Tuple of recognized conditions in source order (possibly empty)
    """
    return tuple(
        condition
        for condition in (parse_condition(clause) for clause in expression.split("&"))
        if condition is not None
    )


def evaluate(path: str, conditions: Sequence[PathCondition]) -> bool:
    """Evaluate a conjunction of conditions against a path.

    Args:
        path: Element path
        conditions: Parsed conditions

    Returns:
        True only if conditions is non-empty, path is non-empty, and every
        condition holds
    """
    if not path or not conditions:
        return False
    return all(condition.evaluate(path) for condition in conditions)
