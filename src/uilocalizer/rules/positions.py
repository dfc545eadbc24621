"""Position adjustment rules.

Translated text often needs a small nudge (different glyph metrics in the
replacement font). Each rule pairs a condition expression with an offset;
rules are consulted in declaration order and the first match wins.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from uilocalizer.core.vector import ZERO, Vector3
from uilocalizer.diagnostics import Diagnostic, DiagnosticCode, RuleSyntaxError
from uilocalizer.rules.conditions import PathCondition, evaluate, parse_conditions

__all__ = ["PositionRule", "PositionRuleSet", "parse_position_rule"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PositionRule:
    """Conjunction of path conditions with the offset to apply on match.

    Attributes:
        conditions: AND-ed predicates (empty never matches)
        offset: Local position offset
        source: Original expression text, for diagnostics
    """

    conditions: tuple[PathCondition, ...]
    offset: Vector3
    source: str = ""

    def matches(self, path: str) -> bool:
        """Check if every condition holds for path."""
        return evaluate(path, self.conditions)


def parse_position_rule(line: str) -> PositionRule | None:
    """Parse a ``ConditionExpression = X,Y,Z`` line.

    Args:
        line: Trimmed configuration line

    Returns:
        Parsed rule, or None for lines without a usable ``=`` split

    Raises:
        RuleSyntaxError: If the offset is not three numeric fields
    """
    equals_index = line.find("=")
    if equals_index <= 0:
        return None

    expression = line[:equals_index].strip()
    offset_text = line[equals_index + 1 :].strip()
    if not expression or not offset_text:
        return None

    try:
        offset = Vector3.parse(offset_text)
    except ValueError as e:
        diagnostic = Diagnostic(
            code=DiagnosticCode.INVALID_POSITION_OFFSET,
            message=f"Invalid position offset '{offset_text}' in '{line}': {e}",
            hint="Offsets are three comma-separated numbers, e.g. 0,-0.05,0",
            severity="warning",
        )
        raise RuleSyntaxError(diagnostic) from e

    return PositionRule(parse_conditions(expression), offset, expression)


class PositionRuleSet:
    """Ordered position rules with first-match-wins resolution.

    Example:
        >>> rules = PositionRuleSet.from_lines([
        ...     "Contains(GUI/HUD/) & EndsWith(/HUDLabel) = 0,-0.05,0",
        ... ])
        >>> rules.resolve("GUI/HUD/Day/HUDLabel")
        Vector3(x=0.0, y=-0.05, z=0.0)
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[PositionRule] = ()) -> None:
        self._rules: tuple[PositionRule, ...] = tuple(rules)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        diagnostics: list[Diagnostic] | None = None,
    ) -> PositionRuleSet:
        """Build a rule set from configuration lines.

        Malformed offsets are logged and the line is omitted. Rules without
        recognized conditions are kept (they never match) and reported.

        Args:
            lines: ``ConditionExpression = X,Y,Z`` lines
            diagnostics: Optional list that receives a Diagnostic per problem
        """
        rules: list[PositionRule] = []
        for line in lines:
            try:
                rule = parse_position_rule(line.strip())
            except RuleSyntaxError as e:
                logger.warning("%s", e.diagnostic.message if e.diagnostic else e)
                if diagnostics is not None and e.diagnostic is not None:
                    diagnostics.append(e.diagnostic)
                continue
            if rule is None:
                continue
            if not rule.conditions:
                logger.warning(
                    "Position rule '%s' has no recognized conditions and never matches",
                    rule.source,
                )
                if diagnostics is not None:
                    diagnostics.append(
                        Diagnostic(
                            code=DiagnosticCode.EMPTY_CONDITION_EXPRESSION,
                            message=f"Position rule '{rule.source}' has no recognized conditions",
                            hint="Use Contains(), EndsWith(), StartsWith() or Equals() joined by &",
                            severity="warning",
                        )
                    )
            rules.append(rule)
        return cls(rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[PositionRule]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"PositionRuleSet(rules={len(self._rules)})"

    def resolve(self, path: str) -> Vector3:
        """Return the offset of the first rule matching path.

        Args:
            path: Element path

        Returns:
            Matching offset, or the zero vector when no rule matches
        """
        for rule in self._rules:
            if rule.matches(path):
                return rule.offset
        return ZERO
