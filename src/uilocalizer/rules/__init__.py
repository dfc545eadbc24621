"""Path condition expressions and position adjustment rules.

Submodules:
    conditions - PathCondition, parse_conditions, evaluate
    positions  - PositionRule, PositionRuleSet

Python 3.13+. Zero external dependencies.
"""

from .conditions import PathCondition, evaluate, parse_condition, parse_conditions
from .positions import PositionRule, PositionRuleSet, parse_position_rule

__all__ = [
    "PathCondition",
    "PositionRule",
    "PositionRuleSet",
    "evaluate",
    "parse_condition",
    "parse_conditions",
    "parse_position_rule",
]
