"""Diagnostic codes and data structures.

Defines error codes and diagnostic records produced while loading
configuration, translation packs, rules and font resources.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Loading (missing or unreadable data files)
        2000-2999: Configuration (language metadata, Unicode ranges)
        3000-3999: Rules (condition expressions, position offsets)
        4000-4999: Resources (font assets)
    """

    # Loading (1000-1999)
    FILE_NOT_FOUND = 1001
    FILE_UNREADABLE = 1002

    # Configuration (2000-2999)
    UNSAFE_UNICODE_RANGE = 2001
    INVALID_UNICODE_RANGE = 2002
    UNKNOWN_LOCALE = 2003

    # Rules (3000-3999)
    INVALID_POSITION_OFFSET = 3001
    EMPTY_CONDITION_EXPRESSION = 3002

    # Resources (4000-4999)
    FONT_SOURCE_FAILED = 4001
    FONT_NOT_IN_SOURCE = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        source_path: File the diagnostic refers to (None if not file-bound)
        line: 1-based line number within source_path (None if unknown)
        hint: Suggestion for fixing the problem
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    source_path: str | None = None
    line: int | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[UNSAFE_UNICODE_RANGE]: Unicode range '0000-024F' includes Latin characters
              --> config.txt:4
              = help: Leave UNICODE_RANGES empty for Latin-based languages

        Returns:
            Formatted diagnostic text
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.source_path is not None:
            location = self.source_path
            if self.line is not None:
                location = f"{location}:{self.line}"
            lines.append(f"  --> {_escape(location)}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    # Keep each diagnostic on its own log lines.
    return text.replace("\r", "\\r").replace("\n", "\\n")
