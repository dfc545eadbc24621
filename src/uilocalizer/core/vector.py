"""Three-component vector for element positions and offsets.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ZERO", "Vector3"]


@dataclass(frozen=True, slots=True)
class Vector3:
    """Immutable 3D vector (local position or position offset)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        """Component-wise sum."""
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __bool__(self) -> bool:
        """False for the zero vector."""
        return bool(self.x or self.y or self.z)

    @classmethod
    def parse(cls, text: str) -> Vector3:
        """Parse an ``X,Y,Z`` string.

        Args:
            text: Three comma-separated numbers (whitespace around fields allowed)

        Returns:
            Parsed vector

        Raises:
            ValueError: If the field count is not three or a field is not numeric
        """
        parts = text.split(",")
        if len(parts) != 3:
            msg = f"Expected X,Y,Z with 3 fields, got {len(parts)}: '{text}'"
            raise ValueError(msg)
        x, y, z = (float(part.strip()) for part in parts)
        return cls(x, y, z)


ZERO = Vector3()
