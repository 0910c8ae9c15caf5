"""Rotating vector descriptors produced from a spectrum."""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class DrawDescriptor:
    """One rotating vector (epicycle) of the reconstruction.

    The vector's contribution at time t is
    ``radius * exp(i * (angle + 2 * pi * frequency * t))``.

    Attributes:
        frequency: Signed frequency in turns per period
        radius: Vector length (magnitude of the coefficient)
        angle: Initial phase in radians (argument of the coefficient)
    """

    frequency: int
    radius: float
    angle: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "frequency": self.frequency,
            "radius": self.radius,
            "angle": self.angle,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DrawDescriptor":
        """Deserialize from dictionary."""
        return cls(
            frequency=int(data["frequency"]),
            radius=float(data["radius"]),
            angle=float(data["angle"]),
        )

    def to_complex(self) -> complex:
        """Rebuild the source coefficient from its polar form."""
        return complex(
            self.radius * math.cos(self.angle),
            self.radius * math.sin(self.angle),
        )
