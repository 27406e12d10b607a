"""Scenario tags and barrier geometry."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum

from quantumscenarios.config import PLATES_DISTANCE


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class BarrierScenario(StrEnum):
    """Particle energy relative to the barrier height U."""
    E_GREATER_THAN_U = "E > U"
    E_LESS_THAN_U = "E < U"

class EnergyPreset(float, Enum):
    """Energy shifts offered for the linear potential (particle between plates)."""
    LOW = 0.0
    HIGH = 1.5

    @property
    def description(self) -> str:
        match self:
            case EnergyPreset.LOW:
                return "Low Energy State: ψ(x) localized near lower plate"
            case EnergyPreset.HIGH:
                return "Higher Energy State: ψ(x) more extended in the field"


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class BarrierGeometry:
    """
    Position of the potential barrier along the plate axis.

    Attributes:
        x0: Barrier onset (in samples).
        length: Barrier length L (in samples).
        distance: Total domain length.
    """
    x0: float
    length: float
    distance: float = PLATES_DISTANCE

    ONSET_FRACTION = 0.35
    LENGTH_FRACTION = 0.30

    def __post_init__(self) -> None:
        if self.x0 < 0:
            raise ValueError(f"Barrier onset must be non-negative, got {self.x0}.")
        if self.length <= 0:
            raise ValueError(f"Barrier length must be positive, got {self.length}.")
        if self.x0 + self.length > self.distance:
            raise ValueError(
                f"Barrier [{self.x0}, {self.x0 + self.length}] exceeds the domain length {self.distance}."
            )

    @classmethod
    def from_distance(cls, distance: float = PLATES_DISTANCE) -> BarrierGeometry:
        """Standard barrier: starts at 35 % of the domain and spans 30 % of it."""
        return cls(
            x0=distance * cls.ONSET_FRACTION,
            length=distance * cls.LENGTH_FRACTION,
            distance=distance,
        )

    @property
    def x_end(self) -> float:
        return self.x0 + self.length

    @property
    def onset_index(self) -> int:
        return int(self.x0)

    @property
    def end_index(self) -> int:
        return int(self.x_end)
