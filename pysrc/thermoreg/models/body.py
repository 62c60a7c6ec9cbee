"""Body parameter models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Sex(Enum):
    """Biological sex, used by the resting energy expenditure formula."""

    MALE = "m"
    FEMALE = "f"

    @classmethod
    def from_code(cls, code: str) -> Sex:
        """
        Parse a one-letter sex code ('m' or 'f', case-insensitive).

        Raises:
            ValueError: If the code is not recognised.
        """
        normalized = code.strip().lower()[:1]
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Sex code must be 'm' or 'f', got {code!r}")


@dataclass(frozen=True)
class BodyParameters:
    """
    Body characteristics for a simulation run.

    Immutable for the duration of a run. Surface area and basal metabolic
    rate are derived from these values.

    Attributes:
        mass: Body mass in kg. Default 80.
        height: Body height in cm. Default 185.
        age: Age in years. Default 25.
        sex: Biological sex. Default male.
        reflectivity: Skin reflectivity (0-1). Default 0.5.
    """

    mass: float = 80.0
    height: float = 185.0
    age: float = 25.0
    sex: Sex = Sex.MALE
    reflectivity: float = 0.5

    def __post_init__(self):
        if not self.mass > 0:
            raise ValueError(f"mass must be positive, got {self.mass}")
        if not self.height > 0:
            raise ValueError(f"height must be positive, got {self.height}")
        if not self.age >= 0:
            raise ValueError(f"age must be non-negative, got {self.age}")
        if not 0 <= self.reflectivity <= 1:
            raise ValueError(f"reflectivity must be in [0, 1], got {self.reflectivity}")
        if not isinstance(self.sex, Sex):
            raise ValueError(f"sex must be a Sex member, got {self.sex!r}")

    @property
    def surface_area(self) -> float:
        """Body surface area in m² (Mosteller)."""
        from ..physics.heat_exchange import surface_area

        return surface_area(self.mass, self.height)

    @property
    def basal_metabolic_rate(self) -> float:
        """Resting metabolic heat production in W."""
        from ..physics.heat_exchange import basal_metabolic_rate

        return basal_metabolic_rate(self.mass, self.height, self.age, self.sex)

    def metabolic_rate(self, override: float = 0.0) -> float:
        """
        Metabolic heat production used by a run.

        Args:
            override: Explicit metabolic rate in W. 0 means "compute the
                basal rate from the body parameters".
        """
        if override == 0:
            return self.basal_metabolic_rate
        return override
