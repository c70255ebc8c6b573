# -----------------------------------------------------------------------------
# DOMAIN MODELS - CONSTRUCTION TEMPLATE
# -----------------------------------------------------------------------------
# These models define the construction template shared by every house:
# the closed set of house kinds, the fixed five-step build sequence, and the
# House Plan that fills in the customisable steps for one kind.
#
# The Company parses raw names into a HouseKind at the gate; the Builder only
# ever sees validated plans.
# -----------------------------------------------------------------------------

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HouseKind(str, Enum):
    """
    The houses the company knows how to build.

    Declaration order is the catalog order shown to customers.
    """

    WOOD = "wood"
    BRICK = "brick"
    LUXURY = "luxury"


class BuildStep(int, Enum):
    """
    The five steps of the construction template, numbered in execution order.
    """

    FOUNDATION = 1
    WALLS = 2
    ROOF = 3
    PAINT = 4
    FINAL_TOUCHES = 5

    @property
    def title(self) -> str:
        """Human-readable step name, e.g. 'Final Touches'."""
        return self.name.replace("_", " ").title()


# The template itself. Identical for every HouseKind.
BUILD_SEQUENCE: tuple[BuildStep, ...] = tuple(BuildStep)


class UnknownHouseTypeError(ValueError):
    """
    Raised when a requested house type is outside the catalog.

    Carries the raw input and the valid kinds so callers can show both.
    """

    def __init__(self, house_type: str) -> None:
        self.house_type = house_type
        self.available = [kind.value for kind in HouseKind]
        super().__init__(
            f"Invalid house type: {house_type}. Available types: {', '.join(self.available)}"
        )


def parse_house_kind(raw: str) -> HouseKind:
    """
    Parse a customer-supplied house name into a HouseKind.

    Matching ignores case and surrounding whitespace.

    Raises:
        UnknownHouseTypeError: If the name is not in the catalog.
    """
    try:
        return HouseKind(str(raw).strip().lower())
    except ValueError as e:
        raise UnknownHouseTypeError(str(raw)) from e


class HousePlan(BaseModel):
    """
    The customisable part of the construction template for one HouseKind.

    Fields:
    - walls_line / paint_line: what the Walls and Paint steps do (mandatory)
    - extra_final_touches: replacement lines for the Final Touches step;
      empty means the default cleanup is used
    - description, materials, features, price_tier: catalog text
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    kind: HouseKind
    walls_line: str = Field(..., min_length=1, description="Walls step output")
    paint_line: str = Field(..., min_length=1, description="Paint step output")
    extra_final_touches: tuple[str, ...] = Field(
        default=(), description="Final Touches lines; empty uses the default"
    )
    description: str = Field(..., min_length=1)
    materials: str = ""
    features: str = ""
    price_tier: str = "$"


@dataclass
class BuildStatistics:
    """Counters for one interactive session."""

    houses_built: int = 0
    failed_builds: int = 0
    by_kind: dict[HouseKind, int] = field(
        default_factory=lambda: {kind: 0 for kind in HouseKind}
    )
    failed_by_kind: dict[HouseKind, int] = field(
        default_factory=lambda: {kind: 0 for kind in HouseKind}
    )

    def record_success(self, kind: HouseKind) -> None:
        self.houses_built += 1
        self.by_kind[kind] += 1

    def record_failure(self, kind: HouseKind) -> None:
        self.failed_builds += 1
        self.failed_by_kind[kind] += 1

    @property
    def attempts(self) -> int:
        return self.houses_built + self.failed_builds

    @property
    def success_rate(self) -> float:
        """Percentage of attempted builds that completed. 100.0 before any attempt."""
        if self.attempts == 0:
            return 100.0
        return 100.0 * self.houses_built / self.attempts
