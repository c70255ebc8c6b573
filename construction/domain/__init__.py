# -----------------------------------------------------------------------------
# DOMAIN LAYER
# -----------------------------------------------------------------------------
# House kinds, build steps, house plans and the statistics record.
# No console output lives here.
# -----------------------------------------------------------------------------

from .models import (
    BUILD_SEQUENCE,
    BuildStatistics,
    BuildStep,
    HouseKind,
    HousePlan,
    UnknownHouseTypeError,
    parse_house_kind,
)

__all__ = [
    "BUILD_SEQUENCE",
    "BuildStatistics",
    "BuildStep",
    "HouseKind",
    "HousePlan",
    "UnknownHouseTypeError",
    "parse_house_kind",
]
