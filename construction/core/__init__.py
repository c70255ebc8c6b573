# -----------------------------------------------------------------------------
# CORE LAYER
# -----------------------------------------------------------------------------
# The business logic of the construction company:
# - Catalog: one House Plan per house kind
# - HouseBuilder: runs the fixed construction template for a plan
# - ConstructionCompany: validates orders and dispatches to the Builder
# - Settings: runtime settings for the shells
# -----------------------------------------------------------------------------

from .builder import HouseBuilder
from .catalog import DEFAULT_FINAL_TOUCH, HOUSE_PLANS, plan_for
from .company import UNKNOWN_DESCRIPTION, ConstructionCompany
from .settings import Settings, SettingsError, load_settings

__all__ = [
    "HouseBuilder",
    "DEFAULT_FINAL_TOUCH", "HOUSE_PLANS", "plan_for",
    "UNKNOWN_DESCRIPTION", "ConstructionCompany",
    "Settings", "SettingsError", "load_settings",
]
