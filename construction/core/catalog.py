# -----------------------------------------------------------------------------
# THE CATALOG - HOUSE PLANS
# -----------------------------------------------------------------------------
# Responsibility: One House Plan per HouseKind. The plans are the only thing
# that differs between houses; the Builder runs the same template for all.
# -----------------------------------------------------------------------------

from construction.domain.models import HouseKind, HousePlan

DEFAULT_FINAL_TOUCH = "Basic cleanup done."

HOUSE_PLANS: dict[HouseKind, HousePlan] = {
    HouseKind.WOOD: HousePlan(
        kind=HouseKind.WOOD,
        walls_line="Building wooden walls with timber",
        paint_line="Painting with brown wood stain",
        description="🌳 Timber house with natural wood finish",
        materials="Timber walls",
        features="Basic design",
        price_tier="$",
    ),
    HouseKind.BRICK: HousePlan(
        kind=HouseKind.BRICK,
        walls_line="Building walls with red bricks",
        paint_line="No painting needed - natural brick color",
        extra_final_touches=(
            "Adding brick house chimney",
            "Installing brick garden path",
        ),
        description="🧱 Brick house with chimney and garden path",
        materials="Red brick walls",
        features="Chimney, garden path",
        price_tier="$$",
    ),
    HouseKind.LUXURY: HousePlan(
        kind=HouseKind.LUXURY,
        walls_line="Building walls with marble and glass",
        paint_line="Applying premium white paint",
        extra_final_touches=(
            "Installing swimming pool",
            "Adding gold door handles",
            "Landscaping with exotic plants",
        ),
        description="✨ Premium house with marble walls and luxury amenities",
        materials="Marble walls",
        features="Pool, premium finishes",
        price_tier="$$$",
    ),
}

_missing = set(HouseKind) - set(HOUSE_PLANS)
if _missing:
    raise RuntimeError(f"House plans missing for: {sorted(k.value for k in _missing)}")


def plan_for(kind: HouseKind) -> HousePlan:
    """Return the House Plan for a validated HouseKind."""
    return HOUSE_PLANS[kind]
