# -----------------------------------------------------------------------------
# THE COMPANY - CONSTRUCTION FACADE
# -----------------------------------------------------------------------------
# Responsibility: The single entry point for ordering a house.
#
# Flow:
# 1. Parse the requested name into a HouseKind (unknown names stop here)
# 2. Look up the House Plan in the Catalog
# 3. Hand the plan to a Builder and run the construction template
#
# Unknown house types are reported, not raised. Faults from the Builder are
# reported and then propagated to the caller.
# -----------------------------------------------------------------------------

from rich.console import Console
from rich.markup import escape

from construction.core.builder import HouseBuilder
from construction.core.catalog import plan_for
from construction.domain.models import HouseKind, HousePlan, UnknownHouseTypeError, parse_house_kind

UNKNOWN_DESCRIPTION = "❌ Unknown house type"


class ConstructionCompany:
    """
    Validates house orders and runs the construction template for them.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console()

    def construct_house(self, house_type: str) -> bool:
        """
        Build a house of the requested type.

        Args:
            house_type: House name, matched case-insensitively.

        Returns:
            True if the house was built, False if the type is unknown.

        Raises:
            Exception: Any fault raised while building, after it is reported.
        """
        try:
            kind = parse_house_kind(house_type)
        except UnknownHouseTypeError as e:
            self._console.print(
                f"[red][ERROR] We don't know how to build '{escape(e.house_type)}'[/red]"
            )
            self._console.print(f"Available types: {', '.join(e.available)}")
            return False

        label = kind.value.upper()
        builder = HouseBuilder(plan_for(kind), console=self._console)

        self._console.print(f"[bold cyan]🏗️ Building a {label} house:[/bold cyan]")
        self._console.rule(style="cyan")
        self._console.print("📋 Using standard construction template...\n")

        try:
            builder.build()
        except Exception as e:
            self._console.print(
                f"[bold red][ERROR] Construction of {label} house failed: {escape(str(e))}[/bold red]"
            )
            raise

        self._console.print(f"[bold green]✅ {label} house construction completed![/bold green]")
        self._console.print("🎯 Construction successful!\n")
        return True

    def get_available_house_types(self) -> list[str]:
        """Return the buildable house types in catalog order."""
        return [kind.value for kind in HouseKind]

    def get_house_description(self, house_type: str) -> str:
        """Return the catalog description, or a fallback for unknown types."""
        try:
            return plan_for(parse_house_kind(house_type)).description
        except UnknownHouseTypeError:
            return UNKNOWN_DESCRIPTION

    def get_house_plan(self, house_type: str) -> HousePlan:
        """
        Return the full House Plan for a type.

        Raises:
            UnknownHouseTypeError: If the type is not in the catalog.
        """
        return plan_for(parse_house_kind(house_type))
