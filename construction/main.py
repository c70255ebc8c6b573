# -----------------------------------------------------------------------------
# CONSTRUCTION COMPANY - INTERACTIVE CONSOLE
# -----------------------------------------------------------------------------
# Responsibility: The menu-driven front desk of the construction company.
#
# Menu:
# 1-3: Order a Wood / Brick / Luxury house (with confirmation)
# 4:   Browse the house catalog
# 5:   Session statistics
# 6:   Exit
#
# The session statistics belong to one HouseBuildingApp instance and are
# reset only when a new app is started.
#
# Usage: construction   (or: python -m construction.main)
# -----------------------------------------------------------------------------

import time
from collections.abc import Callable
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from construction.core.company import ConstructionCompany
from construction.core.settings import Settings, load_settings
from construction.domain.models import BuildStatistics, HouseKind

PROJECT_ROOT = Path(__file__).parent.parent

console = Console()

EXIT_OPTION = "6"
BUILD_OPTIONS: dict[str, HouseKind] = {
    "1": HouseKind.WOOD,
    "2": HouseKind.BRICK,
    "3": HouseKind.LUXURY,
}
MENU_ITEMS = (
    ("1", "Build Wood House"),
    ("2", "Build Brick House"),
    ("3", "Build Luxury House"),
    ("4", "View House Types"),
    ("5", "View Statistics"),
    (EXIT_OPTION, "Exit"),
)
CONFIRM_ANSWERS = ("y", "yes")


class HouseBuildingApp:
    """
    Interactive menu loop around the ConstructionCompany.

    Input and the build delay are injectable so the loop can be driven
    without a terminal.
    """

    def __init__(
        self,
        company: ConstructionCompany | None = None,
        console: Console | None = None,
        settings: Settings | None = None,
        input_func: Callable[[str], str] | None = None,
        sleep_func: Callable[[float], None] = time.sleep,
    ) -> None:
        self._console = console if console is not None else Console()
        self._company = company if company is not None else ConstructionCompany(console=self._console)
        self._settings = settings if settings is not None else load_settings()
        self._input = input_func if input_func is not None else self._console.input
        self._sleep = sleep_func
        self.statistics = BuildStatistics()

    def run(self) -> int:
        """
        Run the menu loop until the customer exits.

        Returns:
            Process exit code: 0 on exit, 1 on an unexpected fault,
            130 on Ctrl-C.
        """
        try:
            self._show_welcome()
            self._main_menu()
        except KeyboardInterrupt:
            self._console.print("\n[yellow]Interrupted.[/yellow]")
            return 130
        except Exception as e:
            self._console.print(f"[bold red]Application error: {escape(str(e)) or type(e).__name__}[/bold red]")
            return 1
        return 0

    def _ask(self, question: str) -> str:
        return self._input(question).strip()

    def _clear(self) -> None:
        if self._settings.clear_screen:
            self._console.clear()

    def _show_welcome(self) -> None:
        self._clear()
        self._console.print(
            Panel(
                "Professional house building using proven construction methods.",
                title="🏗️ HOUSE CONSTRUCTION COMPANY",
                border_style="cyan",
            )
        )

    def _main_menu(self) -> None:
        while True:
            self._console.rule("[bold]🏠 MAIN MENU[/bold]")
            for key, label in MENU_ITEMS:
                self._console.print(f"{key}. {label}")
            self._console.print()

            choice = self._ask(f"Choose option (1-{len(MENU_ITEMS)}): ")

            if choice not in dict(MENU_ITEMS):
                self._console.print(f"[red]❌ Invalid choice. Please select 1-{len(MENU_ITEMS)}.[/red]\n")
                continue

            if choice == EXIT_OPTION:
                self._exit_app()
                return

            try:
                self._handle_menu_choice(choice)
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception as e:
                self._console.print(f"[red]Menu error: {escape(str(e))}[/red]")
                self._ask("Press Enter to continue...")

    def _handle_menu_choice(self, choice: str) -> None:
        if choice in BUILD_OPTIONS:
            self._build_house_interactive(BUILD_OPTIONS[choice])
        elif choice == "4":
            self._show_house_types()
        elif choice == "5":
            self._show_statistics()

    def _build_house_interactive(self, kind: HouseKind) -> None:
        self._clear()
        self._console.rule(f"[bold]🏗️ BUILDING {kind.value.upper()} HOUSE[/bold]")

        confirm = self._ask("Confirm construction? (y/n): ")

        if confirm.lower() in CONFIRM_ANSWERS:
            self._console.print("\n🚀 Starting construction...\n")
            with self._console.status("[bold white]Preparing the building site...[/bold white]"):
                self._sleep(self._settings.build_delay_seconds)

            try:
                built = self._company.construct_house(kind.value)
            except Exception as e:
                self.statistics.record_failure(kind)
                self._console.print(f"[red]Construction error: {escape(str(e))}[/red]")
            else:
                if built:
                    self.statistics.record_success(kind)
                    self._console.print("[bold green]🎉 Construction completed successfully![/bold green]")
        else:
            self._console.print("[yellow]❌ Construction cancelled.[/yellow]")

        self._ask("\nPress Enter to continue...")
        self._clear()

    def _show_house_types(self) -> None:
        self._clear()
        self._console.rule("[bold]🏠 AVAILABLE HOUSE TYPES[/bold]")

        for house_type in self._company.get_available_house_types():
            plan = self._company.get_house_plan(house_type)
            self._console.print(f"[bold]{house_type.upper()} HOUSE[/bold]")
            self._console.print(f"  • Materials: {plan.materials}")
            self._console.print(f"  • Features: {plan.features}")
            self._console.print(f"  • Price: {escape(plan.price_tier)}")
            self._console.print(f"  • {self._company.get_house_description(house_type)}\n")

        self._console.print("All houses follow the same construction process.\n")

    def _show_statistics(self) -> None:
        self._clear()
        stats = self.statistics
        self._console.rule("[bold]📊 CONSTRUCTION STATISTICS[/bold]")
        self._console.print(f"🏠 Houses built: {stats.houses_built}")
        for kind, count in stats.by_kind.items():
            self._console.print(f"  • {kind.value.capitalize()}: {count}")
        self._console.print("🏗️ Method: Template Method Pattern")
        self._console.print(f"✅ Success rate: {stats.success_rate:.0f}%\n")

        if stats.houses_built == 0:
            self._console.print("Build your first house to see more statistics.\n")

    def _exit_app(self) -> None:
        self._clear()
        self._console.print(
            Panel(
                f"Houses built: {self.statistics.houses_built}\n"
                "Template Method Pattern demonstration complete.",
                title="👋 THANK YOU",
                border_style="green",
            )
        )


def main() -> int:
    load_dotenv(PROJECT_ROOT / ".env")
    try:
        app = HouseBuildingApp(console=console)
    except Exception as e:
        console.print(f"[bold red]Application startup failed: {escape(str(e))}[/bold red]")
        return 1
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
