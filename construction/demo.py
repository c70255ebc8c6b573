# -----------------------------------------------------------------------------
# CONSTRUCTION DEMO - LINEAR WALKTHROUGH
# -----------------------------------------------------------------------------
# Builds every house in the catalog, one after another, to show that all of
# them follow the same construction template.
#
# Usage: construction-demo   (or: python -m construction.demo)
# -----------------------------------------------------------------------------

from rich.console import Console
from rich.markup import escape

from construction.core.company import ConstructionCompany
from construction.domain.models import BUILD_SEQUENCE

console = Console()


def run_demo(company: ConstructionCompany | None = None, console: Console | None = None) -> int:
    """
    Build every available house type in catalog order.

    Returns:
        0 once every house is built. Faults from the company propagate.
    """
    out = console if console is not None else Console()
    company = company if company is not None else ConstructionCompany(console=out)

    out.rule("[bold]🏠 TEMPLATE METHOD PATTERN DEMO[/bold]")
    out.print("Building different house types using the same construction template:\n")

    house_types = company.get_available_house_types()
    for index, house_type in enumerate(house_types):
        company.construct_house(house_type)
        if index < len(house_types) - 1:
            out.rule()

    out.print("\n[bold]🎯 KEY TAKEAWAY:[/bold]")
    out.print(" -> ".join(f"{step.value}. {step.title}" for step in BUILD_SEQUENCE))
    out.print("All houses follow the same building process with customized implementations.")
    out.print("This demonstrates the Template Method Pattern in action!\n")
    return 0


def main() -> int:
    try:
        return run_demo(console=console)
    except Exception as e:
        console.print(f"[bold red]Demo failed: {escape(str(e))}[/bold red]")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
