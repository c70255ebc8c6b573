# -----------------------------------------------------------------------------
# THE BUILDER - CONSTRUCTION TEMPLATE
# -----------------------------------------------------------------------------
# Responsibility: Runs the fixed five-step template for one House Plan.
#
# Foundation and Roof are the same for every house. Walls and Paint come
# from the plan. Final Touches come from the plan or fall back to the
# default cleanup.
#
# The Builder has NO knowledge of house names; it only sees a validated plan.
# -----------------------------------------------------------------------------

from rich.console import Console
from rich.markup import escape

from construction.core.catalog import DEFAULT_FINAL_TOUCH
from construction.domain.models import BUILD_SEQUENCE, BuildStep, HousePlan


class HouseBuilder:
    """
    Builds one house from a House Plan.

    Stateless apart from the plan; one instance per build.
    """

    def __init__(self, plan: HousePlan, console: Console | None = None) -> None:
        self._plan = plan
        self._console = console if console is not None else Console()

    def build(self) -> None:
        """
        Run the construction template.

        Raises:
            Exception: Whatever a step raised, unchanged, after the
                [FAILED] marker has been printed.
        """
        self._console.print("[bold]🏗️ Starting house construction...[/bold]\n")

        try:
            for step in BUILD_SEQUENCE:
                self._run_step(step)
        except Exception as e:
            self._console.print(f"[bold red][FAILED] Construction failed: {escape(str(e))}[/bold red]")
            raise

        self._console.print("[bold green][COMPLETE] House completed![/bold green]\n")

    def _run_step(self, step: BuildStep) -> None:
        """Print the step marker, then each line the step produces."""
        lines = self._step_lines(step)
        self._console.print(f"[cyan][STEP {step.value}/{len(BUILD_SEQUENCE)}] {step.title}[/cyan]")
        for line in lines:
            self._console.print(f"  - {escape(line)}")

    def _step_lines(self, step: BuildStep) -> list[str]:
        if step is BuildStep.FOUNDATION:
            return self._lay_foundation()
        if step is BuildStep.WALLS:
            return self._build_walls()
        if step is BuildStep.ROOF:
            return self._install_roof()
        if step is BuildStep.PAINT:
            return self._paint_house()
        if step is BuildStep.FINAL_TOUCHES:
            return self._add_final_touches()
        raise ValueError(f"Unhandled build step: {step!r}")

    def _lay_foundation(self) -> list[str]:
        return ["Laying foundation..."]

    def _build_walls(self) -> list[str]:
        return [self._plan.walls_line]

    def _install_roof(self) -> list[str]:
        return ["Installing roof..."]

    def _paint_house(self) -> list[str]:
        return [self._plan.paint_line]

    def _add_final_touches(self) -> list[str]:
        return list(self._plan.extra_final_touches) or [DEFAULT_FINAL_TOUCH]
