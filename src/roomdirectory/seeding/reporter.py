"""
Console reporter for seeding results.

Formats seed results and previews using Rich.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from roomdirectory.seeding.pipeline import RowOutcome, SeedResult


class SeedReporter:
    """Formats and displays seeding results to the console."""

    def __init__(self, console: Console, error_console: Console | None = None) -> None:
        """
        Initialize seed reporter.

        Args:
            console: Rich Console for progress and summaries (stdout).
            error_console: Rich Console for skipped rows (stderr).
        """
        self.console = console
        self.error_console = error_console or Console(stderr=True)

    def print_result(self, result: SeedResult) -> None:
        """
        Print the end-of-run summary.

        Args:
            result: Result of a seed run.
        """
        table = Table(title="Seed Results", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="green")

        table.add_row("Input rows", str(result.n_rows))
        table.add_row("Buildings created", str(result.n_buildings))
        table.add_row("Features created", str(result.n_features))
        table.add_row("Rooms created", str(result.n_rooms))
        table.add_row("Rows skipped", str(len(result.skipped)))

        self.console.print(table)
        self._print_skipped(result.skipped)

        self.console.print(
            f"\n[green]Successfully seeded {result.n_rooms} rooms![/green]"
        )

    def print_preview(self, outcomes: Sequence[RowOutcome]) -> None:
        """
        Print what a seed run would do with each row.

        Args:
            outcomes: Preview outcomes in file order.
        """
        table = Table(title="Seed Preview", show_header=True)
        table.add_column("Row", justify="right", style="dim")
        table.add_column("Building", style="cyan")
        table.add_column("Room", style="blue")
        table.add_column("Status", justify="center")
        table.add_column("Features", justify="right")

        for outcome in outcomes:
            status = (
                "[green]Load[/green]"
                if outcome.status == "created"
                else "[red]Skip[/red]"
            )
            features = str(outcome.n_features) if outcome.status == "created" else "-"
            table.add_row(
                str(outcome.row_number),
                outcome.building_abbrev,
                outcome.room_number,
                status,
                features,
            )

        self.console.print(table)

        skipped = [o for o in outcomes if o.status == "skipped"]
        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  Total rows: {len(outcomes)}")
        self.console.print(f"  [green]Would load: {len(outcomes) - len(skipped)}[/green]")
        self.console.print(f"  [red]Would skip: {len(skipped)}[/red]")
        self._print_skipped(skipped)

    def _print_skipped(self, skipped: Sequence[RowOutcome]) -> None:
        """
        Print the reason for every skipped row.

        Args:
            skipped: Outcomes with status 'skipped'.
        """
        if not skipped:
            return

        self.error_console.print()
        self.error_console.print("[bold red]Skipped rows:[/bold red]")
        for outcome in skipped:
            reason = outcome.rejection.message if outcome.rejection else "unknown"
            self.error_console.print(f"  row {outcome.row_number}: {reason}")
