"""Display functions for sorter configuration and pass reports."""

from typing import TYPE_CHECKING

from mediasort.ui.console import ConsoleUI

if TYPE_CHECKING:
    from mediasort.config.cli import CLIArgs
    from mediasort.pipeline.sorter import SortReport


def display_configuration(cli_args: "CLIArgs", console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.
    """
    mode_parts = []
    if cli_args.dry_run:
        mode_parts.append("[yellow]SIMULATION[/yellow]")
    if cli_args.run_once:
        mode_parts.append("[cyan]Single pass[/cyan]")
    if not mode_parts:
        mode_parts.append("[green]Normal[/green]")

    mode_status = " ".join(mode_parts)

    console.print_panel(
        f"[bold]Sort configuration[/bold]\n"
        f"TV: [cyan]{cli_args.tv_download_dir}[/cyan] -> [cyan]{cli_args.tv_library_dir}[/cyan]\n"
        f"Movies: [cyan]{cli_args.movie_download_dir}[/cyan] -> [cyan]{cli_args.movie_library_dir}[/cyan]\n"
        f"Video: {', '.join(cli_args.video_extensions)}\n"
        f"Deleted: {', '.join(cli_args.ignore_extensions)}\n"
        f"Interval: {cli_args.min_interval:g}s (poll {cli_args.poll_interval:g}s)\n"
        f"Mode: {mode_status}",
        title="Media Sorter",
    )


def display_report(report: "SortReport", console: ConsoleUI) -> None:
    """
    Display one row per media kind for a finished sort pass.

    Args:
        report: Report returned by DualRootSorter.sort_all().
        console: Console UI instance.
    """
    table = console.create_table(
        "Sort pass",
        ["Kind", "Status", "Entries", "Moved", "Deleted", "Dirs removed", "Parse failures", "Errors"],
    )

    for kind, outcome in report.outcomes.items():
        if not outcome.success or outcome.stats is None:
            table.add_row(kind.label, "[red]failed[/red]", "-", "-", "-", "-", "-", str(outcome.error))
            continue

        stats = outcome.stats
        table.add_row(
            kind.label,
            "[green]ok[/green]",
            str(stats.entries),
            str(stats.moved),
            str(stats.deleted_files),
            str(stats.removed_directories),
            str(stats.parse_failures),
            str(stats.errors),
        )

    console.print_table(table)
