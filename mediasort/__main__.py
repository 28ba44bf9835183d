"""Entry point for the mediasort package.

Run with: python -m mediasort
"""

import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

from mediasort.config import execution_context
from mediasort.config.cli import (
    parse_arguments,
    args_to_cli_args,
    validate_directories,
    build_targets,
)
from mediasort.config.settings import LOG_ROTATION, LOG_RETENTION
from mediasort.pipeline import DualRootSorter, RunScheduler, SortReport
from mediasort.ui import ConsoleUI, display_configuration, display_report


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
        log_file: Optional path of a rotating log file.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stdout,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    if log_file is not None:
        logger.add(
            str(log_file),
            rotation=LOG_ROTATION,
            retention=LOG_RETENTION,
            level="DEBUG",
        )


def run_sort_pass(sorter: DualRootSorter, console: ConsoleUI) -> SortReport:
    """
    Run one sort pass and display its report.

    Args:
        sorter: Sorter bound to the TV and movie targets.
        console: Console UI instance.

    Returns:
        The pass report.
    """
    report = sorter.sort_all()
    display_report(report, console)
    for kind in report.failed_kinds:
        console.print_error(f"{kind.label} sort failed, will retry next pass")
    if report.success:
        console.print_success("Sort pass complete")
    return report


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the sorter.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    load_dotenv()

    namespace = parse_arguments(argv)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug, cli_args.log_file)
    console = ConsoleUI()

    logger.info("Starting script")

    if not validate_directories(
        download_dirs=[cli_args.tv_download_dir, cli_args.movie_download_dir],
        library_dirs=[cli_args.tv_library_dir, cli_args.movie_library_dir],
        dry_run=cli_args.dry_run,
    ):
        console.print_error("Directory validation failed")
        return 1

    if cli_args.dry_run:
        console.print_warning(
            "SIMULATION MODE\n\n"
            "• No file will be moved or deleted\n"
            "• Every operation is logged with a SIMULATION prefix"
        )

    display_configuration(cli_args, console)

    sorter = DualRootSorter(build_targets(cli_args))

    with execution_context(dry_run=cli_args.dry_run):
        if cli_args.run_once:
            report = run_sort_pass(sorter, console)
            return 0 if report.success else 1

        scheduler = RunScheduler(
            lambda: run_sort_pass(sorter, console),
            min_interval=cli_args.min_interval,
            poll_interval=cli_args.poll_interval,
        )
        console.print_info(
            f"Sorting every {cli_args.min_interval:g}s, press Ctrl-C to stop"
        )
        try:
            scheduler.run_forever()
        except KeyboardInterrupt:
            logger.info(f"Stopped after {scheduler.pass_count} passes")

    return 0


if __name__ == "__main__":
    sys.exit(main())
