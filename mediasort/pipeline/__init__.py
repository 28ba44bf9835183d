"""Sort pipeline: reconciliation, dual-root fan-out and scheduling."""

from mediasort.pipeline.reconciler import (
    ReconcileStats,
    DirectoryReconciler,
    reconcile,
    reconcile_target,
)
from mediasort.pipeline.sorter import (
    KindOutcome,
    SortReport,
    DualRootSorter,
)
from mediasort.pipeline.scheduler import (
    SchedulerState,
    SchedulerAction,
    RunScheduler,
)

__all__ = [
    "ReconcileStats",
    "DirectoryReconciler",
    "reconcile",
    "reconcile_target",
    "KindOutcome",
    "SortReport",
    "DualRootSorter",
    "SchedulerState",
    "SchedulerAction",
    "RunScheduler",
]
