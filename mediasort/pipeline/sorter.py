"""Tri parallèle des répertoires de téléchargements séries et films."""

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from loguru import logger

from mediasort.models.media import MediaKind, SortTarget
from mediasort.pipeline.reconciler import ReconcileStats, reconcile_target


@dataclass
class KindOutcome:
    """Résultat du passage pour un type de média."""

    kind: MediaKind
    stats: Optional[ReconcileStats] = None
    error: Optional[BaseException] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class SortReport:
    """Résultats agrégés d'un passage de tri, par type de média."""

    outcomes: Dict[MediaKind, KindOutcome] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """True si tous les types de média ont été traités sans échec."""
        return all(outcome.success for outcome in self.outcomes.values())

    @property
    def failed_kinds(self) -> List[MediaKind]:
        return [kind for kind, outcome in self.outcomes.items() if not outcome.success]


class DualRootSorter:
    """
    Lance la réconciliation de chaque type de média en parallèle.

    Un échec sur un type de média est capturé et journalisé sans
    interrompre les autres.
    """

    def __init__(
        self,
        targets: Sequence[SortTarget],
        reconcile_fn: Callable[[SortTarget], ReconcileStats] = reconcile_target,
    ):
        """
        Initialise le trieur.

        Arguments :
            targets: Configurations à traiter (séries et films).
            reconcile_fn: Fonction de réconciliation appliquée à chaque configuration.
        """
        self.targets = list(targets)
        self.reconcile_fn = reconcile_fn

    def sort_all(self) -> SortReport:
        """
        Trie toutes les configurations et attend la fin de chacune.

        Retourne :
            SortReport avec le succès ou l'erreur de chaque type de média.
        """
        report = SortReport()
        if not self.targets:
            return report

        with ThreadPoolExecutor(
            max_workers=len(self.targets), thread_name_prefix="mediasort"
        ) as executor:
            futures: Dict[MediaKind, Future] = {
                target.kind: executor.submit(self.reconcile_fn, target)
                for target in self.targets
            }

            for kind, future in futures.items():
                try:
                    stats = future.result()
                except Exception as e:
                    logger.opt(exception=e).error(f"Error sorting {kind.label}: {e}")
                    report.outcomes[kind] = KindOutcome(kind=kind, error=e)
                    continue
                report.outcomes[kind] = KindOutcome(kind=kind, stats=stats)

        return report
