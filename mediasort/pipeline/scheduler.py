"""Boucle de planification des passages de tri."""

import time
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from loguru import logger

from mediasort.config.settings import MIN_RUN_INTERVAL_SECONDS, POLL_INTERVAL_SECONDS


class SchedulerState(Enum):
    """État de la boucle de planification."""

    IDLE = "idle"
    RUNNING = "running"


class SchedulerAction(Enum):
    """Décision prise à chaque tick."""

    NONE = "none"
    RUN_PASS = "run_pass"


class RunScheduler:
    """
    Lance des passages de tri à intervalle minimum, sans chevauchement.

    La décision de lancer un passage (``tick``) est une fonction pure de
    l'horloge, séparée de l'exécution du passage. L'horloge et l'attente
    sont injectables pour les tests.

    Attributs :
        min_interval: Délai minimum en secondes entre deux passages.
        poll_interval: Délai en secondes entre deux ticks.
        last_run: Horloge à la fin du dernier passage.
        state: IDLE ou RUNNING.
    """

    def __init__(
        self,
        sort_pass: Callable[[], object],
        min_interval: float = MIN_RUN_INTERVAL_SECONDS,
        poll_interval: float = POLL_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialise le planificateur.

        Arguments :
            sort_pass: Passage de tri à exécuter.
            min_interval: Délai minimum entre deux passages.
            poll_interval: Délai entre deux ticks.
            clock: Horloge monotone en secondes.
            sleep: Fonction d'attente.
        """
        self.sort_pass = sort_pass
        self.min_interval = min_interval
        self.poll_interval = poll_interval
        self.clock = clock
        self.sleep = sleep
        self.state = SchedulerState.IDLE
        # Un intervalle complet dans le passé force un premier passage immédiat
        self.last_run = clock() - min_interval
        self.pass_count = 0

    def tick(self, now: float) -> SchedulerAction:
        """
        Décide si un passage doit démarrer.

        Arguments :
            now: Valeur courante de l'horloge.

        Retourne :
            RUN_PASS si aucun passage n'est en cours et que l'intervalle
            minimum est écoulé, NONE sinon.
        """
        if self.state is not SchedulerState.IDLE:
            return SchedulerAction.NONE
        if now - self.last_run >= self.min_interval:
            return SchedulerAction.RUN_PASS
        return SchedulerAction.NONE

    def run_once(self) -> bool:
        """
        Évalue un tick et exécute le passage si nécessaire.

        Retourne :
            True si un passage a été exécuté.
        """
        if self.tick(self.clock()) is not SchedulerAction.RUN_PASS:
            return False

        self.state = SchedulerState.RUNNING
        try:
            self.sort_pass()
        except Exception:
            logger.exception("Error sorting")
        finally:
            self.last_run = self.clock()
            self.state = SchedulerState.IDLE
            self.pass_count += 1

        logger.info(f"Finished sorting {datetime.now().isoformat()}")
        return True

    def run_forever(self, max_ticks: Optional[int] = None) -> None:
        """
        Boucle principale : un tick toutes les ``poll_interval`` secondes.

        Aucune erreur d'un tick n'interrompt la boucle.

        Arguments :
            max_ticks: Nombre de ticks avant de rendre la main (None = infini).
        """
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            try:
                self.run_once()
            except Exception:
                logger.exception("Unexpected error in scheduler tick")

            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break
            self.sleep(self.poll_interval)
