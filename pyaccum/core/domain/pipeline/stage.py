import logging
from threading import Lock
from typing import Callable, Dict, List, Optional

from pyaccum.core.ports.accumulator import AccumulatorBase
from pyaccum.core.ports.statistic import Statistic

logger = logging.getLogger(__name__)


class Stage:
    """Fans one stream of points out to several accumulators, with optional observers.

    Args:
        statistics: Statistics to compute. Either all univariate or all
            pairwise.

    NOTES:
      Accumulators themselves are not thread safe. The stage serializes every
      update under one lock, so several producers may feed the same stage.
    """

    def __init__(self, statistics: List[Statistic]):
        if not statistics:
            raise ValueError("Stage needs at least one statistic")

        kinds = {s.is_pairwise() for s in statistics}
        if len(kinds) > 1:
            raise ValueError("Cannot mix univariate and pairwise statistics in one stage")

        self.pairs = kinds.pop()
        self.lock = Lock()
        self.accumulators: Dict[Statistic, AccumulatorBase] = {
            s: s.accumulator() for s in statistics
        }
        self.observers: List[Callable[[Dict[str, Optional[float]]], None]] = []

    def subscribe(self, callback: Callable[[Dict[str, Optional[float]]], None]):
        """Call `callback` with a snapshot of the values after every point."""
        self.observers.append(callback)

    def put(self, x: float):
        if self.pairs:
            raise ValueError("Pairwise stage expects put_pair(x, y, weight)")
        with self.lock:
            for acc in self.accumulators.values():
                acc.add(x)
        self._notify()

    def put_pair(self, x: float, y: float, weight: float = 1.0):
        if not self.pairs:
            raise ValueError("Univariate stage expects put(x)")
        with self.lock:
            for acc in self.accumulators.values():
                acc.add(x, y, weight)
        self._notify()

    def values(self) -> Dict[str, Optional[float]]:
        with self.lock:
            return {s.value: acc.value for s, acc in self.accumulators.items()}

    @property
    def count(self) -> int:
        with self.lock:
            return next(iter(self.accumulators.values())).count

    def reset(self):
        with self.lock:
            for acc in self.accumulators.values():
                acc.reset()

    def _notify(self):
        if not self.observers:
            return
        snapshot = self.values()
        for cb in self.observers:
            try:
                cb(snapshot)
            except Exception:
                logger.exception("Stage observer %r failed", cb)
