import logging

from pyaccum.core.ports.reader import ReaderPort
from .stage import Stage

logger = logging.getLogger(__name__)

DEFAULT_LOG_INTERVAL = 10000


class Consumer:
    def __init__(
        self,
        reader: ReaderPort,
        stage: Stage,
        log_interval: int = DEFAULT_LOG_INTERVAL,
    ):
        if reader.pairs != stage.pairs:
            kind = "pairs" if reader.pairs else "values"
            raise ValueError(f"Reader yields {kind} but stage expects the other kind")

        self._reader = reader
        self.stage = stage
        self.log_interval = log_interval

    def run(self) -> int:
        """Drain the reader into the stage. Returns the number of points consumed."""
        consumed = 0
        try:
            for point in self._reader:
                if self.stage.pairs:
                    self.stage.put_pair(*point)
                else:
                    self.stage.put(point)
                consumed += 1

                if self.log_interval > 0 and consumed % self.log_interval == 0:
                    logger.debug("Consumed %d points", consumed)
        finally:
            self._reader.close()

        logger.info("Consumed %d points", consumed)
        return consumed
