import logging
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional

from pyaccum.core.ports.statistic import Statistic
from pyaccum.core.domain.pipeline.consumer import DEFAULT_LOG_INTERVAL


DEFAULT_STATISTICS = Statistic.univariate_list()
DEFAULT_LOG_LEVEL = logging.ERROR
DEFAULT_INPUT_FILENAME: Optional[str] = None


class Config:
    def __init__(self, path: str):
        """
        Load YAML configuration from the given path.

        Args:
            path: Path to config.yaml.
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")

        with open(self.path, "r") as f:
            self._data: Dict[str, Any] = yaml.safe_load(f) or {}

    @classmethod
    def default(cls) -> "Config":
        """Configuration with every key at its default."""
        cfg = cls.__new__(cls)
        cfg.path = None
        cfg._data = {}
        return cfg

    def get(self, key: str, default=None):
        """Get a config value by key."""
        return self._data.get(key, default)

    @property
    def statistics(self) -> List[Statistic]:
        names = self._data.get("statistics")
        if not names:
            return list(DEFAULT_STATISTICS)
        if isinstance(names, str):
            names = [names]

        return [Statistic.from_name(str(name)) for name in names]

    @property
    def input_filename(self) -> Optional[str]:
        input_props = self._data.get("input") or {}
        return input_props.get("filename", DEFAULT_INPUT_FILENAME)

    @property
    def log_level(self) -> int:
        logging_props = self._data.get("logging") or {}
        raw = logging_props.get("level")
        if raw is None:
            return DEFAULT_LOG_LEVEL

        level = logging.getLevelName(str(raw).upper())
        if not isinstance(level, int):
            return DEFAULT_LOG_LEVEL
        return level

    @property
    def log_interval(self) -> int:
        consumer_props = self._data.get("consumer") or {}
        return int(consumer_props.get("log_interval", DEFAULT_LOG_INTERVAL))

    def is_pairwise(self) -> bool:
        return any(s.is_pairwise() for s in self.statistics)
