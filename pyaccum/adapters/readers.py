import logging
import os
import re
from typing import Iterator, List, Tuple

import numpy as np

from pyaccum.core.ports.reader import ReaderPort

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = re.compile(r"[\s,;]+")
COMMENT = "#"


def _parse_line(filename: str, lineno: int, line: str) -> List[float]:
    line = line.split(COMMENT, 1)[0].strip()
    if not line:
        return []

    values = []
    for token in TOKEN_SEPARATOR.split(line):
        if not token:
            continue
        try:
            values.append(float(token))
        except ValueError:
            raise ValueError(f"{filename}:{lineno}: not a number: {token!r}")
    return values


class FileReader(ReaderPort):
    def __init__(self, filename: str):
        """
        Text file reader yielding one float per number.
            :param filename: Path to a file holding numbers separated by
                whitespace, commas or semicolons. '#' starts a comment.
        """
        if not os.path.exists(filename):
            raise FileNotFoundError(f"File {filename} does not exist")
        self.filename = filename
        self.file = open(filename, "r")

    def __iter__(self) -> Iterator[float]:
        for lineno, line in enumerate(self.file, start=1):
            yield from _parse_line(self.filename, lineno, line)

    def close(self):
        self.file.close()


class PairFileReader(FileReader):
    """
    Text file reader yielding (x, y, weight) tuples, one per line.

    Each line holds 'x y' or 'x y weight'; weight defaults to 1.
    """

    pairs = True

    def __iter__(self) -> Iterator[Tuple[float, float, float]]:
        for lineno, line in enumerate(self.file, start=1):
            values = _parse_line(self.filename, lineno, line)
            if not values:
                continue
            if len(values) == 2:
                yield values[0], values[1], 1.0
            elif len(values) == 3:
                yield values[0], values[1], values[2]
            else:
                raise ValueError(
                    f"{self.filename}:{lineno}: expected 2 or 3 columns, got {len(values)}"
                )


class ArrayReader(ReaderPort):
    def __init__(self, array):
        """
        In-memory reader over a numpy array.
            :param array: 1-D array of values, or a 2-D array with 2 columns
                (x, y) or 3 columns (x, y, weight).
        """
        self.array = np.asarray(array, dtype=float)

        if self.array.ndim == 1:
            self.pairs = False
        elif self.array.ndim == 2 and self.array.shape[1] in (2, 3):
            self.pairs = True
        else:
            raise ValueError(
                f"Expected a 1-D array or an (n, 2) / (n, 3) array, got shape {self.array.shape}"
            )
        logger.debug("ArrayReader over array of shape %s", self.array.shape)

    def __iter__(self):
        if not self.pairs:
            for x in self.array:
                yield float(x)
        elif self.array.shape[1] == 2:
            for x, y in self.array:
                yield float(x), float(y), 1.0
        else:
            for x, y, w in self.array:
                yield float(x), float(y), float(w)
