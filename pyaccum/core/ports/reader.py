from abc import ABC, abstractmethod
from typing import Iterator, Tuple, Union

Point = Union[float, Tuple[float, float, float]]


class ReaderPort(ABC):
    """
    Lazily iterated source of sample points.

    Value readers yield floats, pair readers yield (x, y, weight) tuples.
    """

    pairs: bool = False

    @abstractmethod
    def __iter__(self) -> Iterator[Point]:
        pass

    def close(self):
        """Release the underlying source."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
