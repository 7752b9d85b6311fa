import logging
import math

import numpy as np
import pytest

from pyaccum.adapters.readers import ArrayReader, FileReader, PairFileReader
from pyaccum.core.domain.pipeline.consumer import Consumer
from pyaccum.core.domain.pipeline.stage import Stage
from pyaccum.core.ports.statistic import Statistic


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)

# ------------------------------------------------------------
# Readers
# ------------------------------------------------------------

def test_file_reader_parses_mixed_separators_and_comments(tmp_path):
    path = write(tmp_path, "values.txt", "# header\n1 2,3\n\n4;5  # trailing\nnan inf\n")
    with FileReader(path) as reader:
        values = list(reader)

    assert values[:5] == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert math.isnan(values[5])
    assert values[6] == math.inf
    assert reader.pairs is False


def test_file_reader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileReader(str(tmp_path / "missing.txt"))


def test_file_reader_reports_bad_token(tmp_path):
    path = write(tmp_path, "bad.txt", "1\n2\nthree\n")
    reader = FileReader(path)
    with pytest.raises(ValueError, match=r"bad.txt:3"):
        list(reader)
    reader.close()


def test_pair_file_reader(tmp_path):
    path = write(tmp_path, "pairs.txt", "1 2\n# skip\n3 4 0.5\n")
    with PairFileReader(path) as reader:
        assert list(reader) == [(1.0, 2.0, 1.0), (3.0, 4.0, 0.5)]
        assert reader.pairs is True


def test_pair_file_reader_rejects_wrong_column_count(tmp_path):
    path = write(tmp_path, "pairs.txt", "1 2\n1 2 3 4\n")
    with PairFileReader(path) as reader:
        with pytest.raises(ValueError, match="expected 2 or 3 columns"):
            list(reader)


def test_array_reader_shapes():
    assert list(ArrayReader(np.array([1, 2, 3]))) == [1.0, 2.0, 3.0]
    assert list(ArrayReader(np.array([[1, 2], [3, 4]]))) == [(1.0, 2.0, 1.0), (3.0, 4.0, 1.0)]
    assert list(ArrayReader([[1, 2, 3]])) == [(1.0, 2.0, 3.0)]

    with pytest.raises(ValueError):
        ArrayReader(np.zeros((2, 4)))
    with pytest.raises(ValueError):
        ArrayReader(np.zeros((2, 2, 2)))

# ------------------------------------------------------------
# Stage
# ------------------------------------------------------------

def test_stage_feeds_every_accumulator():
    stage = Stage([Statistic.MEAN, Statistic.MAXIMUM, Statistic.SAMPLE_VARIANCE])
    for x in [1.0, 2.0, 3.0]:
        stage.put(x)

    assert stage.values() == {"mean": 2.0, "maximum": 3.0, "sample_variance": 1.0}
    assert stage.count == 3

    stage.reset()
    assert stage.values() == {"mean": None, "maximum": None, "sample_variance": None}
    assert stage.count == 0


def test_pair_stage():
    stage = Stage([Statistic.PEARSON_CORRELATION])
    for x in range(5):
        stage.put_pair(x, 3 * x - 1)
    assert stage.values()["pearson_correlation"] == pytest.approx(1.0)

    with pytest.raises(ValueError):
        stage.put(1.0)


def test_stage_rejects_mixed_or_empty_statistics():
    with pytest.raises(ValueError):
        Stage([Statistic.MEAN, Statistic.PEARSON_CORRELATION])
    with pytest.raises(ValueError):
        Stage([])
    with pytest.raises(ValueError):
        Stage([Statistic.MEAN]).put_pair(1.0, 2.0)


def test_stage_observers_and_failing_observer(caplog):
    stage = Stage([Statistic.SUM])
    seen = []

    def broken(_):
        raise RuntimeError("boom")

    stage.subscribe(broken)
    stage.subscribe(seen.append)

    with caplog.at_level(logging.ERROR):
        stage.put(2.0)
        stage.put(3.0)

    assert seen == [{"sum": 2.0}, {"sum": 5.0}]
    assert "observer" in caplog.text

# ------------------------------------------------------------
# Consumer
# ------------------------------------------------------------

def test_consumer_drains_reader(tmp_path):
    path = write(tmp_path, "values.txt", "2 4\n8\n")
    stage = Stage([Statistic.GEOMETRIC_MEAN, Statistic.SUM])
    consumed = Consumer(FileReader(path), stage).run()

    assert consumed == 3
    assert stage.values()["sum"] == 14.0
    assert stage.values()["geometric_mean"] == pytest.approx(4.0)


def test_consumer_pairs_from_array():
    data = np.column_stack([np.arange(10.0), -np.arange(10.0)])
    stage = Stage([Statistic.PEARSON_CORRELATION])
    assert Consumer(ArrayReader(data), stage).run() == 10
    assert stage.values()["pearson_correlation"] == pytest.approx(-1.0)


def test_consumer_rejects_mismatched_reader():
    with pytest.raises(ValueError):
        Consumer(ArrayReader(np.arange(3.0)), Stage([Statistic.PEARSON_CORRELATION]))


def test_consumer_logs_progress(caplog):
    stage = Stage([Statistic.MEAN])
    with caplog.at_level(logging.DEBUG, logger="pyaccum.core.domain.pipeline.consumer"):
        Consumer(ArrayReader(np.arange(6.0)), stage, log_interval=2).run()

    progress = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert len(progress) == 3
    assert "Consumed 6 points" in caplog.text
