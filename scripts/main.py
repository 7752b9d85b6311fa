"""
Compute streaming statistics over a text file of numbers.

Usage:
  python -m scripts.main data.txt
  python -m scripts.main --config ./configs/config.yaml
  python -m scripts.main --config ./configs/pairs.yaml pairs.txt
"""

import argparse
import logging
import sys
from typing import List, Optional

from pyaccum.adapters.readers import FileReader, PairFileReader
from pyaccum.core.config import Config
from pyaccum.core.domain.pipeline.consumer import Consumer
from pyaccum.core.domain.pipeline.stage import Stage
from pyaccum.core.ports.accumulator import UNDEFINED


def format_report(values) -> str:
    lines = []
    for name, value in values.items():
        lines.append(f"{name}: {UNDEFINED if value is None else value}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Single-pass descriptive statistics")
    parser.add_argument("file", nargs="?", help="input file (overrides input.filename)")
    parser.add_argument("--config", help="path to a YAML config file")
    args = parser.parse_args(argv)

    cfg = Config(args.config) if args.config else Config.default()

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    filename = args.file or cfg.input_filename
    if not filename:
        parser.error("no input file given and input.filename is not configured")

    stage = Stage(cfg.statistics)
    reader_cls = PairFileReader if stage.pairs else FileReader
    with reader_cls(filename) as reader:
        Consumer(reader, stage, log_interval=cfg.log_interval).run()

    print(format_report(stage.values()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
