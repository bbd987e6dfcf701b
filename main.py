#!/usr/bin/env python3

"""
Demonstration entry point for diffcast: forecasts a series and prints the input and the forecast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from config import DEMO_SERIES, settings
from engine.exceptions import ForecastError
from engine.forecast import Forecaster

log = logging.getLogger(__name__)


def _parse_series(text: str) -> List[float]:
    try:
        return [float(part) for part in text.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid series: {exc}") from exc


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Forecast a series with differencing and a lag regression")
    parser.add_argument(
        "--series",
        type=_parse_series,
        default=list(DEMO_SERIES),
        help="Comma-separated observations, oldest first",
    )
    parser.add_argument("--order", type=int, default=settings.default_order, help="Autoregressive window size p")
    parser.add_argument(
        "--length",
        type=int,
        default=settings.default_prediction_length,
        help="Number of future steps to forecast",
    )
    return parser.parse_args(argv)


def _fmt(values: Sequence[float]) -> str:
    digits = settings.output_precision
    return "[" + ", ".join(f"{round(v, digits)}" for v in values) + "]"


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stdout,
    )
    args = parse_args(argv)
    try:
        result = Forecaster(args.series, args.length).forecast(args.order)
    except ForecastError as exc:
        log.error("forecast failed: %s", exc)
        return 1

    print(f"Input: {_fmt(args.series)}")
    print(f"Forecast: {_fmt(result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
