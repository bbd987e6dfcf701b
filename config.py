"""
Constants and configuration for diffcast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


DIFFCAST_DEFAULT_ORDER: int = int(os.getenv("DIFFCAST_DEFAULT_ORDER", "2"))
DIFFCAST_DEFAULT_PREDICTION_LENGTH: int = int(os.getenv("DIFFCAST_DEFAULT_PREDICTION_LENGTH", "5"))
DIFFCAST_LOG_LEVEL: str = os.getenv("DIFFCAST_LOG_LEVEL", "INFO").upper()

# series used by the demonstration driver when none is supplied
DEMO_SERIES = [
    11.31, 11.21, 13.01, 11.81, 13.2, 13.91, 12.6,
    15.21, 14.5, 19.4, 21.01, 23.21, 24.41, 25.8,
]


class Settings(BaseSettings):
    default_order: int = DIFFCAST_DEFAULT_ORDER
    default_prediction_length: int = DIFFCAST_DEFAULT_PREDICTION_LENGTH

    # input validation
    min_series_length: int = 3
    min_order: int = 2

    # a predictor whose variance is at or below this fraction of its mean square
    # is treated as constant
    singular_variance_tolerance: float = 1e-12

    log_level: str = DIFFCAST_LOG_LEVEL
    output_precision: int = 6

    model_config = {
        "env_prefix": "DIFFCAST_",
        "extra": "ignore",
    }


settings = Settings()
