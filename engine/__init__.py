"""
Engine packages for the diffcast forecaster

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.exceptions import (
    ForecastError,
    IndexOutOfRangeError,
    InvalidInputError,
    SingularMatrixError,
)

__all__ = ["ForecastError", "IndexOutOfRangeError", "InvalidInputError", "SingularMatrixError"]
