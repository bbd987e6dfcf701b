"""
Forecasting logic: iterative multi-step prediction over differenced data and the top-level orchestration that turns a raw series into level forecasts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.iterative import generate_forecast, training_window
from engine.forecast.forecaster import Forecaster, forecast

__all__ = ["generate_forecast", "training_window", "Forecaster", "forecast"]
