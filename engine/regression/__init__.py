"""
Regression subpackage for the diffcast engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.regression.ols import OLSModel, augment, build_design_matrix, fit, predict

__all__ = ["OLSModel", "augment", "build_design_matrix", "fit", "predict"]
