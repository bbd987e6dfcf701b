"""
Differencing subpackage for the diffcast engine.

Re-exports :func:`diff` and :func:`inv_diff` from
:mod:`engine.differencing.series` so callers can import them from
``engine.differencing`` directly.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.differencing.series import diff, inv_diff

__all__ = ["diff", "inv_diff"]
