"""Environment-driven settings, read once at import."""

from __future__ import annotations

import importlib.util
import os
from typing import Final

DENSE_BACKEND_DISABLED: Final[bool] = os.environ.get("SCIARRAY_DISABLE_DENSE_BACKEND", "0") == "1"
DENSE_X64: Final[bool] = os.environ.get("SCIARRAY_DENSE_X64", "1") != "0"
SINGULAR_RCOND: Final[float] = max(0.0, float(os.environ.get("SCIARRAY_SINGULAR_RCOND", "0")))

HAS_DENSE_BACKEND: Final[bool] = importlib.util.find_spec("jax") is not None and not DENSE_BACKEND_DISABLED
