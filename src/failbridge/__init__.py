"""failbridge: relocate expected failures across plain-callable boundaries.

Public API:
    - Failure: The expected failure raised by failable operations
    - UncheckedFailure: Propagating wrapper that carries a Failure as its cause
    - FailableAction / FailableComputation: Failable shapes and their conversions
    - run(): Convert and invoke a failable in one step
    - Config: Diagnostics configuration
"""

from __future__ import annotations

import logging

from failbridge.bridge import run
from failbridge.config import Config
from failbridge.errors import (
    ArgumentError,
    ConfigurationError,
    FailbridgeError,
    Failure,
    UncheckedFailure,
)
from failbridge.failable import Failable, FailableAction, FailableComputation

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("failbridge")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("failbridge").addHandler(logging.NullHandler())

__all__ = [
    "ArgumentError",
    "Config",
    "ConfigurationError",
    "FailbridgeError",
    "Failable",
    "FailableAction",
    "FailableComputation",
    "Failure",
    "UncheckedFailure",
    "run",
]
