"""
errors.py
=========
Exception types raised by the Panchang engine.

  InvalidInput      : malformed civil date/time, out-of-range coordinates,
                       non-finite numbers. Raised before any computation.
  ComputationFailure: an arithmetic fault (NaN/Inf) surfaced with the
                       operation name and its inputs.
  ConfigurationError: the muhurat rule book could not be loaded.

An unknown activity type is not an error: scoring falls back to the
``general`` rule set.
"""

import math
from typing import Any, Dict, Optional


class PanchangError(Exception):
    """Base class for every error raised by the engine."""


class InvalidInput(PanchangError, ValueError):
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class ComputationFailure(PanchangError, ArithmeticError):
    def __init__(self, operation: str, inputs: Optional[Dict[str, Any]] = None,
                 reason: str = "non-finite result"):
        self.operation = operation
        self.inputs = dict(inputs or {})
        self.reason = reason
        args = ", ".join(f"{k}={v!r}" for k, v in self.inputs.items())
        super().__init__(f"{operation}({args}): {reason}")


class ConfigurationError(PanchangError):
    pass


# ── Validation helpers ─────────────────────────────────────────

def require_finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"{name} must be a number, got {value!r}", name, value) from e
    if not math.isfinite(value):
        raise InvalidInput(f"{name} must be finite, got {value!r}", name, value)
    return value


def require_range(name: str, value: float, low: float, high: float) -> float:
    value = require_finite(name, value)
    if not low <= value <= high:
        raise InvalidInput(f"{name} must be within [{low}, {high}], got {value}", name, value)
    return value


def require_latitude(latitude: float) -> float:
    return require_range("latitude", latitude, -90.0, 90.0)


def require_longitude(longitude: float) -> float:
    return require_range("longitude", longitude, -180.0, 180.0)


def check_result(operation: str, value: float, **inputs) -> float:
    """Raise ComputationFailure if an intermediate result is NaN or infinite."""
    if not math.isfinite(value):
        raise ComputationFailure(operation, inputs)
    return value
