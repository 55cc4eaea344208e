# milligrad/errors.py
"""
Exception types raised by milligrad.

Numeric edge cases (nan/inf from log of a non-positive value, overflow in
pow/exp) are never raised: they propagate through `val` and `grad` as
ordinary floating-point values.
"""


class MilligradError(Exception):
    """Base class for all milligrad errors."""


class DimensionMismatchError(MilligradError, ValueError):
    """
    Two sequences that must line up do not (unit input vs. weight count,
    true vs. predicted values, inputs vs. labels). This is a programming or
    configuration error; the library never recovers from it.
    """


class InvalidBatchSizeError(MilligradError, ValueError):
    """Mini-batch size outside [1, len(y)] (0 is accepted as "full batch")."""
