# -*- coding: utf-8 -*-
"""Error types raised by the protocol engine."""

from __future__ import annotations


class WeightCutError(Exception):
    """Base class for engine errors."""


class ConfigurationError(WeightCutError):
    """Profile or protocol configuration cannot produce a trustworthy result.

    Callers render this as a blocking "setup incomplete" state.
    """


class InvalidInputError(WeightCutError, ValueError):
    """A numeric input is missing, NaN, or outside its allowed range."""


class UnknownProtocolError(WeightCutError, LookupError):
    """A protocol or phase tag outside the closed enumeration was reached."""
