"""Exceptions raised by interestingness."""

from __future__ import annotations


class InterestingnessError(Exception):
    """Base class for all interestingness errors."""


class InvalidConfigurationError(InterestingnessError, ValueError):
    """Scoring options that would make the pipeline divide by zero or misbehave."""
