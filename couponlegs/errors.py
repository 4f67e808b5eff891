"""Exceptions raised while building coupon legs."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Leg inputs that cannot produce a consistent leg."""


class InvariantViolation(RuntimeError):
    """A builder produced a leg its configurator does not recognise.

    This is a programming error, not a user-input error, and is never caught
    inside the package.
    """


__all__ = ["ConfigurationError", "InvariantViolation"]
