"""Exceptions raised for Fanorona engine contract violations."""

from __future__ import annotations


class InvalidDimensions(ValueError):
    """Board size is not one of the supported layouts."""


class InvalidArgument(ValueError):
    """Required input is missing or out of range."""
