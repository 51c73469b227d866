"""Percentage arithmetic."""

from __future__ import annotations


def percentage_of_value(original_value: float, percentage: float) -> float:
    """Return ``percentage`` percent of ``original_value``."""
    return (percentage * original_value) / 100


def value_from_percentage(percentage: float, calculated_value: float) -> float:
    """Return the original value of which ``calculated_value`` is ``percentage`` percent.

    Raises ZeroDivisionError when ``percentage`` is zero.
    """
    return (calculated_value * 100) / percentage