"""Utility functions for AgreeDisclaimer."""

from agreedisclaimer.utils.text import normalize_line_breaks

__all__ = ["normalize_line_breaks"]
