"""Utility functions."""

from roma.utils.formatters import format_number, format_signed_percent
from roma.utils.numbers import clamp, to_int, to_number

__all__ = ["format_number", "format_signed_percent", "clamp", "to_int", "to_number"]
