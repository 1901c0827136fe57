"""Notepad-style calculator with variables, user functions and unit conversions."""

__version__ = "0.2.0"
__all__ = ["app", "parser", "pretty", "units"]