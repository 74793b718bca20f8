"""Fuel station simulator — cars competing for pumps and checkout registers."""

__version__ = "1.0.0"
